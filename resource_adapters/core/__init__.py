"""Core Layer: pure contract, types and matching rules. No IO, no locks.

Invariants:
    - No module in core/ imports from infrastructure/
    - All functions are pure and deterministic
"""
