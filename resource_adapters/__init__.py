"""Resource Adapters: pluggable storage backends behind one CRUD contract.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
