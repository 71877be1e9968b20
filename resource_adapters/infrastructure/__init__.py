"""Infrastructure Layer: concrete adapters and cross-cutting concerns.

Invariants:
    - Adapters satisfy core.adapter_protocols.Adapter structurally
    - Failures surface as core.errors.AdapterError subclasses
"""
