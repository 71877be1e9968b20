"""Boundary Protocols: the contract every storage adapter implements.

Invariants:
    - Five operations: list, get, post, patch, delete
    - Every return value is an independent copy; callers may mutate it freely
    - post mints the "id" field; patch never changes it
    - delete is idempotent and always echoes {"id": object_id}
    - Failures are raised as core.errors.AdapterError subclasses

Design Decisions:
    - Protocol over ABC: structural subtyping, adapters need no shared base class
    - Async methods: persistent adapters do IO; the in-memory adapter completes
      without awaiting, so callers use one calling convention for all backends
    - params on get/post/patch/delete is accepted and ignored today; it is the
      slot for per-request options shared by every backend
"""

from typing import Protocol, runtime_checkable

from resource_adapters.core.domain_types import JsonObject


@runtime_checkable
class Adapter(Protocol):
    """Contract for object storage backends consumed by the resource layer."""

    async def list(self, params: JsonObject | None = None) -> JsonObject:
        """Return {"data": [...]} with every object equal on all params fields."""
        ...

    async def get(
        self, object_id: str, params: JsonObject | None = None,
    ) -> JsonObject:
        """Return the object stored under object_id. Raises NotFoundError."""
        ...

    async def post(
        self, data: JsonObject, params: JsonObject | None = None,
    ) -> JsonObject:
        """Store data under a freshly minted id and return the stored object."""
        ...

    async def patch(
        self, object_id: str, data: JsonObject, params: JsonObject | None = None,
    ) -> JsonObject:
        """Shallow-merge data into the stored object. Raises BadRequestError, NotFoundError."""
        ...

    async def delete(
        self, object_id: str, params: JsonObject | None = None,
    ) -> JsonObject:
        """Remove object_id if present and return {"id": object_id}."""
        ...
