"""Memory Adapter: volatile, process-local reference implementation of Adapter.

Invariants:
    - One lock guards both the table and the id counter; every operation runs
      its whole critical section under it, with no await inside
    - Every stored object has "id" equal to its table key
    - Ids are minted from a counter that only grows: never reused after delete
    - Nothing handed in or handed out aliases stored state (deep copies both ways)
    - Data lives only as long as the instance

Design Decisions:
    - threading.Lock, not asyncio.Lock: the critical sections never suspend, so
      one primitive serializes thread-parallel and asyncio callers alike
    - Whole-store lock instead of per-id locks: operations are O(1) dict work
      (list is O(n)) with no IO, and one total order keeps them linearizable
    - Errors are raised to the caller, never logged here
"""

import copy
import logging
import threading

from resource_adapters.core.domain_types import DATA_FIELD, ID_FIELD, ErrorKind, JsonObject
from resource_adapters.core.errors import AdapterError, ErrorContext, error_for
from resource_adapters.core.object_matching import (
    format_object_id, matches_filter, merge_shallow, with_id,
)

logger = logging.getLogger(__name__)

_NOT_FOUND = "couldn't find object with that id"
_ID_IMMUTABLE = "can't update id"


def _not_found(object_id: str, operation: str) -> AdapterError:
    return error_for(
        ErrorKind.NOT_FOUND, _NOT_FOUND,
        ErrorContext(object_id=object_id, operation=operation),
    )


class MemoryAdapter:
    """Dict-backed adapter. Safe to share across threads and event loops."""

    name = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._datastore: dict[str, JsonObject] = {}
        self._last_num = 0

    async def list(self, params: JsonObject | None = None) -> JsonObject:
        with self._lock:
            matched = [
                copy.deepcopy(item)
                for item in self._datastore.values()
                if matches_filter(item, params)
            ]
        return {DATA_FIELD: matched}

    async def get(
        self, object_id: str, params: JsonObject | None = None,
    ) -> JsonObject:
        with self._lock:
            item = self._datastore.get(object_id)
            if item is None:
                raise _not_found(object_id, "get")
            return copy.deepcopy(item)

    async def post(
        self, data: JsonObject, params: JsonObject | None = None,
    ) -> JsonObject:
        with self._lock:
            self._last_num += 1
            object_id = format_object_id(self._last_num)
            stored = with_id(data, object_id)
            self._datastore[object_id] = stored
            result = copy.deepcopy(stored)
        logger.debug(
            "Object created",
            extra={"object_id": object_id, "operation": "post", "adapter": self.name},
        )
        return result

    async def patch(
        self, object_id: str, data: JsonObject, params: JsonObject | None = None,
    ) -> JsonObject:
        if ID_FIELD in data:
            raise error_for(
                ErrorKind.BAD_REQUEST, _ID_IMMUTABLE,
                ErrorContext(object_id=object_id, operation="patch"),
            )
        with self._lock:
            stored = self._datastore.get(object_id)
            if stored is None:
                raise _not_found(object_id, "patch")
            # shallow: nested values are replaced, not merged
            merge_shallow(stored, data)
            return copy.deepcopy(stored)

    async def delete(
        self, object_id: str, params: JsonObject | None = None,
    ) -> JsonObject:
        with self._lock:
            existed = self._datastore.pop(object_id, None) is not None
        logger.debug(
            "Object deleted" if existed else "Delete of absent object ignored",
            extra={"object_id": object_id, "operation": "delete", "adapter": self.name},
        )
        return {ID_FIELD: object_id}

    @property
    def size(self) -> int:
        """Number of objects currently stored."""
        with self._lock:
            return len(self._datastore)

    @property
    def last_assigned(self) -> int:
        """Highest counter value minted so far (0 before the first post)."""
        with self._lock:
            return self._last_num
