"""Domain Types: names for the JSON data model and adapter identity.

Invariants:
    - JsonObject keys are always str; values stay within the JSON data model
    - ObjectId is the decimal string form of a positive integer, minted by the adapter
    - ErrorKind values are the wire names placed in error envelopes

Design Decisions:
    - Type aliases over wrapper classes: adapters accept and return plain dicts
    - str Enum for ErrorKind: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import Any, NewType, Union


# ─── JSON Values ─────────────────────────────────────────────────

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
JsonObject = dict[str, Any]


# ─── Identity Types ──────────────────────────────────────────────

ObjectId = NewType("ObjectId", str)

ID_FIELD = "id"
DATA_FIELD = "data"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Failure kinds an adapter can report. Callers dispatch on these."""
    NOT_FOUND = "NotFound"
    BAD_REQUEST = "BadRequest"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
}
