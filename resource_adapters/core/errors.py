"""Error Hierarchy: typed exceptions for every adapter failure mode.

Invariants:
    - Every error has a message (str) and a kind (ErrorKind)
    - to_response() produces exactly {"error": {"type": ..., "message": ...}}
    - ErrorContext is for observability only and never reaches the envelope
    - Adapters raise these; they never log or swallow them

Design Decisions:
    - Single hierarchy with AdapterError base: callers catch one type and
      dispatch on .kind (or .http_status)
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from resource_adapters.core.domain_types import ErrorKind


@dataclass
class ErrorContext:
    """Where the failure happened, for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    object_id: str | None = None
    operation: str | None = None


class AdapterError(Exception):
    """Base exception for all adapter failures."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or ErrorContext()

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    def to_response(self) -> dict:
        """Convert to the wire-facing error envelope."""
        return {
            "error": {
                "type": self.kind.value,
                "message": self.message,
            }
        }

    def log_extra(self) -> dict:
        """Fields for logger.*(extra=...) when a caller records this error."""
        return {
            "error_kind": self.kind.value,
            "object_id": self.context.object_id,
            "operation": self.context.operation,
        }


class NotFoundError(AdapterError):
    """No object stored under the requested id."""
    def __init__(
        self,
        object_id: str | None,
        context: ErrorContext | None = None,
        message: str = "couldn't find object with that id",
    ):
        ctx = replace(context or ErrorContext(), object_id=object_id)
        super().__init__(message, ErrorKind.NOT_FOUND, ctx)
        self.object_id = object_id


class BadRequestError(AdapterError):
    """Request payload is not acceptable for this operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.BAD_REQUEST, context)


def error_for(
    kind: ErrorKind, message: str, context: ErrorContext | None = None,
) -> AdapterError:
    """Build the AdapterError subclass matching kind, keeping message verbatim.

    Adapters raise through this so every backend produces the same subclass
    for a kind; callers re-raising a foreign failure use it the same way.
    """
    if kind is ErrorKind.NOT_FOUND:
        ctx = context or ErrorContext()
        return NotFoundError(ctx.object_id, ctx, message=message)
    return BadRequestError(message, context)
