"""Error hierarchy for the ShapeShift client."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .endpoints import Operation

UNKNOWN_PAIR_MESSAGE = "Unknown pair"


class ApiErrorKind(Enum):
    UNKNOWN_PAIR = "unknown_pair"
    GENERIC = "generic"


class ShapeShiftError(Exception):
    """Base error for the ShapeShift client."""


class InvalidArgumentError(ShapeShiftError, ValueError):
    """Raised when a caller breaks an operation's precondition, before any request."""


class TransportError(ShapeShiftError):
    """Raised when the HTTP transport fails (connection, DNS, timeout, non-2xx status)."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class MalformedResponseError(ShapeShiftError):
    """Raised when a response is not JSON or lacks the field an operation promises."""


class NotSupportedError(ShapeShiftError):
    """Raised by operations the remote API documents but this client does not implement."""

    def __init__(self, operation: "Operation") -> None:
        super().__init__(f"Operation not supported: {operation.value}")
        self.operation = operation


class ApiError(ShapeShiftError):
    """Raised when a 200 response body carries a fatal ``error`` field."""

    def __init__(self, message: str, kind: ApiErrorKind = ApiErrorKind.GENERIC) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class UnknownPairError(ApiError):
    """Raised when the service does not know the requested coin pair."""

    def __init__(self, message: str = UNKNOWN_PAIR_MESSAGE) -> None:
        super().__init__(message, kind=ApiErrorKind.UNKNOWN_PAIR)
