"""Error hierarchy for markup conversion."""
from __future__ import annotations

UNKNOWN_PARSE_ERROR = "Unknown HTML parsing error: Neither DOM nor Error returned"


class ElementalError(Exception):
    """Base error for all elemental errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ParseError(ElementalError):
    """Raised when the markup parser rejects its input."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class ProtocolError(ElementalError):
    """Raised when a markup parser returns neither nodes nor an error."""

    def __init__(self, message: str = UNKNOWN_PARSE_ERROR) -> None:
        super().__init__(message)


class CssParseError(ElementalError):
    """Raised when inline CSS cannot be split into declarations."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
