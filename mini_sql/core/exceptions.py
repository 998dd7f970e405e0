"""Errors raised while building, rendering, or binding statements."""

from __future__ import annotations


class QueryBuilderError(Exception):
    """Base class for every error raised by the statement builder."""


class InvalidArgument(QueryBuilderError, ValueError):
    """Raised when a builder call receives malformed input."""


class InvalidState(QueryBuilderError, RuntimeError):
    """Raised when a builder call is made out of order."""


class IncompleteQuery(QueryBuilderError):
    """Raised when a statement is rendered without its required parts."""

    default_message = "Query is invalid or incomplete."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class ParameterMismatch(QueryBuilderError, ValueError):
    """Raised when placeholder count and bound value count disagree."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"SQL template has {expected} placeholder(s) but {received} value(s) were bound."
        )
