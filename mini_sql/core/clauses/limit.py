"""LIMIT and OFFSET clauses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..exceptions import InvalidArgument
from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement


class _RowCount(Clause):
    """Single optional row count; unset or negative counts render nothing."""

    keyword = ""

    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._value: Optional[int] = None

    @property
    def value(self) -> Optional[int]:
        return self._value

    def _set(self, value: Optional[int]) -> Statement:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise InvalidArgument(f"{self.keyword} must be an integer, got {type(value).__name__}")
        self._value = value
        return self._statement

    def is_empty(self) -> bool:
        return self._value is None or self._value < 0

    def template(self) -> str:
        return f"{self.keyword} {self._value}"


class Limit(_RowCount):
    keyword = "LIMIT"

    def limit(self, limit: Optional[int]) -> Statement:
        return self._set(limit)


class Offset(_RowCount):
    keyword = "OFFSET"

    def offset(self, offset: Optional[int]) -> Statement:
        return self._set(offset)
