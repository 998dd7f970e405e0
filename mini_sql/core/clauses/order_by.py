"""ORDER BY clause."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..exceptions import InvalidArgument
from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement

_DIRECTIONS = ("ASC", "DESC")


class OrderBy(Clause):
    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._order: List[str] = []

    def order_by(self, column: str, direction: str = "asc") -> Statement:
        """Append `column DIRECTION`; direction is case-insensitive ASC or DESC."""

        normalized = direction.strip().upper() if isinstance(direction, str) else ""
        if normalized not in _DIRECTIONS:
            raise InvalidArgument("Direction should be either ASC or DESC")

        self._order.append(f"{column} {normalized}")
        return self._statement

    def is_empty(self) -> bool:
        return not self._order

    def template(self) -> str:
        return f"ORDER BY {', '.join(self._order)}"
