"""GROUP BY clause."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ..columns import grouping_specs
from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement


class GroupBy(Clause):
    """Accumulates grouping expressions in call order.

    Each argument is a column name or a mapping of column to modifier, e.g.
    `group_by("author", {"YEAR(created)": "DESC"})`.
    """

    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._columns: List[str] = []

    def group_by(self, *columns: Any) -> Statement:
        for spec in grouping_specs(columns):
            self._columns.extend(spec.render())
        return self._statement

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    def is_empty(self) -> bool:
        return not self._columns

    def template(self) -> str:
        return f"GROUP BY {', '.join(self._columns)}"
