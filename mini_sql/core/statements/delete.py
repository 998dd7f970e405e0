"""DELETE statement."""

from __future__ import annotations

from typing import List, Optional

from ..clauses.base import CompiledFragment
from ..clauses.join import Join
from ..contracts import DatabasePort
from .base import Statement


class Delete(Statement):
    """DELETE with optional JOIN, WHERE and RAW clauses."""

    def __init__(self, db: Optional[DatabasePort] = None):
        super().__init__(db)
        self._join = Join(self)

    def from_(self, table: str, alias: Optional[str] = None) -> Delete:
        self.table(table)
        if alias:
            self._table = f"{self._table} AS {alias}"
        return self

    def join(self, table: str, alias: str, left: str, operator: str, right: str) -> Delete:
        self._join.join(table, alias, left, operator, right)
        return self

    def left_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Delete:
        self._join.left_join(table, alias, left, operator, right)
        return self

    def right_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Delete:
        self._join.right_join(table, alias, left, operator, right)
        return self

    def validate(self) -> None:
        self._require_table()

    def _fragments(self) -> List[CompiledFragment]:
        if self._join.is_empty():
            head = CompiledFragment(f"DELETE FROM {self._table}")
        else:
            head = CompiledFragment(f"DELETE {self._table} FROM {self._table}")
        return [head, self._join.compile(), self._where.compile(), self._raw.compile()]
