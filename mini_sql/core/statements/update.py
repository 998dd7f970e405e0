"""UPDATE statement."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..clauses.base import CompiledFragment
from ..contracts import DatabasePort
from ..exceptions import IncompleteQuery, InvalidState
from .base import Statement


class Update(Statement):
    """UPDATE that refuses to render without a WHERE clause."""

    def __init__(self, db: Optional[DatabasePort] = None):
        super().__init__(db)
        self._data: Dict[str, Any] = {}

    def data(self, data: Mapping[str, Any]) -> Update:
        self._data = dict(data)
        return self

    def get_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def save(self, where: Mapping[str, Any]) -> int:
        """Update rows matching every `where` equality through the database.

        Quick path for equality filters; returns the affected row count.
        Statements that built a WHERE clause run through `execute()` instead.

        Raises:
            IncompleteQuery: Missing table, data or `where` filters.
            InvalidState: The statement already has a WHERE clause, or no database.
        """

        table = self._require_table()
        if not self._data:
            raise IncompleteQuery("No data specified for update")
        if not where:
            raise IncompleteQuery("No WHERE clause specified for update")
        if not self._where.is_empty():
            raise InvalidState("Use execute() for an UPDATE with a WHERE clause")
        return self._require_db().update_rows(table, self._data, where)

    def validate(self) -> None:
        self._require_table()
        if not self._data:
            raise IncompleteQuery("No data specified for update")
        if self._where.is_empty():
            raise IncompleteQuery("No WHERE clause specified for update")

    def _fragments(self) -> List[CompiledFragment]:
        assignments: List[str] = []
        params: List[Any] = []
        for column, value in self._data.items():
            assignments.append(f"{column} = %s")
            params.append(value)

        head = CompiledFragment(f"UPDATE {self._table} SET {', '.join(assignments)}", params)
        return [head, self._where.compile(), self._raw.compile()]
