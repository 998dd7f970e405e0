"""INSERT statement."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..clauses.base import CompiledFragment
from ..contracts import DatabasePort
from ..exceptions import IncompleteQuery
from .base import Statement


class Insert(Statement):
    """Single-row INSERT built from a column-value mapping.

    `None` values are written as the literal `NULL` and never bound.
    """

    def __init__(self, db: Optional[DatabasePort] = None):
        super().__init__(db)
        self._data: Dict[str, Any] = {}

    def data(self, data: Mapping[str, Any]) -> Insert:
        self._data = dict(data)
        return self

    def get_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def into(self, table: str) -> Insert:
        self.table(table)
        return self

    def save(self) -> Optional[int]:
        """Insert the row through the database and return its new id."""

        table = self._require_table()
        self.validate()
        return self._require_db().insert_row(table, self._data)

    def validate(self) -> None:
        self._require_table()
        if not self._data:
            raise IncompleteQuery("No data specified for insertion")

    def _fragments(self) -> List[CompiledFragment]:
        values: List[str] = []
        params: List[Any] = []
        for value in self._data.values():
            if value is None:
                values.append("NULL")
            else:
                values.append("%s")
                params.append(value)

        head = CompiledFragment(
            f"INSERT INTO {self._table} ({', '.join(self._data)}) VALUES ({', '.join(values)})",
            params,
        )
        return [head, self._raw.compile()]
