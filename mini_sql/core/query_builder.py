"""Entry point that hands out statements bound to one database."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .contracts import DatabasePort
from .statements import Delete, Insert, Select, Update


class QueryBuilder:
    """Fluent factory for SELECT, INSERT, UPDATE and DELETE statements.

    Example:
        >>> qb = QueryBuilder()
        >>> qb.select("id", "name").from_("users").where("status").equals("active").to_sql()
        "SELECT id, name FROM users WHERE (status = 'active')"
    """

    def __init__(self, db: Optional[DatabasePort] = None):
        self.db = db

    def select(self, *columns: Any) -> Select:
        return Select(self.db).columns(*columns)

    def insert(self, data: Mapping[str, Any]) -> Insert:
        return Insert(self.db).data(data)

    def update(self, data: Mapping[str, Any]) -> Update:
        return Update(self.db).data(data)

    def delete(self) -> Delete:
        return Delete(self.db)
