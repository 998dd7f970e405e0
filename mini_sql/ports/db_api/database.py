"""DB-API adapter implementation for the core database port."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence

from ...core.exceptions import IncompleteQuery
from ...core.placeholders import prepare
from ...core.types import MaybeRow, QueryParams, RowMapping, Rows
from .dialects import Dialect

logger = logging.getLogger(__name__)


class Database:
    """Thin DB-API wrapper that normalizes execute and row mapping behavior."""

    def __init__(self, conn: Any, dialect: Dialect, *, prefix: str = ""):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance.
            prefix: Prepended to every logical table name, e.g. `wp_`.
        """

        self._closed = False
        self.conn: Any | None = conn
        self.dialect = dialect
        self.prefix = prefix

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    def resolve_table_name(self, name: str) -> str:
        """Return the physical table name for a logical one."""

        return f"{self.prefix}{name}"

    def prepare(self, template: str, params: Sequence[Any]) -> str:
        """Substitute values into a `%s` template as literal SQL."""

        return prepare(template, params)

    def execute(self, sql: str, params: QueryParams = None) -> Any:
        """Execute SQL with optional parameters and return cursor."""

        conn = self._require_open_connection()
        cur = conn.cursor()
        logger.debug("execute: %s", sql)
        if params is None:
            cur.execute(sql)
        else:
            cur.execute(sql, params)
        return cur

    def _row_to_mapping(self, cursor: Any, row: Any) -> RowMapping:
        """Normalize row object to mapping.

        Supports mapping rows directly and tuple/list rows via
        `cursor.description`.
        """

        if isinstance(row, Mapping):
            return row

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row))

        keys = getattr(row, "keys", None)
        if callable(keys):
            return {key: row[key] for key in keys()}

        raise TypeError(f"Unsupported row type: {type(row)}")

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow:
        """Execute query and return one normalized row mapping."""

        cur = self.execute(sql, params)
        row = cur.fetchone()
        if row is None:
            return None
        return self._row_to_mapping(cur, row)

    def fetchall(self, sql: str, params: QueryParams = None) -> Rows:
        """Execute query and return all rows as normalized mappings."""

        cur = self.execute(sql, params)
        rows = cur.fetchall()
        return [self._row_to_mapping(cur, r) for r in rows]

    def fetch_column(self, sql: str, params: QueryParams = None, index: int = 0) -> List[Any]:
        """Execute query and return the values of one 0-indexed column."""

        cur = self.execute(sql, params)
        values: List[Any] = []
        for row in cur.fetchall():
            if isinstance(row, Mapping):
                row = list(row.values())
            values.append(row[index])
        return values

    def insert_row(self, table: str, data: Mapping[str, Any]) -> Optional[int]:
        """Insert one row into a physical table and return its new id."""

        if not data:
            raise IncompleteQuery("No data specified for insertion")

        columns = list(data)
        column_sql = ", ".join(self.dialect.q(name) for name in columns)
        placeholders = ", ".join(self.dialect.placeholder(name) for name in columns)
        sql = f"INSERT INTO {self.dialect.q(table)} ({column_sql}) VALUES ({placeholders})"
        params: QueryParams
        if self.dialect.paramstyle == "named":
            params = {name: data[name] for name in columns}
        else:
            params = [data[name] for name in columns]

        cursor = self.execute(sql, params)
        return self.dialect.get_lastrowid(cursor)

    def update_rows(
        self,
        table: str,
        data: Mapping[str, Any],
        where: Mapping[str, Any],
    ) -> int:
        """Update rows matching every `where` equality and return the row count."""

        if not data:
            raise IncompleteQuery("No data specified for update")
        if not where:
            raise IncompleteQuery("No WHERE clause specified for update")

        set_keys = {name: f"set_{i}" for i, name in enumerate(data)}
        where_keys = {name: f"where_{i}" for i, name in enumerate(where)}
        set_clause = ", ".join(
            f"{self.dialect.q(name)} = {self.dialect.placeholder(key)}"
            for name, key in set_keys.items()
        )
        where_clause = " AND ".join(
            f"{self.dialect.q(name)} = {self.dialect.placeholder(key)}"
            for name, key in where_keys.items()
        )
        sql = f"UPDATE {self.dialect.q(table)} SET {set_clause} WHERE {where_clause}"
        params: QueryParams
        if self.dialect.paramstyle == "named":
            params = {key: data[name] for name, key in set_keys.items()}
            params.update({key: where[name] for name, key in where_keys.items()})
        else:
            params = [data[name] for name in set_keys] + [where[name] for name in where_keys]

        cursor = self.execute(sql, params)
        return cursor.rowcount

    def close(self) -> None:
        """Close the underlying connection."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
