"""Core port contracts used by adapters and statements."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Sequence

from .types import MaybeRow, QueryParams, RowMapping


class DialectPort(Protocol):
    """Dialect behavior required to bind rendered statements."""

    name: str
    paramstyle: str

    def q(self, ident: str) -> str: ...

    def placeholder(self, key: str) -> str: ...

    def get_lastrowid(self, cursor: Any) -> Optional[int]: ...


class DatabasePort(Protocol):
    """Database adapter behavior consumed by statements."""

    dialect: DialectPort

    def resolve_table_name(self, name: str) -> str: ...

    def prepare(self, template: str, params: Sequence[Any]) -> str: ...

    def execute(self, sql: str, params: QueryParams = None) -> Any: ...

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow: ...

    def fetchall(self, sql: str, params: QueryParams = None) -> List[RowMapping]: ...

    def fetch_column(
        self, sql: str, params: QueryParams = None, index: int = 0
    ) -> List[Any]: ...

    def insert_row(self, table: str, data: Mapping[str, Any]) -> Optional[int]: ...

    def update_rows(
        self,
        table: str,
        data: Mapping[str, Any],
        where: Mapping[str, Any],
    ) -> int: ...
