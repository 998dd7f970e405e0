"""Base statement: clause orchestration, rendering and execution."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Tuple

from ..clauses.base import CompiledFragment
from ..clauses.predicate import PredicateClause, Where
from ..clauses.raw import Raw
from ..conditions import Connective, ConnectiveInput
from ..contracts import DatabasePort, DialectPort
from ..exceptions import IncompleteQuery, InvalidState
from ..placeholders import bind, prepare
from ..types import MaybeRow, QueryParams, Rows

logger = logging.getLogger(__name__)


class Statement(ABC):
    """One SQL verb composed of an ordered set of clauses.

    Every statement owns a WHERE and a RAW clause; subclasses add the
    clauses their verb supports. Rendering validates first, then joins the
    non-empty clause templates with single spaces and collects their
    parameters in the same order, so one substitution pass lines markers
    and values up.
    """

    def __init__(self, db: Optional[DatabasePort] = None):
        """Create a statement.

        Args:
            db: Database collaborator used for table-name resolution and
                execution. Without one, table names are used verbatim and
                only rendering is available.
        """

        self._db = db
        self._table: Optional[str] = None
        self._where = Where(self)
        self._raw = Raw(self)
        self._last_cursor: Any = None

    @property
    def db(self) -> Optional[DatabasePort]:
        return self._db

    # -- table -------------------------------------------------------------

    def resolve_table_name(self, name: str) -> str:
        """Map a logical table name to its physical (prefixed) name."""

        if self._db is None:
            return name
        return self._db.resolve_table_name(name)

    def table(self, table: str) -> Statement:
        self._table = self.resolve_table_name(table)
        return self

    def get_table(self) -> Optional[str]:
        return self._table

    # -- WHERE / RAW delegation ---------------------------------------------

    def where(self, column: str) -> PredicateClause:
        return self._where.where(column)

    def and_where(self, column: str) -> PredicateClause:
        return self._where.and_where(column)

    def or_where(self, column: str) -> PredicateClause:
        return self._where.or_where(column)

    def where_raw(self, condition: str, params: Iterable[Any] = ()) -> Statement:
        return self._where.where_raw(condition, params)

    def or_where_raw(self, condition: str, params: Iterable[Any] = ()) -> Statement:
        return self._where.or_where_raw(condition, params)

    def group_where(
        self,
        builder: Callable[[PredicateClause], Any],
        connective: ConnectiveInput = Connective.AND,
    ) -> Statement:
        return self._where.group(builder, connective)

    def raw(self, sql: str, params: Iterable[Any] = ()) -> Statement:
        return self._raw.add_raw(sql, params)

    def end(self) -> Statement:
        return self

    # -- rendering -----------------------------------------------------------

    @abstractmethod
    def validate(self) -> None:
        """Raise `IncompleteQuery` when a required part is missing."""

    @abstractmethod
    def _fragments(self) -> List[CompiledFragment]:
        """Return compiled fragments in rendering order."""

    def _require_table(self) -> str:
        if not self._table:
            raise IncompleteQuery("No table specified")
        return self._table

    def compile(self) -> CompiledFragment:
        """Validate and return the full SQL template with ordered parameters."""

        self.validate()
        fragments = [fragment for fragment in self._fragments() if fragment.sql]
        sql = " ".join(fragment.sql for fragment in fragments)
        params = [value for fragment in fragments for value in fragment.params]
        logger.debug("Compiled %s with %d parameter(s): %s", type(self).__name__, len(params), sql)
        return CompiledFragment(sql, params)

    def get_params(self) -> List[Any]:
        """Bound values of the rendered statement, in placeholder order."""

        return self.compile().params

    @property
    def params(self) -> List[Any]:
        return self.get_params()

    def to_sql(self) -> str:
        """Render literal SQL with every value substituted.

        A bound string `"NULL"` stays quoted here, matching what the driver
        receives from `build()`. Only a predicate clause's own `to_sql()`
        rewrites `'NULL'` to bare `NULL`; null tests use the `NULL` sentinel
        and render bare in both.
        """

        fragment = self.compile()
        return prepare(fragment.sql, fragment.params)

    def build(self, dialect: Optional[DialectPort] = None) -> Tuple[str, QueryParams]:
        """Return driver-ready SQL and parameters for `dialect`.

        Defaults to the dialect of the bound database.
        """

        if dialect is None:
            dialect = self._require_db().dialect
        fragment = self.compile()
        return bind(fragment.sql, fragment.params, dialect)

    def __str__(self) -> str:
        return self.to_sql()

    # -- execution -----------------------------------------------------------

    def _require_db(self) -> DatabasePort:
        if self._db is None:
            raise InvalidState("Statement has no database to execute against")
        return self._db

    def execute(self) -> int:
        """Run the statement and return the affected row count."""

        db = self._require_db()
        sql, params = self.build(db.dialect)
        logger.debug("Executing %s", sql)
        self._last_cursor = db.execute(sql, params)
        return self.affected_rows

    def fetch_one(self) -> MaybeRow:
        db = self._require_db()
        sql, params = self.build(db.dialect)
        return db.fetchone(sql, params)

    def fetch_all(self) -> Rows:
        db = self._require_db()
        sql, params = self.build(db.dialect)
        return db.fetchall(sql, params)

    def fetch_column(self, index: int = 0) -> List[Any]:
        """Return the values of one result column (0-indexed)."""

        db = self._require_db()
        sql, params = self.build(db.dialect)
        return db.fetch_column(sql, params, index)

    @property
    def affected_rows(self) -> int:
        """Row count reported by the last `execute()`; 0 before any run."""

        if self._last_cursor is None:
            return 0
        rowcount = getattr(self._last_cursor, "rowcount", -1)
        return rowcount if rowcount is not None and rowcount >= 0 else 0

    @property
    def last_insert_id(self) -> Optional[int]:
        if self._last_cursor is None or self._db is None:
            return None
        return self._db.dialect.get_lastrowid(self._last_cursor)
