"""SELECT statement."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..clauses.base import CompiledFragment
from ..clauses.distinct import Distinct
from ..clauses.group_by import GroupBy
from ..clauses.join import Join
from ..clauses.limit import Limit, Offset
from ..clauses.order_by import OrderBy
from ..clauses.predicate import Having, PredicateClause
from ..columns import Aliased, Plain, projection_specs
from ..conditions import Connective, ConnectiveInput
from ..contracts import DatabasePort
from ..exceptions import IncompleteQuery
from .base import Statement


class Select(Statement):
    """SELECT with DISTINCT, JOIN, WHERE, GROUP BY, HAVING, ORDER BY, LIMIT, OFFSET and RAW.

    Clauses always render in that order, whatever order they were set in.
    """

    def __init__(self, db: Optional[DatabasePort] = None):
        super().__init__(db)
        self._columns: List[str] = []
        self._distinct = Distinct(self)
        self._join = Join(self)
        self._group_by = GroupBy(self)
        self._having = Having(self)
        self._order_by = OrderBy(self)
        self._limit = Limit(self)
        self._offset = Offset(self)

    # -- projection ------------------------------------------------------------

    def get_columns(self) -> List[str]:
        return list(self._columns)

    def columns(self, *columns: Any) -> Select:
        """Replace the projection; no arguments selects `*`.

        Each argument is a column name, a `{column: alias}` mapping, or a
        sequence of those.
        """

        specs = projection_specs(columns) if columns else [Plain("*")]
        self._columns = [text for spec in specs for text in spec.render()]
        return self

    def from_(self, table: str, alias: Optional[str] = None) -> Select:
        self.table(table)
        if alias:
            self._table = f"{self._table} AS {alias}"
        return self

    def count(self, column: str = "*", alias: Optional[str] = None) -> Select:
        return self._aggregate("COUNT", column, alias)

    def sum(self, column: str, alias: Optional[str] = None) -> Select:
        return self._aggregate("SUM", column, alias)

    def avg(self, column: str, alias: Optional[str] = None) -> Select:
        return self._aggregate("AVG", column, alias)

    def min(self, column: str, alias: Optional[str] = None) -> Select:
        return self._aggregate("MIN", column, alias)

    def max(self, column: str, alias: Optional[str] = None) -> Select:
        return self._aggregate("MAX", column, alias)

    def _aggregate(self, function: str, column: str, alias: Optional[str]) -> Select:
        # Replaces the projection rather than appending to it.
        expression = f"{function}({column})"
        spec = Aliased(expression, alias) if alias else Plain(expression)
        self._columns = spec.render()
        return self

    # -- clause delegation -------------------------------------------------------

    def distinct(self) -> Select:
        self._distinct.distinct()
        return self

    def join(self, table: str, alias: str, left: str, operator: str, right: str) -> Select:
        self._join.join(table, alias, left, operator, right)
        return self

    def left_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Select:
        self._join.left_join(table, alias, left, operator, right)
        return self

    def right_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Select:
        self._join.right_join(table, alias, left, operator, right)
        return self

    def group_by(self, *columns: Any) -> Select:
        self._group_by.group_by(*columns)
        return self

    def having(
        self,
        condition: str,
        value: Any,
        connective: ConnectiveInput = Connective.AND,
    ) -> Select:
        self._having.having(condition, value, connective)
        return self

    def and_having(self, condition: str, value: Any) -> Select:
        self._having.and_having(condition, value)
        return self

    def or_having(self, condition: str, value: Any) -> Select:
        self._having.or_having(condition, value)
        return self

    def having_column(self, column: str) -> PredicateClause:
        """Start a HAVING condition with the WHERE-style vocabulary."""

        return self._having.where(column)

    def order_by(self, column: str, direction: str = "asc") -> Select:
        self._order_by.order_by(column, direction)
        return self

    def limit(self, limit: Optional[int]) -> Select:
        self._limit.limit(limit)
        return self

    def offset(self, offset: Optional[int]) -> Select:
        self._offset.offset(offset)
        return self

    def add_raw(self, sql: str, params: Iterable[Any] = ()) -> Select:
        self._raw.add_raw(sql, params)
        return self

    # -- rendering ------------------------------------------------------------------

    def validate(self) -> None:
        if not self._columns:
            raise IncompleteQuery("No columns specified")
        self._require_table()

    def _fragments(self) -> List[CompiledFragment]:
        distinct = self._distinct.compile().sql
        head = CompiledFragment(f"SELECT {distinct}{', '.join(self._columns)} FROM {self._table}")
        return [
            head,
            self._join.compile(),
            self._where.compile(),
            self._group_by.compile(),
            self._having.compile(),
            self._order_by.compile(),
            self._limit.compile(),
            self._offset.compile(),
            self._raw.compile(),
        ]
