"""WHERE / HAVING predicate clauses with AND/OR grouping.

A predicate clause keeps an ordered list of `ConditionGroup` objects, each
tagged `AND` or `OR`, starting with a single empty `AND` group. Builder calls
pick a column (`where`, `and_where`, `or_where`), then a terminal method
(`equals`, `in_set`, `between`, ...) commits one condition and returns the
owning statement.

Two merge rules decide where a committed condition lands:

- comparisons and null tests: `OR` always opens a fresh `OR` group; `AND`
  joins the last group when it is an `AND` group, otherwise opens one.
- set membership, ranges and raw text: join the last group when its tag
  matches the pending connective, otherwise open a group with that tag.

Both rules are kept as-is; unifying them changes rendered SQL.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional

from ..conditions import ConditionGroup, Connective, ConnectiveInput, normalize_connective
from ..exceptions import InvalidArgument, InvalidState
from ..params import NULL
from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement

logger = logging.getLogger(__name__)


class PredicateClause(Clause):
    """Stateful boolean-group accumulator shared by WHERE and HAVING."""

    keyword = "WHERE"

    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._groups: List[ConditionGroup] = [ConditionGroup(Connective.AND)]
        self._column: Optional[str] = None
        self._connective = Connective.AND

    # -- column selection -------------------------------------------------

    def where(self, column: str) -> PredicateClause:
        """Start a condition on `column`."""

        self._column = column
        return self

    def __call__(self, column: str) -> PredicateClause:
        return self.where(column)

    def and_where(self, column: str) -> PredicateClause:
        """Start a condition on `column` joined with `AND`."""

        self._connective = Connective.AND
        return self.where(column)

    def or_where(self, column: str) -> PredicateClause:
        """Start a condition on `column` joined with `OR`."""

        self._connective = Connective.OR
        return self.where(column)

    @property
    def pending_column(self) -> Optional[str]:
        return self._column

    @property
    def groups(self) -> List[ConditionGroup]:
        """Copies of the condition groups, in commit order."""

        return [ConditionGroup(group.connective, list(group.conditions)) for group in self._groups]

    # -- comparison terminals ---------------------------------------------

    def equals(self, value: Any) -> Statement:
        return self._add_comparison("=", value)

    def not_equals(self, value: Any) -> Statement:
        return self._add_comparison("!=", value)

    def less_than(self, value: Any) -> Statement:
        return self._add_comparison("<", value)

    def greater_than(self, value: Any) -> Statement:
        return self._add_comparison(">", value)

    def at_least(self, value: Any) -> Statement:
        return self._add_comparison(">=", value)

    def at_most(self, value: Any) -> Statement:
        return self._add_comparison("<=", value)

    def is_null(self) -> Statement:
        return self._add_comparison("IS", NULL)

    def is_not_null(self) -> Statement:
        return self._add_comparison("IS NOT", NULL)

    is_ = equals
    is_not = not_equals

    # -- membership, range and raw terminals ------------------------------

    def in_set(self, values: Iterable[Any]) -> Statement:
        """Commit `column IN (...)`; an empty set renders the always-false `1=0`."""

        column = self._require_column("IN")
        items = list(values)
        if not items:
            return self._add_matching("1=0", [])
        return self._add_matching(f"{column} IN ({_markers(len(items))})", items)

    def not_in_set(self, values: Iterable[Any]) -> Statement:
        """Commit `column NOT IN (...)`; an empty set renders the always-true `1=1`."""

        column = self._require_column("NOT IN")
        items = list(values)
        if not items:
            return self._add_matching("1=1", [])
        return self._add_matching(f"{column} NOT IN ({_markers(len(items))})", items)

    in_ = in_set
    not_in = not_in_set

    def between(self, start: Any, end: Any) -> Statement:
        column = self._require_column("BETWEEN")
        return self._add_matching(f"{column} BETWEEN %s AND %s", [start, end])

    def where_raw(self, condition: str, params: Iterable[Any] = ()) -> Statement:
        """Commit caller-written condition text verbatim.

        The text is not escaped; only `params` are bound.
        """

        if not isinstance(condition, str) or not condition.strip():
            raise InvalidArgument("Raw condition must be a non-empty string.")
        return self._add_matching(condition, list(params))

    def or_where_raw(self, condition: str, params: Iterable[Any] = ()) -> Statement:
        self._connective = Connective.OR
        return self.where_raw(condition, params)

    # -- nested groups -----------------------------------------------------

    def group(
        self,
        builder: Callable[[PredicateClause], Any],
        connective: ConnectiveInput = Connective.AND,
    ) -> Statement:
        """Build a parenthesized sub-group with the same vocabulary.

        `builder` receives a fresh clause of the same type. Terminal calls on
        it return a group scope instead of the statement, so chains such as
        `q.where("a").equals(1).or_where("b").equals(2)` stay inside the
        group. The nested conditions are committed here as one condition and
        their parameters appended after the ones already bound. Unknown
        connectives fall back to `AND`.
        """

        nested = type(self)(self._statement)
        nested._statement = _GroupScope(nested, self._statement)
        builder(nested)
        if nested.is_empty():
            return self._release()

        connective = normalize_connective(connective, strict=False)
        condition = f"({nested._render_nested()})"

        if connective is Connective.OR or self._connective is Connective.OR:
            self._groups.append(ConditionGroup(connective, [condition]))
        else:
            self._groups[-1].conditions.append(condition)

        self._params.extend(nested.params)
        return self._release()

    # -- rendering ---------------------------------------------------------

    def is_empty(self) -> bool:
        return not any(group.conditions for group in self._groups)

    def template(self) -> str:
        parts: List[str] = []
        for group in self._groups:
            for condition in group.conditions:
                parts.append(f"{group.connective.value} ({condition})" if parts else f"({condition})")
        return f"{self.keyword} {' '.join(parts)}"

    def to_sql(self) -> str:
        """Render literal SQL; quoted `'NULL'` tokens become bare `NULL`."""

        return super().to_sql().replace("'NULL'", "NULL")

    def _render_nested(self) -> str:
        # One connective per group; conditions inside a group are ANDed.
        parts: List[str] = []
        for group in self._groups:
            if not group.conditions:
                continue
            text = " AND ".join(group.conditions)
            parts.append(f"{group.connective.value} {text}" if parts else text)
        return " ".join(parts)

    # -- commit helpers ----------------------------------------------------

    def _require_column(self, operator: str) -> str:
        if self._column is None:
            raise InvalidState(f"Column must be specified before the {operator} condition")
        return self._column

    def _add_comparison(self, operator: str, value: Any) -> Statement:
        column = self._require_column(operator)
        condition = f"{column} {operator} %s"

        if self._connective is Connective.OR:
            self._groups.append(ConditionGroup(Connective.OR, [condition]))
        else:
            if self._groups[-1].connective is not Connective.AND:
                self._groups.append(ConditionGroup(Connective.AND))
            self._groups[-1].conditions.append(condition)

        self._params.append(value)
        return self._release()

    def _add_matching(self, condition: str, values: List[Any]) -> Statement:
        if self._groups[-1].connective is not self._connective:
            self._groups.append(ConditionGroup(self._connective))
        self._groups[-1].conditions.append(condition)

        self._params.extend(values)
        return self._release()

    def _release(self) -> Statement:
        logger.debug(
            "%s committed condition #%d",
            self.keyword,
            sum(len(group.conditions) for group in self._groups),
        )
        self._column = None
        self._connective = Connective.AND
        return self._statement


class Where(PredicateClause):
    """WHERE clause of a statement."""

    keyword = "WHERE"


class Having(PredicateClause):
    """HAVING clause of a SELECT statement.

    Besides the column vocabulary it accepts whole condition templates bound
    to one value, e.g. `having("COUNT(*) > %d", 5)`.
    """

    keyword = "HAVING"

    def having(
        self,
        condition: str,
        value: Any,
        connective: ConnectiveInput = Connective.AND,
    ) -> Statement:
        if not isinstance(condition, str) or not condition.strip():
            raise InvalidArgument("HAVING condition must be a non-empty string.")
        self._connective = normalize_connective(connective, strict=True)
        return self._add_matching(condition, [value])

    def and_having(self, condition: str, value: Any) -> Statement:
        return self.having(condition, value, Connective.AND)

    def or_having(self, condition: str, value: Any) -> Statement:
        return self.having(condition, value, Connective.OR)


class _GroupScope:
    """Owner handed to a nested group clause.

    Predicate calls chained off a terminal go back to the nested clause;
    any other attribute is looked up on the real statement.
    """

    _CLAUSE_CALLS = frozenset(
        {"where", "and_where", "or_where", "where_raw", "or_where_raw", "having", "and_having", "or_having"}
    )

    def __init__(self, clause: PredicateClause, statement: Any):
        self._clause = clause
        self._statement = statement

    def group_where(
        self,
        builder: Callable[[PredicateClause], Any],
        connective: ConnectiveInput = Connective.AND,
    ) -> Any:
        return self._clause.group(builder, connective)

    def having_column(self, column: str) -> PredicateClause:
        return self._clause.where(column)

    def __getattr__(self, name: str) -> Any:
        if name in self._CLAUSE_CALLS and hasattr(self._clause, name):
            return getattr(self._clause, name)
        return getattr(self._statement, name)


def _markers(count: int) -> str:
    return ", ".join(["%s"] * count)
