"""JOIN clauses for SELECT and DELETE statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from ..exceptions import InvalidArgument
from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement

JOIN_KINDS = ("INNER", "LEFT", "RIGHT")


@dataclass(frozen=True)
class JoinSpec:
    """One `KIND JOIN table AS alias ON left OP right` entry."""

    kind: str
    table: str
    alias: str
    left: str
    operator: str
    right: str

    def render(self) -> str:
        return (
            f"{self.kind} JOIN {self.table} AS {self.alias} "
            f"ON {self.left} {self.operator} {self.right}"
        )


class Join(Clause):
    """Ordered JOIN entries; table names go through the statement's table resolver."""

    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._joins: List[JoinSpec] = []

    def join(self, table: str, alias: str, left: str, operator: str, right: str) -> Join:
        return self.add_join("INNER", table, alias, left, operator, right)

    def left_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Join:
        return self.add_join("LEFT", table, alias, left, operator, right)

    def right_join(self, table: str, alias: str, left: str, operator: str, right: str) -> Join:
        return self.add_join("RIGHT", table, alias, left, operator, right)

    def add_join(
        self,
        kind: str,
        table: str,
        alias: str,
        left: str,
        operator: str,
        right: str,
    ) -> Join:
        """Append a join; `kind` is INNER, LEFT or RIGHT, with or without a trailing JOIN."""

        normalized = kind.strip().upper() if isinstance(kind, str) else ""
        if normalized.endswith(" JOIN"):
            normalized = normalized[: -len(" JOIN")].strip()
        if normalized not in JOIN_KINDS:
            raise InvalidArgument(f"Invalid join type: {kind!r}")

        self._joins.append(
            JoinSpec(
                kind=normalized,
                table=self._statement.resolve_table_name(table),
                alias=alias,
                left=left,
                operator=operator,
                right=right,
            )
        )
        return self

    @property
    def joins(self) -> List[JoinSpec]:
        return list(self._joins)

    def is_empty(self) -> bool:
        return not self._joins

    def template(self) -> str:
        return " ".join(join.render() for join in self._joins)
