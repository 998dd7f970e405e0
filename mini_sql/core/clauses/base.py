"""Clause contract shared by every SQL fragment owned by a statement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

from ..params import ParameterList
from ..placeholders import prepare

if TYPE_CHECKING:
    from ..statements.base import Statement


@dataclass(frozen=True)
class CompiledFragment:
    """Represents a compiled SQL template with its positional parameters."""

    sql: str
    params: List[Any] = field(default_factory=list)


class Clause(ABC):
    """A renderable SQL fragment owning a private parameter sink.

    Builder methods mutate the clause and return the owning statement so
    calls can be chained across clauses.
    """

    def __init__(self, statement: Statement):
        self._statement = statement
        self._params = ParameterList()

    @property
    def statement(self) -> Statement:
        return self._statement

    @property
    def params(self) -> List[Any]:
        """Bound values in placeholder order."""

        return self._params.as_list()

    def is_empty(self) -> bool:
        return not self._params

    @abstractmethod
    def template(self) -> str:
        """Return the SQL text with positional markers for a non-empty clause."""

    def compile(self) -> CompiledFragment:
        """Return the clause template and parameters, or an empty fragment."""

        if self.is_empty():
            return CompiledFragment("")
        return CompiledFragment(self.template(), self._params.as_list())

    def to_sql(self) -> str:
        """Render the clause as literal SQL using its own parameters."""

        fragment = self.compile()
        if not fragment.sql:
            return ""
        return prepare(fragment.sql, fragment.params)

    def end(self) -> Statement:
        """Return the owning statement to continue chaining."""

        return self._statement
