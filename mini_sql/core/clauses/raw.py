"""Raw SQL fragments appended after every other clause."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Tuple

from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement


class Raw(Clause):
    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._fragments: List[Tuple[str, Tuple[Any, ...]]] = []

    def add_raw(self, sql: str, params: Iterable[Any] = ()) -> Statement:
        """Append caller-written SQL; only `params` are bound, the text is verbatim."""

        bound = tuple(params)
        self._fragments.append((sql, bound))
        self._params.extend(bound)
        return self._statement

    def is_empty(self) -> bool:
        return not self._fragments

    def template(self) -> str:
        return " ".join(sql for sql, _ in self._fragments)
