"""DISTINCT modifier for SELECT statements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Clause

if TYPE_CHECKING:
    from ..statements.base import Statement


class Distinct(Clause):
    def __init__(self, statement: Statement):
        super().__init__(statement)
        self._enabled = False

    def distinct(self, enabled: bool = True) -> Statement:
        self._enabled = bool(enabled)
        return self._statement

    def is_empty(self) -> bool:
        return not self._enabled

    def template(self) -> str:
        return "DISTINCT "
