"""Column specifications resolved at the builder call boundary.

Builder methods accept strings, mappings, and sequences interchangeably;
they are turned into one of three tagged specs before any state changes:

- `Plain("id")` renders `id`,
- `Aliased("COUNT(id)", "total")` renders `COUNT(id) AS total`,
- `DirectedList((("created", "DESC"),))` renders `created DESC`.
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple, Union

from .exceptions import InvalidArgument


@dataclass(frozen=True)
class Plain:
    name: str

    def render(self) -> List[str]:
        return [self.name]


@dataclass(frozen=True)
class Aliased:
    name: str
    alias: str

    def render(self) -> List[str]:
        return [f"{self.name} AS {self.alias}"]


@dataclass(frozen=True)
class DirectedList:
    items: Tuple[Tuple[str, str], ...]

    def render(self) -> List[str]:
        return [f"{column} {modifier}" for column, modifier in self.items]


ColumnSpec = Union[Plain, Aliased, DirectedList]
_SPEC_TYPES = (Plain, Aliased, DirectedList)


def projection_specs(columns: Iterable[Any]) -> List[ColumnSpec]:
    """Resolve SELECT column arguments.

    Strings become `Plain`, mappings of `{column: alias}` become `Aliased`
    (a falsy alias keeps the bare column), and non-string sequences are
    flattened one level.

    Raises:
        InvalidArgument: An argument is none of the accepted shapes.
    """

    specs: List[ColumnSpec] = []
    for column in columns:
        if isinstance(column, _SPEC_TYPES):
            specs.append(column)
        elif isinstance(column, str):
            specs.append(Plain(column))
        elif isinstance(column, Mapping):
            for name, alias in column.items():
                _ensure_str(name, "Column name")
                specs.append(Aliased(name, alias) if alias else Plain(name))
        elif isinstance(column, SequenceABC):
            specs.extend(projection_specs(column))
        else:
            raise InvalidArgument("Argument should be a string or mapping")
    return specs


def grouping_specs(columns: Iterable[Any]) -> List[ColumnSpec]:
    """Resolve GROUP BY arguments: strings or `{column: modifier}` mappings."""

    specs: List[ColumnSpec] = []
    for column in columns:
        if isinstance(column, _SPEC_TYPES):
            specs.append(column)
        elif isinstance(column, str):
            specs.append(Plain(column))
        elif isinstance(column, Mapping):
            items = []
            for name, modifier in column.items():
                _ensure_str(name, "group_by column")
                _ensure_str(modifier, "group_by modifier")
                items.append((name, modifier))
            specs.append(DirectedList(tuple(items)))
        else:
            raise InvalidArgument("group_by columns must be strings or mappings")
    return specs


def _ensure_str(value: Any, label: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgument(f"{label} must be a string, got {type(value).__name__}")
