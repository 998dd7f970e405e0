"""Ordered parameter sink shared by clauses and statements."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List


class _NullSentinel:
    """Marker bound by `IS NULL` checks; always rendered as the bare `NULL` literal."""

    _instance: "_NullSentinel | None" = None

    def __new__(cls) -> "_NullSentinel":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __str__(self) -> str:
        return "NULL"

    def __reduce__(self) -> str:
        return "NULL"


NULL = _NullSentinel()


class ParameterList:
    """Append-only list of values bound to positional placeholders.

    The order of values is the order their placeholders appear in the SQL
    template, so clauses must append in the same left-to-right order they
    write markers.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: List[Any] = list(values)

    def append(self, value: Any) -> None:
        self._values.append(value)

    def extend(self, values: Iterable[Any]) -> None:
        self._values.extend(values)

    def as_list(self) -> List[Any]:
        """Return a copy safe to hand to substitution or a driver."""

        return list(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterList):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParameterList({self._values!r})"
