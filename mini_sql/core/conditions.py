"""Connective and condition-group primitives for predicate clauses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .exceptions import InvalidArgument


class Connective(str, Enum):
    """Boolean joiner placed between predicate conditions."""

    AND = "AND"
    OR = "OR"


ConnectiveInput = str | Connective


@dataclass
class ConditionGroup:
    """Ordered condition texts that share one connective tag."""

    connective: Connective
    conditions: List[str] = field(default_factory=list)


def normalize_connective(connective: ConnectiveInput, *, strict: bool = True) -> Connective:
    """Normalize user connective input into a `Connective` value.

    Args:
        connective: `AND`/`OR` in any case, or a `Connective`.
        strict: Raise on unknown input instead of falling back to `AND`.

    Raises:
        InvalidArgument: Unknown connective while `strict` is set.
    """

    if isinstance(connective, Connective):
        return connective

    key = connective.strip().upper() if isinstance(connective, str) else ""
    if key in Connective._value2member_map_:
        return Connective(key)
    if strict:
        raise InvalidArgument(f"Invalid connective: {connective!r}. Must be AND or OR.")
    return Connective.AND
