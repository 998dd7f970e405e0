"""Clause implementations owned by statements."""

from .base import Clause, CompiledFragment
from .distinct import Distinct
from .group_by import GroupBy
from .join import Join, JoinSpec
from .limit import Limit, Offset
from .order_by import OrderBy
from .predicate import Having, PredicateClause, Where
from .raw import Raw

__all__ = [
    "Clause",
    "CompiledFragment",
    "Distinct",
    "GroupBy",
    "Having",
    "Join",
    "JoinSpec",
    "Limit",
    "Offset",
    "OrderBy",
    "PredicateClause",
    "Raw",
    "Where",
]
