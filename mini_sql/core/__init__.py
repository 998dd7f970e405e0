"""Public core API for statement building and rendering."""

from .clauses import (
    Clause,
    CompiledFragment,
    Distinct,
    GroupBy,
    Having,
    Join,
    JoinSpec,
    Limit,
    Offset,
    OrderBy,
    PredicateClause,
    Raw,
    Where,
)
from .columns import Aliased, ColumnSpec, DirectedList, Plain
from .conditions import ConditionGroup, Connective, normalize_connective
from .contracts import DatabasePort, DialectPort
from .exceptions import (
    IncompleteQuery,
    InvalidArgument,
    InvalidState,
    ParameterMismatch,
    QueryBuilderError,
)
from .params import NULL, ParameterList
from .placeholders import bind, prepare
from .query_builder import QueryBuilder
from .statements import Delete, Insert, Select, Statement, Update

__all__ = [
    "NULL",
    "Aliased",
    "Clause",
    "ColumnSpec",
    "CompiledFragment",
    "ConditionGroup",
    "Connective",
    "DatabasePort",
    "Delete",
    "DialectPort",
    "DirectedList",
    "Distinct",
    "GroupBy",
    "Having",
    "IncompleteQuery",
    "Insert",
    "InvalidArgument",
    "InvalidState",
    "Join",
    "JoinSpec",
    "Limit",
    "Offset",
    "OrderBy",
    "ParameterList",
    "ParameterMismatch",
    "Plain",
    "PredicateClause",
    "QueryBuilder",
    "QueryBuilderError",
    "Raw",
    "Select",
    "Statement",
    "Update",
    "Where",
    "bind",
    "normalize_connective",
    "prepare",
]
