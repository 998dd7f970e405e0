"""mini-sql: fluent SQL statement builder with a single parameter-binding path."""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .ports import Database, Dialect, MySQLDialect, PostgresDialect, QmarkDialect, SQLiteDialect

__all__ = [
    *_core_all,
    "Database",
    "Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "QmarkDialect",
    "SQLiteDialect",
]
