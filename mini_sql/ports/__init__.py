"""Public port exports for concrete adapter implementations."""

from .db_api import Database, Dialect, MySQLDialect, PostgresDialect, QmarkDialect, SQLiteDialect

__all__ = [
    "Database",
    "Dialect",
    "SQLiteDialect",
    "QmarkDialect",
    "PostgresDialect",
    "MySQLDialect",
]
