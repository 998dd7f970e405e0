"""Show driver-ready SQL and parameters across SQLite/qmark/Postgres/MySQL dialects."""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_sql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_sql import QueryBuilder
from mini_sql.ports.db_api.dialects import MySQLDialect, PostgresDialect, QmarkDialect, SQLiteDialect


def show_for_dialect(name: str, dialect) -> None:  # noqa: ANN001
    print(f"\n===== {name} =====")

    statement = (
        QueryBuilder()
        .select("id", "email")
        .from_("users")
        .where("email").not_equals("blocked@example.com")
        .and_where("age").between(18, 65)
        .or_where("deleted_at").is_null()
        .where_raw("email LIKE %s", ["%@example.com"])
        .order_by("id")
        .limit(5)
    )
    sql, params = statement.build(dialect)

    print("SQL:", sql)
    print("Params:", params)


def main() -> None:
    show_for_dialect("SQLiteDialect", SQLiteDialect())
    show_for_dialect("QmarkDialect", QmarkDialect())
    show_for_dialect("PostgresDialect", PostgresDialect())
    show_for_dialect("MySQLDialect", MySQLDialect())


if __name__ == "__main__":
    main()
