"""Basic CRUD example for mini_sql statements over sqlite3."""

from __future__ import annotations

import logging
import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_sql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_sql import Database, QueryBuilder, SQLiteDialect


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    # 1) Create DB adapter with a table prefix and a builder bound to it.
    conn = sqlite3.connect(":memory:")
    db = Database(conn, SQLiteDialect(), prefix="app_")
    qb = QueryBuilder(db)

    try:
        db.execute(
            'CREATE TABLE "app_users" ("id" INTEGER PRIMARY KEY, "email" TEXT, "age" INTEGER);'
        )

        # 2) Insert rows; None values are written as NULL.
        alice = qb.insert({"email": "alice@example.com", "age": 25}).into("users")
        alice.execute()
        print("Inserted alice with id:", alice.last_insert_id)
        bob_id = qb.insert({"email": "bob@example.com", "age": None}).into("users").save()
        print("Inserted bob with id:", bob_id)

        # 3) Read rows back.
        print("All users:", qb.select().from_("users").order_by("id").fetch_all())
        print(
            "Alice:",
            qb.select("email", "age").from_("users").where("id").equals(alice.last_insert_id).fetch_one(),
        )

        # 4) Update requires a WHERE clause.
        updated = qb.update({"age": 31}).table("users").where("id").equals(bob_id).execute()
        print("Updated row count:", updated)

        # 5) Delete.
        deleted = qb.delete().from_("users").where("email").equals("alice@example.com").execute()
        print("Deleted row count:", deleted)
        print("Remaining emails:", qb.select("email").from_("users").fetch_column())
    finally:
        db.close()


if __name__ == "__main__":
    main()
