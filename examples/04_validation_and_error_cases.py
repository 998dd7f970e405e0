"""Validation and error case examples for statement building."""

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

from mini_sql import Join, QueryBuilder, Where, prepare


def expect_error(label: str, fn) -> None:  # noqa: ANN001
    try:
        fn()
    except Exception as exc:  # noqa: BLE001
        print(f"[OK] {label}: {type(exc).__name__}: {exc}")
    else:
        print(f"[UNEXPECTED] {label}: no exception raised")


def main() -> None:
    qb = QueryBuilder()

    # Rendering validates required parts.
    expect_error("SELECT needs a table", lambda: qb.select("id").to_sql())
    expect_error("INSERT needs data", lambda: qb.insert({}).into("users").to_sql())
    expect_error("UPDATE needs WHERE", lambda: qb.update({"a": 1}).table("users").to_sql())

    # Builder calls validate their input.
    expect_error("terminal needs a column", lambda: Where(qb.select().from_("t")).equals(1))
    expect_error("bad ORDER BY direction", lambda: qb.select().from_("t").order_by("id", "up"))
    expect_error("bad join type", lambda: Join(qb.delete()).add_join("OUTER", "u", "u", "a", "=", "b"))
    expect_error("bad HAVING connective", lambda: qb.select().from_("t").having("COUNT(*) > %d", 1, "XOR"))
    expect_error("bad column argument", lambda: qb.select(42))

    # Placeholder substitution checks marker counts.
    expect_error("marker mismatch", lambda: prepare("a = %s AND b = %s", [1]))

    # Execution needs a database.
    expect_error("execute without database", lambda: qb.select().from_("t").execute())


if __name__ == "__main__":
    main()
