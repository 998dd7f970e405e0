"""WHERE grouping, HAVING and raw fragments rendered as literal SQL."""

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


def main() -> None:
    qb = QueryBuilder()

    # AND chains stay in one group, OR opens a new one.
    statement = (
        qb.select("id", "email")
        .from_("users")
        .where("status").equals("active")
        .and_where("age").at_least(18)
        .or_where("role").in_set(["admin", "owner"])
    )
    print("Conditions:", statement.to_sql())

    # Parenthesized sub-groups use the same vocabulary.
    def staff(q) -> None:  # noqa: ANN001
        q.where("role").equals("editor")
        q.or_where("role").equals("author")

    grouped = qb.select().from_("posts").where("published").equals(True).group_where(staff)
    print("Grouped:", grouped.to_sql())

    # Aggregates replace the projection; HAVING binds a single value.
    report = (
        qb.select("author")
        .from_("posts", "p")
        .left_join("users", "u", "p.author", "=", "u.id")
        .where("p.deleted_at").is_null()
        .group_by("author")
        .having("COUNT(*) > %d", 5)
        .order_by("author", "desc")
        .limit(10)
        .offset(20)
    )
    print("Report:", report.to_sql())
    print("Template:", report.compile().sql)
    print("Params:", report.get_params())

    # Raw fragments go last and are never escaped; only their params are.
    locked = qb.select("id").from_("jobs").where("state").equals("queued").raw("FOR UPDATE")
    print("Raw:", locked.to_sql())


if __name__ == "__main__":
    main()
