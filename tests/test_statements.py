from __future__ import annotations

import sqlite3
import unittest

from mini_sql.core.exceptions import IncompleteQuery, InvalidArgument, InvalidState
from mini_sql.core.placeholders import count_markers
from mini_sql.core.query_builder import QueryBuilder
from mini_sql.core.statements import Delete, Insert, Select, Update
from mini_sql.ports.db_api.database import Database
from mini_sql.ports.db_api.dialects import MySQLDialect, PostgresDialect, QmarkDialect, SQLiteDialect


class SelectStatementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.qb = QueryBuilder()

    def test_simple_select(self) -> None:
        statement = self.qb.select("id", "name").from_("users")

        self.assertIsInstance(statement, Select)
        self.assertEqual(statement.to_sql(), "SELECT id, name FROM users")
        self.assertEqual(statement.get_params(), [])

    def test_no_columns_selects_star(self) -> None:
        self.assertEqual(self.qb.select().from_("users").to_sql(), "SELECT * FROM users")

    def test_column_shapes(self) -> None:
        statement = self.qb.select(["id", "name"], {"COUNT(id)": "total", "email": None})
        statement.from_("users", "u")

        self.assertEqual(
            statement.to_sql(),
            "SELECT id, name, COUNT(id) AS total, email FROM users AS u",
        )
        self.assertEqual(statement.get_columns(), ["id", "name", "COUNT(id) AS total", "email"])

    def test_invalid_column_argument_raises(self) -> None:
        with self.assertRaises(InvalidArgument):
            self.qb.select(123)

    def test_aggregates_replace_projection(self) -> None:
        statement = self.qb.select("id", "name").from_("orders")

        statement.count()
        self.assertEqual(statement.to_sql(), "SELECT COUNT(*) FROM orders")

        statement.sum("price", "total")
        self.assertEqual(statement.to_sql(), "SELECT SUM(price) AS total FROM orders")

        for method, expected in (("avg", "AVG(price)"), ("min", "MIN(price)"), ("max", "MAX(price)")):
            with self.subTest(method=method):
                getattr(statement, method)("price")
                self.assertEqual(statement.get_columns(), [expected])

    def test_clauses_render_in_fixed_order(self) -> None:
        db = Database(sqlite3.connect(":memory:"), SQLiteDialect(), prefix="wp_")
        self.addCleanup(db.close)
        qb = QueryBuilder(db)

        statement = qb.select("author", {"COUNT(*)": "posts"})
        statement.add_raw("FOR UPDATE")
        statement.offset(10).limit(5)
        statement.order_by("posts", "desc")
        statement.having("COUNT(*) > %d", 2)
        statement.group_by("author")
        statement.where("status").equals("publish")
        statement.join("users", "u", "p.author", "=", "u.ID")
        statement.distinct()
        statement.from_("posts", "p")

        self.assertEqual(
            statement.to_sql(),
            "SELECT DISTINCT author, COUNT(*) AS posts FROM wp_posts AS p "
            "INNER JOIN wp_users AS u ON p.author = u.ID "
            "WHERE (status = 'publish') GROUP BY author HAVING (COUNT(*) > 2) "
            "ORDER BY posts DESC LIMIT 5 OFFSET 10 FOR UPDATE",
        )
        self.assertEqual(statement.get_params(), ["publish", 2])

    def test_fluent_chain_returns_statement(self) -> None:
        sql = (
            self.qb.select("id")
            .from_("users")
            .where("status").equals("active")
            .and_where("age").at_least(18)
            .order_by("id")
            .limit(10)
            .to_sql()
        )

        self.assertEqual(
            sql,
            "SELECT id FROM users WHERE (status = 'active') AND (age >= 18) ORDER BY id ASC LIMIT 10",
        )

    def test_having_column_vocabulary(self) -> None:
        statement = self.qb.select("author").from_("posts").group_by("author")
        statement.having_column("COUNT(*)").greater_than(3)

        self.assertEqual(
            statement.to_sql(),
            "SELECT author FROM posts GROUP BY author HAVING (COUNT(*) > 3)",
        )

    def test_group_where_and_raw_conditions(self) -> None:
        def build(q) -> None:  # noqa: ANN001
            q.where("role").equals("admin")
            q.or_where("role").equals("editor")

        statement = self.qb.select().from_("users")
        statement.where("active").equals(True)
        statement.group_where(build)
        statement.or_where_raw("name LIKE %s", ["%root%"])

        self.assertEqual(
            statement.to_sql(),
            "SELECT * FROM users WHERE (active = 1) "
            "AND ((role = 'admin' OR role = 'editor')) OR (name LIKE '%root%')",
        )
        self.assertEqual(statement.get_params(), [True, "admin", "editor", "%root%"])

    def test_missing_table_raises(self) -> None:
        with self.assertRaises(IncompleteQuery):
            self.qb.select("id").to_sql()

    def test_missing_columns_raises(self) -> None:
        statement = Select().from_("users")
        with self.assertRaises(IncompleteQuery) as ctx:
            statement.compile()
        self.assertIn("No columns specified", str(ctx.exception))

    def test_rendering_is_idempotent_and_str_matches(self) -> None:
        statement = self.qb.select("id").from_("users").where("id").in_set([1, 2])

        first = statement.to_sql()
        self.assertEqual(statement.to_sql(), first)
        self.assertEqual(str(statement), first)
        self.assertEqual(statement.get_params(), [1, 2])
        self.assertEqual(statement.params, [1, 2])

    def test_marker_count_matches_parameter_count(self) -> None:
        statement = (
            self.qb.select("id")
            .from_("t")
            .where("a").equals("x")
            .or_where("b").in_set([1, 2])
            .where("c").is_null()
            .having("COUNT(*) > %d", 1)
            .add_raw("LIMIT %d", [3])
        )

        fragment = statement.compile()
        self.assertEqual(count_markers(fragment.sql), len(fragment.params))


class InsertStatementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.qb = QueryBuilder()

    def test_insert_renders_none_as_literal_null(self) -> None:
        statement = self.qb.insert({"a": 1, "b": None, "c": "x"}).into("t")

        self.assertIsInstance(statement, Insert)
        fragment = statement.compile()
        self.assertEqual(fragment.sql, "INSERT INTO t (a, b, c) VALUES (%s, NULL, %s)")
        self.assertEqual(fragment.params, [1, "x"])
        self.assertEqual(statement.to_sql(), "INSERT INTO t (a, b, c) VALUES (1, NULL, 'x')")

    def test_insert_with_raw_suffix(self) -> None:
        statement = self.qb.insert({"id": 1}).into("t").raw("ON CONFLICT DO NOTHING")
        self.assertEqual(statement.to_sql(), "INSERT INTO t (id) VALUES (1) ON CONFLICT DO NOTHING")

    def test_insert_validation(self) -> None:
        with self.assertRaises(IncompleteQuery):
            self.qb.insert({"a": 1}).to_sql()
        with self.assertRaises(IncompleteQuery) as ctx:
            self.qb.insert({}).into("t").to_sql()
        self.assertIn("No data specified for insertion", str(ctx.exception))

    def test_get_data_returns_copy(self) -> None:
        statement = self.qb.insert({"a": 1})
        statement.get_data()["b"] = 2
        self.assertEqual(statement.get_data(), {"a": 1})


class UpdateStatementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.qb = QueryBuilder()

    def test_update_with_where(self) -> None:
        statement = self.qb.update({"name": "x", "age": None}).table("users")
        statement.where("id").equals(3)

        self.assertIsInstance(statement, Update)
        fragment = statement.compile()
        self.assertEqual(fragment.sql, "UPDATE users SET name = %s, age = %s WHERE (id = %s)")
        self.assertEqual(fragment.params, ["x", None, 3])
        self.assertEqual(statement.to_sql(), "UPDATE users SET name = 'x', age = NULL WHERE (id = 3)")

    def test_update_requires_where(self) -> None:
        statement = self.qb.update({"name": "x"}).table("users")

        with self.assertRaises(IncompleteQuery) as ctx:
            statement.to_sql()
        self.assertIn("No WHERE clause specified for update", str(ctx.exception))

    def test_update_requires_table_and_data(self) -> None:
        with self.assertRaises(IncompleteQuery):
            self.qb.update({"name": "x"}).where("id").equals(1).to_sql()
        with self.assertRaises(IncompleteQuery):
            self.qb.update({}).table("users").where("id").equals(1).to_sql()


class DeleteStatementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.qb = QueryBuilder()

    def test_delete_with_where(self) -> None:
        statement = self.qb.delete().from_("users").where("id").equals(1)

        self.assertIsInstance(statement, Delete)
        self.assertEqual(statement.to_sql(), "DELETE FROM users WHERE (id = 1)")

    def test_delete_without_where_is_allowed(self) -> None:
        self.assertEqual(self.qb.delete().from_("logs").to_sql(), "DELETE FROM logs")

    def test_delete_with_join_names_target_table(self) -> None:
        statement = (
            self.qb.delete()
            .from_("posts")
            .join("users", "u", "posts.author", "=", "u.ID")
            .where("u.status").equals("banned")
        )

        self.assertEqual(
            statement.to_sql(),
            "DELETE posts FROM posts INNER JOIN users AS u ON posts.author = u.ID "
            "WHERE (u.status = 'banned')",
        )

    def test_delete_requires_table(self) -> None:
        with self.assertRaises(IncompleteQuery):
            self.qb.delete().where("id").equals(1).to_sql()

    def test_delete_with_chained_group_conditions(self) -> None:
        statement = (
            self.qb.delete()
            .from_("orders")
            .where("status").equals("pending")
            .group_where(lambda q: q.where("total").greater_than(1000).or_where("is_priority").equals(True))
        )

        self.assertIsInstance(statement, Delete)
        self.assertEqual(
            statement.to_sql(),
            "DELETE FROM orders WHERE (status = 'pending') AND ((total > 1000 OR is_priority = 1))",
        )
        self.assertEqual(statement.get_params(), ["pending", 1000, True])

    def test_statement_keeps_bound_null_string_quoted(self) -> None:
        quoted = self.qb.delete().from_("t").where("a").equals("NULL")
        null_test = self.qb.delete().from_("t").where("a").is_null()

        self.assertEqual(quoted.to_sql(), "DELETE FROM t WHERE (a = 'NULL')")
        self.assertEqual(null_test.to_sql(), "DELETE FROM t WHERE (a IS NULL)")


class BuildAndDatabaseBindingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.db = Database(sqlite3.connect(":memory:"), SQLiteDialect(), prefix="wp_")
        self.qb = QueryBuilder(self.db)

    def tearDown(self) -> None:
        self.db.close()

    def test_tables_are_prefixed(self) -> None:
        self.assertEqual(self.qb.select().from_("users").get_table(), "wp_users")
        self.assertEqual(self.qb.update({"a": 1}).table("users").get_table(), "wp_users")
        self.assertEqual(self.qb.insert({"a": 1}).into("users").get_table(), "wp_users")

    def test_build_uses_database_dialect(self) -> None:
        statement = self.qb.select("id").from_("users").where("status").equals("active")

        self.assertEqual(
            statement.build(),
            ("SELECT id FROM wp_users WHERE (status = :p_1)", {"p_1": "active"}),
        )

    def test_build_with_explicit_dialects(self) -> None:
        statement = self.qb.select("id").from_("users").where("status").in_set(["a", "b"])

        self.assertEqual(
            statement.build(QmarkDialect()),
            ("SELECT id FROM wp_users WHERE (status IN (?, ?))", ["a", "b"]),
        )
        self.assertEqual(
            statement.build(MySQLDialect()),
            ("SELECT id FROM wp_users WHERE (status IN (%s, %s))", ["a", "b"]),
        )

    def test_build_inlines_null_checks(self) -> None:
        statement = self.qb.select("id").from_("users").where("deleted_at").is_null()

        self.assertEqual(
            statement.build(PostgresDialect()),
            ("SELECT id FROM wp_users WHERE (deleted_at IS NULL)", []),
        )

    def test_statement_without_database(self) -> None:
        statement = Select().columns("id").from_("users")

        self.assertEqual(statement.to_sql(), "SELECT id FROM users")
        self.assertIsNone(statement.db)
        with self.assertRaises(InvalidState):
            statement.build()
        with self.assertRaises(InvalidState):
            statement.execute()
        with self.assertRaises(InvalidState):
            statement.fetch_all()
        self.assertEqual(statement.affected_rows, 0)
        self.assertIsNone(statement.last_insert_id)


if __name__ == "__main__":
    unittest.main()
