from __future__ import annotations

import unittest

from mini_sql.core.exceptions import ParameterMismatch
from mini_sql.core.params import NULL, ParameterList
from mini_sql.core.placeholders import bind, count_markers, escape_string, format_value, prepare
from mini_sql.ports.db_api.dialects import MySQLDialect, PostgresDialect, QmarkDialect, SQLiteDialect


class ParameterListTests(unittest.TestCase):
    def test_starts_empty_and_grows_in_order(self) -> None:
        params = ParameterList()
        self.assertFalse(params)
        self.assertEqual(len(params), 0)

        params.append("a")
        params.extend([1, 2.5])

        self.assertTrue(params)
        self.assertEqual(params.as_list(), ["a", 1, 2.5])
        self.assertEqual(list(params), ["a", 1, 2.5])
        self.assertEqual(params, ["a", 1, 2.5])

    def test_as_list_returns_a_copy(self) -> None:
        params = ParameterList([1])
        snapshot = params.as_list()
        snapshot.append(2)
        self.assertEqual(params.as_list(), [1])

    def test_null_sentinel_is_a_singleton(self) -> None:
        self.assertIs(type(NULL)(), NULL)
        self.assertEqual(str(NULL), "NULL")
        self.assertEqual(repr(NULL), "NULL")


class PrepareTests(unittest.TestCase):
    def test_values_render_by_type(self) -> None:
        samples = [
            ("text", "'text'"),
            (42, "42"),
            (3.14, "3.140000"),
            (True, "1"),
            (False, "0"),
            (None, "NULL"),
            (NULL, "NULL"),
        ]
        for value, expected in samples:
            with self.subTest(value=value):
                self.assertEqual(format_value(value), expected)

    def test_typed_markers(self) -> None:
        sql = prepare("a = %d AND b > %f AND c = %s", ["7", 1, "x"])
        self.assertEqual(sql, "a = 7 AND b > 1.000000 AND c = 'x'")

    def test_strings_are_escaped(self) -> None:
        self.assertEqual(escape_string("O'Reilly"), "O\\'Reilly")
        self.assertEqual(
            prepare("name = %s", ["x' OR '1'='1"]),
            "name = 'x\\' OR \\'1\\'=\\'1'",
        )
        self.assertEqual(prepare("path = %s", ["a\\b"]), "path = 'a\\\\b'")

    def test_escaped_percent_is_literal(self) -> None:
        self.assertEqual(count_markers("LIKE '%%s' AND a = %s"), 1)
        self.assertEqual(prepare("LIKE '100%%' AND a = %s", [1]), "LIKE '100%' AND a = 1")

    def test_values_containing_markers_are_not_reparsed(self) -> None:
        self.assertEqual(
            prepare("a = %s AND b = %s", ["%s", "x"]),
            "a = '%s' AND b = 'x'",
        )

    def test_marker_count_mismatch_raises(self) -> None:
        with self.assertRaises(ParameterMismatch) as ctx:
            prepare("a = %s AND b = %s", [1])
        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.received, 1)

        with self.assertRaises(ParameterMismatch):
            prepare("a = 1", [1])

    def test_template_without_markers_is_unchanged(self) -> None:
        self.assertEqual(prepare("SELECT * FROM t", []), "SELECT * FROM t")


class BindTests(unittest.TestCase):
    def test_bind_named(self) -> None:
        sql, params = bind("a = %s AND b IN (%s, %s)", ["x", 1, 2], SQLiteDialect())
        self.assertEqual(sql, "a = :p_1 AND b IN (:p_2, :p_3)")
        self.assertEqual(params, {"p_1": "x", "p_2": 1, "p_3": 2})

    def test_bind_qmark(self) -> None:
        sql, params = bind("a = %s AND b = %d", ["x", 2], QmarkDialect())
        self.assertEqual(sql, "a = ? AND b = ?")
        self.assertEqual(params, ["x", 2])

    def test_bind_format_escapes_literal_percent(self) -> None:
        sql, params = bind("name LIKE 'a%' AND id = %s AND x LIKE '5%%'", [3], PostgresDialect())
        self.assertEqual(sql, "name LIKE 'a%%' AND id = %s AND x LIKE '5%%'")
        self.assertEqual(params, [3])

    def test_bind_qmark_unescapes_percent(self) -> None:
        sql, _ = bind("x LIKE '5%%' AND id = %s", [3], QmarkDialect())
        self.assertEqual(sql, "x LIKE '5%' AND id = ?")

    def test_bind_inlines_null_sentinel(self) -> None:
        sql, params = bind("(a IS %s) AND (b = %s)", [NULL, None], MySQLDialect())
        self.assertEqual(sql, "(a IS NULL) AND (b = %s)")
        self.assertEqual(params, [None])

        named_sql, named_params = bind("a IS NOT %s", [NULL], SQLiteDialect())
        self.assertEqual(named_sql, "a IS NOT NULL")
        self.assertEqual(named_params, {})

    def test_bind_mismatch_raises(self) -> None:
        with self.assertRaises(ParameterMismatch):
            bind("a = %s", [], QmarkDialect())


if __name__ == "__main__":
    unittest.main()
