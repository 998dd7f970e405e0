"""Placeholder substitution and driver binding for rendered SQL templates.

Templates use printf-style positional markers:

- `%s` renders the value according to its Python type,
- `%d` forces an integer,
- `%f` forces a fixed six-digit float,
- `%%` is a literal percent sign.

`prepare()` produces a literal SQL string (useful for logging and tests).
`bind()` keeps values out of the SQL text and rewrites the markers into the
placeholder style of a dialect so a DB-API driver performs the binding.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Sequence, Tuple

from .contracts import DialectPort
from .exceptions import ParameterMismatch
from .params import NULL
from .types import NamedParams, PositionalParams, QueryParams

logger = logging.getLogger(__name__)

_MARKER = re.compile(r"%([%sdf])")
_ESCAPES = {"\\": "\\\\", "'": "\\'", '"': '\\"', "\x00": "\\0"}


class _ParamNameGenerator:
    """Generates safe, unique parameter names for named SQL styles."""

    def __init__(self) -> None:
        self._counter = 0

    def next(self, base: str = "p") -> str:
        """Return a deterministic parameter name based on a hint."""

        self._counter += 1
        safe = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in base)
        return f"{safe}_{self._counter}"


def count_markers(template: str) -> int:
    """Count value markers in a template, ignoring escaped `%%`."""

    return sum(1 for match in _MARKER.finditer(template) if match.group(1) != "%")


def escape_string(value: str) -> str:
    """Backslash-escape quotes, backslashes and NUL bytes."""

    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def format_value(value: Any, marker: str = "s") -> str:
    """Render one value as a SQL literal for the given marker type."""

    if value is None or value is NULL:
        return "NULL"
    if marker == "d":
        return str(int(value))
    if marker == "f":
        return f"{float(value):.6f}"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}"
    return f"'{escape_string(str(value))}'"


def prepare(template: str, params: Sequence[Any]) -> str:
    """Substitute positional markers with literal values.

    Args:
        template: SQL text with `%s`/`%d`/`%f` markers.
        params: Values in marker order.

    Returns:
        SQL text with every marker replaced.

    Raises:
        ParameterMismatch: Marker count differs from the number of values.
    """

    values = list(params)
    expected = count_markers(template)
    if expected != len(values):
        raise ParameterMismatch(expected, len(values))

    iterator = iter(values)

    def _replace(match: re.Match[str]) -> str:
        marker = match.group(1)
        if marker == "%":
            return "%"
        return format_value(next(iterator), marker)

    return _MARKER.sub(_replace, template)


def bind(
    template: str,
    params: Sequence[Any],
    dialect: DialectPort,
) -> Tuple[str, QueryParams]:
    """Rewrite a template for driver-side binding.

    NULL sentinels are inlined as `NULL` and dropped from the values. The
    returned parameters are a dict for `named` dialects and a list otherwise.

    Raises:
        ParameterMismatch: Marker count differs from the number of values.
    """

    values = list(params)
    expected = count_markers(template)
    if expected != len(values):
        raise ParameterMismatch(expected, len(values))

    named = dialect.paramstyle == "named"
    generator = _ParamNameGenerator()
    positional: PositionalParams = []
    named_params: NamedParams = {}
    parts: List[str] = []
    iterator = iter(values)
    cursor = 0

    for match in _MARKER.finditer(template):
        parts.append(_escape_literal_percent(template[cursor : match.start()], dialect))
        cursor = match.end()
        marker = match.group(1)
        if marker == "%":
            parts.append("%%" if dialect.paramstyle == "format" else "%")
            continue
        value = next(iterator)
        if value is NULL:
            parts.append("NULL")
            continue
        key = generator.next()
        parts.append(dialect.placeholder(key))
        if named:
            named_params[key] = value
        else:
            positional.append(value)

    parts.append(_escape_literal_percent(template[cursor:], dialect))
    sql = "".join(parts)
    bound: QueryParams = named_params if named else positional
    logger.debug("Bound %d parameter(s) for %s paramstyle", len(bound), dialect.paramstyle)
    return sql, bound


def _escape_literal_percent(text: str, dialect: DialectPort) -> str:
    """Double stray `%` signs that a `format` paramstyle driver would parse."""

    if dialect.paramstyle == "format":
        return text.replace("%", "%%")
    return text
