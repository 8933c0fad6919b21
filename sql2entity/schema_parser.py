"""Extract a table model from a MySQL-style CREATE TABLE statement.

Handles:
- Backtick-quoted table and column names
- NOT NULL detection
- Type normalization (int, varchar(N), date/datetime, decimal, double)
- Inline COMMENT '...' annotations
- PRIMARY KEY declaration lines

Anything else in the table body (indexes, constraints, engine options,
the closing parenthesis) is skipped.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

HEADER_MARKER = "CREATE TABLE "
PRIMARY_KEY_MARKER = "PRIMARY KEY"
NOT_NULL_MARKER = "NOT NULL"

_VARCHAR_LENGTH = re.compile(r"varchar\((\d+)\)")


class ParseError(ValueError):
    """Raised when the text holds no recognizable CREATE TABLE header."""


@dataclass(frozen=True)
class Column:
    name: str
    type: str = ""
    nullable: bool = True
    length: int = 0
    is_primary_key: bool = False
    comment: str = ""


@dataclass(frozen=True)
class Table:
    table_name: str
    columns: tuple[Column, ...] = ()


class LineKind(enum.Enum):
    HEADER = "header"
    COLUMN = "column"
    PRIMARY_KEY = "primary_key"
    OTHER = "other"


def _date_type(nullable: bool) -> str:
    return "DateTime?" if nullable else "DateTime"


# Ordered (keyword, resolver) rules; the first keyword contained in the
# type token wins.
_TYPE_RULES: list[tuple[str, Callable[[bool], str]]] = [
    ("int", lambda nullable: "int"),
    ("varchar", lambda nullable: "string"),
    ("date", _date_type),
    ("decimal", lambda nullable: "decimal"),
    ("double", lambda nullable: "double"),
]


def resolve_type(token: str, nullable: bool) -> str:
    """Map a SQL type token to its entity type, or "" when unrecognized."""
    for keyword, resolver in _TYPE_RULES:
        if keyword in token:
            return resolver(nullable)
    return ""


def _parse_varchar_length(token: str) -> int:
    """Read N out of a varchar(N) token; 0 with a warning when malformed."""
    match = _VARCHAR_LENGTH.match(token)
    if not match:
        logger.warning("Cannot read varchar length from %r, using 0", token)
        return 0
    return int(match.group(1))


def _split_tokens(line: str) -> list[str]:
    return line.strip().split(" ")


def classify_line(line: str) -> LineKind:
    """Classify one line of a CREATE TABLE statement.

    A backtick in the first token makes a column line, whatever else the
    line holds (a COMMENT may well mention CREATE TABLE).
    """
    if "`" in _split_tokens(line)[0]:
        return LineKind.COLUMN
    if HEADER_MARKER in line:
        return LineKind.HEADER
    if PRIMARY_KEY_MARKER in line:
        return LineKind.PRIMARY_KEY
    return LineKind.OTHER


def parse_column(line: str) -> tuple[Column | None, bool]:
    """Parse a column definition line.

    Returns ``(column, True)`` for a column line, ``(None, False)`` for
    anything whose first token carries no backtick.
    """
    tokens = _split_tokens(line)
    if "`" not in tokens[0]:
        return None, False

    name = tokens[0].split("`")[1]
    nullable = NOT_NULL_MARKER not in line

    type_token = tokens[1] if len(tokens) > 1 else ""
    column_type = resolve_type(type_token, nullable)
    length = 0
    if column_type == "string" and "(" in type_token:
        length = _parse_varchar_length(type_token)

    comment = ""
    if "'" in line:
        comment = line.split("'")[1]

    column = Column(
        name=name,
        type=column_type,
        nullable=nullable,
        length=length,
        comment=comment,
    )
    return column, True


def _mark_primary_keys(columns: list[Column], key_line: str) -> None:
    """Flag every column whose name occurs anywhere in the key line."""
    for i, column in enumerate(columns):
        if column.name in key_line:
            columns[i] = dataclasses.replace(column, is_primary_key=True)


def build_table(raw: str | bytes) -> Table:
    """Build a Table from the text of a single CREATE TABLE statement."""
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw

    _, marker, body = text.partition(HEADER_MARKER)
    if not marker:
        raise ParseError(f"No {HEADER_MARKER.strip()!r} header found")

    name_parts = body.split("`")
    if len(name_parts) < 2:
        raise ParseError("No backtick-quoted table name after the header")
    table_name = name_parts[1]

    columns: list[Column] = []
    for line in body.split("\n")[1:]:
        kind = classify_line(line)
        if kind is LineKind.COLUMN:
            column, ok = parse_column(line)
            if ok:
                columns.append(column)
        # A column line may carry an inline PRIMARY KEY as well.
        if PRIMARY_KEY_MARKER in line:
            _mark_primary_keys(columns, line)

    logger.debug("Parsed table %s with %d columns", table_name, len(columns))
    return Table(table_name=table_name, columns=tuple(columns))
