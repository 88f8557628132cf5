"""
SQL INSERT statement builder.

INSERT statements are not composed from options: the column list is taken as
given and one placeholder is emitted per column.
"""

from typing import Sequence

from ..core.identifier import render_field_list
from ..core.parameters import build_placeholders
from ..core.vocabulary import Field, StatementKind, Table
from .base import emit_statement


def build_insert(table: Table, fields: Sequence[Field]) -> str:
    """
    Build a single-row INSERT statement.

    Fields qualified with ``table.`` are unqualified, since INSERT column
    lists must not carry the table name. The caller binds values in the same
    order as ``fields``.

    Args:
        table: Target table
        fields: Columns to insert

    Returns:
        INSERT SQL statement

    Example:
        >>> build_insert("users", ["name", "address", "status"])
        'INSERT INTO users (name, address, status) VALUES (?, ?, ?)'
    """
    text = (
        f"{StatementKind.INSERT.value} {table} "
        f"({render_field_list(fields, table=table) if fields else ''}) "
        f"VALUES ({build_placeholders(len(fields), separator=', ')})"
    )
    emit_statement(StatementKind.INSERT, table, text, [])
    return text
