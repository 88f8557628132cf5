"""SELECT statement builder."""

from typing import Optional, Sequence

from ..core.identifier import render_field_list
from ..core.parameters import merge_params
from ..core.query import Query, QueryOption
from ..core.render import render_aggregations, render_joins, render_where
from ..core.vocabulary import Field, StatementKind, Table
from .base import Statement, emit_statement


def build_select(
    table: Table, fields: Optional[Sequence[Field]] = None, *options: QueryOption
) -> Statement:
    """
    Build a SELECT statement.

    Clause order is fixed: fields, ``FROM``, joins, ``WHERE``, trailing
    clauses. Arguments are predicate values followed by trailing values.

    Args:
        table: Table to select from
        fields: Fields to select; empty or ``None`` selects ``*``
        *options: Query options applied in order

    Returns:
        Tuple of (statement text, positional arguments)

    Raises:
        TypeError: If ``fields`` is a string or an option; pass ``None``
            before the options to select ``*``

    Example:
        >>> build_select("users", None, limit(1), order_by("users.id", OrderByType.DESC))
        ('SELECT * FROM users LIMIT ? ORDER BY users.id DESC', [1])
    """
    if isinstance(fields, str) or callable(fields):
        raise TypeError(
            f"fields must be a sequence of field names, got {type(fields).__name__}"
        )

    query = Query(table).apply(options)

    text = (
        f"{StatementKind.SELECT.value} {render_field_list(fields)} FROM {table}"
        f"{render_joins(query.joins)}"
        f"{render_where(query.where)}"
        f"{render_aggregations(query.aggregations)}"
    )
    params = merge_params(query.params, query.aggregation_params)
    return emit_statement(StatementKind.SELECT, table, text, params)
