"""DELETE statement builder."""

from ..core.parameters import merge_params
from ..core.query import Query, QueryOption
from ..core.render import render_aggregations, render_joins, render_where
from ..core.vocabulary import StatementKind, Table
from .base import Statement, emit_statement


def build_delete(table: Table, *options: QueryOption) -> Statement:
    """Build ``DELETE FROM table`` with joins, ``WHERE`` and trailing clauses."""
    query = Query(table).apply(options)

    text = (
        f"{StatementKind.DELETE.value} FROM {table}"
        f"{render_joins(query.joins)}"
        f"{render_where(query.where)}"
        f"{render_aggregations(query.aggregations)}"
    )
    params = merge_params(query.params, query.aggregation_params)
    return emit_statement(StatementKind.DELETE, table, text, params)
