"""UPDATE statement builder."""

from ..core.identifier import strip_table_prefix
from ..core.parameters import merge_params
from ..core.query import Query, QueryOption
from ..core.render import render_aggregations, render_joins, render_where
from ..core.vocabulary import StatementKind, Table
from .base import Statement, emit_statement


def build_update(table: Table, *options: QueryOption) -> Statement:
    """
    Build an UPDATE statement from ``set_`` assignments and predicates.

    Clause order: ``SET`` assignments (table qualifier stripped), joins,
    ``WHERE``, trailing clauses. Arguments are assignment values, then
    predicate values, then trailing values.

    Example:
        >>> build_update("users", set_("users.name", "bla"), where("users.id", "=", 2))
        ('UPDATE users SET name = ? WHERE users.id = ?', ['bla', 2])
    """
    query = Query(table).apply(options)

    assignments = ", ".join(f"{strip_table_prefix(f, table)} = ?" for f in query.sets)
    text = (
        f"{StatementKind.UPDATE.value} {table} SET"
        f"{' ' + assignments if assignments else ''}"
        f"{render_joins(query.joins)}"
        f"{render_where(query.where)}"
        f"{render_aggregations(query.aggregations)}"
    )
    params = merge_params(query.set_params, query.params, query.aggregation_params)
    return emit_statement(StatementKind.UPDATE, table, text, params)
