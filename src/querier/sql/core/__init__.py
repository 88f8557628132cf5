"""Core SQL utilities package."""

from .identifier import render_field_list, strip_table_prefix
from .parameters import PLACEHOLDER, build_placeholders, count_placeholders, merge_params
from .query import Query, QueryOption
from .vocabulary import (
    COUNT,
    Field,
    JoinType,
    Operator,
    OrderByType,
    StatementKind,
    Table,
    coerce_token,
)

__all__ = [
    "COUNT",
    "Field",
    "JoinType",
    "Operator",
    "OrderByType",
    "PLACEHOLDER",
    "Query",
    "QueryOption",
    "StatementKind",
    "Table",
    "build_placeholders",
    "coerce_token",
    "count_placeholders",
    "merge_params",
    "render_field_list",
    "strip_table_prefix",
]
