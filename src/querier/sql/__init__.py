"""
SQL statement construction.

Builds parameterized statement text and a positional argument list from a
composable set of options. Nothing here executes SQL: the ``(text, params)``
pair is handed to whatever driver the caller uses.
"""

from .core.query import Query, QueryOption
from .core.vocabulary import COUNT, JoinType, Operator, OrderByType, StatementKind
from .exceptions import QueryBuildError, UnknownTokenError
from .operations import build_delete, build_insert, build_select, build_update
from .options import (
    and_,
    first,
    join,
    limit,
    or_,
    order_by,
    raw,
    raw_where,
    set_,
    where,
)

__all__ = [
    "COUNT",
    "JoinType",
    "Operator",
    "OrderByType",
    "Query",
    "QueryBuildError",
    "QueryOption",
    "StatementKind",
    "UnknownTokenError",
    "and_",
    "build_delete",
    "build_insert",
    "build_select",
    "build_update",
    "first",
    "join",
    "limit",
    "or_",
    "order_by",
    "raw",
    "raw_where",
    "set_",
    "where",
]
