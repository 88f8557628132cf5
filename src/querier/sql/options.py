"""
Query options: deferred mutations applied to a ``Query`` accumulator.

Each function returns a ``QueryOption`` which, when a builder applies it,
appends one fragment (and any bound values) to the accumulator. Options are
applied in the order they are passed, and that order is the order in which
their fragments and values appear in the rendered statement.

Example:
    >>> from querier.sql import Operator, build_select, or_, where
    >>> build_select(
    ...     "users",
    ...     ["users.name"],
    ...     where("users.active", Operator.EQUAL, True),
    ...     or_(where("users.id", "=", 1), where("users.id", "=", 2)),
    ... )
    ('SELECT users.name FROM users WHERE users.active = ? AND users.id = ? OR users.id = ?', [True, 1, 2])
"""

from typing import Any, Union

from .core.query import Query, QueryOption
from .core.render import render_predicate
from .core.vocabulary import (
    Field,
    JoinType,
    Operator,
    OrderByType,
    Table,
    coerce_token,
)


def where(field: Field, operation: Union[Operator, str], *params: Any) -> QueryOption:
    """
    Add a ``field OP ?`` predicate.

    With one value a single placeholder is rendered; with several, a
    parenthesized list sized to the value count (for ``IN`` / ``NOT IN``);
    with none, the operator is rendered alone and nothing is bound.

    Args:
        field: Field to compare
        operation: Comparison operator or its token string
        *params: Values bound in order

    Raises:
        UnknownTokenError: If ``operation`` is not a known operator
    """
    operator = coerce_token(Operator, operation)
    values = list(params)

    def option(query: Query) -> None:
        query.where.append(render_predicate(field, operator, len(values)))
        query.params.extend(values)

    return option


def and_(*options: QueryOption) -> QueryOption:
    """Apply ``options`` directly to the enclosing query; same as listing them inline."""

    def option(query: Query) -> None:
        query.apply(options)

    return option


def or_(*options: QueryOption) -> QueryOption:
    """
    Group predicates with ``OR``.

    The nested options are applied to a fresh, isolated query. Its predicates
    are joined with `` OR `` into one fragment and its predicate values are
    appended after the enclosing query's values. No parentheses are added, so
    an OR group combined with other predicates binds by normal SQL precedence
    (``a AND b OR c``). Wrap the group with ``raw_where`` if explicit grouping
    is needed.
    """

    def option(query: Query) -> None:
        isolated = Query().apply(options)
        query.where.append(" OR ".join(isolated.where))
        query.params.extend(isolated.params)

    return option


def raw_where(text: str, *params: Any) -> QueryOption:
    """
    Add a predicate verbatim.

    Placeholders in ``text`` are not checked against ``params``; the caller
    keeps them consistent.
    """
    values = list(params)

    def option(query: Query) -> None:
        query.where.append(text)
        query.params.extend(values)

    return option


def set_(field: Field, value: Any) -> QueryOption:
    """Add a ``field = ?`` assignment (UPDATE statements only)."""

    def option(query: Query) -> None:
        query.sets.append(field)
        query.set_params.append(value)

    return option


def raw(text: str, *params: Any) -> QueryOption:
    """Add a trailing clause verbatim, binding ``params`` after predicate values."""
    values = list(params)

    def option(query: Query) -> None:
        query.aggregations.append(text)
        query.aggregation_params.extend(values)

    return option


def join(
    table: Table,
    join_type: Union[JoinType, str],
    on: Field = "",
    equal: Field = "",
) -> QueryOption:
    """
    Add `` KIND JOIN table``, followed by `` ON on = equal`` when both fields are set.

    Raises:
        UnknownTokenError: If ``join_type`` is not a known join kind
    """
    kind = coerce_token(JoinType, join_type)
    fragment = f" {kind.value} JOIN {table}"
    if on and equal:
        fragment += f" ON {on} = {equal}"

    def option(query: Query) -> None:
        query.joins.append(fragment)

    return option


def limit(count: int) -> QueryOption:
    """Add ``LIMIT ?`` bound to ``count``."""

    def option(query: Query) -> None:
        query.aggregations.append("LIMIT ?")
        query.aggregation_params.append(count)

    return option


def order_by(field: Field, order: Union[OrderByType, str]) -> QueryOption:
    """
    Add ``ORDER BY field DIR``.

    Raises:
        UnknownTokenError: If ``order`` is not ``ASC`` or ``DESC``
    """
    direction = coerce_token(OrderByType, order)
    fragment = f"ORDER BY {field} {direction.value}"

    def option(query: Query) -> None:
        query.aggregations.append(fragment)

    return option


def first() -> QueryOption:
    """Add ``LIMIT 1``."""

    def option(query: Query) -> None:
        query.aggregations.append("LIMIT 1")

    return option
