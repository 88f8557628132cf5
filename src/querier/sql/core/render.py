"""
Clause rendering shared by the statement builders.

Each helper returns either an empty string or a clause carrying its own
leading space, so builders can concatenate them directly after the statement
head.
"""

from typing import Sequence

from .parameters import build_placeholders
from .vocabulary import Field, Operator


def render_predicate(field: Field, operator: Operator, count: int) -> str:
    """
    Render one ``field OP`` predicate for ``count`` bound values.

    Examples:
        >>> render_predicate("users.id", Operator.EQUAL, 1)
        'users.id = ?'
        >>> render_predicate("users.id", Operator.IN, 3)
        'users.id IN (?,?,?)'
        >>> render_predicate("users.id", Operator.IN, 0)
        'users.id IN'
    """
    predicate = f"{field} {operator.value}"
    if count == 1:
        return f"{predicate} ?"
    if count > 1:
        return f"{predicate} ({build_placeholders(count)})"
    return predicate


def render_joins(joins: Sequence[str]) -> str:
    """Concatenate join fragments in append order."""
    return "".join(joins)


def render_where(where: Sequence[str]) -> str:
    """Render `` WHERE a AND b`` or an empty string when there are no predicates."""
    if not where:
        return ""
    return " WHERE " + " AND ".join(where)


def render_aggregations(aggregations: Sequence[str]) -> str:
    """Render trailing clauses space-joined, or an empty string."""
    if not aggregations:
        return ""
    return " " + " ".join(aggregations)
