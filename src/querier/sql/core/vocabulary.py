"""
Closed SQL vocabulary used by the query builders.

Every token that can reach rendered statement text without coming from the
caller (statement keywords, join kinds, ordering directions, comparison
operators) is defined here as an enum member.
"""

from enum import Enum
from typing import Final, Type, TypeVar, Union

from ..exceptions import UnknownTokenError

Table = str
Field = str

COUNT: Final[Field] = "COUNT(*)"


class StatementKind(str, Enum):
    """Leading keyword for each statement kind."""

    INSERT = "INSERT INTO"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class JoinType(str, Enum):
    """Join kinds accepted by ``join``."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CROSS = "CROSS"
    FULL = "FULL"


class OrderByType(str, Enum):
    """Ordering directions accepted by ``order_by``."""

    ASC = "ASC"
    DESC = "DESC"


class Operator(str, Enum):
    """Comparison operators accepted by ``where``."""

    NOT_EQUAL = "<>"
    EQUAL = "="
    LESS_OR_EQUAL = "<="
    LESS_THAN = "<"
    GREATER_OR_EQUAL = ">="
    GREATER_THAN = ">"
    NOT_IN = "NOT IN"
    IN = "IN"
    LIKE = "LIKE"


E = TypeVar("E", JoinType, OrderByType, Operator)


def coerce_token(enum_cls: Type[E], token: Union[E, str]) -> E:
    """
    Resolve a member of ``enum_cls`` from a member or its token string.

    Args:
        enum_cls: One of the vocabulary enums
        token: Enum member or its SQL token (e.g. ``"="``, ``"left"``)

    Returns:
        The matching enum member

    Raises:
        UnknownTokenError: If the token is not part of the vocabulary

    Examples:
        >>> coerce_token(Operator, "NOT IN")
        <Operator.NOT_IN: 'NOT IN'>
        >>> coerce_token(JoinType, "left")
        <JoinType.LEFT: 'LEFT'>
    """
    if isinstance(token, enum_cls):
        return token
    if isinstance(token, str):
        normalized = " ".join(token.split()).upper()
        try:
            return enum_cls(normalized)
        except ValueError:
            pass
    raise UnknownTokenError(enum_cls.__name__, token)
