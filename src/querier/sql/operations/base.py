"""Shared helpers for the statement builders."""

from typing import Any, List, Tuple

from pydantic import ValidationError

from querier.config import get_settings
from querier.utils.logging import bind_context

from ..core.parameters import count_placeholders
from ..core.vocabulary import StatementKind, Table

Statement = Tuple[str, List[Any]]


def _statement_logging_enabled() -> bool:
    # Bad settings only disable logging; building never fails on them
    try:
        return get_settings().log_statements
    except ValidationError:
        return False


def emit_statement(
    kind: StatementKind, table: Table, text: str, params: List[Any]
) -> Statement:
    """
    Return the built ``(text, params)`` pair, logging it when enabled.

    Argument values are never logged, only their count.
    """
    if _statement_logging_enabled():
        bind_context(__name__, kind=kind.name.lower(), table=table).debug(
            "statement_built",
            statement=text,
            placeholder_count=count_placeholders(text),
            argument_count=len(params),
        )
    return text, params
