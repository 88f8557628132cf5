"""
SQL parameter placeholder utilities.

All statements use the positional ``?`` placeholder; argument lists are kept
in the same left-to-right order as the placeholders they bind to.
"""

from typing import Any, Iterable, List

PLACEHOLDER = "?"


def build_placeholders(count: int, separator: str = ",") -> str:
    """
    Build ``count`` placeholders joined by ``separator``.

    Examples:
        >>> build_placeholders(3)
        '?,?,?'
        >>> build_placeholders(2, separator=", ")
        '?, ?'
    """
    return separator.join([PLACEHOLDER] * count)


def count_placeholders(text: str) -> int:
    """Count ``?`` placeholders in rendered statement text."""
    return text.count(PLACEHOLDER)


def merge_params(*groups: Iterable[Any]) -> List[Any]:
    """
    Concatenate argument groups into one new list, preserving order.

    Examples:
        >>> merge_params(["bla"], [2], [])
        ['bla', 2]
    """
    merged: List[Any] = []
    for group in groups:
        merged.extend(group)
    return merged
