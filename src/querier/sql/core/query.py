"""
Per-call build state shared by query options.

A ``Query`` is created by exactly one builder call, mutated by the options
passed to that call in order, rendered once and then discarded.
"""

from typing import Any, Callable, Iterable, List

from .vocabulary import Table


class Query:
    """
    Accumulator for statement fragments and their positional arguments.

    Each fragment list is paired with an argument list whose elements line up
    with the ``?`` placeholders of the fragments, left to right:

    - ``where`` / ``params``: predicate fragments, AND-joined on render
    - ``joins``: join fragments, each carrying its own leading space
    - ``sets`` / ``set_params``: assignment field names (UPDATE only)
    - ``aggregations`` / ``aggregation_params``: trailing clauses such as
      ``LIMIT``, ``ORDER BY`` and raw trailing SQL

    Custom options may append to these lists directly.
    """

    def __init__(self, table: Table = ""):
        self._table = table
        self.where: List[str] = []
        self.params: List[Any] = []
        self.joins: List[str] = []
        self.sets: List[str] = []
        self.set_params: List[Any] = []
        self.aggregations: List[str] = []
        self.aggregation_params: List[Any] = []

    @property
    def table(self) -> Table:
        """Target table, fixed at creation."""
        return self._table

    def apply(self, options: Iterable["QueryOption"]) -> "Query":
        """Apply options in call order and return self."""
        for option in options:
            option(self)
        return self

    def __repr__(self) -> str:
        return (
            f"Query(table={self._table!r}, where={self.where!r}, "
            f"params={self.params!r}, joins={self.joins!r}, sets={self.sets!r}, "
            f"aggregations={self.aggregations!r})"
        )


QueryOption = Callable[[Query], None]
