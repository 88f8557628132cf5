"""
querier - parameterized SQL statement construction.

Assembles statement text with positional ``?`` placeholders and the matching
argument list from composable query options. Builders live in
``querier.sql``.
"""

__version__ = "0.1.0"
