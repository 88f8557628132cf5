"""
SQL identifier handling utilities.

Table and field names are opaque strings supplied by the caller; the only
transformation applied to them is removal of the ``table.`` qualifier from
column lists that must not be qualified (INSERT and UPDATE).
"""

from typing import Optional, Sequence

from .vocabulary import Field, Table


def strip_table_prefix(field: Field, table: Table) -> Field:
    """
    Remove a leading ``<table>.`` qualifier from a field name.

    Only a single leading occurrence is removed; fields qualified with another
    table, or not qualified at all, are returned unchanged.

    Args:
        field: Field name, optionally qualified
        table: Table whose qualifier should be removed

    Returns:
        Unqualified field name

    Examples:
        >>> strip_table_prefix("users.name", "users")
        'name'
        >>> strip_table_prefix("products.name", "users")
        'products.name'
    """
    prefix = f"{table}."
    if field.startswith(prefix):
        return field[len(prefix):]
    return field


def render_field_list(
    fields: Optional[Sequence[Field]], table: Optional[Table] = None
) -> str:
    """
    Render a comma-separated field list.

    An empty or missing list renders as ``*``. When ``table`` is given, each
    field has its ``table.`` qualifier stripped first.

    Examples:
        >>> render_field_list(None)
        '*'
        >>> render_field_list(["users.id", "products.user_id"])
        'users.id, products.user_id'
        >>> render_field_list(["users.name", "status"], table="users")
        'name, status'
    """
    if not fields:
        return "*"
    if table is not None:
        fields = [strip_table_prefix(f, table) for f in fields]
    return ", ".join(fields)
