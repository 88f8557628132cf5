"""Statement builders, one per statement kind."""

from .delete import build_delete
from .insert import build_insert
from .select import build_select
from .update import build_update

__all__ = ["build_select", "build_insert", "build_update", "build_delete"]
