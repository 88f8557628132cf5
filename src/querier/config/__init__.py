"""Configuration management for querier.

Usage:
    >>> from querier.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_statements
    False
"""

from querier.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
