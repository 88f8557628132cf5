"""Structured logging for querier, built on structlog.

Loggers returned by ``get_logger`` carry their own processor chain and emit
JSON lines through the stdlib logger of the same name, so importing querier
never touches the host application's structlog or root logger setup.
Applications that want querier's output on stdout (and optionally in a
rotating file) call ``configure_logging`` once at start-up.

Usage:
    >>> from querier.utils.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> get_logger(__name__).debug("statement_built", kind="select", table="users")
"""

import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional, Union

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from querier.config import get_settings

ROOT_LOGGER_NAME = "querier"

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy ``data`` with values of sensitive keys replaced, recursing into dicts.

    Example:
        >>> sanitize_for_logging({"password": "secret123", "table": "users"})
        {'password': '[REDACTED]', 'table': 'users'}
    """
    return {
        key: (
            REDACTED_VALUE
            if any(p.match(key) for p in SENSITIVE_PATTERNS)
            else sanitize_for_logging(value) if isinstance(value, dict) else value
        )
        for key, value in data.items()
    }


def redact_sensitive(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor applying ``sanitize_for_logging`` to each event."""
    return sanitize_for_logging(dict(event_dict))


PROCESSORS: List[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    redact_sensitive,
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str) -> Any:
    """Return a structlog BoundLogger wrapping the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def bind_context(name: str, **kwargs: Any) -> Any:
    """Return ``get_logger(name)`` with ``kwargs`` bound to every event."""
    return get_logger(name).bind(**kwargs)


def _settings_level() -> str:
    try:
        return get_settings().LOG_LEVEL
    except ValidationError:
        return "INFO"


def configure_logging(
    level: Optional[Union[int, str]] = None,
    log_file_dir: Optional[Union[str, Path]] = None,
) -> List[logging.Handler]:
    """
    Attach output handlers to the ``querier`` logger.

    Args:
        level: Level name or number; defaults to the LOG_LEVEL setting
            (INFO when settings cannot be loaded)
        log_file_dir: When given, also write to ``querier-YYYYMMDD.log`` in
            this directory, rotated at midnight with 30 days retained

    Returns:
        The handlers that were added, so callers can detach them again
    """
    if level is None:
        level = _settings_level()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file_dir is not None:
        log_dir = Path(log_file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(log_dir / f"querier-{datetime.now():%Y%m%d}.log"),
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    return handlers
