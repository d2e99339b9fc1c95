"""
Structured logging for the style assistant, built on structlog.

Production writes one JSON object per line; every other environment gets
the colored console renderer. Request-scoped values (request_id, method,
path) are carried in structlog contextvars and merged into each event.

Usage:
    from core.logging import configure_logging, get_logger

    configure_logging(json_logs=settings.is_production)
    logger = get_logger(__name__)
    logger.info("Matched products", product_id=5, returned=4)
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

# Third-party loggers that log every HTTP exchange at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "openai", "hpack", "uvicorn.access")


def _build_processors(json_logs: bool, include_timestamp: bool) -> List[Processor]:
    processors: List[Processor] = []
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=True, exception_formatter=structlog.dev.plain_traceback)
        )
    return processors


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        json_logs: JSON lines when True, colored console output otherwise.
        log_level: Minimum level name for the root logger.
        include_timestamp: Prefix every event with an ISO timestamp.
    """
    level = getattr(logging, log_level.upper())

    structlog.configure(
        processors=_build_processors(json_logs, include_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by an earlier call
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/value pairs to every log event in the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
