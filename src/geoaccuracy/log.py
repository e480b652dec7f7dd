"""structlog configuration for the geoaccuracy command line."""

from __future__ import annotations

from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Handler,
    StreamHandler,
    getLogger,
)

import structlog
from structlog import dev, processors, stdlib

LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(level: str = "warning", json: bool = False) -> None:
    """
    Route structlog through the stdlib root logger.

    *level* is one of LOG_LEVELS; unknown names fall back to warning.
    """
    log_level = LOG_LEVELS.get(level.lower(), WARNING)

    root_logger = getLogger()
    root_logger.setLevel(log_level)

    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler: Handler = StreamHandler()
    handler.setFormatter(
        stdlib.ProcessorFormatter(
            processor=processors.JSONRenderer() if json else dev.ConsoleRenderer(),
            foreign_pre_chain=shared_processors,
        )
    )
    # Replace existing handlers so repeated calls do not duplicate output
    root_logger.handlers = [handler]
