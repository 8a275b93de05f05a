import logging
import sys
from typing import Optional

import structlog

from .config import Settings, get_settings
from .core.exceptions import ConfigurationError


def configure_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """Configure structlog once per process. Logs go to stderr."""
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level_name}")

    renderer = (structlog.processors.JSONRenderer() if settings.log_json
                else structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
