"""Logging setup shared by the API and the command-line scripts.

Usage:
    from inkwell.logging_config import setup_logging
    setup_logging()   # Call once at startup (in the lifespan or a script main)
"""

import logging

from inkwell.config import get_settings
from inkwell.middleware import RequestIDLogFilter

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"

# Noisy third-party loggers kept at WARNING unless debugging
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger and attach the request-ID filter.

    Safe to call more than once; handlers already carrying the filter are
    left alone.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    root_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=root_level, format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(root_level)
    for handler in root.handlers:
        if not any(isinstance(f, RequestIDLogFilter) for f in handler.filters):
            handler.addFilter(RequestIDLogFilter())

    quiet_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
