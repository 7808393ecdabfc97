"""Logging setup for the yelp_search package.

Modules log through ``logging.getLogger(__name__)``, so every record goes through
the ``yelp_search`` logger configured here. Applications that already configure
the root logger do not need to call `configure_logging`.
"""

import logging
import sys

from .config import LoggingSettings, get_settings

PACKAGE_LOGGER = "yelp_search"


def configure_logging(
    settings: LoggingSettings | None = None, level: str | None = None
) -> logging.Logger:
    """Send the package's log records to stdout.

    Only the ``yelp_search`` logger is touched; the root logger and the loggers of
    other libraries keep their configuration. Calling this again replaces the
    handler installed by the previous call instead of adding a second one.

    Args:
        settings: Level and format to use. Defaults to the global settings.
        level: Optional level overriding the one in `settings` (e.g. "DEBUG").

    Returns:
        The configured package logger.
    """
    settings = settings or get_settings().logging
    log_level = (level or settings.level).upper()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_yelp_search", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.format))
    handler._yelp_search = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.propagate = False

    # requests logs every connection through urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    package_logger.debug("Logging configured with level: %s", log_level)
    return package_logger
