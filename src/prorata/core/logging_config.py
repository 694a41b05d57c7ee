"""Console logging setup shared by the API and command-line callers."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def setup_logging(level: str | int = "INFO") -> None:
    """Attach a single console handler to the ``prorata`` logger.

    Calling this more than once only updates the level.
    """
    global _LOGGING_CONFIGURED

    pkg_logger = logging.getLogger("prorata")
    pkg_logger.setLevel(level.upper() if isinstance(level, str) else level)

    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    pkg_logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
