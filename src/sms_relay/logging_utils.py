from __future__ import annotations

import logging
import sys

from .config import get_settings

LOGGER_NAME = "sms_relay"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging() -> logging.Logger:
    """
    Make sure relay log lines reach stdout as plain text.

    If the host (Lambda runtime, uvicorn, pytest) already configured the root
    logger we just propagate to it; otherwise a bare "%(message)s" stdout
    handler is attached once.
    """
    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(get_settings().log_level)
    return logger
