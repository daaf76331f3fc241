#=================================================================
# wpi/logging_config.py
# Console logging for the translation helpers.
#=================================================================

import logging

from wpi.config import settings

LOGGER_NAME = "wpi"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Console logging, INFO by default (WPI_LOG_LEVEL overrides)."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.WPI_LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logging.getLogger(LOGGER_NAME)
