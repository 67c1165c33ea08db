"""Logging configuration."""

import logging

from s3helper.core.config import Settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure application logging."""
    level = (settings or Settings()).LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
