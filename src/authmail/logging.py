"""Logging configuration based on environment."""

import logging
import sys

from authmail.config import settings

# Development format: cleaner
DEV_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

# Production format: full details for debugging
PROD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_format = DEV_FORMAT if settings.is_development else PROD_FORMAT
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    logging.basicConfig(
        level=level,
        format=log_format,
        stream=sys.stdout,
    )

    # Quiet noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
