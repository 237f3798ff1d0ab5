"""Shared logging format and configuration for applications using amazon-s3-uri."""

import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: int | None = None) -> None:
    """
    Configure the root logger for this process. Call once at application startup.

    When level is None, S3_URI_LOG_LEVEL (default WARNING) is used.
    """
    if level is None:
        level = get_settings().log_level_number
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
