"""Centralized logging configuration."""

import sys

from loguru import logger

from event_booking.core.config import LOG_LEVEL

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)


def configure_logging(level: str = LOG_LEVEL) -> None:
    # Remove default handler to avoid duplicate output
    logger.remove()
    logger.add(sys.stdout, format=log_format, level=level)
