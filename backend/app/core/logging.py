"""Logging setup for stdlib logging and structlog.

Services log through logging.getLogger(__name__); the API and provider layers
log key/value events through structlog. Both honour LOG_LEVEL.
"""

import logging

import structlog


def configure_logging(level_name: str) -> None:
    """Apply the configured log level to stdlib logging and structlog.

    Args:
        level_name: Level name such as "INFO" or "debug". Unknown names fall
            back to INFO.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
