"""Logging configuration helpers."""

import logging

from healthy_coaching.errors import HealthyCoachingError


def configure_logging() -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("healthy_coaching")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def log_error(logger: logging.Logger, error: HealthyCoachingError) -> None:
    """Log an application error, escalating reportable severities."""
    summary = error.summary()
    if error.should_report():
        logger.error("%s: %s", error.formatted_message(), summary)
    else:
        logger.warning("%s: %s", error.formatted_message(), summary)
