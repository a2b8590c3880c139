"""Tests for logging configuration."""

import logging

from meal_tracker.app_logging import configure_logging
from meal_tracker.config import parse_log_level


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("meal_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging(logging.DEBUG)
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_parse_log_level() -> None:
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level(" debug ") == logging.DEBUG
    assert parse_log_level("30") == 30
    assert parse_log_level("chatty") == logging.INFO
