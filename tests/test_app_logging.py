"""Tests for logging configuration."""

import logging

from users_demo.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("users_demo")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level() -> None:
    configure_logging("debug")

    assert logging.getLogger("users_demo").level == logging.DEBUG
