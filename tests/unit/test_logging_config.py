"""Tests for logging configuration."""

import logging

from cardrelay.logging_config import build_logging_config, configure_logging


def test_level_is_normalized():
    config = build_logging_config("debug")
    assert config["root"]["level"] == "DEBUG"


def test_httpx_is_quiet():
    """Request URLs carry credentials and must not be logged at INFO."""
    config = build_logging_config("DEBUG")
    assert config["loggers"]["httpx"]["level"] == "WARNING"


def test_configure_logging():
    configure_logging("WARNING")

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("cardrelay.services.dispatcher").getEffectiveLevel() == logging.WARNING
