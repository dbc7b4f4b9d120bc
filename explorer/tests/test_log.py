"""Tests for logging setup."""

import logging

from explorer.config import Config
from explorer.log import get_logger, setup_logging


def test_setup_logging_quiets_web3():
    """web3 is held at WARNING whatever the configured level."""
    setup_logging(Config(log_level="DEBUG"))
    assert logging.getLogger("web3").level == logging.WARNING


def test_setup_logging_override_level():
    """An explicit level takes precedence and unknown names fall back."""
    setup_logging(Config(log_level="DEBUG"), log_level="nonsense")
    assert logging.getLogger("web3").level == logging.WARNING


def test_get_logger():
    """Module loggers are named after the module."""
    assert get_logger("explorer.views.address_view").name == "explorer.views.address_view"
