"""Unit tests for logging configuration."""

import logging

import pytest

from canon.config import Settings
from canon.util.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.mark.parametrize(
        ("environment", "debug", "expected"),
        [
            ("development", False, logging.INFO),
            ("production", False, logging.WARNING),
            ("production", True, logging.DEBUG),
        ],
    )
    def test_level_follows_environment(self, environment, debug, expected):
        """Application logger level should follow environment and debug flag."""
        setup_logging(Settings(environment=environment, debug=debug))

        assert logging.getLogger("canon").level == expected
