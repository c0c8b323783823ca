"""Tests for logger.py - package logger configuration."""

from __future__ import annotations

import logging

import pytest

from responders import configure_logger, get_log_level, set_log_level


class TestLogger:
    def test_set_log_level(self, package_logger):
        set_log_level("debug")

        assert package_logger.level == logging.DEBUG
        assert get_log_level() == "debug"

    def test_silent_disables_errors(self, package_logger):
        set_log_level("silent")

        assert not package_logger.isEnabledFor(logging.CRITICAL)

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            set_log_level("verbose")  # type: ignore[arg-type]

    def test_configure_logger_replaces_its_handler(self, package_logger):
        configure_logger("info", prefix="Test")
        configure_logger("warn", prefix="Test")

        installed = [h for h in package_logger.handlers if getattr(h, "_responders_handler", False)]
        assert len(installed) == 1
        assert package_logger.level == logging.WARNING
        assert installed[0].formatter._fmt.startswith("[Test]")

    def test_child_loggers_follow_package_level(self, package_logger):
        set_log_level("error")

        assert not logging.getLogger("responders.core.response").isEnabledFor(logging.WARNING)
