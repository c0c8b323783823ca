"""Tests for config loading functionality."""

import logging
import os
import unittest
from unittest import mock

from responders.core.config import (
    ResponderConfig,
    get_config,
    include_all,
    initialize,
    load_responder_config,
    set_config,
    set_should_include,
)


class TestLoadResponderConfig(unittest.TestCase):
    """Test the load_responder_config function."""

    def tearDown(self):
        set_config(ResponderConfig())

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Should use built-in defaults when nothing is set."""
        config = load_responder_config()

        self.assertEqual(config.nullable_prefix, "Null")
        self.assertEqual(config.secondary_tag, "json")
        self.assertIsNone(config.json_indent)
        self.assertEqual(config.log_level, "warn")
        self.assertIs(config.should_include, include_all)

    @mock.patch.dict(
        os.environ,
        {
            "RESPONDERS_NULLABLE_PREFIX": "Opt",
            "RESPONDERS_JSON_INDENT": "4",
            "RESPONDERS_LOG_LEVEL": "DEBUG",
        },
        clear=True,
    )
    def test_environment_variables(self):
        """Should read RESPONDERS_* environment variables."""
        config = load_responder_config()

        self.assertEqual(config.nullable_prefix, "Opt")
        self.assertEqual(config.json_indent, 4)
        self.assertEqual(config.log_level, "debug")

    @mock.patch.dict(os.environ, {"RESPONDERS_JSON_INDENT": "wide", "RESPONDERS_LOG_LEVEL": "loud"}, clear=True)
    def test_invalid_environment_values_are_ignored(self):
        """Should log a warning and keep defaults for invalid values."""
        with self.assertLogs("responders.core.config", level=logging.WARNING) as captured:
            config = load_responder_config()

        self.assertIsNone(config.json_indent)
        self.assertEqual(config.log_level, "warn")
        self.assertEqual(len(captured.records), 2)

    @mock.patch.dict(os.environ, {"RESPONDERS_NULLABLE_PREFIX": "Opt"}, clear=True)
    def test_overrides_take_precedence(self):
        """Should prefer explicit overrides over environment variables."""
        config = load_responder_config(nullable_prefix="Maybe", json_indent=None)

        self.assertEqual(config.nullable_prefix, "Maybe")
        self.assertIsNone(config.json_indent)


class TestProcessConfig(unittest.TestCase):
    """Test the process-wide default config."""

    def tearDown(self):
        set_config(ResponderConfig())

    def test_set_should_include(self):
        def only_admin(condition):
            return condition == "admin"

        set_should_include(only_admin)
        self.assertIs(get_config().should_include, only_admin)

        set_should_include(None)
        self.assertIs(get_config().should_include, include_all)

    def test_set_should_include_keeps_other_settings(self):
        set_config(ResponderConfig(nullable_prefix="Opt"))
        set_should_include(lambda condition: False)

        self.assertEqual(get_config().nullable_prefix, "Opt")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_initialize_installs_config(self):
        logger = logging.getLogger("responders")
        handlers = list(logger.handlers)
        try:
            config = initialize(nullable_prefix="Opt", log_level="error")

            self.assertIs(get_config(), config)
            self.assertEqual(config.nullable_prefix, "Opt")
            self.assertEqual(logger.level, logging.ERROR)
        finally:
            logger.handlers = handlers
            logger.propagate = True
            logger.setLevel(logging.NOTSET)
