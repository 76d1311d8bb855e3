"""Tests for libmuslim logging configuration."""

import logging
import os
import unittest
from unittest.mock import patch

from libmuslim.cli.common import configure_logging
from libmuslim.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    _get_log_level,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    """Test cases for logger setup and level selection."""

    def tearDown(self):
        set_log_level(DEFAULT_LOG_LEVEL)

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)

    def test_env_override(self):
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "ERROR"}):
            self.assertEqual(_get_log_level(), logging.ERROR)
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "nonsense"}):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)

    def test_get_logger_configures_once(self):
        logger = get_logger("libmuslim.tests.example")
        self.assertEqual(len(logger.handlers), 1)
        self.assertIs(get_logger("libmuslim.tests.example"), logger)
        self.assertEqual(len(logger.handlers), 1)

    def test_set_log_level_updates_children(self):
        logger = get_logger("libmuslim.tests.child")
        set_log_level(logging.ERROR)
        self.assertEqual(logging.getLogger("libmuslim").level, logging.ERROR)
        self.assertEqual(logger.level, logging.ERROR)

    def test_configure_logging_from_flags(self):
        configure_logging({"verbose": 1})
        self.assertEqual(logging.getLogger("libmuslim").level, logging.INFO)
        configure_logging({"verbose": 2})
        self.assertEqual(logging.getLogger("libmuslim").level, logging.DEBUG)
        configure_logging({"debug": True})
        self.assertEqual(logging.getLogger("libmuslim").level, logging.DEBUG)
        configure_logging({"quiet": True, "debug": True})
        self.assertEqual(logging.getLogger("libmuslim").level, logging.ERROR)
        configure_logging({})
        self.assertEqual(logging.getLogger("libmuslim").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
