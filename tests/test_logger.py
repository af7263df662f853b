"""
Unit tests for the logging setup.
"""

import logging
import os
import sys
import tempfile
import unittest

# Import from src directory
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from rocketeer.core.logger import configure_logging, get_logger


class TestLogger(unittest.TestCase):
    """Test cases for configure_logging and get_logger."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.logger = logging.getLogger("rocketeer")

    def tearDown(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.tmpdir.cleanup()

    def test_get_logger_names(self):
        self.assertEqual(get_logger("rocketeer.analysis.performance").name, "rocketeer.analysis.performance")
        self.assertEqual(get_logger("rocketeer").name, "rocketeer")
        self.assertEqual(get_logger("main").name, "rocketeer.main")
        self.assertEqual(get_logger("rocketeering").name, "rocketeer.rocketeering")

    def test_writes_log_file(self):
        path = os.path.join(self.tmpdir.name, "logs", "run.log")
        self.assertEqual(configure_logging(logging.DEBUG, log_file=path, console=False), path)
        get_logger("tests").info("motor loaded")
        for handler in self.logger.handlers:
            handler.flush()
        with open(path) as f:
            contents = f.read()
        self.assertIn("rocketeer.tests - INFO - motor loaded", contents)
        self.assertFalse(self.logger.propagate)

    def test_reconfigure_replaces_handlers(self):
        first = os.path.join(self.tmpdir.name, "first.log")
        second = os.path.join(self.tmpdir.name, "second.log")
        configure_logging(log_file=first)
        old_handlers = list(self.logger.handlers)
        self.assertEqual(len(old_handlers), 2)

        configure_logging(logging.WARNING, log_file=second, console=False)
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertNotIn(self.logger.handlers[0], old_handlers)
        self.assertEqual(self.logger.level, logging.WARNING)
        # The replaced file handler has released its stream
        self.assertIsNone(old_handlers[0].stream)


if __name__ == "__main__":
    unittest.main()
