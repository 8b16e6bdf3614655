"""Unit tests for logging configuration."""

import logging
import shutil
import tempfile
import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.logging_config import (
    StructuredFormatter, get_logger, log_with_context, setup_logging
)


class TestLoggingConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        package_logger = logging.getLogger("catpoint")
        for handler in list(package_logger.handlers):
            handler.close()
            package_logger.removeHandler(handler)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_component_loggers_are_cached(self):
        logger = get_logger("unit")
        self.assertIs(logger, get_logger("unit"))
        self.assertEqual(logger.name, "catpoint.unit")

    def test_setup_logging_writes_files(self):
        manager = setup_logging("DEBUG", self.test_dir)
        logger = get_logger("file_test")

        logger.error("something broke")
        for handler in logging.getLogger("catpoint").handlers:
            handler.flush()

        stats = manager.get_log_stats()
        self.assertEqual(stats["log_level"], "DEBUG")
        self.assertIn("catpoint.log", stats["log_files"])
        self.assertIn("errors.log", stats["log_files"])
        with open(os.path.join(self.test_dir, "errors.log")) as f:
            self.assertIn("something broke", f.read())

    def test_console_only_without_log_dir(self):
        manager = setup_logging("warning")
        self.assertEqual(manager.log_level, logging.WARNING)
        self.assertEqual(len(logging.getLogger("catpoint").handlers), 1)
        self.assertEqual(manager.get_log_stats()["log_files"], {})

    def test_context_in_formatted_record(self):
        logger = get_logger("context_test")
        with self.assertLogs(logger, level="INFO") as captured:
            log_with_context(logger, logging.INFO, "scan finished", {"detections": 2})

        formatted = StructuredFormatter().format(captured.records[0])
        self.assertIn("scan finished", formatted)
        self.assertIn("Context: detections=2", formatted)


if __name__ == '__main__':
    unittest.main()
