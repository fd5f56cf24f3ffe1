"""Tests for structured JSON logging."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):

    def _record(self, msg, **kwargs):
        return logging.LogRecord(
            name="services.user_service", level=logging.INFO, pathname=__file__,
            lineno=1, msg=msg, args=(), exc_info=kwargs.pop("exc_info", None),
        )

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(self._record("User created")))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.user_service")
        self.assertEqual(data["message"], "User created")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_extra_fields_are_included(self):
        record = self._record("User created")
        record.user_id = "abc"
        record.errors = ["Name is required"]

        data = json.loads(JSONFormatter().format(record))

        self.assertEqual(data["user_id"], "abc")
        self.assertEqual(data["errors"], ["Name is required"])
        self.assertNotIn("pathname", data)

    def test_exception_is_formatted(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record("Unhandled exception", exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        self.assertIn("RuntimeError: boom", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers = self._saved[1]

    def test_known_level_is_applied(self):
        setup_structured_logging("debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info_with_warning(self):
        with self.assertLogs("utils.logging", level="WARNING") as captured:
            setup_structured_logging("verbose")

        self.assertEqual(logging.getLogger().level, logging.INFO)
        self.assertIn("Unknown log level", captured.output[0])
