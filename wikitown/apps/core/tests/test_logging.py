"""Tests for log formatting and request context."""

import json
import logging
import sys

from django.test import SimpleTestCase, TestCase, tag

from wikitown.logging import (
    DevFormatter,
    JsonFormatter,
    RequestContextFilter,
    current_log_context,
    log_context,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("wikitown.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@tag("unit")
class LogContextTests(SimpleTestCase):
    def test_fields_visible_inside_block_only(self):
        with log_context(request_id="abc"):
            self.assertEqual(current_log_context(), {"request_id": "abc"})
        self.assertEqual(current_log_context(), {})

    def test_nested_blocks_merge(self):
        with log_context(request_id="abc"), log_context(slug="well"):
            self.assertEqual(current_log_context(), {"request_id": "abc", "slug": "well"})

    def test_empty_values_are_dropped(self):
        with log_context(request_id="abc", remote_ip=None, path=""):
            self.assertEqual(current_log_context(), {"request_id": "abc"})

    def test_filter_copies_context_without_overwriting(self):
        record = _record(slug="explicit")

        with log_context(request_id="abc", slug="from-context"):
            self.assertTrue(RequestContextFilter().filter(record))

        self.assertEqual(record.request_id, "abc")
        self.assertEqual(record.slug, "explicit")


@tag("unit")
class FormatterTests(SimpleTestCase):
    def test_json_formatter_includes_extras(self):
        data = json.loads(JsonFormatter().format(_record("Article %s", slug="well")))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "wikitown.test")
        self.assertEqual(data["message"], "Article %s")
        self.assertEqual(data["slug"], "well")
        self.assertIn("timestamp", data)

    def test_json_formatter_stringifies_unserializable_extras(self):
        data = json.loads(JsonFormatter().format(_record(obj=object())))

        self.assertTrue(data["obj"].startswith("<object object"))

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "wikitown.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        data = json.loads(JsonFormatter().format(record))

        self.assertIn("ValueError: boom", data["exception"])

    def test_dev_formatter_appends_extras(self):
        line = DevFormatter().format(_record(slug="well"))

        self.assertIn("INFO", line)
        self.assertIn("wikitown.test hello", line)
        self.assertTrue(line.endswith("| slug='well'"))

    def test_dev_formatter_without_extras(self):
        line = DevFormatter().format(_record())

        self.assertNotIn("|", line)


@tag("views")
class RequestContextMiddlewareTests(TestCase):
    def test_generates_request_id(self):
        response = self.client.get("/healthz")

        self.assertEqual(len(response["X-Request-ID"]), 32)

    def test_echoes_incoming_request_id(self):
        response = self.client.get("/healthz", headers={"X-Request-ID": "req-123"})

        self.assertEqual(response["X-Request-ID"], "req-123")
