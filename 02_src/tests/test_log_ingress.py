"""Tests for placeholder interpolation and the logger interface."""

import logging
import uuid

import pytest

from debugbar.messages import CollectorLogHandler, interpolate, is_stringable


class Named:
    """Object declaring its own string conversion."""

    def __str__(self):
        return "named-object"


class Opaque:
    """Object without a string conversion."""


class TestInterpolate:
    """Tests for interpolate()."""

    def test_replaces_placeholder(self):
        """Test a simple substitution."""
        assert interpolate("Hello {name}", {"name": "Ada"}) == "Hello Ada"

    def test_missing_key_left_untouched(self):
        """Test that unknown placeholders stay literal."""
        assert interpolate("Hello {name}", {"other": "x"}) == "Hello {name}"

    def test_no_context(self):
        """Test interpolation without context."""
        assert interpolate("Hello {name}") == "Hello {name}"
        assert interpolate("Hello {name}", {}) == "Hello {name}"

    def test_multiple_and_repeated_placeholders(self):
        """Test several placeholders, one used twice."""
        result = interpolate("{a}+{b}={c}, again {a}", {"a": 1, "b": 2, "c": 3})
        assert result == "1+2=3, again 1"

    @pytest.mark.parametrize(
        "value",
        [[1, 2], (1, 2), {"k": "v"}, {1, 2}, frozenset({1}), Opaque()],
    )
    def test_unstringable_values_skipped(self, value):
        """Test that composites and opaque objects are not substituted."""
        assert interpolate("Val {x}", {"x": value}) == "Val {x}"

    def test_object_with_str_substituted(self):
        """Test that objects declaring __str__ are substituted."""
        assert interpolate("By {who}", {"who": Named()}) == "By named-object"

    def test_exception_substituted(self):
        """Test that exceptions use their message."""
        assert interpolate("Failed: {e}", {"e": ValueError("bad input")}) == "Failed: bad input"

    def test_scalars_substituted(self):
        """Test numbers, booleans and None."""
        result = interpolate(
            "{i} {f} {b} {n}", {"i": 3, "f": 1.5, "b": True, "n": None}
        )
        assert result == "3 1.5 True None"

    def test_single_pass(self):
        """Test that substituted text is not interpolated again."""
        assert interpolate("{a}", {"a": "{b}", "b": "x"}) == "{b}"

    def test_non_string_keys(self):
        """Test that keys are matched by their string form."""
        assert interpolate("item {0}", {0: "zero"}) == "item zero"

    def test_bytes_decoded(self):
        """Test that bytes are substituted as decoded text."""
        assert interpolate("v={b}", {"b": b"abc"}) == "v=abc"
        assert interpolate("v={b}", {"b": b"caf\xe9"}) == "v=caf\ufffd"

    def test_is_stringable(self):
        """Test the stringability check directly."""
        assert is_stringable("s")
        assert is_stringable(b"bytes")
        assert is_stringable(Named())
        assert not is_stringable([])
        assert not is_stringable(Opaque())


class TestLog:
    """Tests for MessagesCollector.log() and level helpers."""

    def test_log_interpolates(self, messages):
        """Test log() with a string message."""
        record = messages.log("info", "Hello {name}", {"name": "Ada"})

        assert record.text == "Hello Ada"
        assert record.is_string is True
        assert record.label == "info"

    def test_log_leaves_array_placeholder(self, messages):
        """Test that an array context value is not substituted."""
        record = messages.log("info", "Val {x}", {"x": [1, 2]})
        assert record.text == "Val {x}"

    def test_log_non_string_bypasses_interpolation(self, messages, formatter):
        """Test that non-string messages reach the formatter untouched."""
        payload = {"template": "{x}"}
        record = messages.log("debug", payload, {"x": 1})

        assert formatter.calls == [payload]
        assert record.is_string is False
        assert record.label == "debug"

    def test_log_without_context(self, messages):
        """Test log() with no context at all."""
        assert messages.log("notice", "plain {x}").text == "plain {x}"

    @pytest.mark.parametrize(
        "level",
        ["emergency", "alert", "critical", "error", "warning", "notice", "info", "debug"],
    )
    def test_level_helpers(self, messages, level):
        """Test that each level helper logs under its own label."""
        record = getattr(messages, level)("Order {id}", {"id": 7})

        assert record.label == level
        assert record.text == "Order 7"

    def test_any_level_accepted(self, messages):
        """Test that arbitrary labels are stored as-is."""
        assert messages.log("sql", "SELECT 1").label == "sql"


class TestCollectorLogHandler:
    """Tests for the logging bridge."""

    @pytest.fixture
    def app_logger(self, messages):
        logger = logging.getLogger(f"test.bridge.{uuid.uuid4().hex}")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = CollectorLogHandler(messages)
        logger.addHandler(handler)
        yield logger
        logger.removeHandler(handler)

    def test_records_become_messages(self, app_logger, messages):
        """Test that log records are added with lowercased level names."""
        app_logger.warning("Inventory low for %s", "sku-17")
        app_logger.debug("details")

        records = messages.get_messages()
        assert [(r.text, r.label) for r in records] == [
            ("Inventory low for sku-17", "warning"),
            ("details", "debug"),
        ]

    def test_handler_formatter_applied(self, app_logger, messages):
        """Test that the handler's formatter shapes the text."""
        app_logger.handlers[0].setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        app_logger.error("boom")

        assert messages.get_messages()[0].text == "ERROR: boom"

    def test_handler_level_filters(self, messages):
        """Test that the handler level is honoured."""
        logger = logging.getLogger(f"test.bridge.{uuid.uuid4().hex}")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        logger.addHandler(CollectorLogHandler(messages, level=logging.WARNING))

        logger.info("ignored")
        logger.warning("kept")

        assert [r.text for r in messages.get_messages()] == ["kept"]

    def test_root_handler_ignores_package_logs(self, messages):
        """Test that the collectors' own log records are not captured."""
        root = logging.getLogger()
        saved_level = root.level
        handler = CollectorLogHandler(messages)
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
        try:
            messages.log("info", "Val {x}", {"x": [1]})
            logging.getLogger("debugbar.exceptions.source").warning("internal")
            logging.getLogger("debugbarextra").info("kept")
        finally:
            root.removeHandler(handler)
            root.setLevel(saved_level)

        assert [(r.text, r.label) for r in messages.get_messages()] == [
            ("Val {x}", "info"),
            ("kept", "info"),
        ]
