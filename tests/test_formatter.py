"""Tests for message formatters"""

import pytest
from datetime import datetime, timedelta, timezone

from runtime_logger import DefaultLogMessageFormatter, LogLevel, MessageState
from runtime_logger.core.log_level import level_to_label
from runtime_logger.formatters import BaseFormatter, MessageProperty, format_timestamp


def fixed_time(ts: datetime) -> str:
    return "12:00:00"


def unformatted(template, *args):
    formatter = DefaultLogMessageFormatter(add_prefix=False)
    return formatter.format_message(MessageState(template=template, arguments=args))


class TestParseProperties:
    """Test placeholder discovery."""

    def test_finds_properties_in_order(self):
        props = BaseFormatter.parse_properties("Processed {count} of {total} items")
        assert props == [
            MessageProperty(10, 17, "count"),
            MessageProperty(21, 28, "total"),
        ]
        assert props[0].text == "{count}"

    def test_empty_and_none_template(self):
        assert BaseFormatter.parse_properties("") == []
        assert BaseFormatter.parse_properties(None) == []

    def test_empty_braces_are_not_properties(self):
        assert BaseFormatter.parse_properties("a {} b") == []

    def test_unmatched_braces_are_not_properties(self):
        assert BaseFormatter.parse_properties("cost: {5") == []
        assert BaseFormatter.parse_properties("cost: 5}") == []

    def test_nested_brace_starts_new_property(self):
        props = BaseFormatter.parse_properties("{{a}}")
        assert props == [MessageProperty(1, 4, "a")]

    def test_format_directive_is_part_of_name(self):
        props = BaseFormatter.parse_properties("{count:D2}")
        assert props[0].name == "count:D2"


class TestSubstitution:
    """Test replacing properties with argument values."""

    def test_positional_substitution(self):
        assert unformatted("Processed {count} of {total} items", 3, 10) == "Processed 3 of 10 items"

    def test_pairs_by_position_not_name(self):
        assert unformatted("{b} then {a}", "first", "second") == "first then second"

    def test_argument_shortfall_leaves_placeholder(self):
        assert unformatted("{a} and {b}", "x") == "x and {b}"

    def test_argument_surplus_is_ignored(self):
        assert unformatted("{a}", "x", "y") == "x"

    def test_malformed_braces_pass_through(self):
        assert unformatted("cost: {5", 1, 2) == "cost: {5"

    def test_empty_braces_pass_through(self):
        assert unformatted("a {} b {c}", 1) == "a {} b 1"

    def test_none_argument_renders_empty(self):
        assert unformatted("value=[{v}]", None) == "value=[]"

    def test_literal_template_ignores_arguments(self):
        assert unformatted("nothing to replace", 1, "two", None) == "nothing to replace"

    def test_unprintable_argument(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("boom")

        assert unformatted("{x}", Broken()) == "<unprintable Broken>"

    def test_format_directive_not_interpreted(self):
        assert unformatted("{count:D2}", 7) == "7"


class TestFastPath:
    """Test messages without arguments."""

    @pytest.mark.parametrize("template", ["plain", "{name}", "cost: {5", "{}", ""])
    def test_no_arguments_returns_template(self, template):
        formatter = DefaultLogMessageFormatter(add_prefix=False)
        state = MessageState(template=template, arguments=[])
        assert formatter.format_message(state) == template

    def test_none_arguments_leaves_placeholders(self):
        formatter = DefaultLogMessageFormatter(add_prefix=False)
        state = MessageState(template="{a} here", arguments=None)
        assert formatter.format_message(state) == "{a} here"

    def test_none_template(self):
        formatter = DefaultLogMessageFormatter(add_prefix=False)
        assert formatter.format_message(MessageState(template=None, arguments=[1])) == ""


class TestPrefix:
    """Test prefix assembly."""

    def test_prefix_with_level(self):
        formatter = DefaultLogMessageFormatter(add_prefix=True, timestamp_formatter=fixed_time)
        state = MessageState(template="failure", level=LogLevel.ERROR, request_id="req-1")
        assert formatter.format_message(state) == "12:00:00\treq-1\tfail\tfailure"

    def test_prefix_without_level(self):
        formatter = DefaultLogMessageFormatter(add_prefix=True, timestamp_formatter=fixed_time)
        state = MessageState(template="failure", request_id="req-1")
        assert formatter.format_message(state) == "12:00:00\treq-1\tfailure"

    def test_missing_request_id_and_message(self):
        formatter = DefaultLogMessageFormatter(timestamp_formatter=fixed_time)
        state = MessageState(template=None, level=LogLevel.INFORMATION)
        assert formatter.format_message(state) == "12:00:00\t\tinfo\t"

    def test_prefix_with_substitution(self):
        formatter = DefaultLogMessageFormatter(timestamp_formatter=fixed_time)
        state = MessageState(
            template="Processed {count} items",
            arguments=[3],
            level=LogLevel.DEBUG,
            request_id="abc",
        )
        assert formatter(state) == "12:00:00\tabc\tdbug\tProcessed 3 items"

    def test_default_timestamp(self):
        formatter = DefaultLogMessageFormatter()
        state = MessageState(
            template="hi",
            level=LogLevel.WARNING,
            request_id="r",
            timestamp=datetime(2024, 5, 1, 12, 0, 0, 123456),
        )
        assert formatter.format(state) == "2024-05-01T12:00:00.123Z\tr\twarn\thi"

    def test_add_prefix_property(self):
        assert DefaultLogMessageFormatter().add_prefix is True
        assert DefaultLogMessageFormatter(add_prefix=False).add_prefix is False
        assert "add_prefix=False" in repr(DefaultLogMessageFormatter(add_prefix=False))


class TestFormatTimestamp:
    """Test default timestamp rendering."""

    def test_naive_is_utc(self):
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"

    def test_aware_is_converted(self):
        ts = datetime(2024, 1, 2, 14, 0, 0, 5000, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(ts) == "2024-01-02T12:00:00.005Z"


class TestLevelLabels:
    """Test level label mapping."""

    @pytest.mark.parametrize("level,label", [
        (LogLevel.TRACE, "trce"),
        (LogLevel.DEBUG, "dbug"),
        (LogLevel.INFORMATION, "info"),
        (LogLevel.WARNING, "warn"),
        (LogLevel.ERROR, "fail"),
        (LogLevel.CRITICAL, "crit"),
    ])
    def test_known_levels(self, level, label):
        assert level_to_label(level) == label
        assert level.label == label

    def test_unknown_level_uses_name(self):
        assert level_to_label(LogLevel.NONE) == "NONE"
        assert level_to_label("Custom") == "Custom"

    def test_plain_int_uses_own_text(self):
        assert level_to_label(2) == "2"
        assert level_to_label(4) == "4"

    def test_unknown_level_in_prefix(self):
        formatter = DefaultLogMessageFormatter(timestamp_formatter=fixed_time)
        state = MessageState(template="m", level=LogLevel.NONE, request_id="r")
        assert formatter.format_message(state) == "12:00:00\tr\tNONE\tm"
