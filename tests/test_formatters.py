"""Tests for renderers, formatters, filters and writers"""

import io
import traceback
from collections import OrderedDict, UserList, namedtuple
from datetime import datetime
from types import MappingProxyType

import pytest

from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.filters import BaseFilter, LevelFilter
from context_logger.formatters import (
    STACK_TRACE_HEADER,
    EmptyRenderer,
    ErrorRenderer,
    StructuredRenderer,
    TextFormatter,
    TextRenderer,
    format_timestamp,
    render_lines,
)
from context_logger.writers import ConsoleWriter


class TestRenderLines:
    """Test value to lines dispatch."""

    @pytest.mark.parametrize("value", [None, False, "", b""])
    def test_empty_values(self, value):
        assert render_lines(value) == [""]

    def test_text_is_trimmed_and_filtered(self):
        assert render_lines("  a \n\n  \n b") == ["a", "b"]

    def test_blank_text_yields_no_lines(self):
        assert render_lines(" \n\t\n") == []

    def test_trim_disabled_keeps_whitespace_lines(self):
        assert render_lines(" a \n  ", trim=False) == [" a ", "  "]

    def test_trim_before_empty_check(self):
        assert render_lines("x\n   \ny", trim=True, ignore_empty=True) == ["x", "y"]
        assert render_lines("x\n   \ny", trim=True, ignore_empty=False) == ["x", "", "y"]

    def test_non_text_scalars(self):
        assert render_lines(42) == ["42"]
        assert render_lines(-1) == ["-1"]
        assert render_lines(3.5) == ["3.5"]

    @pytest.mark.parametrize("value", [0, 0.0, -0.0])
    def test_numeric_zero_is_empty(self, value):
        assert render_lines(value) == [""]

    def test_bytes_are_decoded(self):
        assert render_lines(b"caf\xc3\xa9\nok") == ["café", "ok"]

    def test_mapping(self):
        assert render_lines({"a": 1, "b": 2}) == ["{", '  "a": 1,', '  "b": 2', "}"]

    def test_nested_structure(self):
        assert render_lines({"ships": ["Voyager"], "crew": {}}) == [
            "{",
            '  "ships": [',
            '    "Voyager"',
            "  ],",
            '  "crew": {}',
            "}",
        ]

    def test_empty_collections_are_structured(self):
        assert render_lines({}) == ["{}"]
        assert render_lines([]) == ["[]"]

    def test_unserializable_members_use_str(self):
        when = datetime(2023, 11, 1, 17, 10)
        assert render_lines([when]) == ["[", '  "2023-11-01 17:10:00"', "]"]

    def test_read_only_mapping(self):
        assert render_lines(MappingProxyType({"a": 1, "b": 2})) == [
            "{", '  "a": 1,', '  "b": 2', "}"
        ]

    def test_nested_mapping_and_sequence_types(self):
        value = OrderedDict(
            ships=UserList(["Voyager"]),
            crew=MappingProxyType({"captain": "Janeway"}),
        )
        assert render_lines(value) == [
            "{",
            '  "ships": [',
            '    "Voyager"',
            "  ],",
            '  "crew": {',
            '    "captain": "Janeway"',
            "  }",
            "}",
        ]

    def test_sets_become_lists(self):
        assert render_lines({"tags": {"a"}}) == ["{", '  "tags": [', '    "a"', "  ]", "}"]

    def test_namedtuple_is_a_sequence(self):
        Point = namedtuple("Point", "x y")
        assert render_lines(Point(1, 2)) == ["[", "  1,", "  2", "]"]

    def test_non_text_keys_fall_back_to_pprint(self):
        assert render_lines({(1, 2): "pair"}) == ["{(1, 2): 'pair'}"]

    def test_cycle_falls_back_to_pprint(self):
        items = [1]
        items.append(items)
        lines = render_lines(items)
        assert len(lines) == 1
        assert lines[0].startswith("[1, <Recursion on list with id=")

    def test_error_lines(self):
        lines = render_lines(KeyError("missing"))
        assert lines == ["'missing'", STACK_TRACE_HEADER, "KeyError: 'missing'"]

    def test_error_without_message_uses_type_name(self):
        assert render_lines(ValueError())[0] == "ValueError"

    def test_error_with_broken_str(self):
        class BrokenError(Exception):
            def __str__(self):
                raise RuntimeError("no str")

        lines = render_lines(BrokenError())
        assert lines[:2] == ["BrokenError", STACK_TRACE_HEADER]
        assert len(lines) >= 3

    def test_error_with_broken_traceback_formatting(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("cannot format")

        monkeypatch.setattr(traceback, "format_exception", broken)
        error = ValueError("boom")
        assert render_lines(error) == [
            "boom", STACK_TRACE_HEADER, f"<ValueError at {hex(id(error))}>"
        ]

    def test_error_lines_are_not_trimmed(self):
        try:
            raise ValueError("indented")
        except ValueError as e:
            lines = render_lines(e)
        assert lines[2] == "Traceback (most recent call last):"
        assert lines[3].startswith("  File ")


class TestRenderers:
    """Test renderer capability checks."""

    def test_empty_renderer(self):
        renderer = EmptyRenderer()
        assert renderer.accepts(None)
        assert renderer.accepts(0)
        assert not renderer.accepts(1)
        assert not renderer.accepts([])
        assert not renderer.accepts({})

    def test_error_renderer(self):
        renderer = ErrorRenderer()
        assert renderer.accepts(RuntimeError("x"))
        assert not renderer.accepts("RuntimeError")

    def test_structured_renderer(self):
        renderer = StructuredRenderer()
        assert renderer.accepts({})
        assert renderer.accepts((1,))
        assert not renderer.accepts("text")
        assert not renderer.accepts(b"bytes")

    def test_renderers_are_callable(self):
        renderer = TextRenderer(trim=False, ignore_empty=False)
        assert renderer(" a ") == [" a "]
        assert "trim=False" in repr(renderer)


class TestTextFormatter:
    """Test line prefixes."""

    def setup_method(self):
        self.entry = LogEntry(
            level=LogLevel.INFO,
            value="ready",
            context="db",
            timestamp=datetime(2023, 11, 1, 17, 10, 0, 123456),
        )

    def test_format_timestamp_milliseconds(self):
        assert format_timestamp(self.entry.timestamp, "%Y-%m-%d %H:%M:%S.%f") == \
            "2023-11-01 17:10:00.123"

    def test_format_with_date(self):
        formatter = TextFormatter("%H:%M:%S")
        assert formatter.format(self.entry, ["ready", "set"]) == [
            "[17:10:00][info][db] ready",
            "[17:10:00][info][db] set",
        ]

    @pytest.mark.parametrize("date_format", [None, ""])
    def test_format_without_date(self, date_format):
        formatter = TextFormatter(date_format)
        assert formatter.format(self.entry, ["ready"]) == ["[info][db] ready"]

    def test_empty_line_keeps_separator(self):
        formatter = TextFormatter()
        assert formatter.format(self.entry, [""]) == ["[info][db] "]

    def test_no_lines(self):
        assert TextFormatter().format(self.entry, []) == []


class TestLevelFilter:
    """Test level filtering."""

    def test_is_a_filter(self):
        assert isinstance(LevelFilter(), BaseFilter)

    @pytest.mark.parametrize("min_level", list(LogLevel))
    def test_rank_comparison(self, min_level):
        level_filter = LevelFilter(min_level)
        for level in LogLevel:
            assert level_filter.should_log(level) is (level >= min_level)
            assert level_filter(level) is level_filter.should_log(level)

    def test_text_level_is_parsed(self):
        assert LevelFilter("error").min_level == LogLevel.ERROR
        assert LevelFilter("bogus").min_level == LogLevel.WARN

    def test_repr(self):
        assert repr(LevelFilter(LogLevel.INFO)) == "LevelFilter(min=INFO)"


class TestConsoleWriter:
    """Test the default sink."""

    def test_writes_to_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        writer("line\n")
        writer.write("next\n")
        writer.flush()
        assert stream.getvalue() == "line\nnext\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleWriter().write("hello\n")
        assert capsys.readouterr().out == "hello\n"
