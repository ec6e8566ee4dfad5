"""
Value renderers

Turn a logged value into lines. Renderers are tried in a fixed order and the
first one accepting the value is used: empty values, exceptions, structured
values, then text.
"""

import json
import pprint
import traceback
from typing import Any, List, Mapping, Sequence

from context_logger.formatters.base_formatter import BaseRenderer

STACK_TRACE_HEADER = "Stack trace:"


class EmptyRenderer(BaseRenderer):
    """Render None, False, numeric zero and empty text as a single empty line."""

    def accepts(self, value: Any) -> bool:
        if value is None or value is False:
            return True
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value == 0
        return isinstance(value, (str, bytes, bytearray)) and not value

    def render(self, value: Any) -> List[str]:
        return [""]


class ErrorRenderer(BaseRenderer):
    """
    Render exceptions as their message, a header, then the formatted trace.

    Exceptions that were never raised have no traceback; their trace is the
    single ``Type: message`` line.
    """

    def accepts(self, value: Any) -> bool:
        return isinstance(value, BaseException)

    def render(self, value: Any) -> List[str]:
        name = type(value).__name__
        try:
            message = str(value) or name
        except Exception:
            message = name
        try:
            trace = "".join(
                traceback.format_exception(type(value), value, value.__traceback__)
            )
        except Exception:
            trace = f"<{name} at {hex(id(value))}>"
        return [message, STACK_TRACE_HEADER] + trace.rstrip("\n").split("\n")


class StructuredRenderer(BaseRenderer):
    """
    Pretty-print mappings and collections as 2-space indented JSON.

    Mappings and sequences other than dict and list are converted before
    encoding. Values JSON cannot represent (cycles, non-text keys) fall back to
    ``pprint.pformat``; objects that even pprint fails on are shown as
    ``<TypeName at 0x...>``.
    """

    indent = 2

    def accepts(self, value: Any) -> bool:
        if isinstance(value, (str, bytes, bytearray)):
            return False
        return isinstance(value, (Mapping, Sequence, set, frozenset))

    def render(self, value: Any) -> List[str]:
        return self._format(value).split("\n")

    def _format(self, value: Any) -> str:
        try:
            return json.dumps(
                value, indent=self.indent, default=self._default, ensure_ascii=False
            )
        except Exception:
            pass
        try:
            return pprint.pformat(value, indent=self.indent, width=100)
        except Exception:
            return f"<{value.__class__.__name__} at {hex(id(value))}>"

    @staticmethod
    def _default(obj: Any) -> Any:
        if isinstance(obj, Mapping):
            return dict(obj)
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
            return list(obj)
        return str(obj)


class TextRenderer(BaseRenderer):
    """
    Render any value as text split on line breaks.

    Args:
        trim: Strip leading/trailing whitespace from each line
        ignore_empty: Drop lines left empty (after trimming)
    """

    def __init__(self, trim: bool = True, ignore_empty: bool = True):
        self.trim = trim
        self.ignore_empty = ignore_empty

    def accepts(self, value: Any) -> bool:
        return True

    def render(self, value: Any) -> List[str]:
        lines = self._to_text(value).split("\n")
        if self.trim:
            lines = [line.strip() for line in lines]
        if self.ignore_empty:
            lines = [line for line in lines if line]
        return lines

    @staticmethod
    def _to_text(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        try:
            return str(value)
        except Exception:
            return f"<{value.__class__.__name__} at {hex(id(value))}>"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextRenderer(trim={self.trim}, ignore_empty={self.ignore_empty})"


_EMPTY = EmptyRenderer()
_ERROR = ErrorRenderer()
_STRUCTURED = StructuredRenderer()


def render_lines(value: Any, trim: bool = True, ignore_empty: bool = True) -> List[str]:
    """
    Render a logged value into output lines.

    Args:
        value: Any value
        trim: Strip whitespace from text lines
        ignore_empty: Drop text lines that are empty after trimming

    Returns:
        Lines in output order; empty when all text lines were dropped

    Example:
        render_lines({"a": 1})        # ['{', '  "a": 1', '}']
        render_lines("  a \\n\\n b")   # ['a', 'b']
    """
    for renderer in (_EMPTY, _ERROR, _STRUCTURED):
        if renderer.accepts(value):
            return renderer.render(value)
    return TextRenderer(trim=trim, ignore_empty=ignore_empty).render(value)
