"""
Formatters module

Renderers turn logged values into lines; the text formatter prefixes them.
"""

from context_logger.formatters.base_formatter import BaseRenderer
from context_logger.formatters.text_formatter import TextFormatter, format_timestamp
from context_logger.formatters.value_renderer import (
    STACK_TRACE_HEADER,
    EmptyRenderer,
    ErrorRenderer,
    StructuredRenderer,
    TextRenderer,
    render_lines,
)

__all__ = [
    "BaseRenderer",
    "EmptyRenderer",
    "ErrorRenderer",
    "StructuredRenderer",
    "TextRenderer",
    "TextFormatter",
    "STACK_TRACE_HEADER",
    "format_timestamp",
    "render_lines",
]
