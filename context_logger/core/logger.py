"""
Context logger - leveled console logger bound to a context label
"""

from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
import inspect
import os
import sys

from context_logger.core.config_store import ConfigStore, get_default_store
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig, Sink, deep_merge
from context_logger.filters.level_filter import LevelFilter
from context_logger.formatters.text_formatter import TextFormatter
from context_logger.formatters.value_renderer import render_lines
from context_logger.writers.console_writer import ConsoleWriter

LOG_LEVEL_ENV = "LOG_LEVEL"

_console: Optional[ConsoleWriter] = None


def _default_sink() -> ConsoleWriter:
    """Get the stdout writer, created on first use."""
    global _console
    if _console is None:
        _console = ConsoleWriter()
    return _console


class ContextLogger:
    """
    Logger writing ``[timestamp][level][context] line`` lines.

    The effective configuration is the store's options with the instance
    overrides merged on top. It is resolved lazily and cached until the
    store's version changes.
    """

    def __init__(
        self,
        context: str,
        overrides: Optional[Mapping[str, Any]] = None,
        store: Optional[ConfigStore] = None,
    ):
        self._context = context
        self._overrides = MappingProxyType(deep_merge({}, overrides or {}))
        self._store = store or get_default_store()
        self._version = -1
        self._config: Optional[LoggerConfig] = None
        self._filter: Optional[LevelFilter] = None
        self._formatter: Optional[TextFormatter] = None

    @property
    def context(self) -> str:
        return self._context

    @property
    def overrides(self) -> Mapping[str, Any]:
        return self._overrides

    @property
    def config(self) -> LoggerConfig:
        """Effective configuration, re-resolved when the store changed."""
        return self._resolve()

    def _resolve(self) -> LoggerConfig:
        """Recompute the effective configuration if the store version moved."""
        version = self._store.version
        if self._config is None or self._version != version:
            options = dict(self._store.options)
            env_level = os.environ.get(LOG_LEVEL_ENV)
            if env_level:
                options["log_level"] = env_level

            self._config = LoggerConfig.from_options(deep_merge(options, self._overrides))
            self._filter = LevelFilter(self._config.log_level)
            self._formatter = TextFormatter(self._config.date_format)
            self._version = version
        return self._config

    def should_log(self, level: LogLevel) -> bool:
        """Check ``level`` against the effective minimum level."""
        self._resolve()
        return self._filter.should_log(level)

    def log(self, level: LogLevel, value: Any) -> None:
        """Log a value at ``level``."""
        if not self.should_log(level):
            return

        config = self._config
        entry = LogEntry(level=level, value=value, context=self._context)
        lines = render_lines(value, trim=config.trim, ignore_empty=config.ignore_empty)
        color = config.color_for(level)
        sink = config.output or _default_sink()

        for text in self._formatter.format(entry, lines):
            if color:
                text = color(text)
            self._write(sink, f"{text}\n")

    @staticmethod
    def _write(sink: Sink, text: str) -> None:
        try:
            sink(text)
        except Exception as e:
            print(f"Sink error: {e}", file=sys.stderr)

    def trace(self, value: Any = None) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, value)

    def info(self, value: Any = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, value)

    def warn(self, value: Any = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, value)

    def error(self, value: Any = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, value)

    def get_log_level(self) -> str:
        """Get the effective minimum level as upper-case text."""
        return str(self._resolve().log_level)

    def __repr__(self) -> str:
        """String representation."""
        return f"ContextLogger(context='{self._context}')"


def _caller_context(frame) -> str:
    """Path of the frame's source file, relative to the working directory."""
    filename = frame.f_code.co_filename
    if filename.startswith("<"):
        return filename
    path = Path(filename).resolve()
    try:
        return str(path.relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


def create_logger(
    context: Union[str, Mapping[str, Any], None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    store: Optional[ConfigStore] = None,
    **options,
) -> ContextLogger:
    """
    Create a logger for a context.

    Args:
        context: Context label. When a mapping is given instead, it is used
                 as the overrides and the label is the caller's file path.
        overrides: Options merged over the global ones for this logger
        store: Option store to follow (default: the process-wide store)
        **options: Extra overrides, merged after ``overrides``

    Returns:
        New ContextLogger

    Raises:
        ValueError: If no context is given and the runtime cannot inspect
                    the calling frame

    Example:
        log = create_logger("db", {"log_level": "INFO"})
        log.info("connected")

        # Context is the calling module's path, e.g. "app/models.py"
        log = create_logger(date_format="%H:%M:%S")
    """
    if isinstance(context, Mapping):
        context, overrides = None, context
    if not isinstance(overrides, Mapping):
        overrides = {}

    if not isinstance(context, str):
        frame = inspect.currentframe()
        if frame is None or frame.f_back is None:
            raise ValueError("context is required: caller frame is not available")
        try:
            context = _caller_context(frame.f_back)
        finally:
            del frame

    return ContextLogger(context, deep_merge(overrides, options), store=store)


get_logger = create_logger
