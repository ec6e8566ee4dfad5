"""
Logger configuration management

Options are kept as plain nested mappings (see ``default_options``) so that
partial updates can be deep-merged; ``LoggerConfig`` is the resolved,
normalised form a logger works with.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from colorama import Style

from context_logger.core.log_level import LogLevel

ColorFunction = Callable[[str], str]
Sink = Callable[[str], Any]

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def colorize(code: str) -> ColorFunction:
    """
    Build a color function wrapping text in ``code`` and a reset sequence.

    Example:
        from colorama import Fore
        red = colorize(Fore.RED)
        red("boom")  # '\\x1b[31mboom\\x1b[0m'
    """
    def wrap(text: str) -> str:
        return f"{code}{text}{Style.RESET_ALL}"

    wrap.__name__ = "colorize"
    return wrap


def default_options() -> Dict[str, Any]:
    """Create a fresh copy of the built-in global options."""
    return {
        "colors": {level.tag: colorize(level.color) for level in LogLevel},
        "date_format": DEFAULT_DATE_FORMAT,
        "trim": True,
        "ignore_empty": True,
        "log_level": LogLevel.WARN.name,
        "output": None,
    }


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge ``override`` into a copy of ``base``.

    Nested mappings are merged key by key; every other value, lists and
    explicit ``None``/``False`` included, replaces what was there. Neither
    argument is modified and no nested mapping of either is shared with the
    result.
    """
    merged = {
        key: deep_merge({}, value) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping):
            merged[key] = deep_merge(current if isinstance(current, Mapping) else {}, value)
        else:
            merged[key] = value
    return merged


@dataclass
class LoggerConfig:
    """
    Effective configuration of one logger.

    Built with ``from_options`` from the merged option mapping.
    """

    colors: Optional[Mapping[str, Optional[ColorFunction]]] = None
    date_format: Optional[str] = DEFAULT_DATE_FORMAT
    trim: bool = True
    ignore_empty: bool = True
    log_level: LogLevel = LogLevel.WARN
    output: Optional[Sink] = None

    def __post_init__(self):
        """Normalize the level after initialization."""
        self.log_level = LogLevel.parse(self.log_level)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "LoggerConfig":
        """Create configuration from an option mapping, ignoring unknown keys."""
        colors = options.get("colors")
        date_format = options.get("date_format")
        output = options.get("output")
        return cls(
            colors=colors if isinstance(colors, Mapping) else None,
            date_format=date_format if isinstance(date_format, str) and date_format else None,
            trim=bool(options.get("trim", True)),
            ignore_empty=bool(options.get("ignore_empty", True)),
            log_level=options.get("log_level"),
            output=output if callable(output) else None,
        )

    def color_for(self, level: LogLevel) -> Optional[ColorFunction]:
        """Get the color function for ``level``, or None when disabled."""
        if not self.colors:
            return None
        color = self.colors.get(level.tag)
        return color if callable(color) else None
