"""
Log level enumeration

Ranks are used for filtering: TRACE < INFO < WARN < ERROR.
"""

from enum import IntEnum
from typing import Any

from colorama import Fore


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The integer value is the rank compared by the level filter.
    """

    TRACE = 0       # Most verbose, detailed tracing
    INFO = 1        # Informational messages
    WARN = 2        # Warning messages
    ERROR = 3       # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def parse(cls, value: Any, default: "LogLevel" = None) -> "LogLevel":
        """
        Convert any value to a LogLevel without raising.

        Unknown names, None and non-text values collapse to ``default``
        (WARN when not given).
        """
        if default is None:
            default = cls.WARN
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return default
        try:
            return cls.from_string(value)
        except ValueError:
            return default

    @property
    def tag(self) -> str:
        """Lower-case name shown between brackets in output lines."""
        return self.name.lower()

    @property
    def color(self) -> str:
        """
        Get the default ANSI foreground code for this level.

        Returns:
            colorama escape sequence
        """
        colors = {
            LogLevel.TRACE: Fore.LIGHTBLACK_EX,  # Grey
            LogLevel.INFO: Fore.CYAN,
            LogLevel.WARN: Fore.YELLOW,
            LogLevel.ERROR: Fore.LIGHTRED_EX,
        }
        return colors[self]
