"""
Text formatter for output lines

Builds ``[timestamp][level][context] line`` strings from a log entry
"""

from datetime import datetime
from typing import List, Optional

from context_logger.core.log_entry import LogEntry


def format_timestamp(timestamp: datetime, date_format: str) -> str:
    """
    Format ``timestamp`` with a strftime pattern where ``%f`` is milliseconds.

    Example:
        format_timestamp(datetime(2023, 11, 1, 17, 10), "%Y-%m-%d %H:%M:%S.%f")
        # '2023-11-01 17:10:00.000'
    """
    millis = f"{timestamp.microsecond // 1000:03d}"
    return timestamp.strftime(date_format.replace("%f", millis))


class TextFormatter:
    """
    Format rendered lines of a log entry.

    Args:
        date_format: strftime pattern for the timestamp; None or empty
                     removes the timestamp segment

    Example:
        formatter = TextFormatter("%H:%M:%S")
        formatter.format(entry, ["ready"])  # ["[17:10:00][info][db] ready"]
    """

    def __init__(self, date_format: Optional[str] = None):
        self.date_format = date_format or None

    def prefix(self, entry: LogEntry) -> str:
        """Build the bracketed segments shared by all lines of ``entry``."""
        date = (
            f"[{format_timestamp(entry.timestamp, self.date_format)}]"
            if self.date_format
            else ""
        )
        return f"{date}[{entry.level.tag}][{entry.context}]"

    def format(self, entry: LogEntry, lines: List[str]) -> List[str]:
        """
        Prefix the rendered lines of a log entry.

        Args:
            entry: Log entry the lines were rendered from
            lines: Rendered lines

        Returns:
            Prefixed lines without trailing line breaks
        """
        prefix = self.prefix(entry)
        return [f"{prefix} {line}" for line in lines]

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(date_format='{self.date_format}')"
