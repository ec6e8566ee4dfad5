"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from context_logger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    A single logger call.

    All lines rendered from ``value`` share the same timestamp.
    """

    level: LogLevel
    value: Any
    context: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.context, str):
            self.context = str(self.context)
