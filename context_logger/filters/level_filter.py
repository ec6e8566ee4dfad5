"""
Level-based filter

Filters calls whose level ranks below a minimum
"""

from context_logger.core.log_level import LogLevel
from context_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter calls based on log level.

    Example:
        # Only log WARN and above
        level_filter = LevelFilter(min_level=LogLevel.WARN)
        level_filter.should_log(LogLevel.INFO)   # False
        level_filter.should_log(LogLevel.ERROR)  # True
    """

    def __init__(self, min_level: LogLevel = LogLevel.WARN):
        self.min_level = LogLevel.parse(min_level)

    def should_log(self, level: LogLevel) -> bool:
        """
        Check if ``level`` ranks at or above the minimum level.

        Args:
            level: Level of the call

        Returns:
            True if the level is high enough, False otherwise
        """
        return level >= self.min_level

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level.name})"
