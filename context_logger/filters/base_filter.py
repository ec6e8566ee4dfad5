"""
Base filter interface
"""

from abc import ABC, abstractmethod

from context_logger.core.log_level import LogLevel


class BaseFilter(ABC):
    """
    Abstract base class for level filters.

    Filters decide whether a call at a given level is processed or discarded
    before any rendering happens.
    """

    @abstractmethod
    def should_log(self, level: LogLevel) -> bool:
        """
        Determine if a call at ``level`` should be logged.

        Args:
            level: The level of the call

        Returns:
            True if the call should be logged, False otherwise
        """
        pass

    def __call__(self, level: LogLevel) -> bool:
        """Allow filters to be callable."""
        return self.should_log(level)
