"""
Log filters module

Provides the level filter used by loggers before rendering.
"""

from context_logger.filters.base_filter import BaseFilter
from context_logger.filters.level_filter import LevelFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
]
