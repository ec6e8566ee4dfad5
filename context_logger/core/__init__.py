"""
Core module for logger system

This module contains the fundamental classes:
- ContextLogger: Leveled logger bound to a context label
- ConfigStore: Global options with a version counter
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Effective configuration of one logger
"""

from context_logger.core.config_store import (
    ConfigStore,
    configure,
    get_default_store,
    reset_configuration,
)
from context_logger.core.logger import ContextLogger, create_logger, get_logger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig, colorize, deep_merge, default_options

__all__ = [
    "ContextLogger",
    "ConfigStore",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "colorize",
    "configure",
    "create_logger",
    "deep_merge",
    "default_options",
    "get_default_store",
    "get_logger",
    "reset_configuration",
]
