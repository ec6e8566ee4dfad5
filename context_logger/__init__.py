"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Context Logger - A lightweight leveled console logger
with per-context overrides and lazily applied global configuration
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from context_logger.core.config_store import (
    ConfigStore,
    configure,
    get_default_store,
    reset_configuration,
)
from context_logger.core.logger import ContextLogger, create_logger, get_logger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig, colorize

# Import submodules (not all classes by default)
from context_logger import filters
from context_logger import formatters
from context_logger import writers

__all__ = [
    "ConfigStore",
    "ContextLogger",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "colorize",
    "configure",
    "create_logger",
    "get_default_store",
    "get_logger",
    "reset_configuration",
    "filters",
    "formatters",
    "writers",
]
