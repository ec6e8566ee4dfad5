"""
Process-wide option store

A ``ConfigStore`` holds the global options and a version counter. Loggers
keep a reference to their store and re-resolve their configuration when the
version they last saw is out of date.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from context_logger.core.logger_config import deep_merge, default_options


class ConfigStore:
    """Global options plus a version bumped on every change."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._options = deep_merge(default_options(), options or {})
        self._version = 0

    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only view of the current options."""
        return MappingProxyType(self._options)

    @property
    def version(self) -> int:
        return self._version

    def configure(self, partial: Optional[Mapping[str, Any]] = None, **options) -> None:
        """
        Deep-merge new options into the store.

        Args:
            partial: Mapping of options to merge
            **options: Options given as keywords, merged after ``partial``

        Example:
            store.configure({"colors": {"info": None}}, date_format="%H:%M:%S")

        The version is incremented on every call, even when nothing changed.
        A ``partial`` that is not a mapping is ignored.
        """
        if not isinstance(partial, Mapping):
            partial = {}
        self._options = deep_merge(deep_merge(self._options, partial), options)
        self._version += 1

    def reset(self) -> None:
        """Restore the built-in options."""
        self._options = default_options()
        self._version += 1

    def __repr__(self) -> str:
        """String representation."""
        return f"ConfigStore(version={self._version})"


_default_store = ConfigStore()


def get_default_store() -> ConfigStore:
    """Get the store shared by loggers created without an explicit one."""
    return _default_store


def configure(partial: Optional[Mapping[str, Any]] = None, **options) -> None:
    """Configure the process-wide store. See ``ConfigStore.configure``."""
    _default_store.configure(partial, **options)


def reset_configuration() -> None:
    """Restore the process-wide store to the built-in options."""
    _default_store.reset()
