"""
Base renderer interface
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseRenderer(ABC):
    """
    Abstract base class for value renderers.

    Renderers turn one logged value into the ordered lines printed for it.
    ``accepts`` tells whether the renderer handles a value's shape.
    """

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """
        Check whether this renderer handles ``value``.

        Args:
            value: The logged value

        Returns:
            True if ``render`` should be used for the value
        """
        pass

    @abstractmethod
    def render(self, value: Any) -> List[str]:
        """
        Render a value into lines, without line breaks.

        Args:
            value: The logged value

        Returns:
            Lines in output order
        """
        pass

    def __call__(self, value: Any) -> List[str]:
        """Allow renderers to be callable."""
        return self.render(value)
