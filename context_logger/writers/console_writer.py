"""Console writer, the default sink"""

import sys

import colorama


class ConsoleWriter:
    """Write finished lines to the console."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, looked up on each write)
        """
        self._stream = stream
        colorama.just_fix_windows_console()

    @property
    def stream(self):
        return self._stream or sys.stdout

    def write(self, text: str):
        """Write text, which already ends with a line break."""
        self.stream.write(text)
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __call__(self, text: str):
        self.write(text)
