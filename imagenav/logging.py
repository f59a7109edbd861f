"""Logging utilities with timing and tick tracking."""

from __future__ import annotations
import contextlib
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Application logger with timestamps and tick counts.

    Lines end with LF, or CRLF inside `raw_lines()` while the terminal is
    in raw mode (no output post-processing).
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._tick: int = 0
        self._stream = stream
        self.line_end = "\n"

    @property
    def tick(self) -> int:
        """Current loop tick."""
        return self._tick

    def increment_tick(self) -> None:
        """Increment tick counter."""
        self._tick += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp and tick number."""
        line = f"[{self.elapsed:7.3f}s T{self._tick:06d}] {msg}{self.line_end}"
        stream = self._stream or sys.stdout
        try:
            stream.write(line)
            stream.flush()
        except (OSError, ValueError):
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass

    @contextlib.contextmanager
    def raw_lines(self):
        """End lines with CRLF for the duration of the block."""
        previous, self.line_end = self.line_end, "\r\n"
        try:
            yield self
        finally:
            self.line_end = previous

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_logger(logger: Optional[Logger]) -> None:
    """Replace the global logger (None recreates it lazily)."""
    global _logger
    _logger = logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def increment_tick() -> None:
    """Increment tick counter."""
    get_logger().increment_tick()