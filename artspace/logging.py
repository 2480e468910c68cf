"""Logging utilities with timing, frame tracking and tagged channels.

Each subsystem logs through its own Channel, which prefixes lines with a
tag such as [TEX] and marks failures as [TEX][ERR] or [APP][CRITICAL].
"""

from __future__ import annotations
import sys
import time
from collections import Counter
from typing import Dict, Optional


class Logger:
    """Application logger with timestamps, frame counts and error tally."""

    def __init__(self):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self.errors: Counter = Counter()

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    def increment_frame(self) -> None:
        """Increment frame counter."""
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def write(self, line: str) -> None:
        """Write one line with timestamp and frame number."""
        text = f"[{self.elapsed:7.3f}s F{self._frame:06d}] {line}\n"
        try:
            sys.stdout.write(text)
            sys.stdout.flush()
        except (OSError, ValueError):
            # stdout closed or detached (pythonw, redirected pipe gone)
            sys.stderr.write(text)
            sys.stderr.flush()


class Channel:
    """Tagged log channel for one subsystem."""

    def __init__(self, tag: str, logger: Optional[Logger] = None):
        self.tag = tag
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_logger()

    def __call__(self, msg: str) -> None:
        self.logger.write(f"[{self.tag}] {msg}")

    def err(self, msg: str) -> None:
        """Recoverable failure; counted for the HUD."""
        self.logger.errors[self.tag] += 1
        self.logger.write(f"[{self.tag}][ERR] {msg}")

    def critical(self, msg: str) -> None:
        """Failure that ends the main loop."""
        self.logger.errors[self.tag] += 1
        self.logger.write(f"[{self.tag}][CRITICAL] {msg}")


# Global logger instance
_logger: Optional[Logger] = None
_channels: Dict[str, Channel] = {}


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def channel(tag: str) -> Channel:
    """Get the shared channel for a tag."""
    ch = _channels.get(tag)
    if ch is None:
        ch = _channels[tag] = Channel(tag)
    return ch


def get_frame() -> int:
    """Get current frame count."""
    return get_logger().frame


def error_count() -> int:
    """Total errors logged so far, all channels."""
    return sum(get_logger().errors.values())


def increment_frame() -> None:
    """Increment frame counter."""
    get_logger().increment_frame()


# Time utilities
def now() -> float:
    """Get current time in seconds (high precision)."""
    return time.perf_counter()
