"""Console logging with a timestamped, per-logger header and level colours."""

from __future__ import annotations

import datetime as _dt
import enum
import sys
from typing import Any, Protocol, TextIO


class Level(enum.Enum):
    """Severity of a log record."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_RESET = "\x1b[0m"
_COLOURS = {
    Level.INFO: "\x1b[37m",
    Level.WARNING: "\x1b[93m",
    Level.ERROR: "\x1b[91m",
}


class _ClockTime(Protocol):
    hour: int
    minute: int
    second: int


def _render(value: Any) -> str:
    """Render one message piece the way a default text stream would."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_record(header: str, message: str, when: _ClockTime) -> str:
    """Return ``[HH:MM:SS] header: message`` for the clock time ``when``."""
    return f"[{when.hour:02d}:{when.minute:02d}:{when.second:02d}] {header}: {message}"


class Logger:
    """Writes records tagged with ``header`` to a text stream.

    When no stream is given, records go to whatever ``sys.stdout`` is at the
    time of writing. Records are coloured by level on terminals.
    """

    def __init__(self, header: str, stream: TextIO | None = None) -> None:
        self.header = header
        self.stream = stream

    def log(self, level: Level, *args: Any) -> None:
        """Join ``args`` into one message and write it at ``level``."""
        message = "".join(_render(arg) for arg in args)
        record = format_record(self.header, message, _dt.datetime.now())
        stream = self.stream if self.stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            stream.write(f"{_COLOURS[level]}{record}\n{_RESET}")
        else:
            stream.write(f"{record}\n")
        stream.flush()

    def info(self, *args: Any) -> None:
        """Write an informational record."""
        self.log(Level.INFO, *args)

    def warning(self, *args: Any) -> None:
        """Write a warning record."""
        self.log(Level.WARNING, *args)

    def error(self, *args: Any) -> None:
        """Write an error record."""
        self.log(Level.ERROR, *args)

    def __repr__(self) -> str:
        return f"Logger({self.header!r})"


_core_logger: Logger | None = None
_client_logger: Logger | None = None


def init() -> None:
    """Create the engine's core logger and the client application's logger."""
    global _core_logger, _client_logger
    _core_logger = Logger("Lucky")
    _client_logger = Logger("APP")


def get_core_logger() -> Logger:
    """Return the engine's own logger; ``init()`` must have been called."""
    if _core_logger is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _core_logger


def get_client_logger() -> Logger:
    """Return the client application's logger; ``init()`` must have been called."""
    if _client_logger is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _client_logger