"""Timestamped, aligned log lines written to the console and to a log file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import TextIO

MAX_FUNCTION_NAME_LENGTH = 15
REMOVE_ARGS = True
REMOVE_FUNCTION_NAME_FROM_CLASSES = True
REMOVE_RETURN_TYPE = True

_SEPARATOR = "   "


class LogLevel(Enum):
    """Severity of a log entry."""

    INFO = 0
    DEBUG = 1
    WARN = 2
    ERROR = 3


_LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARN: "WARN ",
    LogLevel.ERROR: "ERROR",
}


def level_to_string(level) -> str:
    """Return the fixed-width name of a level, or ``UNKNOWN``."""
    return _LEVEL_NAMES.get(level, "UNKNOWN")


def _without_args(name: str) -> str:
    pos = name.rfind("(")
    return name[:pos] if pos != -1 else name


def format_function_name(func_name: str) -> str:
    """Shorten a function signature to its class (or function) name and pad it."""
    name = func_name

    if REMOVE_ARGS:
        name = _without_args(name)

    if REMOVE_FUNCTION_NAME_FROM_CLASSES:
        if REMOVE_ARGS:
            pos = name.rfind("::")
            if pos != -1:
                name = name[:pos]
        else:
            args_pos = name.rfind("(")
            head = name[:args_pos] if args_pos != -1 else ""
            pos = head.rfind("::")
            if pos != -1 and args_pos != -1:
                name = name[:pos] + name[args_pos:]

    if REMOVE_RETURN_TYPE:
        head = name if REMOVE_ARGS else (
            name[: name.rfind("(")] if "(" in name else ""
        )
        pos = head.rfind(" ")
        if pos != -1:
            name = name[pos + 1:]

    return name.ljust(MAX_FUNCTION_NAME_LENGTH)


def format_message(message) -> str:
    """Render a message: text as is, a number or a 2-vector in parentheses."""
    if isinstance(message, str):
        return message
    if isinstance(message, Real):
        return f"({float(message):f})"
    if isinstance(message, Sequence) and len(message) == 2:
        x, y = message
        return f"({float(x):f}, {float(y):f})"
    raise TypeError(f"cannot log a message of type {type(message).__name__}")


def make_timestamp(now: datetime | None = None) -> str:
    """Return the local time as ``HH:MM:SS.mmm``."""
    if now is None:
        now = datetime.now()
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


class BLogger:
    """Writes log entries to the console and, if it could be opened, a file."""

    def __init__(self, filename: str | None = "logfile.txt",
                 to_console: bool = True, to_file: bool = True) -> None:
        self._to_console = to_console
        self._to_file = to_file
        self._file: TextIO | None = None
        if filename is None:
            return
        try:
            self._file = open(filename, "w", encoding="utf-8")
        except OSError:
            print("Error opening log file.", file=sys.stderr)
        else:
            self.log(LogLevel.INFO, "BLogger::BLogger(const std::string&)",
                     "Logging started.")

    def log(self, level, func_name: str = "", message="") -> str:
        """Write one entry and return the formatted line."""
        line = _SEPARATOR.join((
            make_timestamp(),
            level_to_string(level),
            format_function_name(func_name),
            format_message(message),
        ))
        if self._to_console:
            print(line)
        if self._to_file and self._file is not None:
            self._file.write(line + "\n")
            self._file.flush()
        return line

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "BLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()