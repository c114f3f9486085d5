"""Error codes and the messages the shell prints for them."""

from __future__ import annotations

import enum
import sys
from typing import Optional, TextIO


class ErrorCode(enum.Enum):
    """Kinds of error the shell reports."""

    FILE_NOT_FOUND = enum.auto()
    ARGS = enum.auto()
    PERMISSION_DENIED = enum.auto()
    CMD_NOT_FOUND = enum.auto()
    DOUBLE_PIPES = enum.auto()
    PIPE_FAILURE = enum.auto()
    FORK_FAILURE = enum.auto()
    UNCLOSED_QUOTES = enum.auto()
    UNKNOWN = enum.auto()


_MESSAGES = {
    ErrorCode.FILE_NOT_FOUND: "{subject}: No such file or directory",
    ErrorCode.ARGS: "invalid number of arguments.",
    ErrorCode.PERMISSION_DENIED: "{subject}: Permission denied",
    ErrorCode.CMD_NOT_FOUND: "{subject}: command not found",
    ErrorCode.DOUBLE_PIPES: "{subject}: invalid double pipes",
    ErrorCode.PIPE_FAILURE: "'|': pipe failure",
    ErrorCode.FORK_FAILURE: "fork failure",
    ErrorCode.UNCLOSED_QUOTES: "{subject}: unclosed quotes",
    ErrorCode.UNKNOWN: "unknown error",
}


def error_message(code: ErrorCode, subject: Optional[str] = None) -> str:
    """Return the message for ``code``, naming ``subject`` where the message has one."""
    template = _MESSAGES.get(code, _MESSAGES[ErrorCode.UNKNOWN])
    return template.format(subject="(null)" if subject is None else subject)


def report_error(
    code: ErrorCode, subject: Optional[str] = None, stream: Optional[TextIO] = None
) -> int:
    """Write the message for ``code`` as one line to ``stream`` (stderr by default).

    Returns the number of characters written.
    """
    out = sys.stderr if stream is None else stream
    text = error_message(code, subject) + "\n"
    out.write(text)
    return len(text)


class ShellError(Exception):
    """An error the shell reports to the user."""

    def __init__(self, code: ErrorCode, subject: Optional[str] = None) -> None:
        super().__init__(error_message(code, subject))
        self.code = code
        self.subject = subject