"""Opening the files that redirections name, and reading heredocs."""

from __future__ import annotations

import errno
import itertools
import os
import sys
import tempfile
from typing import Callable, Iterable, Optional, TextIO

from minishell.commands import Command, Redirection

HEREDOC_PREFIX = os.path.join(tempfile.gettempdir(), "heredoc_")

_FILE_MODE = 0o644
_heredoc_numbers = itertools.count(1)


def heredoc_name() -> str:
    """Return a fresh file name for the next heredoc."""
    return f"{HEREDOC_PREFIX}{next(_heredoc_numbers)}"


def _open_onto(redirection: Redirection, flags: int, target: int, last: bool) -> bool:
    if redirection.file is None:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
    fd = os.open(redirection.file, flags, _FILE_MODE)
    redirection.fd = fd
    try:
        if last:
            os.dup2(fd, target)
    finally:
        os.close(fd)
    return True


def open_input(redirection: Redirection, last: bool) -> bool:
    """Open the file of a ``<``; when ``last``, make it standard input.

    Raises OSError when the file cannot be opened.
    """
    return _open_onto(redirection, os.O_RDONLY, 0, last)


def open_output(redirection: Redirection, last: bool) -> bool:
    """Create or truncate the file of a ``>``; when ``last``, make it standard output.

    Raises OSError when the file cannot be opened.
    """
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    return _open_onto(redirection, flags, 1, last)


def open_append(redirection: Redirection, last: bool) -> bool:
    """Open the file of a ``>>`` for appending; when ``last``, make it standard output.

    Raises OSError when the file cannot be opened.
    """
    flags = os.O_WRONLY | os.O_CREAT | os.O_APPEND
    return _open_onto(redirection, flags, 1, last)


def read_heredoc(redirection: Redirection, stream: Optional[TextIO] = None) -> bool:
    """Copy lines from ``stream`` into a fresh heredoc file up to the delimiter.

    On success the file's name is stored in ``redirection.file`` and True is
    returned. Returns False when the stream ends before the delimiter line.
    """
    source = sys.stdin if stream is None else stream
    delimiter = (redirection.delimiter or "") + "\n"
    name = heredoc_name()
    with open(name, "w", encoding="utf-8") as body:
        for line in iter(source.readline, ""):
            if line == delimiter:
                redirection.file = name
                return True
            body.write(line if line.endswith("\n") else line + "\n")
    return False


def _opener(redirection: Redirection) -> Optional[Callable[[Redirection, bool], bool]]:
    if redirection.in_redir:
        return open_input
    if redirection.out_redir:
        return open_output
    if redirection.append:
        return open_append
    return None


def apply_redirections(command: Command) -> bool:
    """Open every file redirection of ``command`` in order.

    Only the last redirection of the command replaces a standard stream.
    Heredocs are left to :func:`collect_heredocs`. Stops at the first file
    that cannot be opened, reports it on stderr and returns False.
    """
    count = len(command.redirections)
    for index, redirection in enumerate(command.redirections):
        opener = _opener(redirection)
        if opener is None:
            continue
        try:
            opener(redirection, index == count - 1)
        except OSError as exc:
            sys.stderr.write(f"open: {exc.strerror}\n")
            return False
    return True


def manage_redirections(commands: Iterable[Command]) -> int:
    """Apply the redirections of every command; return 1 if any failed, else 0."""
    status = 0
    for command in commands:
        if not apply_redirections(command):
            status = 1
    return status


def collect_heredocs(commands: Iterable[Command], stream: Optional[TextIO] = None) -> bool:
    """Read the body of every heredoc of every command; return whether all were closed."""
    complete = True
    for command in commands:
        for redirection in command.redirections:
            if redirection.heredoc and not read_heredoc(redirection, stream):
                complete = False
    return complete