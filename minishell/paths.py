"""Finding commands through the PATH variable."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Sequence, Tuple


def path_directories(env: Iterable[Tuple[str, str]]) -> Optional[List[str]]:
    """Return the directories of the first variable whose name starts with PATH.

    Empty components are skipped. Returns None when no such variable is set.
    """
    for key, value in env:
        if key.startswith("PATH"):
            return [part for part in value.split(":") if part]
    return None


def construct_path(directory: str, command: str) -> str:
    """Join a directory and a command name with a slash."""
    return f"{directory}/{command}"


def find_path(directories: Optional[Sequence[str]], command: Optional[str]) -> Optional[str]:
    """Locate ``command``.

    A command holding a slash is returned as is when it exists. Otherwise the
    first executable ``directory/command`` is returned, or None.
    """
    if directories is None or not command:
        return None
    if "/" in command and os.path.exists(command):
        return command
    for directory in directories:
        candidate = construct_path(directory, command)
        if os.access(candidate, os.X_OK):
            return candidate
    return None