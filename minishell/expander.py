"""Expansion of ``$NAME`` variables inside words."""

from __future__ import annotations

from typing import Optional

from minishell.environment import Environment


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def is_key_char(char: str) -> bool:
    """Tell whether ``char`` may appear in a variable name."""
    return len(char) == 1 and ((char.isascii() and char.isalnum()) or char == "_")


def extract_key(value: str, start: int) -> str:
    """Return the run of name characters in ``value`` beginning at ``start``."""
    end = start
    while end < len(value) and is_key_char(value[end]):
        end += 1
    return value[start:end]


def lookup(value: str, index: int, env: Optional[Environment]) -> Optional[str]:
    """Return the value of the variable named after the ``$`` at ``index``.

    Returns None when the name does not start with a letter or underscore,
    or when the variable is not set.
    """
    start = index + 1
    first = value[start : start + 1]
    if not first or not (_is_alpha(first) or first == "_"):
        return None
    if env is None:
        return None
    return env.get(extract_key(value, start))


def expand(value: str, env: Optional[Environment]) -> str:
    """Replace every ``$NAME`` in ``value`` with its value.

    A value that starts with a single quote is returned unchanged. Unset
    variables, and ``$`` followed by a digit-led name, expand to nothing; a
    ``$`` not followed by a name character is kept as is.
    """
    if value.startswith("'"):
        return value
    pieces: list[str] = []
    pos = 0
    length = len(value)
    while pos < length:
        if value[pos] == "$" and pos + 1 < length and is_key_char(value[pos + 1]):
            replacement = lookup(value, pos, env)
            pos += 1
            while pos < length and is_key_char(value[pos]):
                pos += 1
            if replacement is not None:
                pieces.append(replacement)
        else:
            pieces.append(value[pos])
            pos += 1
    return "".join(pieces)