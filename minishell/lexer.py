"""First checks on a raw input line."""

from __future__ import annotations

from typing import Optional

from minishell.errors import ErrorCode, ShellError

UNCLOSED_QUOTES_SUBJECT = "\" or '"


def is_blank(text: str) -> bool:
    """Tell whether ``text`` holds nothing but spaces."""
    return all(ch == " " for ch in text)


def quotes_balanced(text: str) -> bool:
    """Tell whether every single and double quote in ``text`` is closed.

    Quotes of one kind inside quotes of the other kind are not counted.
    """
    in_single = in_double = False
    singles = doubles = 0
    for ch in text:
        if ch == '"' and not in_single:
            in_double = not in_double
            doubles += 1
        if ch == "'" and not in_double:
            in_single = not in_single
            singles += 1
    return singles % 2 == 0 and doubles % 2 == 0


def lex(text: Optional[str]) -> bool:
    """Check a line before parsing.

    Returns False for a missing or blank line and True otherwise. Raises
    ShellError with UNCLOSED_QUOTES when a quote is left open.
    """
    if text is None or is_blank(text):
        return False
    if not quotes_balanced(text):
        raise ShellError(ErrorCode.UNCLOSED_QUOTES, UNCLOSED_QUOTES_SUBJECT)
    return True