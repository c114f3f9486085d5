"""Splitting a line into tokens and classifying them."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

from minishell.environment import Environment
from minishell.expander import is_key_char, lookup
from minishell.paths import construct_path

BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})


class TokenType(enum.Enum):
    """Coarse kind of a token, set by the first pass."""

    WORD = enum.auto()
    SEPARATOR = enum.auto()
    PIPE = enum.auto()
    REDIR = enum.auto()


class TokenSubtype(enum.Enum):
    """Role of a token, set by the second pass."""

    CMD = enum.auto()
    ARG = enum.auto()
    FILES = enum.auto()
    DIR = enum.auto()
    DELIM = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    REDIR_INPUT = enum.auto()
    REDIR_OUTPUT = enum.auto()
    IS_PIPE = enum.auto()
    IS_BUILTIN = enum.auto()
    IS_SEPARATOR = enum.auto()
    UNKNOWN = enum.auto()


@dataclass
class Token:
    """One piece of a command line."""

    type: TokenType
    value: str
    subtype: TokenSubtype = TokenSubtype.UNKNOWN


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _quoted_length(text: str, pos: int, quote: str) -> int:
    end = text.find(quote, pos + 1)
    return len(text) - pos if end == -1 else end - pos + 1


def _word_length(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end] not in "<>| ":
        end += 1
    return end - pos


def skip_unset_variable(text: str, pos: int, env: Optional[Environment]) -> int:
    """Skip the ``$NAME`` at ``pos`` when the variable is not set.

    A set variable leaves ``pos`` unchanged. Otherwise the ``$``, the name
    and one following space are skipped, and the new position is returned.
    """
    if lookup(text, pos, env) is not None:
        return pos
    length = len(text)
    pos += 1
    if pos < length and (_is_alpha(text[pos]) or text[pos] == "_"):
        pos += 1
    while pos < length and is_key_char(text[pos]):
        pos += 1
    if pos < length and text[pos] == " ":
        pos += 1
    return pos


def first_tokenization(text: str, env: Optional[Environment]) -> List[Token]:
    """Split ``text`` into words, separators, pipes and redirections.

    Runs of spaces become a single separator. Quoted parts are kept with
    their quotes. When the line ends right after a skipped unset variable
    no tokens are produced at all.
    """
    tokens: List[Token] = []
    length = len(text)
    pos = 0
    while pos < length:
        if text[pos] == "$":
            pos = skip_unset_variable(text, pos, env)
            if pos >= length:
                return []
        ch = text[pos]
        if ch == " ":
            while pos + 1 < length and text[pos + 1] == " ":
                pos += 1
            tokens.append(Token(TokenType.SEPARATOR, " "))
            pos += 1
            continue
        if ch in "\"'":
            kind, size = TokenType.WORD, _quoted_length(text, pos, ch)
        elif ch in "<>":
            kind, size = TokenType.REDIR, 2 if text[pos + 1 : pos + 2] == ch else 1
        elif ch == "|":
            kind, size = TokenType.PIPE, 1
        else:
            kind, size = TokenType.WORD, _word_length(text, pos)
        tokens.append(Token(kind, text[pos : pos + size]))
        pos += size
    return tokens


def is_builtin(word: str) -> bool:
    """Tell whether ``word`` names a builtin."""
    return word in BUILTINS


def command_status(paths: Optional[Sequence[str]], command: str) -> int:
    """Probe the PATH directories for ``command``.

    Returns 1 when no search is made (no PATH, or a command holding a
    slash), 0 as soon as a searched directory lacks the command, and 127
    when every directory holds it. A word whose status is 0 is taken as
    the command of its pipeline part.
    """
    if paths is None or "/" in command:
        return 1
    for directory in paths:
        if not os.path.exists(construct_path(directory, command)):
            return 0
    return 127


def is_file(path: str) -> Optional[bool]:
    """Tell whether ``path`` is a regular file; None when it does not exist."""
    if not os.path.lexists(path) or not os.path.exists(path):
        return None
    return os.path.isfile(path)


def is_dir(path: str) -> Optional[bool]:
    """Tell whether ``path`` is a directory; None when it does not exist."""
    if not os.path.exists(path):
        return None
    return os.path.isdir(path)


_REDIR_SUBTYPES = {
    ">>": TokenSubtype.APPEND,
    "<<": TokenSubtype.HEREDOC,
    "<": TokenSubtype.REDIR_INPUT,
    ">": TokenSubtype.REDIR_OUTPUT,
}


def _word_subtype(
    prev: Optional[Token], before: Optional[Token], word: str,
    paths: Optional[Sequence[str]], command_found: bool,
) -> TokenSubtype:
    after_separator = prev is not None and prev.subtype is TokenSubtype.IS_SEPARATOR
    if prev is not None and prev.subtype is TokenSubtype.HEREDOC:
        return TokenSubtype.DELIM
    if after_separator and before is not None and before.subtype is TokenSubtype.HEREDOC:
        return TokenSubtype.DELIM
    if prev is not None and prev.type is TokenType.REDIR:
        return TokenSubtype.FILES
    if after_separator and before is not None and before.type is TokenType.REDIR:
        return TokenSubtype.FILES
    if not command_found and is_builtin(word):
        return TokenSubtype.IS_BUILTIN
    if not command_found and command_status(paths, word) == 0:
        return TokenSubtype.CMD
    return TokenSubtype.ARG


def classify_tokens(tokens: List[Token], paths: Optional[Sequence[str]]) -> None:
    """Set the subtype of every token in place."""
    command_found = False
    for index, token in enumerate(tokens):
        if token.type is TokenType.PIPE:
            token.subtype = TokenSubtype.IS_PIPE
            command_found = False
        elif token.type is TokenType.REDIR:
            if token.value in _REDIR_SUBTYPES:
                token.subtype = _REDIR_SUBTYPES[token.value]
            elif token.value[:1] in _REDIR_SUBTYPES:
                token.subtype = _REDIR_SUBTYPES[token.value[:1]]
        elif token.type is TokenType.SEPARATOR:
            token.subtype = TokenSubtype.IS_SEPARATOR
        elif token.type is TokenType.WORD:
            prev = tokens[index - 1] if index >= 1 else None
            before = tokens[index - 2] if index >= 2 else None
            token.subtype = _word_subtype(prev, before, token.value, paths, command_found)
            if token.subtype in (TokenSubtype.IS_BUILTIN, TokenSubtype.CMD):
                command_found = True