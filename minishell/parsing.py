"""Turning a raw command line into classified, expanded tokens."""

from __future__ import annotations

from typing import List, Optional

from minishell.environment import Environment
from minishell.errors import ErrorCode, ShellError
from minishell.expander import expand
from minishell.paths import path_directories
from minishell.tokenizer import (
    Token,
    TokenSubtype,
    TokenType,
    classify_tokens,
    first_tokenization,
)

_TRIMMED = " \t\n"
_EMPTY_QUOTES = ('""', "''")


def strip_quotes(value: str, quote: str) -> str:
    """Remove every ``quote`` character from ``value``, keeping what they enclosed."""
    return value.replace(quote, "")


def blank_empty_quotes(tokens: List[Token]) -> None:
    """Turn tokens that are just an empty quoted string into empty words, in place."""
    for token in tokens:
        if token.value in _EMPTY_QUOTES:
            token.value = ""


def join_words(tokens: List[Token]) -> List[Token]:
    """Merge directly adjacent word tokens into one.

    A word holding a ``$`` is never merged into the word that follows it.
    Returns the new list of tokens.
    """
    result: List[Token] = []
    pending: Optional[Token] = None
    for token in tokens:
        if (
            pending is not None
            and pending.type is TokenType.WORD
            and token.type is TokenType.WORD
            and "$" not in pending.value
        ):
            token.value = pending.value + token.value
        elif pending is not None:
            result.append(pending)
        pending = token
    if pending is not None:
        result.append(pending)
    return result


def expand_tokens(tokens: List[Token], env: Optional[Environment]) -> None:
    """Expand variables in every word token except heredoc delimiters, in place."""
    for token in tokens:
        if token.type is TokenType.WORD and token.subtype is not TokenSubtype.DELIM:
            token.value = expand(token.value, env)


def check_cmd_tokens(tokens: List[Token]) -> bool:
    """Check that every part of a pipeline starts with a command.

    Returns True when it does. Raises ShellError with CMD_NOT_FOUND naming
    the first token found where a command was expected.
    """
    cmd_expected = True
    for token in tokens:
        if cmd_expected:
            if token.subtype is TokenSubtype.CMD:
                cmd_expected = False
            elif token.subtype is not TokenSubtype.IS_SEPARATOR:
                raise ShellError(ErrorCode.CMD_NOT_FOUND, token.value)
        if token.subtype is TokenSubtype.IS_PIPE:
            cmd_expected = True
    return True


def parse(line: str, env: Optional[Environment]) -> List[Token]:
    """Tokenize, classify and expand ``line``; return its tokens."""
    trimmed = line.strip(_TRIMMED)
    tokens = first_tokenization(trimmed, env)
    blank_empty_quotes(tokens)
    tokens = join_words(tokens)
    for token in tokens:
        if token.type is TokenType.WORD:
            token.value = strip_quotes(token.value, '"')
    paths = path_directories(env) if env is not None else None
    classify_tokens(tokens, paths)
    expand_tokens(tokens, env)
    for token in tokens:
        if token.type is TokenType.WORD:
            token.value = strip_quotes(token.value, "'")
    return tokens