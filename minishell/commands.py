"""Grouping tokens into commands with their redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from minishell.tokenizer import Token, TokenSubtype, TokenType


@dataclass
class Redirection:
    """One ``<``, ``>``, ``>>`` or ``<<`` of a command."""

    value: str
    file: Optional[str] = None
    fd: int = -1
    in_redir: bool = False
    out_redir: bool = False
    append: bool = False
    heredoc: bool = False
    delimiter: Optional[str] = None


@dataclass
class Command:
    """The part of a pipeline between two pipes."""

    argv: List[str] = field(default_factory=list)
    redirections: List[Redirection] = field(default_factory=list)


def build_argv(tokens: Sequence[Token]) -> List[str]:
    """Collect the command word and its arguments up to the first pipe."""
    argv: List[str] = []
    found = False
    for token in tokens:
        if token.type is TokenType.WORD:
            if token.subtype is TokenSubtype.CMD and not found:
                argv.append(token.value)
                found = True
            elif token.subtype is TokenSubtype.ARG and found:
                argv.append(token.value)
        if token.type is TokenType.PIPE:
            break
    return argv


def _nearby(tokens: Sequence[Token], index: int, subtype: TokenSubtype) -> Optional[str]:
    for offset in (1, 2):
        pos = index + offset
        if pos < len(tokens) and tokens[pos].subtype is subtype:
            return tokens[pos].value
    return None


def _make_redirection(tokens: Sequence[Token], index: int) -> Redirection:
    token = tokens[index]
    redirection = Redirection(value=token.value, file=_nearby(tokens, index, TokenSubtype.FILES))
    if token.subtype is TokenSubtype.APPEND:
        redirection.append = True
    elif token.subtype is TokenSubtype.REDIR_INPUT:
        redirection.in_redir = True
    elif token.subtype is TokenSubtype.REDIR_OUTPUT:
        redirection.out_redir = True
    elif token.subtype is TokenSubtype.HEREDOC:
        redirection.heredoc = True
        redirection.delimiter = _nearby(tokens, index, TokenSubtype.DELIM)
    return redirection


def build_redirections(tokens: Sequence[Token]) -> List[Redirection]:
    """Collect the redirections up to the first pipe."""
    redirections: List[Redirection] = []
    for index, token in enumerate(tokens):
        if token.subtype is TokenSubtype.IS_PIPE:
            break
        if token.type is TokenType.REDIR:
            redirections.append(_make_redirection(tokens, index))
    return redirections


def build_commands(tokens: Sequence[Token]) -> List[Command]:
    """Split classified tokens into one command per pipeline part."""
    commands: List[Command] = []
    pos = 0
    while pos < len(tokens):
        part = tokens[pos:]
        commands.append(Command(build_argv(part), build_redirections(part)))
        end = pos
        while end + 1 < len(tokens) and tokens[end].type is not TokenType.PIPE:
            end += 1
        pos = end + 1
    return commands


def _show(text: Optional[str]) -> str:
    return "(null)" if text is None else text


def format_redirection(redirection: Redirection) -> str:
    """Describe a redirection as a block of text."""
    return (
        "\n\nContent of redir: \n"
        f"File: {_show(redirection.file)}\n"
        f"Value: {_show(redirection.value)}\n"
        f"Append: {int(redirection.append)}\n"
        f"Heredoc: {int(redirection.heredoc)}\n"
        f"Delim: {_show(redirection.delimiter)}\n\n"
    )