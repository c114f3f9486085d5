"""The commands the shell runs itself."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from minishell.environment import Environment, is_valid_assignment
from minishell.errors import ErrorCode, report_error
from minishell.tokenizer import Token, TokenSubtype, TokenType


def is_long_n(flag: str) -> bool:
    """Tell whether ``flag`` is a dash followed only by ``n`` characters."""
    return flag.startswith("-") and all(ch == "n" for ch in flag[1:])


def echo(tokens: Sequence[Token], out: Optional[TextIO] = None) -> int:
    """Print the words after the ``echo`` token at ``tokens[0]``.

    Leading ``-n`` style flags drop the final newline. A token that is
    neither a word nor an inner separator prints ``error`` and gives 1.
    """
    out = sys.stdout if out is None else out
    newline = True
    pos = 1
    while pos < len(tokens):
        if tokens[pos].subtype is TokenSubtype.IS_SEPARATOR:
            pos += 1
        if pos < len(tokens) and is_long_n(tokens[pos].value):
            newline = False
            pos += 1
        else:
            break
    first_word = True
    for index in range(pos, len(tokens)):
        token = tokens[index]
        if index + 1 < len(tokens) and token.subtype is TokenSubtype.IS_SEPARATOR:
            if not first_word:
                out.write(token.value)
            continue
        if token.type is not TokenType.WORD:
            out.write("error")
            return 1
        before = tokens[index - 2] if index >= 2 else None
        spaced = before is not None and before.subtype is TokenSubtype.IS_SEPARATOR
        out.write((" " if spaced else "") + token.value)
        first_word = False
    if newline:
        out.write("\n")
    return 0


def cd(path: str) -> None:
    """Change the working directory; raises OSError when that fails."""
    os.chdir(path)


def pwd(out: Optional[TextIO] = None) -> None:
    """Print the working directory."""
    out = sys.stdout if out is None else out
    out.write(os.getcwd() + "\n")


def env_builtin(env: Environment, out: Optional[TextIO] = None) -> None:
    """Print every variable as ``key=value``."""
    out = sys.stdout if out is None else out
    for line in env.lines():
        out.write(line + "\n")


def export(env: Environment, tokens: Sequence[Token], out: Optional[TextIO] = None) -> None:
    """Set the variables assigned after the ``export`` token at ``tokens[0]``.

    With no arguments the environment is printed. Words that are not valid
    assignments are ignored; any other token ends the list.
    """
    if len(tokens) < 2:
        env_builtin(env, out)
        return
    for token in tokens[1:]:
        if token.subtype is TokenSubtype.IS_SEPARATOR:
            continue
        if token.type is not TokenType.WORD:
            return
        if is_valid_assignment(token.value):
            env.export(token.value)


def unset(env: Environment, tokens: Sequence[Token]) -> None:
    """Remove the variables named after the ``unset`` token at ``tokens[0]``."""
    for token in tokens[1:]:
        if token.subtype is TokenSubtype.IS_SEPARATOR:
            continue
        if token.type is not TokenType.WORD:
            return
        env.unset(token.value)


def _run_cd(tokens: Sequence[Token]) -> int:
    if len(tokens) < 3:
        report_error(ErrorCode.ARGS, None, sys.stderr)
        return 1
    try:
        cd(tokens[2].value)
    except OSError as exc:
        sys.stderr.write(f"cd: {exc.strerror}\n")
        return 1
    return 0


def run_builtins(tokens: Sequence[Token], env: Environment, out: Optional[TextIO] = None) -> int:
    """Run every builtin found in ``tokens``; return the status of the last one."""
    out = sys.stdout if out is None else out
    status = 0
    for index, token in enumerate(tokens):
        if token.subtype is not TokenSubtype.IS_BUILTIN:
            continue
        rest = tokens[index:]
        name = token.value
        if name == "echo":
            status = echo(rest, out)
        elif name == "cd":
            status = _run_cd(rest)
        elif name == "pwd":
            pwd(out)
            status = 0
        elif name == "export":
            export(env, rest, out)
            status = 0
        elif name == "unset":
            unset(env, rest)
            status = 0
        elif name == "env":
            env_builtin(env, out)
            status = 0
    return status