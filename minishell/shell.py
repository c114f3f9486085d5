"""The interactive read-parse-run loop."""

from __future__ import annotations

import os
import sys
from typing import Iterable, List, Mapping, Optional, Sequence

from minishell.builtins import run_builtins
from minishell.commands import Command, build_commands
from minishell.environment import Environment
from minishell.errors import ShellError, report_error
from minishell.lexer import lex
from minishell.parsing import parse
from minishell.tokenizer import Token


class Shell:
    """A shell session: its environment and the result of the last line."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.env = Environment.from_mapping(os.environ if environ is None else environ)
        self.tokens: List[Token] = []
        self.commands: List[Command] = []
        self.history: List[str] = []
        self.exit_code = 0
        self.out = sys.stdout
        self.err = sys.stderr

    def prompt(self) -> str:
        """Return the prompt: the working directory followed by ``$ ``."""
        return os.getcwd() + "$ "

    def run_line(self, line: str) -> int:
        """Parse and run one line; return the exit code."""
        self.history.append(line)
        self.tokens = []
        self.commands = []
        try:
            if not lex(line):
                return self.exit_code
        except ShellError as exc:
            report_error(exc.code, exc.subject, self.err)
            return self.exit_code
        self.tokens = parse(line, self.env)
        self.commands = build_commands(self.tokens)
        self.exit_code = run_builtins(self.tokens, self.env, self.out)
        return self.exit_code

    def run(self, lines: Iterable[str]) -> int:
        """Run each line in turn; return the last exit code."""
        for line in lines:
            self.run_line(line.rstrip("\n"))
        return self.exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines from the terminal and run them until end of input."""
    shell = Shell()
    if sys.stdin.isatty():
        try:
            import readline  # noqa: F401  enables line editing and history for input()
        except ImportError:
            pass
    while True:
        try:
            prompt = shell.prompt()
        except OSError as exc:
            sys.stderr.write(f"getcwd error: {exc.strerror}\n")
            break
        try:
            line = input(prompt)
        except EOFError:
            break
        shell.run_line(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())