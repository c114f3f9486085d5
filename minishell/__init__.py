"""A small interactive shell with quoting, expansion, builtins and redirection parsing."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "commands",
    "environment",
    "errors",
    "expander",
    "lexer",
    "parsing",
    "paths",
    "redirections",
    "shell",
    "tokenizer",
]