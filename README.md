# minishell

A small interactive shell. Each line you type is checked for balanced
quotes, split into tokens, stripped of quotes and expanded (`$NAME` is
replaced by its value from the shell's own environment). The tokens are
then grouped into commands separated by pipes, each with its list of
redirections (`<`, `>`, `>>`, `<<`), and any builtins on the line are run.

The builtins that run are `echo` (with `-n`, `-nn`, ... to drop the final
newline), `cd`, `pwd`, `export`, `unset` and `env`. `export` with no
arguments prints the environment; arguments that are not `NAME=value`
assignments are ignored.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt shows the current directory followed by `$ `. End the session
with end-of-file (Ctrl-D). A line with an unclosed quote is reported on
standard error as `" or ': unclosed quotes` and not run.

## Using it from Python

```python
from minishell.shell import Shell

shell = Shell({"HOME": "/home/user", "PATH": "/usr/bin:/bin"})
shell.run_line("export GREETING=hello")
shell.run_line("echo $GREETING world")   # prints "hello world"
print(shell.exit_code)
```

`Shell.run(lines)` runs an iterable of lines in turn and returns the last
exit code. After `run_line`, `shell.tokens` holds the parsed tokens and
`shell.commands` the grouped commands of that line.

The stages can also be used on their own:

- `minishell.lexer.lex` checks a line; it returns False for a blank line
  and raises `minishell.errors.ShellError` for unclosed quotes.
- `minishell.parsing.parse(line, env)` turns a line into classified
  `minishell.tokenizer.Token` objects (`type`, `subtype`, `value`).
- `minishell.expander.expand(value, env)` expands `$NAME` references.
- `minishell.commands.build_commands(tokens)` groups tokens into `Command`
  objects (`argv`, `redirections`) holding `Redirection` objects.
- `minishell.environment.Environment` holds the variables, with `get`,
  `export`, `unset`, `lines`, iteration over `(key, value)` pairs and
  `Environment.from_mapping`.
- `minishell.paths.find_path` looks a command up in PATH directories.
- `minishell.redirections` opens the files of `<`, `>` and `>>`
  redirections (`apply_redirections`, `manage_redirections`) and reads
  heredoc bodies into temporary files (`collect_heredocs`, `read_heredoc`).
- `minishell.errors.report_error` writes the shell's error messages.

## What it does not do

- It does not start other programs: words that are not builtins are
  parsed and grouped into commands, but nothing is executed for them, and
  pipes connect nothing.
- The interactive loop does not apply redirections or read heredocs;
  the functions in `minishell.redirections` do that only when called
  directly.
- `exit` is recognised as a builtin name but does nothing; the session
  ends only at end-of-file.

## Tests

```
pip install .[test]
pytest
```