import pytest

from minishell.commands import (
    Redirection,
    build_argv,
    build_commands,
    build_redirections,
    format_redirection,
)
from minishell.environment import Environment
from minishell.parsing import parse


@pytest.fixture
def env(tmp_path):
    return Environment([f"PATH={tmp_path}"])


def test_build_argv_stops_at_pipe(env):
    assert build_argv(parse("ls -l | wc", env)) == ["ls", "-l"]


def test_build_argv_skips_files(env):
    assert build_argv(parse("cat < in.txt", env)) == ["cat"]


def test_build_argv_builtin_is_not_collected(env):
    assert build_argv(parse("echo hi", env)) == []


def test_build_commands_pipeline(env):
    commands = build_commands(parse("ls -l | wc", env))
    assert [c.argv for c in commands] == [["ls", "-l"], ["wc"]]


def test_build_commands_leading_pipe(env):
    commands = build_commands(parse("| ls", env))
    assert [c.argv for c in commands] == [[], ["ls"]]


def test_build_commands_empty():
    assert build_commands([]) == []


def test_redirections_input_and_output(env):
    redirections = build_redirections(parse("cat < in.txt > out.txt", env))
    assert len(redirections) == 2
    first, second = redirections
    assert (first.value, first.file, first.in_redir) == ("<", "in.txt", True)
    assert (second.value, second.file, second.out_redir) == (">", "out.txt", True)
    assert not first.out_redir and not second.in_redir


def test_redirection_append(env):
    (redirection,) = build_redirections(parse("ls >> log", env))
    assert redirection.append is True
    assert redirection.file == "log"


def test_redirection_heredoc(env):
    (redirection,) = build_redirections(parse("cat << EOF", env))
    assert redirection.heredoc is True
    assert redirection.delimiter == "EOF"
    assert redirection.file is None
    assert redirection.fd == -1


def test_redirections_belong_to_their_part(env):
    commands = build_commands(parse("cat < a | wc > b", env))
    assert [r.file for r in commands[0].redirections] == ["a"]
    assert [r.file for r in commands[1].redirections] == ["b"]


def test_format_redirection():
    text = format_redirection(Redirection(value="<<", heredoc=True, delimiter="EOF"))
    assert text.startswith("\n\nContent of redir: \n")
    assert "File: (null)\n" in text
    assert "Value: <<\n" in text
    assert "Append: 0\nHeredoc: 1\n" in text
    assert text.endswith("Delim: EOF\n\n")