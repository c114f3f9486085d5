import pytest

from minishell.environment import Environment
from minishell.tokenizer import (
    Token,
    TokenSubtype,
    TokenType,
    classify_tokens,
    command_status,
    first_tokenization,
    is_builtin,
    is_dir,
    is_file,
    skip_unset_variable,
)

W, S, P, R = TokenType.WORD, TokenType.SEPARATOR, TokenType.PIPE, TokenType.REDIR


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "USER=alice"])


def values(tokens):
    return [t.value for t in tokens]


def test_pipeline_types_and_values(env):
    tokens = first_tokenization("ls -l | wc", env)
    assert values(tokens) == ["ls", " ", "-l", " ", "|", " ", "wc"]
    assert [t.type for t in tokens] == [W, S, W, S, P, S, W]
    assert all(t.subtype is TokenSubtype.UNKNOWN for t in tokens)


def test_spaces_collapse(env):
    assert values(first_tokenization("a   b", env)) == ["a", " ", "b"]


def test_double_redirections(env):
    tokens = first_tokenization("cat<<EOF>>out", env)
    assert values(tokens) == ["cat", "<<", "EOF", ">>", "out"]
    assert [t.type for t in tokens] == [W, R, W, R, W]


def test_mixed_redirection_chars_split(env):
    assert values(first_tokenization("a<>b", env)) == ["a", "<", ">", "b"]


def test_double_quotes_kept_whole(env):
    assert values(first_tokenization('echo "a b"', env)) == ["echo", " ", '"a b"']


def test_single_quotes_then_word(env):
    assert values(first_tokenization("'x y'z", env)) == ["'x y'", "z"]


def test_unclosed_quote_runs_to_end(env):
    assert values(first_tokenization('"abc', env)) == ['"abc']


def test_set_variable_kept(env):
    assert values(first_tokenization("echo $HOME", env)) == ["echo", " ", "$HOME"]


def test_unset_variable_skipped(env):
    assert values(first_tokenization("echo $NOPE x", env)) == ["echo", " ", "x"]


def test_unset_variable_at_end_yields_nothing(env):
    assert first_tokenization("echo $NOPE", env) == []


def test_skip_unset_variable_leaves_set_variable(env):
    assert skip_unset_variable("$USER x", 0, env) == 0


def test_skip_unset_variable_skips_name_and_space(env):
    text = "$1abc d"
    assert text[skip_unset_variable(text, 0, env):] == "d"


def test_skip_unset_variable_question_mark(env):
    text = "$?"
    assert text[skip_unset_variable(text, 0, env):] == "?"


def test_classify_builtin_and_args(env):
    tokens = first_tokenization("echo hi | pwd", env)
    classify_tokens(tokens, None)
    assert [t.subtype for t in tokens] == [
        TokenSubtype.IS_BUILTIN,
        TokenSubtype.IS_SEPARATOR,
        TokenSubtype.ARG,
        TokenSubtype.IS_SEPARATOR,
        TokenSubtype.IS_PIPE,
        TokenSubtype.IS_SEPARATOR,
        TokenSubtype.IS_BUILTIN,
    ]


def test_classify_command_and_files(env, tmp_path):
    tokens = first_tokenization("cat > out", env)
    classify_tokens(tokens, [str(tmp_path)])
    assert [t.subtype for t in tokens] == [
        TokenSubtype.CMD,
        TokenSubtype.IS_SEPARATOR,
        TokenSubtype.REDIR_OUTPUT,
        TokenSubtype.IS_SEPARATOR,
        TokenSubtype.FILES,
    ]


def test_classify_heredoc_delimiter(env):
    tokens = first_tokenization("cat << EOF", env)
    classify_tokens(tokens, None)
    assert tokens[2].subtype is TokenSubtype.HEREDOC
    assert tokens[4].subtype is TokenSubtype.DELIM


def test_classify_redirection_kinds():
    tokens = [Token(R, v) for v in ("<", ">", "<<", ">>")]
    classify_tokens(tokens, None)
    assert [t.subtype for t in tokens] == [
        TokenSubtype.REDIR_INPUT,
        TokenSubtype.REDIR_OUTPUT,
        TokenSubtype.HEREDOC,
        TokenSubtype.APPEND,
    ]


def test_classify_one_command_per_pipeline_part(env, tmp_path):
    tokens = first_tokenization("foo bar|baz", env)
    classify_tokens(tokens, [str(tmp_path)])
    assert [t.subtype for t in tokens if t.type is W] == [
        TokenSubtype.CMD,
        TokenSubtype.ARG,
        TokenSubtype.CMD,
    ]


@pytest.mark.parametrize("word", ["echo", "cd", "pwd", "export", "unset", "env", "exit"])
def test_is_builtin_true(word):
    assert is_builtin(word) is True


@pytest.mark.parametrize("word", ["ls", "ECHO", "", "echo "])
def test_is_builtin_false(word):
    assert is_builtin(word) is False


def test_command_status_without_paths():
    assert command_status(None, "ls") == 1


def test_command_status_with_slash(tmp_path):
    assert command_status([str(tmp_path)], "/bin/ls") == 1


def test_command_status_missing(tmp_path):
    assert command_status([str(tmp_path)], "prog") == 0


def test_command_status_present_everywhere(tmp_path):
    (tmp_path / "prog").write_text("")
    assert command_status([str(tmp_path)], "prog") == 127


def test_command_status_empty_path_list():
    assert command_status([], "prog") == 127


def test_is_file_and_is_dir(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("data")
    assert is_file(str(target)) is True
    assert is_dir(str(target)) is False
    assert is_dir(str(tmp_path)) is True
    assert is_file(str(tmp_path)) is False


def test_missing_path_is_none(tmp_path):
    missing = str(tmp_path / "missing")
    assert is_file(missing) is None
    assert is_dir(missing) is None