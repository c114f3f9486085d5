import pytest

from minishell.errors import ErrorCode, ShellError, error_message
from minishell.lexer import UNCLOSED_QUOTES_SUBJECT, is_blank, lex, quotes_balanced


@pytest.mark.parametrize(
    "text, expected",
    [("", True), ("   ", True), (" a ", False), ("\t", False)],
)
def test_is_blank(text, expected):
    assert is_blank(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("echo hi", True),
        ("echo 'a b'", True),
        ('echo "a b"', True),
        ('"it\'s"', True),
        ("'say \"hi'", True),
        ('"abc', False),
        ("'abc", False),
        ("'a' \"b", False),
        ("''\"\"", True),
    ],
)
def test_quotes_balanced(text, expected):
    assert quotes_balanced(text) is expected


@pytest.mark.parametrize("text", [None, "", "    "])
def test_lex_blank_lines(text):
    assert lex(text) is False


def test_lex_valid_line():
    assert lex("echo 'hello' | cat") is True


def test_lex_unclosed_quotes_raises():
    with pytest.raises(ShellError) as info:
        lex('echo "oops')
    assert info.value.code is ErrorCode.UNCLOSED_QUOTES
    assert info.value.subject == UNCLOSED_QUOTES_SUBJECT
    assert str(info.value) == error_message(ErrorCode.UNCLOSED_QUOTES, UNCLOSED_QUOTES_SUBJECT)