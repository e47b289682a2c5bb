import pytest
from hypothesis import given
from hypothesis import strategies as st

from tcutils.cmdline import parse_command_line


@pytest.mark.parametrize(
    "cmdline, expected",
    [
        ('prog "a b" c', ["prog", "a b", "c"]),
        ("", []),
        ("   \t ", []),
        ('""', [""]),
        ('"', []),
        ('a"b c', ['a"b', "c"]),
        ('"a b"c', ["a b", "c"]),
        ('"a b', ["a b"]),
        ("  one   two  ", ["one", "two"]),
        ("one\0two", ["one"]),
    ],
)
def test_parse_command_line(cmdline, expected):
    assert parse_command_line(cmdline) == expected


_WORDS = st.lists(
    st.text(alphabet=st.characters(blacklist_characters=' \t\n\v\f\r"\0'), min_size=1),
)


@given(_WORDS)
def test_plain_words_round_trip(words):
    assert parse_command_line(" ".join(words)) == words


@given(st.lists(st.text(alphabet=st.characters(blacklist_characters='"\0'))))
def test_quoted_arguments_round_trip(args):
    cmdline = " ".join(f'"{arg}"' for arg in args)
    assert parse_command_line(cmdline) == args