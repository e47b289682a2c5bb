import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tcutils.printf import FormatError, fprintf, printf, sprintf


def test_worked_example():
    assert sprintf("The answer is %d", 42) == "The answer is 42"


def test_plain_text_and_percent_escape():
    assert sprintf("100%% sure") == "100% sure"
    assert sprintf("no specs") == "no specs"


@pytest.mark.parametrize(
    "fmt,value",
    [
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", -42),
        ("%+d", 7),
        ("% d", 7),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%.3d", 5),
        ("%8.3f", 3.14159),
        ("%e", 12345.678),
        ("%g", 0.0001),
        ("%-10s|", "abc"),
        ("%.2s", "abcdef"),
        ("%c", 65),
    ],
)
def test_matches_c_conventions(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_positional_arguments():
    assert sprintf("%2$s %1$s", "world", "hello") == "hello world"


def test_star_width_and_negative_star_left_aligns():
    assert sprintf("%*d", 5, 42) == "%5d" % 42
    assert sprintf("%*d|", -5, 42) == "%-5d|" % 42


def test_star_precision():
    assert sprintf("%.*f", 2, 1.23456) == "%.2f" % 1.23456


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == str(2**32 - 1)
    assert sprintf("%hhu", 257) == "1"


def test_alt_flag_dropped_for_zero():
    assert sprintf("%#x", 0) == "0"


def test_bool_with_s_and_d():
    assert sprintf("%s %d", True, True) == "true 1"


def test_null_strings():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%p", None) == "(nil)"


def test_zero_flag_ignored_for_strings():
    assert sprintf("%05s", "ab") == "%5s" % "ab"


@pytest.mark.parametrize(
    "fmt,args",
    [
        ("%", (1,)),
        ("%d", ()),
        ("%0$d", (1,)),
        ("%y", (1,)),
        ("%*d", ("a", 1)),
        ("%.*d", (1.5, 1)),
        ("%d", ("text",)),
        ("%99999999999d", (1,)),
        ("%1$d %d", (1, 2)),
    ],
)
def test_errors(fmt, args):
    with pytest.raises(FormatError):
        sprintf(fmt, *args)


def test_fprintf_writes_and_counts():
    buf = io.StringIO()
    count = fprintf(buf, "Don't %s!", "panic")
    assert buf.getvalue() == "Don't panic!"
    assert count == len("Don't panic!")


def test_printf_to_stdout(capsys):
    count = printf("Elapsed time: %.2f seconds", 1.23)
    assert capsys.readouterr().out == "Elapsed time: 1.23 seconds"
    assert count == len("Elapsed time: 1.23 seconds")


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1), st.integers(0, 20))
def test_decimal_agrees_with_c(value, width):
    fmt = f"%{width}d"
    assert sprintf(fmt, value) == fmt % value


@given(st.text(alphabet=st.characters(blacklist_characters="%"), max_size=30))
def test_text_without_specs_is_unchanged(text):
    assert sprintf(text) == text