import pytest
from hypothesis import given, strategies as st

from dilithium_verify.console import format_message, main


def test_plain_text_unchanged():
    assert format_message("Hello RISC-V 32!\n") == "Hello RISC-V 32!\n"


def test_decimal_and_hex():
    assert format_message("Number %d = 0x%x\n", 1234, 1234) == "Number 1234 = 0x4d2\n"


def test_negative_hex_is_unsigned_32bit():
    assert format_message("%x", -1) == "ffffffff"


def test_string_and_char():
    assert format_message("[%s|%c|%c]", "abc", 65, "z") == "[abc|A|z]"


def test_unknown_specifier_dropped():
    assert format_message("a%qb") == "ab"


def test_double_percent_prints_nothing():
    assert format_message("100%%") == "100"


def test_trailing_percent_dropped():
    assert format_message("end%") == "end"


def test_extra_arguments_ignored():
    assert format_message("%d", 7, 8, 9) == "7"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d and %d", 1)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trip(value):
    assert int(format_message("%d", value)) == value


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_round_trip(value):
    text = format_message("%x", value)
    assert int(text, 16) == value
    assert text == text.lower()


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Hello RISC-V 32!"
    assert lines[1] == format_message("Number %d = 0x%x", 1234, 1234)


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])