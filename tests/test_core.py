import pytest

from ftprintf.core import (
    check_flag,
    check_neg_sign,
    check_space,
    count_width,
    ft_printf,
    if_percent,
    is_precision_ok,
    percent_no_specifier,
    render,
)
from ftprintf.state import Cursor, FormatState


def test_plain_text_is_copied():
    assert render("hello world") == (b"hello world", 11)


def test_non_ascii_text_counts_bytes():
    out, count = render("héllo")
    assert out == "héllo".encode("utf-8")
    assert count == len(out)


def test_lone_percent_writes_nothing():
    assert render("%") == (b"", 0)


def test_double_percent():
    assert render("%%") == (b"%", 1)


def test_string_conversion():
    assert render("%s", "abc") == (b"abc", 3)


def test_null_string():
    assert render("%s", None) == (b"(null)", 6)


def test_int_between_text():
    assert render("a%db", 7) == (b"a7b", 3)


def test_char_conversion():
    assert render("%c", "A") == (b"A", 1)


def test_hex_conversions():
    out, count = render("%x", 255)
    assert int(out, 16) == 255
    assert out == out.lower()
    assert count == len(out)
    upper, _ = render("%X", 255)
    assert upper == out.upper()


def test_unsigned_wraps_negative():
    out, count = render("%u", -1)
    assert int(out) == 2**32 - 1
    assert count == len(out)


def test_long_conversion():
    assert render("%ld", -5) == (b"-5", 2)


def test_padded_percent():
    out, count = render("%5%")
    assert out.strip() == b"%"
    assert out.endswith(b"%")
    assert len(out) == count == 5


def test_null_pointer_precision():
    assert render("%.p, %.0p") == (b"0x, 0x", 6)


def test_bare_precision_writes_following_chars():
    assert render("%.iab") == (b"ab", 2)


def test_shortcut_word():
    assert render("%4.1S", "Jambon") == (b"   J", 4)


def test_wide_string_with_precision():
    assert render("%.4S", "42") == (b"42", 2)


def test_unknown_specifier():
    assert render("%k") == (b"k", 1)


def test_missing_argument():
    with pytest.raises(IndexError):
        render("%d")


def test_format_must_be_text():
    with pytest.raises(TypeError):
        render(b"%d", 1)


def test_ft_printf_writes_stdout(capsys):
    count = ft_printf("x%sy", "ab")
    assert count == 4
    assert capsys.readouterr().out == "xaby"


def test_check_space_counts():
    state = FormatState()
    result = check_space(state, Cursor("   d"))
    assert result.char() == "d"
    assert state.space == 3


def test_count_width_with_zero():
    state = FormatState()
    result = count_width(state, Cursor("05d"))
    assert result.char() == "d"
    assert state.zero == 1
    assert state.space_number == 5


def test_count_width_plain():
    state = FormatState()
    result = count_width(state, Cursor("12s"))
    assert result.char() == "s"
    assert state.zero == 0
    assert state.space_number == 12


def test_check_neg_sign():
    state = FormatState()
    result = check_neg_sign(state, Cursor("-5"))
    assert result.pos == 1
    assert state.negatif == 1 and state.negatif_x == 1


def test_check_flag_sharp():
    state = FormatState()
    assert check_flag(state, Cursor("#x")).pos == 1
    assert state.sharp == 1


def test_check_flag_precision():
    state = FormatState()
    result = check_flag(state, Cursor(".12d"))
    assert result.char() == "d"
    assert state.point == 1
    assert state.precision_zero == 12


def test_check_flag_plus_and_spaces():
    state = FormatState()
    result = check_flag(state, Cursor("+  d"))
    assert result.char() == "d"
    assert state.plus == 1
    assert state.space == 2


def test_check_flag_zero():
    assert check_flag(FormatState(), Cursor("0-")).pos == 1
    assert check_flag(FormatState(), Cursor("0d")).pos == 0


def test_is_precision_ok_for_d():
    state = FormatState()
    assert is_precision_ok(state, Cursor(".d")) is False
    assert state.output() == b""


def test_is_precision_ok_writes_two_chars():
    state = FormatState()
    assert is_precision_ok(state, Cursor(".xQR")) is True
    assert state.output() == b"QR"
    assert state.ret == 2


def test_percent_no_specifier_pads():
    state = FormatState(precision_space=4)
    percent_no_specifier(state, Cursor("z"))
    out = state.output()
    assert out.endswith(b"z")
    assert out[:-1].strip() == b""
    assert len(out) == state.ret == 4
    assert state.precision_space == 0


def test_if_percent_plain():
    state = FormatState()
    result = if_percent(state, Cursor("%"))
    assert result.pos == 0
    assert state.output() == b"%"


def test_if_percent_left_aligned():
    state = FormatState()
    result = if_percent(state, Cursor("-3%"))
    out = state.output()
    assert out.rstrip(b" ") == b"%"
    assert state.ret == len(out) == 3
    assert result.char() == "%"


def test_if_percent_right_aligned():
    state = FormatState()
    result = if_percent(state, Cursor("3%"))
    out = state.output()
    assert out.lstrip(b" ") == b"%"
    assert state.ret == len(out) == 3
    assert result.char() == "%"