import pytest

from ftprintf.state import Arguments, Cursor, FormatState
from ftprintf.strings import (
    convert_c,
    convert_c_up,
    convert_s,
    convert_s_up,
    convert_s_up_precision,
    count_octet_wchar,
    encode_wide_char,
)

SAMPLE = "a\u00e9\u20ac\U0001F600"


def run(func, value, **fields):
    state = FormatState(**fields)
    func(state, Arguments([value]))
    return state


@pytest.mark.parametrize("ch", ["A", "\u00e9", "\u20ac", "\U0001F600", "\U0010FFFF"])
def test_encode_wide_char_matches_utf8(ch):
    assert encode_wide_char(ord(ch)) == ch.encode("utf-8")


def test_encode_wide_char_out_of_range_is_empty():
    assert encode_wide_char(0x110000) == b""


def test_encode_wide_char_rejects_negative():
    with pytest.raises(ValueError):
        encode_wide_char(-1)


@pytest.mark.parametrize(
    "text, expected",
    [(SAMPLE, len(SAMPLE.encode("utf-8"))), (None, 0), ("ab\0cd", 2)],
)
def test_count_octet_wchar(text, expected):
    assert count_octet_wchar(FormatState(), text) == expected


@pytest.mark.parametrize(
    "func, value, fields, output",
    [
        (convert_c_up, 0x20AC, {}, "\u20ac".encode("utf-8")),
        (convert_c_up, 0x110000, {}, b""),
        (convert_s, "hello", {}, b"hello"),
        (convert_s, None, {}, b"(null)"),
        (convert_s, "hi", {"precision_space": 8}, b"      hi"),
        (convert_s, "hello", {"precision_zero": 2, "point": 1}, b"he"),
        (
            convert_s,
            "ab",
            {"negatif": 1, "negatif_x": 1, "space_number": 6},
            b"ab    ",
        ),
        (convert_s_up, SAMPLE, {}, SAMPLE.encode("utf-8")),
        (convert_s_up, None, {}, b"(null)"),
    ],
)
def test_argument_conversions(func, value, fields, output):
    state = run(func, value, **fields)
    assert (state.output(), state.ret) == (output, len(output))


def test_convert_s_up_accepts_code_point_list():
    state = run(convert_s_up, [ord(ch) for ch in SAMPLE])
    assert state.output() == SAMPLE.encode("utf-8")


def test_convert_s_up_width_with_point_consumes_no_argument():
    state = FormatState(precision_space=3, point=1)
    args = Arguments(["x"])
    convert_s_up(state, args)
    assert (state.output(), state.ret) == (b"   ", 3)
    assert args.next() == "x"


def test_convert_s_up_rejects_negative_code_points():
    with pytest.raises(ValueError):
        run(convert_s_up, [97, -1])


@pytest.mark.parametrize(
    "text, fields, output",
    [
        ("%c", {}, b"A"),
        ("%5c", {"space_number": 5}, b"    A"),
        ("%-3c", {"space_number": 3, "negatif": 1}, b"A  "),
    ],
)
def test_convert_c(text, fields, output):
    state = FormatState(**fields)
    cursor = Cursor(text, len(text) - 1)
    result = convert_c(state, Arguments(["A"]), cursor)
    assert (state.output(), state.ret) == (output, len(output))
    assert result.pos == len(text) - 1


def test_convert_c_needs_percent():
    with pytest.raises(ValueError):
        convert_c(FormatState(), Arguments(["x"]), Cursor("abc", 2))


@pytest.mark.parametrize(
    "text, fields, output, cut",
    [("abc", {}, b"abc", 0), ("abcd", {"precision_zero": 2}, b"ab", 1)],
)
def test_convert_s_up_precision(text, fields, output, cut):
    state = FormatState(**fields)
    convert_s_up_precision(state, text)
    assert state.output() == output
    assert state.i == cut


def test_convert_s_up_precision_counts_full_text():
    state = FormatState()
    convert_s_up_precision(state, "abc")
    assert state.ret == 3