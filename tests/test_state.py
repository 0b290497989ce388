import pytest

from ftprintf.state import Arguments, Cursor, FormatState


def test_new_state_is_all_zero():
    state = FormatState()
    assert (state.ret, state.space_number, state.precision_zero) == (0, 0, 0)
    assert state.output() == b""


@pytest.mark.parametrize(
    "chunks, counted, output, ret",
    [
        (["ab", b"cd"], True, b"abcd", 4),
        (["xyz"], False, b"xyz", 0),
        ([0xE6], True, bytes([0xE6]), 1),
        (["我"], True, "我".encode("utf-8"), 3),
    ],
)
def test_emit(chunks, counted, output, ret):
    state = FormatState()
    for chunk in chunks:
        state.emit(chunk, counted)
    assert (state.output(), state.ret) == (output, ret)


@pytest.mark.parametrize("ch, zero", [("5", 0), ("0", 1)])
def test_struct_is_zero(ch, zero):
    state = FormatState()
    state.struct_is_zero(ch)
    assert state.zero == zero


@pytest.mark.parametrize("negatif, expected", [(0, 5), (1, 4)])
def test_decr_space_number_only_when_negatif(negatif, expected):
    state = FormatState(space_number=5, negatif=negatif)
    state.decr_space_number()
    assert state.space_number == expected


@pytest.mark.parametrize("z, expected", [(1, 3), (0, 2)])
def test_decr_precision_zero_only_when_z_zero(z, expected):
    state = FormatState(precision_zero=3)
    state.decr_precision_zero(z)
    assert state.precision_zero == expected


def test_arguments_in_order_then_error():
    values = [1, "two", None]
    args = Arguments(values)
    assert [args.next() for _ in values] == values
    with pytest.raises(IndexError):
        args.next()


@pytest.mark.parametrize(
    "offset, expected", [(0, "5"), (-1, "%"), (1, "d"), (2, "\0"), (-2, "\0")]
)
def test_cursor_char_inside_and_outside(offset, expected):
    assert Cursor("%5d", 1).char(offset) == expected


def test_cursor_position_moves():
    cursor = Cursor("abc")
    cursor.pos += 2
    assert cursor.char() == "c"