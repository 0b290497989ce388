"""Width and precision padding written around converted values."""

from __future__ import annotations

from .numconv import decimal_length, to_signed, to_unsigned, ultoa_base
from .state import Cursor, FormatState

INT_BITS = 32


def _hex_int(value: int) -> str:
    return ultoa_base(to_unsigned(value, INT_BITS), 16)


def _hex_long(value: int) -> str:
    return ultoa_base(value, 16)


def _octal_int(value: int) -> str:
    return ultoa_base(to_unsigned(value, INT_BITS), 8)


def _byte_length(s: str | bytes) -> int:
    return len(s.encode("utf-8")) if isinstance(s, str) else len(s)


def _leading_number(text: str) -> int:
    digits = []
    for ch in text:
        if not ch.isdigit():
            break
        digits.append(ch)
    return int("".join(digits)) if digits else 0


def _drain(state: FormatState, count: int, ch: str, counted: bool = True) -> int:
    """Emit ``count`` copies of ``ch``; return the counter as a post-decrement loop leaves it."""
    if count > 0:
        state.emit(ch * count, counted)
    return min(count, 0) - 1


def _pad_char(state: FormatState) -> str:
    return "0" if state.zero == 1 else " "


def _left_aligned(state: FormatState) -> bool:
    """Clear the left-align flag; True if it was set, in which case nothing is padded."""
    if state.negatif == 1:
        state.negatif = 0
        return True
    return False


def _fill_width(state: FormatState) -> None:
    """Pad the remaining field width with zeros or spaces."""
    if state.space_number > 0:
        if state.zero == 1 and state.d < 0:
            state.emit("-", counted=False)
        state.space_number = _drain(state, state.space_number, _pad_char(state))


def _shrink_by_digits(state: FormatState, decimal: int, digits: int) -> None:
    """Take the digits of a value out of the precision and width counters."""
    if decimal > state.precision_zero:
        state.precision_zero -= digits
        state.precision_space -= digits
        state.zero = 1
    elif decimal < state.precision_zero:
        state.precision_zero -= digits
        state.precision_space -= digits + state.precision_zero
        state.zero = 1


def loop_zero(state: FormatState) -> None:
    state.precision_zero = _drain(state, state.precision_zero, "0")


def loop_space(state: FormatState) -> None:
    state.precision_space = _drain(state, state.precision_space, " ")


def while_nb_zero(state: FormatState, count: int) -> None:
    _drain(state, count, "0")


def while_space_number(state: FormatState) -> None:
    state.space_number = _drain(state, state.space_number, " ")


def while_space(state: FormatState) -> None:
    state.space = _drain(state, state.space, " ")


def loop_space_no_ret(state: FormatState) -> None:
    state.precision_space = _drain(state, state.precision_space, " ", counted=False)


def while_precision_space(state: FormatState) -> None:
    state.precision_space = _drain(state, state.precision_space, "0")


def while_space_number_zero(state: FormatState) -> None:
    state.space_number = _drain(state, state.space_number, "0")


def write_null(state: FormatState) -> None:
    state.emit("(null)")


def space_number_inf(state: FormatState) -> None:
    remaining = state.precision_space - 1
    if remaining > 0:
        state.emit(" " * remaining)
    state.precision_space = min(remaining, 0)


def loop_zero_no_ret(state: FormatState) -> None:
    state.ret += state.space_number
    state.space_number = _drain(state, state.space_number, "0", counted=False)


def write_space_int(state: FormatState, value: int) -> None:
    if _left_aligned(state):
        return
    state.space_number -= decimal_length(to_signed(value, INT_BITS))
    if state.plus == 1:
        state.space_number -= 1
    _fill_width(state)


def write_space_percent_s(state: FormatState, length: int) -> None:
    if _left_aligned(state):
        return
    state.space_number -= length
    _fill_width(state)


def write_space_wchar(state: FormatState) -> None:
    if _left_aligned(state):
        return
    state.ret_wchar = state.space_number - state.ret_wchar
    if state.ret_wchar > 0:
        state.ret_wchar = _drain(state, state.ret_wchar, _pad_char(state))


def write_space_int_other(state: FormatState, spec: str) -> None:
    if _left_aligned(state):
        return
    state.space_number -= 1
    if state.space_number > 0:
        if spec == "%" and state.point == 0:
            ch = " "
        elif state.zero == 1 or spec != "Z":
            ch = "0"
        else:
            ch = " "
        state.space_number = _drain(state, state.space_number, ch)


def write_space_char(state: FormatState, address: int) -> None:
    if _left_aligned(state):
        return
    state.precision_space -= len(_hex_long(address)) + 2
    if state.precision_space > 0:
        state.precision_space = _drain(state, state.precision_space, _pad_char(state))


def write_space_hex(state: FormatState, value: int) -> None:
    if _left_aligned(state):
        return
    state.space_number -= len(_hex_long(value))
    if state.sharp == 1:
        state.space_number -= 2
        if state.zero == 1:
            state.emit("0x")
    _fill_width(state)


def put_space_or_zero(state: FormatState, d: int) -> None:
    d = to_signed(d, INT_BITS)
    length = decimal_length(d)
    if length > state.precision_zero:
        state.precision_space -= length
        state.space = 1
    elif length < state.precision_zero:
        if d < 0:
            state.precision_space -= state.precision_zero + 1
        else:
            state.precision_space -= state.precision_zero
        state.zero = 1
    state.precision_zero -= length - 1 if d < 0 else length
    loop_space(state)
    if d < 0:
        state.emit("-", counted=False)
    loop_zero(state)


def put_space_or_zero_u(state: FormatState, d: int) -> None:
    length = decimal_length(to_unsigned(d, INT_BITS))
    _shrink_by_digits(state, length, length)
    loop_space(state)
    loop_zero(state)


def put_space_or_zero_o(state: FormatState, d: int) -> None:
    _shrink_by_digits(
        state, decimal_length(to_signed(d, INT_BITS)), len(_octal_int(d))
    )
    loop_space(state)
    loop_zero(state)


def put_space_or_zero_x(state: FormatState, x: int) -> None:
    _shrink_by_digits(state, decimal_length(to_signed(x, INT_BITS)), len(_hex_int(x)))
    loop_space(state)
    if state.sharp == 1:
        state.emit("0x")
        state.sharp = 0
    loop_zero(state)


def put_space_or_zero_s(state: FormatState, s: str | bytes) -> None:
    length = _byte_length(s)
    if length > state.precision_space:
        state.precision_zero -= length
        state.precision_space -= length
        state.zero = 1
    loop_space(state)


def space_zero(state: FormatState, cursor: Cursor, d: int) -> bool:
    """Handle a ``% 0N`` field for ``d``; True if the value was written."""
    start = cursor.text.rfind("%", 0, cursor.pos + 1)
    if start < 0:
        raise ValueError("no conversion start before cursor")
    probe = Cursor(cursor.text, start + 1)
    if probe.char() != " ":
        return False
    probe.pos += 1
    if probe.char() != "0":
        return False
    state.emit(" ")
    while probe.char() == "0":
        probe.pos += 1
    if not probe.char().isdigit():
        return False
    d = to_signed(d, INT_BITS)
    width = _leading_number(probe.text[probe.pos:])
    while_nb_zero(state, width - decimal_length(d) - 1)
    state.emit(str(d))
    return True