"""Integer and pointer conversions: %d %i %D %u %o %O %x %X %U %p."""

from __future__ import annotations

import re

from .numconv import decimal_length, to_signed, to_unsigned, ultoa_base
from .padding import (
    loop_space_no_ret,
    loop_zero,
    put_space_or_zero,
    put_space_or_zero_o,
    put_space_or_zero_u,
    put_space_or_zero_x,
    space_number_inf,
    space_zero,
    while_space,
    while_space_number,
    while_space_number_zero,
    write_space_char,
    write_space_hex,
    write_space_int,
)
from .state import Arguments, Cursor, FormatState

INT_BITS = 32
LONG_BITS = 64
LONG_MIN = -(1 << 63)

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return to_signed(int(match.group(1)), INT_BITS) if match else 0


def _isdigit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _isalpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _copy(cursor: Cursor) -> Cursor:
    return Cursor(cursor.text, cursor.pos)


def _back_to_percent(cursor: Cursor, state: FormatState | None = None) -> None:
    """Move ``cursor`` back to the ``%`` that opened the conversion."""
    while cursor.char() != "%":
        if cursor.pos <= 0:
            raise ValueError("no conversion start before cursor")
        cursor.pos -= 1
        if state is not None:
            state.i += 1


def _magnitude(d: int) -> str:
    """Decimal digits of ``-d`` as a 32-bit int (the minimum keeps its sign)."""
    return str(to_signed(-d, INT_BITS))


def _hex32(value: int) -> str:
    return ultoa_base(to_unsigned(value, INT_BITS), 16)


def _ltoa_base(value: int, base: int) -> str:
    digits = ultoa_base(abs(value), base)
    if value < 0 and base == 10:
        return "-" + digits
    return digits


def _pointer(raw: object) -> int:
    if raw is None:
        return 0
    return to_unsigned(int(raw), LONG_BITS)


def _pad_before_precision(state: FormatState, d: int) -> int:
    z = 0
    if d < 0 and state.point == 1:
        state.space_number -= 1
    if state.space_number > state.precision_zero:
        z = 1
    if state.space_number > 0:
        state.neg_sign = 1
    if d < 0 and state.plus == 1:
        state.precision_zero -= 1
    if state.space_number > 0 and state.precision_zero > 0 and state.negatif == 0:
        state.space_number -= state.precision_zero
        if state.plus == 1:
            state.space_number -= 1
        while_space_number(state)
    return z


def _with_precision(state: FormatState, dd: int, d: int) -> bool:
    if state.precision_zero <= 0 and state.precision_space <= 0:
        return False
    put_space_or_zero(state, d)
    if dd == 1 and state.point == 1:
        state.emit(" ", counted=False)
    elif d < 0:
        state.emit(_magnitude(d), counted=False)
    else:
        state.emit(str(d), counted=False)
    if state.negatif == 1:
        state.space_number -= decimal_length(d) - state.precision_zero
        while_space_number(state)
    state.ret += decimal_length(d)
    return True


def convert_d(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Write a signed int for ``%d`` or ``%i``."""
    d = to_signed(int(args.next()), INT_BITS)
    dd = state.d
    state.d = d
    state.neg_sign = 0
    z = _pad_before_precision(state, d)
    if state.plus == 1 and state.precision_zero > 0 and d > 0:
        state.emit("+")
        state.decr_space_number()
        state.decr_precision_zero(z)
    if _with_precision(state, dd, d):
        return _copy(cursor)
    if space_zero(state, cursor, d):
        return _copy(cursor)

    f = _copy(cursor)
    if state.plus == 0 and state.point != 1:
        write_space_int(state, d)
    if state.point == 1:
        f = precision(state, f, d)
    if d >= 0 and state.plus == 0:
        while_space(state)
    if state.plus == 1 and d >= 0:
        state.emit("+")
    _back_to_percent(f, state)

    if d < 0:
        f.pos += 1
    if d < 0 and f.char() == "0":
        if state.zero == 1 and state.neg_sign == 0:
            state.emit("-", counted=False)
        state.emit(_magnitude(d), counted=False)
        state.zero = 1
    elif state.point == 0:
        state.emit(str(d), counted=False)
    elif state.point == 1 and d > 0:
        state.emit(str(d))

    f.pos += state.i - 1
    state.i = 0
    write_space_int(state, d)
    if state.point == 0:
        state.ret += decimal_length(d)
    return f


def _unsigned_decimal(state: FormatState, args: Arguments) -> None:
    u = to_unsigned(int(args.next()), INT_BITS)
    length = decimal_length(u)
    if state.space_number > length:
        state.space_number -= length
    if state.zero == 1:
        while_space_number_zero(state)
    if state.precision_zero > 0 or state.precision_space > 0:
        put_space_or_zero_u(state, u)
    state.emit(str(u))
    if state.point == 0:
        while_space_number(state)
    else:
        state.space_number -= 1


def convert_d_up(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Write a long for ``%D`` or an unsigned int for ``%u``."""
    spec = cursor.char()
    if spec == "D":
        d = to_signed(int(args.next()), LONG_BITS)
        state.emit(str(d))
    elif spec == "u":
        _unsigned_decimal(state, args)
    return _copy(cursor)


def precision(state: FormatState, cursor: Cursor, d: int) -> Cursor:
    """Write the zeros that a precision asks for in front of ``d``."""
    if cursor.char() == "d":
        return _copy(cursor)
    result = Cursor(cursor.text, cursor.pos + 1)
    state.precision_zero -= decimal_length(to_signed(d, INT_BITS))
    if state.precision_zero > 0:
        state.emit("0" * state.precision_zero)
        state.precision_zero = -1
    return result


def take_precision(state: FormatState, cursor: Cursor) -> Cursor:
    """Read a ``width.precision`` pair starting at ``cursor``."""
    f = _copy(cursor)
    if f.char() == "-":
        f.pos += 1
    if _isdigit(f.char()):
        state.precision_space = _atoi(f.text[f.pos:])
    if f.char(1) == "%":
        f.pos += 1
        space_number_inf(state)
        return f
    while f.char() != ".":
        if _isalpha(f.char()) or f.pos >= len(f.text):
            return f
        f.pos += 1
    state.point = 1
    f.pos += 1
    if _isalpha(f.char()):
        return f
    state.precision_zero = _atoi(f.text[f.pos:])
    f.pos += 1
    return f


def convert_o(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Write an unsigned int in octal for ``%o``."""
    o = to_unsigned(int(args.next()), INT_BITS)
    signed_len = decimal_length(to_signed(o, INT_BITS))
    if state.precision_zero > signed_len:
        state.space_number -= state.precision_zero - signed_len
    if state.sharp == 1:
        state.space_number -= 1
    if state.precision_zero > 0 or state.precision_space > 0:
        put_space_or_zero_o(state, o)
    if state.space_number > 0 and state.point == 0:
        write_space_int(state, o)
    if state.sharp == 1 and o != 0 and state.zero == 0:
        state.emit("0")
    digits = ultoa_base(o, 8)
    if state.d == 1 and state.point == 1:
        state.emit(" ", counted=False)
    else:
        state.emit(digits, counted=False)
    if state.space_number > 0:
        state.space_number -= signed_len
        while_space_number(state)
    state.ret += len(digits)
    return Cursor(cursor.text, cursor.pos + 1)


def convert_o_up(state: FormatState, args: Arguments) -> None:
    """Write a long in octal for ``%O``."""
    o = to_signed(int(args.next()), LONG_BITS)
    if state.precision_zero > 0 or state.precision_space > 0:
        put_space_or_zero_o(state, o)
    if state.sharp == 1 and o != 0:
        state.emit("0")
    if o == LONG_MIN:
        state.emit("1000000000000000000000")
    else:
        state.emit(_ltoa_base(o, 8))


def _hex_prefix(state: FormatState, spec: str) -> None:
    state.emit("0", counted=False)
    if spec in ("x", "X"):
        state.emit(spec, counted=False)
    state.ret += 2


def _trailing_hex_space(state: FormatState, x: int) -> None:
    state.space_number -= len(_hex32(x))
    while_space_number(state)


def convert_x(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Write an int in hexadecimal for ``%x`` or ``%X``."""
    spec = cursor.char()
    if state.sharp == 1 and state.zero == 1 and state.negatif == 1:
        _hex_prefix(state, spec)
        state.space_number -= 2
    x = to_signed(int(args.next()), INT_BITS)
    if (
        state.precision_zero <= 0
        and state.precision_space <= 0
        and state.sharp == 1
        and state.point == 1
    ):
        return _copy(cursor)

    if state.precision_zero <= 0 or state.precision_space <= 0:
        write_space_hex(state, x)
    if state.precision_zero > 0 or state.precision_space > 0:
        put_space_or_zero_x(state, x)
    if state.sharp == 1 and x != 0 and state.zero == 0:
        _hex_prefix(state, spec)
    if state.d == 1 and state.point == 1:
        state.emit(" ", counted=False)
    elif spec == "x":
        state.emit(_hex32(x), counted=False)
    elif spec == "X":
        state.emit(_hex32(x).upper(), counted=False)

    if state.precision_zero > 0 or state.precision_space > 0:
        write_space_hex(state, x)
    if state.negatif_x == 1:
        _trailing_hex_space(state, x)
    if state.negatif == 1:
        _trailing_hex_space(state, x)
    state.ret += len(_hex32(x))
    return _copy(cursor)


def convert_u_up(state: FormatState, args: Arguments) -> None:
    """Write an unsigned long in decimal for ``%U``."""
    u = to_unsigned(int(args.next()), LONG_BITS)
    state.emit(str(u))


def _pointer_flags(state: FormatState, cursor: Cursor) -> Cursor:
    f = _copy(cursor)
    if state.precision_zero <= 0 or state.precision_space <= 0:
        if f.char(-1) == "0":
            f.pos -= 1
            state.emit("0x")
            state.ok = 2
            return f
    _back_to_percent(f)
    f.pos += 1
    if f.char() == "0":
        state.emit("0x", counted=False)
        state.ok = 1
    return f


def convert_p(state: FormatState, args: Arguments, cursor: Cursor) -> None:
    """Write a pointer as ``0x`` followed by its hexadecimal address."""
    address = _pointer(args.next())
    f = _pointer_flags(state, cursor)
    if state.ok == 2:
        return
    f = take_precision(state, f)
    flag = f.char()
    if flag != "0" and flag != "-":
        write_space_char(state, address)
    if flag != "0" and state.ok == 0:
        state.emit("0x", counted=False)
    hexa = ultoa_base(address, 16)
    if state.precision_zero > 0:
        state.precision_zero -= len(hexa)
        loop_zero(state)
    if flag == "-":
        loop_space_no_ret(state)
    state.emit(hexa, counted=False)
    write_space_char(state, address)
    state.ret += len(hexa) + 2