"""Length-modifier conversions: %h, %hh, %j, %l, %ll and %z."""

from __future__ import annotations

from .integers import convert_p
from .numconv import decimal_length, to_signed, to_unsigned, ultoa_base
from .state import Arguments, Cursor, FormatState
from .strings import convert_c_up, convert_s_up

CHAR_BITS = 8
SHORT_BITS = 16
LONG_BITS = 64


def _take(args: Arguments, bits: int, signed: bool) -> int:
    value = int(args.next())
    return to_signed(value, bits) if signed else to_unsigned(value, bits)


def _hex(value: int, spec: str) -> str:
    digits = ultoa_base(value, 16)
    return digits.upper() if spec == "X" else digits


def _octal(value: int) -> str:
    return ultoa_base(value, 8)


def _signed_long_length(value: int) -> int:
    """Length of ``value`` printed as a signed long in decimal."""
    return decimal_length(to_signed(value, LONG_BITS))


def _signed_octal_length(value: int) -> int:
    """Length of ``value`` printed as a signed long in octal."""
    return len(ultoa_base(abs(to_signed(value, LONG_BITS)), 8))


def _emit_counted_as(state: FormatState, text: str, length: int) -> None:
    """Write ``text`` but add ``length`` to the byte count instead of its size."""
    state.emit(text, counted=False)
    state.ret += length


def _advance(cursor: Cursor) -> Cursor:
    return Cursor(cursor.text, cursor.pos + 1)


def _short_short(state: FormatState, args: Arguments, spec: str) -> None:
    if spec == "u":
        state.emit(str(_take(args, CHAR_BITS, False)))
    elif spec == "o":
        state.emit(_octal(_take(args, CHAR_BITS, False)))
    elif spec in ("x", "X"):
        state.emit(_hex(_take(args, CHAR_BITS, False), spec))
    elif spec == "C":
        convert_c_up(state, args)
    elif spec == "S":
        convert_s_up(state, args)
    else:
        state.emit(str(_take(args, CHAR_BITS, True)))


def _short(state: FormatState, args: Arguments, spec: str) -> None:
    if spec in ("d", "i"):
        state.emit(str(_take(args, SHORT_BITS, True)))
    elif spec in ("u", "D"):
        state.emit(str(_take(args, SHORT_BITS, False)))
    elif spec == "o":
        state.emit(_octal(_take(args, SHORT_BITS, False)))


def _short_wide(state: FormatState, args: Arguments, spec: str) -> None:
    if spec in ("x", "X"):
        state.emit(_hex(_take(args, SHORT_BITS, False), spec))
    elif spec == "O":
        state.emit(_octal(_take(args, SHORT_BITS, False)))
    elif spec == "U":
        state.emit(str(_take(args, LONG_BITS, False)))


def convert_h(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Handle ``%h`` and ``%hh`` conversions; ``cursor`` is on the first ``h``."""
    f = _advance(cursor)
    if f.char() == "h":
        f.pos += 1
        spec = f.char()
        if spec in "diuoxXCS" and spec != "\0":
            _short_short(state, args, spec)
            return f
    spec = f.char()
    if spec in "udDio" and spec != "\0":
        _short(state, args, spec)
    elif spec in "xXOU" and spec != "\0":
        _short_wide(state, args, spec)
    return f


def _double_j(state: FormatState, args: Arguments, cursor: Cursor) -> None:
    g = _advance(cursor)
    if g.char() == "j":
        g.pos += 1
        if g.char() in ("d", "i"):
            state.emit(str(_take(args, LONG_BITS, True)))
            return
    if g.char() == "j":
        g.pos += 1
        if g.char() == "u":
            state.emit(str(_take(args, LONG_BITS, False)))


def convert_j(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Handle ``%j`` conversions; ``cursor`` is on the ``j``."""
    f = _advance(cursor)
    if f.char() == "j":
        f.pos += 1
        if f.char() in ("d", "i"):
            _double_j(state, args, f)
            return f
    spec = f.char()
    if spec in ("d", "i"):
        state.emit(str(_take(args, LONG_BITS, True)))
    elif spec == "D":
        value = _take(args, LONG_BITS, False)
        _emit_counted_as(state, str(value), _signed_long_length(value))
    elif spec == "u":
        state.emit(str(_take(args, LONG_BITS, False)))
    elif spec == "o":
        state.emit(_octal(_take(args, LONG_BITS, False)))
    elif spec == "O":
        value = _take(args, LONG_BITS, False)
        _emit_counted_as(state, _octal(value), _signed_octal_length(value))
    elif spec in ("x", "X"):
        state.emit(_hex(_take(args, LONG_BITS, False), spec))
    elif spec == "U":
        state.emit(str(_take(args, LONG_BITS, False)))
    return f


def convert_ll(state: FormatState, args: Arguments, cursor: Cursor) -> None:
    """Write a long long for ``%lld %lli %llu %llo %llx %llX``; ``cursor`` is on the type."""
    spec = cursor.char()
    if spec in ("d", "i"):
        state.emit(str(_take(args, LONG_BITS, True)))
    elif spec == "u":
        state.emit(str(_take(args, LONG_BITS, False)))
    elif spec == "o":
        state.emit(_octal(_take(args, LONG_BITS, False)))
    elif spec in ("x", "X"):
        if state.sharp == 1:
            state.emit("0x")
        state.emit(_hex(_take(args, LONG_BITS, False), spec))
    else:
        raise ValueError(f"unsupported conversion after 'll': {spec!r}")


def convert_l(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Handle ``%l`` and ``%ll`` conversions; ``cursor`` is on the first ``l``."""
    f = _advance(cursor)
    if f.char() == "l":
        f.pos += 1
        if f.char() in ("d", "i", "u", "o", "x", "X"):
            convert_ll(state, args, f)
            return f
    spec = f.char()
    if spec == "u":
        state.emit(str(_take(args, LONG_BITS, False)))
    elif spec in ("d", "i"):
        state.emit(str(_take(args, LONG_BITS, True)))
    elif spec == "D":
        value = _take(args, LONG_BITS, False)
        _emit_counted_as(state, str(value), _signed_long_length(value))
    elif spec == "o":
        state.emit(_octal(_take(args, LONG_BITS, False)))
    elif spec in ("x", "X"):
        state.emit(_hex(_take(args, LONG_BITS, False), spec))
    elif spec == "O":
        value = _take(args, LONG_BITS, False)
        _emit_counted_as(state, _octal(value), _signed_octal_length(value))
    elif spec == "U":
        state.emit(str(_take(args, LONG_BITS, False)))
    elif spec == "c":
        convert_c_up(state, args)
    elif spec == "s":
        convert_s_up(state, args)
    elif spec == "p":
        convert_p(state, args, f)
    else:
        f.pos -= 1
    return f


def convert_z(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Handle ``%z`` conversions; ``cursor`` is on the ``z``."""
    f = _advance(cursor)
    spec = f.char()
    if spec in ("d", "i"):
        state.emit(str(_take(args, LONG_BITS, True)))
    elif spec in ("u", "D"):
        state.emit(str(_take(args, LONG_BITS, False)))
    elif spec == "o":
        state.emit(_octal(_take(args, LONG_BITS, False)))
    elif spec in ("x", "X"):
        state.emit(_hex(_take(args, LONG_BITS, False), spec))
    elif spec == "O":
        value = _take(args, LONG_BITS, False)
        _emit_counted_as(state, _octal(value), _signed_octal_length(value))
    elif spec == "U":
        state.emit(str(_take(args, LONG_BITS, False)))
    return f