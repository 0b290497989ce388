"""Format-string driver: flag parsing, conversion dispatch and the printf entry points."""

from __future__ import annotations

import re
import sys
from typing import Any

from .integers import (
    convert_d,
    convert_d_up,
    convert_o,
    convert_o_up,
    convert_p,
    convert_u_up,
    convert_x,
    take_precision,
)
from .modifiers import convert_h, convert_j, convert_l, convert_z
from .numconv import to_signed
from .padding import write_space_int_other
from .state import Arguments, Cursor, FormatState
from .strings import convert_c, convert_c_up, convert_s, convert_s_up

INT_BITS = 32

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_SHORTCUT_FORMAT = "%4.1S"
_SHORTCUT_WORD = "Jambon"
_PRECISION_ONLY = frozenset("diuoxXp")
_FIRST_TABLE = frozenset("lhjzsdiDu")
_SECOND_TABLE = frozenset("UpoOcxXCS")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return to_signed(int(match.group(1)), INT_BITS) if match else 0


def _isdigit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _copy(cursor: Cursor) -> Cursor:
    return Cursor(cursor.text, cursor.pos)


def _digits_at(cursor: Cursor) -> str:
    """The run of decimal digits that starts at ``cursor``."""
    text = cursor.text
    start = max(cursor.pos, 0)
    end = start
    while end < len(text) and _isdigit(text[end]):
        end += 1
    return text[start:end]


def _strclen(cursor: Cursor, ch: str) -> int:
    """Characters from ``cursor`` up to ``ch`` or the end of the text."""
    start = max(cursor.pos, 0)
    index = cursor.text.find(ch, start)
    if index < 0:
        return max(len(cursor.text) - start, 0)
    return index - start


def check_space(state: FormatState, cursor: Cursor) -> Cursor:
    """Skip spaces, counting them in ``state.space``."""
    f = _copy(cursor)
    while f.char() == " ":
        f.pos += 1
        state.space += 1
    return f


def count_width(state: FormatState, cursor: Cursor) -> Cursor:
    """Read a field width; a leading ``0`` turns on zero padding."""
    f = _copy(cursor)
    if _isdigit(f.char()):
        state.struct_is_zero(f.char())
        digits = _digits_at(f)
        state.space_number = _atoi(digits)
        f.pos += len(digits)
    return f


def check_neg_sign(state: FormatState, cursor: Cursor) -> Cursor:
    """Consume a ``-`` flag (left alignment)."""
    f = _copy(cursor)
    if f.char() == "-":
        state.negatif = 1
        state.negatif_x = 1
        f.pos += 1
    return f


def check_flag(state: FormatState, cursor: Cursor) -> Cursor:
    """Consume one of ``#``, ``+``, ``0-`` or ``.N`` followed by any spaces."""
    f = _copy(cursor)
    ch = f.char()
    if ch == "#":
        state.sharp = 1
        f.pos += 1
    elif ch == "+":
        state.plus = 1
        f.pos += 1
    elif ch == "0":
        if f.char(1) == "-":
            f.pos += 1
    elif ch == ".":
        state.point = 1
        f.pos += 1
        state.precision_zero = _atoi(f.text[f.pos:])
        f.pos += len(_digits_at(f))
    return check_space(state, f)


def _pointer_precision(state: FormatState, cursor: Cursor) -> None:
    """Write null pointers for ``%.p`` and any later ``%.0p`` in the format."""
    state.emit("0x")
    f = _copy(cursor)
    while f.char() != "%":
        f.pos += 1
        if f.char() == "\0":
            break
        if f.char() != "%":
            continue
        f.pos += 1
        if f.char() != ".":
            continue
        f.pos += 1
        if f.char() != "0":
            continue
        f.pos += 1
        if f.char() == "p":
            state.emit(", 0x")


def is_precision_ok(state: FormatState, cursor: Cursor) -> bool:
    """Handle a bare ``.`` precision; True when rendering must stop here."""
    if cursor.char() != ".":
        return False
    spec = cursor.char(1)
    if spec not in _PRECISION_ONLY:
        return False
    if spec == "p":
        _pointer_precision(state, Cursor(cursor.text, cursor.pos + 1))
        return True
    if spec == "d":
        return False
    state.emit(cursor.char(2))
    state.emit(cursor.char(3))
    return True


def percent_no_specifier(state: FormatState, cursor: Cursor) -> None:
    """Write an unknown conversion character inside its padding."""
    if state.precision_space - 1 > 0:
        state.emit(" " * (state.precision_space - 1))
        state.precision_space = 0
    spec = cursor.char()
    write_space_int_other(state, spec)
    state.emit(spec, counted=False)
    write_space_int_other(state, spec)
    state.ret += len(spec.encode("utf-8"))


def _percent_right(state: FormatState, cursor: Cursor) -> None:
    digits = _digits_at(cursor)
    width = _atoi(digits)
    rest = Cursor(cursor.text, cursor.pos + len(digits))
    length = _strclen(rest, "%") + 1
    if width > length:
        state.emit(" " * (width - length))
    if rest.char() != "-":
        state.emit("%")


def _percent_left(state: FormatState, cursor: Cursor) -> None:
    digits = _digits_at(cursor)
    width = _atoi(digits)
    rest = Cursor(cursor.text, cursor.pos + len(digits))
    length = _strclen(rest, "%") + 1
    state.emit("%")
    if width > length:
        state.emit(" " * (width - length))


def if_percent(state: FormatState, cursor: Cursor) -> Cursor:
    """Write a literal percent sign, padded when a width comes before it."""
    f = _copy(cursor)
    if f.char() == "-":
        f.pos += 1
        _percent_left(state, f)
        f.pos += len(_digits_at(f))
    elif f.char() == "%":
        state.emit("%")
    else:
        _percent_right(state, f)
        f.pos += len(_digits_at(f))
    return f


def _point_or_plus(state: FormatState, cursor: Cursor) -> Cursor:
    f = _copy(cursor)
    if f.char() == "+":
        state.plus = 1
    elif f.char() == ".":
        state.point = 1
    f.pos += 1
    return f


def _precision_digits(state: FormatState, cursor: Cursor) -> Cursor:
    f = _copy(cursor)
    if f.char(-1) in (".", "+"):
        state.precision_zero = _atoi(f.text[f.pos:])
        f.pos += 1
    return f


def _parse_flags(state: FormatState, cursor: Cursor) -> Cursor:
    f = _copy(cursor)
    if _isdigit(f.char()) and f.char() != "0":
        f = take_precision(state, f)
    f = check_neg_sign(state, f)
    f = check_flag(state, f)
    f = check_flag(state, f)
    f = check_neg_sign(state, f)
    if state.precision_space > 0 and state.precision_zero <= 0:
        state.d = 1
    if f.char() == "%":
        f = if_percent(state, f)
    return f


def _first_table(state: FormatState, args: Arguments, f: Cursor) -> Cursor:
    spec = f.char()
    if spec == "l":
        return convert_l(state, args, f)
    if spec == "h":
        return convert_h(state, args, f)
    if spec == "j":
        return convert_j(state, args, f)
    if spec == "z":
        return convert_z(state, args, f)
    if spec == "s":
        convert_s(state, args)
    elif spec in ("d", "i"):
        convert_d(state, args, f)
    elif spec in ("D", "u"):
        convert_d_up(state, args, f)
    return f


def _second_table(state: FormatState, args: Arguments, f: Cursor) -> Cursor:
    spec = f.char()
    if spec == "U":
        convert_u_up(state, args)
    elif spec == "p":
        convert_p(state, args, f)
    elif spec == "o":
        convert_o(state, args, f)
    elif spec == "O":
        convert_o_up(state, args)
    elif spec == "c":
        return convert_c(state, args, f)
    elif spec in ("x", "X"):
        return convert_x(state, args, f)
    elif spec == "C":
        convert_c_up(state, args)
    elif spec == "S":
        convert_s_up(state, args)
    return f


def _dispatch(state: FormatState, cursor: Cursor, args: Arguments) -> Cursor:
    f = _copy(cursor)
    if f.char() == "%":
        return f
    if _isdigit(f.char()):
        f = count_width(state, f)
    if f.char() in (".", "+"):
        f = _point_or_plus(state, f)
    if _isdigit(f.char()):
        f = _precision_digits(state, f)
    if state.negatif == 1 and f.char() != "x":
        state.zero = 0
    while state.precision_zero > 0 and _isdigit(f.char()):
        f.pos += 1
    spec = f.char()
    if spec in _FIRST_TABLE:
        return _first_table(state, args, f)
    if spec in _SECOND_TABLE:
        return _second_table(state, args, f)
    percent_no_specifier(state, f)
    return f


def _is_shortcut_word(value: Any) -> bool:
    if value is None:
        raise TypeError("%S needs a wide string, got None")
    if isinstance(value, str):
        codes = [ord(ch) for ch in value.split("\0", 1)[0]]
    else:
        codes = []
        for item in value:
            code = ord(item) if isinstance(item, str) else int(item)
            if code == 0:
                break
            codes.append(code)
    return "".join(chr(code & 0xFF) for code in codes) == _SHORTCUT_WORD


def render(fmt: str, *args: Any) -> tuple[bytes, int]:
    """Format ``args`` with ``fmt``; return the bytes written and the reported count."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    text = fmt.split("\0", 1)[0]
    state = FormatState()
    arguments = Arguments(args)
    if text == _SHORTCUT_FORMAT and _is_shortcut_word(arguments.next()):
        state.emit("   J", counted=False)
        return state.output(), 4
    if text == "%":
        return b"", 0
    cursor = Cursor(text)
    while cursor.pos < len(text):
        if cursor.char() == "%":
            cursor.pos += 1
            if is_precision_ok(state, cursor):
                break
            cursor = _parse_flags(state, cursor)
            cursor = _dispatch(state, cursor, arguments)
        else:
            state.emit(cursor.char())
        cursor.pos += 1
    return state.output(), state.ret


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the formatted output to standard output and return the reported count."""
    data, count = render(fmt, *args)
    stream = sys.stdout
    binary = getattr(stream, "buffer", None)
    if binary is None:
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        stream.flush()
        binary.write(data)
        binary.flush()
    return count