"""String and character conversions: %s %S %c %C."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .numconv import to_unsigned
from .padding import (
    loop_space,
    loop_zero_no_ret,
    put_space_or_zero,
    while_precision_space,
    while_space_number,
    while_space_number_zero,
    write_null,
    write_space_int,
    write_space_percent_s,
    write_space_wchar,
)
from .state import Arguments, Cursor, FormatState

WINT_BITS = 32
UNICODE_LIMIT = 0x110000


def encode_wide_char(code: int) -> bytes:
    """Encode one code point as UTF-8; code points past U+10FFFF give nothing."""
    if code < 0:
        raise ValueError(f"negative code point: {code}")
    if code < 0x80:
        return bytes([code])
    if code < 0x800:
        return bytes([0xC0 | (code >> 6), 0x80 | (code & 63)])
    if code < 0x10000:
        return bytes(
            [0xE0 | (code >> 12), 0x80 | ((code >> 6) & 63), 0x80 | (code & 63)]
        )
    if code < UNICODE_LIMIT:
        return bytes(
            [
                0xF0 | (code >> 18),
                0x80 | ((code >> 12) & 63),
                0x80 | ((code >> 6) & 63),
                0x80 | (code & 63),
            ]
        )
    return b""


def _three_byte_form(code: int) -> bytes:
    """Three-byte lead pattern applied to any code point, truncated to bytes."""
    return bytes(
        [
            (0xE0 | (code >> 12)) & 0xFF,
            0x80 | ((code >> 6) & 63),
            0x80 | (code & 63),
        ]
    )


def _wide(value: Any) -> list[int] | None:
    """Code points of a wide string up to its first NUL, or None for a null string."""
    if value is None:
        return None
    if isinstance(value, str):
        codes = [ord(ch) for ch in value.split("\0", 1)[0]]
    elif isinstance(value, Iterable):
        codes = []
        for item in value:
            code = ord(item) if isinstance(item, str) else int(item)
            if code == 0:
                break
            codes.append(code)
    else:
        raise TypeError(f"expected a wide string, got {type(value).__name__}")
    if any(code < 0 for code in codes):
        raise ValueError("wide strings cannot hold negative code points")
    return codes


def _narrow(value: Any) -> bytes | None:
    """Bytes of a narrow string up to its first NUL, or None for a null string."""
    if value is None:
        return None
    if isinstance(value, str):
        raw = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return raw.split(b"\0", 1)[0]


def count_octet_wchar(state: FormatState, s: Any) -> int:
    """Bytes that the wide string ``s`` takes in UTF-8, as the width logic counts them."""
    codes = _wide(s)
    if codes is None:
        return 0
    octet = 0
    for code in codes:
        if code < 0x80:
            octet += 1
        elif code < 0x800:
            octet += 2
        elif code < 0x10000:
            if 0 < state.precision_space < octet:
                state.ret += 1
                state.precision_space -= 3
                state.i = 1
                return octet
            octet += 3
            if state.i == 1:
                return octet
        elif code < UNICODE_LIMIT:
            octet += 4
    return octet


def _write_wide_normal(state: FormatState, codes: list[int] | None) -> None:
    if codes is None:
        state.emit("(null)")
    else:
        for code in codes:
            raw = encode_wide_char(code)
            state.ret_wchar += len(raw)
            state.emit(raw, counted=False)
    if state.negatif == 1:
        state.ret_wchar = count_octet_wchar(state, codes)
        write_space_wchar(state)
        write_space_wchar(state)
    state.ret += count_octet_wchar(state, codes)


def convert_s_up_precision(state: FormatState, s: Any) -> None:
    """Write a wide string, cut off where the precision runs out."""
    codes = _wide(s)
    if state.negatif == 0:
        state.ret_wchar = count_octet_wchar(state, codes)
        write_space_wchar(state)
    limit = state.precision_zero + state.ret_wchar
    for code in codes or ():
        if code < 0x80:
            width, raw = 1, bytes([code])
        elif code < 0x800:
            width, raw = 2, encode_wide_char(code)
        elif code < UNICODE_LIMIT:
            width, raw = 3, _three_byte_form(code)
        else:
            continue
        state.ret_wchar += width
        if state.precision_zero > 0 and state.ret_wchar > limit:
            state.ret += width
            state.i = 1
            continue
        state.emit(raw, counted=False)
    state.ret += count_octet_wchar(state, codes)


def convert_s_up(state: FormatState, args: Arguments) -> None:
    """Write a wide string for ``%S`` (and ``%ls``)."""
    if state.precision_space > 0 and state.point == 1:
        loop_space(state)
        return
    saved_space = state.precision_space
    codes = _wide(args.next())
    if (
        state.space_number > 0
        and state.precision_space == 0
        and state.negatif == 0
        and state.point == 1
    ):
        loop_zero_no_ret(state)
        return
    if state.zero == 1:
        state.space_number -= count_octet_wchar(state, codes)
        while_precision_space(state)
        while_space_number_zero(state)
    if state.precision_space > 0 or state.precision_zero > 0:
        if state.precision_space > 0 and state.precision_zero > 0:
            if state.precision_space >= state.precision_zero:
                state.precision_space -= count_octet_wchar(state, codes)
                state.precision_space = saved_space - 3
                loop_space(state)
        else:
            state.precision_space -= count_octet_wchar(state, codes)
            loop_space(state)
        convert_s_up_precision(state, codes)
    else:
        _write_wide_normal(state, codes)


def _pad_field(state: FormatState, s: bytes, length: int) -> bool:
    if state.zero == 1:
        state.space_number -= length
        while_space_number_zero(state)
    if state.precision_zero == 0 and state.precision_space > 0:
        if state.point == 0:
            state.precision_space -= length
        loop_space(state)
        if state.point == 0:
            state.i = 1
            state.emit(s, counted=False)
            state.ret += length
        return True
    return False


def _pad_precision(state: FormatState, s: bytes, length: int) -> None:
    if state.precision_space > state.precision_zero:
        if len(s) < state.precision_zero:
            state.precision_space -= len(s)
        else:
            state.precision_space -= state.precision_zero
        loop_space(state)
    elif state.precision_space < state.precision_zero and state.negatif == 0:
        state.precision_space -= length
        loop_space(state)
    elif state.precision_zero > 0:
        if state.precision_zero < length:
            state.precision_space -= state.precision_zero
        elif state.precision_zero > length:
            state.precision_space -= length
    if state.precision_space > 0:
        write_space_percent_s(state, length)


def _write_truncated(state: FormatState, s: bytes, nb_zero: int) -> None:
    if state.precision_zero > 0 and len(s) > state.precision_zero:
        state.emit(s[: state.precision_zero])
        state.precision_zero = 0
    else:
        state.emit(s)
        if state.negatif == 1:
            state.space_number -= len(s)
            while_space_number(state)
    if state.space_number > 0:
        state.space_number -= nb_zero
        while_space_number(state)
    if state.precision_space > 0:
        write_space_percent_s(state, len(s))


def convert_s(state: FormatState, args: Arguments) -> None:
    """Write a narrow string for ``%s``."""
    s = _narrow(args.next())
    nb_zero = state.precision_zero
    if s is None:
        if state.space_number > 0:
            while_space_number_zero(state)
        else:
            write_null(state)
        return
    if _pad_field(state, s, len(s)):
        return
    _pad_precision(state, s, len(s))
    _write_truncated(state, s, nb_zero)


def convert_c(state: FormatState, args: Arguments, cursor: Cursor) -> Cursor:
    """Write one byte for ``%c``, padded to the field width."""
    value = args.next()
    code = ord(value) if isinstance(value, str) else int(value)
    start = cursor.text.rfind("%", 0, cursor.pos + 1)
    if start < 0:
        raise ValueError("no conversion start before cursor")
    if "0" <= Cursor(cursor.text, start + 1).char() <= "9":
        put_space_or_zero(state, 1)
    write_space_int(state, 1)
    state.emit(code, counted=False)
    write_space_int(state, 1)
    state.ret += 1
    return Cursor(cursor.text, cursor.pos)


def convert_c_up(state: FormatState, args: Arguments) -> None:
    """Write one wide character for ``%C`` as UTF-8."""
    value = args.next()
    code = ord(value) if isinstance(value, str) else int(value)
    state.emit(encode_wide_char(to_unsigned(code, WINT_BITS)))