"""Formatting state shared by the conversion routines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass
class FormatState:
    """Flags, widths and output gathered while one format string is rendered."""

    ret: int = 0
    ret_wchar: int = 0
    space_number: int = 0
    valid: int = 0
    negatif: int = 0
    neg_sign: int = 0
    negatif_x: int = 0
    zero: int = 0
    d: int = 0
    ok: int = 0
    sharp: int = 0
    plus: int = 0
    space: int = 0
    point: int = 0
    precision_zero: int = 0
    precision_space: int = 0
    i: int = 0
    _out: bytearray = field(default_factory=bytearray, init=False, repr=False, compare=False)

    def emit(self, data: str | bytes | int, counted: bool = True) -> None:
        """Append ``data`` to the output; count its bytes in ``ret`` if ``counted``."""
        if isinstance(data, int):
            raw = bytes([data & 0xFF])
        elif isinstance(data, str):
            raw = data.encode("utf-8")
        else:
            raw = bytes(data)
        self._out += raw
        if counted:
            self.ret += len(raw)

    def output(self) -> bytes:
        """Everything emitted so far."""
        return bytes(self._out)

    def struct_is_zero(self, ch: str) -> None:
        if ch == "0":
            self.zero = 1

    def decr_space_number(self) -> None:
        if self.negatif == 1:
            self.space_number -= 1

    def decr_precision_zero(self, z: int) -> None:
        if z == 0:
            self.precision_zero -= 1


class Arguments:
    """The values that conversions consume, in order."""

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = list(values)
        self._index = 0

    def next(self) -> Any:
        """Return the next value; IndexError if none are left."""
        if self._index >= len(self._values):
            raise IndexError("not enough arguments for format string")
        value = self._values[self._index]
        self._index += 1
        return value


class Cursor:
    """A position in a format string; reads outside it give a NUL character."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def char(self, offset: int = 0) -> str:
        index = self.pos + offset
        if 0 <= index < len(self.text):
            return self.text[index]
        return "\0"

    def __repr__(self) -> str:
        return f"Cursor({self.text!r}, {self.pos})"