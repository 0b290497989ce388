"""Command that renders one format string and reports the count it returns."""

from __future__ import annotations

import argparse
import sys

from .core import render

DEMO_FORMAT = "%.4S"
DEMO_VALUES = ("42",)


def _label(fmt: str, values: list[str] | tuple[str, ...]) -> str:
    quoted = ", ".join(f'"{item}"' for item in (fmt, *values))
    return f"ft_printf({quoted})|"


def _write_bytes(data: bytes) -> None:
    stream = sys.stdout
    binary = getattr(stream, "buffer", None)
    if binary is None:
        stream.write(data.decode("utf-8", errors="replace"))
        return
    stream.flush()
    binary.write(data)
    binary.flush()


def main(argv: list[str] | None = None) -> int:
    """Render a format with string values (a built-in example when none is given)."""
    parser = argparse.ArgumentParser(
        prog="ftprintf",
        description="Render a format string and show the count it reports.",
    )
    parser.add_argument("format", nargs="?", default=None, help="format string")
    parser.add_argument("values", nargs="*", help="values, passed as strings")
    namespace = parser.parse_args(argv)
    if namespace.format is None:
        fmt, values = DEMO_FORMAT, list(DEMO_VALUES)
    else:
        fmt, values = namespace.format, namespace.values
    try:
        data, count = render(fmt, *values)
    except (IndexError, TypeError, ValueError) as exc:
        print(f"ftprintf: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(_label(fmt, values))
    _write_bytes(data)
    sys.stdout.write(f"| ret = {count}\n")
    sys.stdout.flush()
    return 0