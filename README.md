# ftprintf

`ftprintf` is a printf-style formatter with its own rules for flags, field
widths and precisions. In many corner cases those rules differ from C's
`printf` and from Python's `%` operator. The number it reports can also differ
from the number of bytes it writes. Use it when output has to follow these
exact rules. For ordinary formatting, use `str.format` or f-strings.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

`ftprintf.core.render` formats its arguments. It returns a pair: the bytes
that would be written, and the count the formatter reports.

```python
from ftprintf.core import render

data, count = render("%d apples and %s", 42, "pears")
```

`ftprintf.core.ft_printf` writes those bytes to standard output and returns the
count:

```python
from ftprintf.core import ft_printf

count = ft_printf("%5d|%-5x|%c\n", 7, 255, "A")
```

The format must be a `str`. Anything after a NUL character in it is ignored.
Errors are raised as exceptions:

- a format that is not a `str` raises `TypeError`;
- running out of arguments raises `IndexError`.

### Conversions

- `s`: a narrow string, given as `str` (encoded as UTF-8) or `bytes`. `None` is
  printed as `(null)`.
- `S`: a wide string, given as a `str` or as a sequence of code points,
  written as UTF-8.
- `c`: a single byte, given as a one-character `str` or an `int`.
- `C`: a single code point, written as UTF-8.
- `d`, `i`: a 32-bit signed integer.
- `D`: a 64-bit signed integer.
- `u`: a 32-bit unsigned integer.
- `U`: a 64-bit unsigned integer.
- `o`, `O`: octal.
- `x`, `X`: hexadecimal.
- `p`: a pointer, given as an `int` or `None`, written as `0x` and then the
  address in hexadecimal.
- `%`: a literal percent sign.

Integer arguments are cut to the width of their conversion, in the same way C
casts them. The length modifiers `h`, `hh`, `l`, `ll`, `j` and `z` choose that
width. The flags `-`, `+`, `#`, `0` and space are recognised, along with a
field width and a `.` precision. Any other conversion character is written
as-is, inside whatever padding the field asks for.

### Lower-level pieces

- `ftprintf.state` has `FormatState`, which holds the flags and counters plus
  the output collected for one format string. It also has `Arguments`, which
  hands out the values in order, and `Cursor`, a position in the format
  string.
- `ftprintf.padding`, `ftprintf.integers`, `ftprintf.strings` and
  `ftprintf.modifiers` hold the padding routines and the conversions that
  `render` dispatches to.
- `ftprintf.numconv` has integer helpers:
  - `ultoa` and `ultoa_base` render a value as unsigned 64-bit, in any base
    from 2 to 36;
  - `to_unsigned` and `to_signed` reinterpret a value at a given bit width;
  - `decimal_length` gives the length of a value's decimal form;
  - `toupper` upper-cases one ASCII letter.
- `ftprintf.lines` has a buffered line reader that works on binary and text
  streams alike:
  - `LineReader(buffer_size)` reads in chunks of that size. Its
    `next_line(stream)` returns the next line without its newline, or `None`
    at the end of the stream. Data left over from each stream is kept for the
    next call.
  - `read_lines(stream, buffer_size)` yields every line.

## Command

```
ftprintf-demo
ftprintf-demo FORMAT [VALUE ...]
```

The command renders one format. The values are passed as strings. With no
arguments it renders a built-in example, `%.4S` with the value `42`.

It prints a label such as `ft_printf("%.4S", "42")|`, then the rendered
bytes, then `| ret = N` with the reported count. If the values do not fit the
format, it prints an error to standard error and exits with status 1.

## What it does not do

There are no floating-point conversions: `f`, `e`, `g` and `a` are not
supported. The `*` width taken from an argument is not supported either.