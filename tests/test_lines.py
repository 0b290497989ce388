import io

import pytest

from ftprintf.lines import LineReader, read_lines


def test_read_lines_bytes():
    assert list(read_lines(io.BytesIO(b"one\ntwo\n"))) == [b"one", b"two"]


def test_read_lines_text_without_final_newline():
    assert list(read_lines(io.StringIO("alpha\nbeta"))) == ["alpha", "beta"]


def test_empty_lines_are_kept():
    assert list(read_lines(io.BytesIO(b"a\n\nb"))) == [b"a", b"", b"b"]


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.BytesIO(b""))) == []


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 100])
def test_buffer_size_does_not_change_result(size):
    text = "first line\nsecond\n\na much longer third line here\nend"
    lines = list(read_lines(io.StringIO(text), size))
    assert "\n".join(lines) == text


def test_next_line_returns_none_at_end():
    reader = LineReader(4)
    stream = io.BytesIO(b"x\n")
    assert reader.next_line(stream) == b"x"
    assert reader.next_line(stream) is None
    assert reader.next_line(stream) is None


def test_streams_are_tracked_separately():
    reader = LineReader(64)
    first = io.StringIO("a1\na2\n")
    second = io.StringIO("b1\nb2\n")
    assert reader.next_line(first) == "a1"
    assert reader.next_line(second) == "b1"
    assert reader.next_line(first) == "a2"
    assert reader.next_line(second) == "b2"


@pytest.mark.parametrize("size", [0, -5])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(size)