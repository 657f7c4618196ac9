import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _tcldata.reader.cursor import StreamCursor, StringCursor, as_cursor
from _tcldata.reader.errors import WrongFileModeError


@pytest.fixture(params=["string", "stream"])
def make_cursor(request):
    def make(text):
        if request.param == "string":
            return StringCursor(text)
        return StreamCursor(io.StringIO(text))

    return make


def test_read_one(make_cursor):
    cursor = make_cursor("ab")
    assert cursor.read_one() == "a"
    assert cursor.read_one() == "b"
    assert cursor.read_one() is None
    assert cursor.read_one() is None


def test_peek_does_not_move(make_cursor):
    cursor = make_cursor("abc")
    start = cursor.position()
    assert cursor.peek() == "a"
    assert cursor.peek(2) == "ab"
    assert cursor.position() == start
    assert cursor.read_one() == "a"


def test_peek_past_end(make_cursor):
    cursor = make_cursor("ab")
    assert cursor.peek(5) == "ab"
    cursor.read_one()
    cursor.read_one()
    assert cursor.peek() == ""


def test_seek_back(make_cursor):
    cursor = make_cursor("abc")
    cursor.read_one()
    middle = cursor.position()
    cursor.read_one()
    cursor.read_one()
    cursor.seek(middle)
    assert cursor.read_one() == "b"


@given(st.text(max_size=20), st.integers(min_value=0, max_value=25), st.data())
def test_peek_is_idempotent(text, num_chars, data):
    pos = data.draw(st.integers(min_value=0, max_value=len(text)))
    for cursor in (StringCursor(text, pos), StreamCursor(io.StringIO(text))):
        if isinstance(cursor, StreamCursor):
            for _ in range(pos):
                cursor.read_one()
        start = cursor.position()
        first = cursor.peek(num_chars)
        second = cursor.peek(num_chars)
        assert first == second == text[pos : pos + num_chars]
        assert cursor.position() == start


@pytest.mark.parametrize("pos", [-1, 4])
def test_string_cursor_seek_out_of_range(pos):
    cursor = StringCursor("abc")
    with pytest.raises(ValueError, match="outside of text"):
        cursor.seek(pos)


def test_binary_stream_is_rejected():
    cursor = StreamCursor(io.BytesIO(b"abc"))
    with pytest.raises(WrongFileModeError):
        cursor.read_one()
    with pytest.raises(WrongFileModeError):
        cursor.peek()


def test_as_cursor():
    cursor = StringCursor("abc")
    assert as_cursor(cursor) is cursor

    stream = io.StringIO("abc")
    assert as_cursor(stream).stream is stream

    with pytest.raises(TypeError, match="seekable text stream"):
        as_cursor("abc")
