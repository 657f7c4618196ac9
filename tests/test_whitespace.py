import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _tcldata.reader.cursor import StringCursor
from _tcldata.reader.whitespace import (
    is_whitespace,
    read_space_and_tabs,
    read_whitespace,
)

from .generators.tcl_words import whitespace


@given(
    st.characters(min_codepoint=33, max_codepoint=126),
    whitespace,
)
def test_read_whitespace(character, whitespace):
    stream = io.StringIO(whitespace + character)

    assert read_whitespace(StringCursor(whitespace + character)) == whitespace

    read_whitespace(stream)
    assert stream.read(1) == character


def test_read_whitespace_to_end():
    stream = io.StringIO(" \t\n ")
    assert read_whitespace(stream) == " \t\n "
    assert stream.read() == ""


def test_read_whitespace_empty():
    cursor = StringCursor("word")
    assert read_whitespace(cursor) == ""
    assert cursor.position() == 0


def test_read_space_and_tabs_stops_at_newline():
    stream = io.StringIO(" \t \nnext")
    assert read_space_and_tabs(stream) == " \t "
    assert stream.read(1) == "\n"


@pytest.mark.parametrize(
    "char, expected",
    [
        (" ", True),
        ("\t", True),
        ("\n", True),
        ("\r", True),
        ("\f", True),
        ("\v", True),
        ("a", False),
        ("\u00a0", False),
        ("", False),
        ("  ", False),
    ],
)
def test_is_whitespace(char, expected):
    assert is_whitespace(char) == expected
