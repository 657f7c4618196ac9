"""
Decoding of backslash sequences, see rule [9] of the Tcl Dodekalogue
(https://wiki.tcl-lang.org/page/Dodekalogue).

Every function here expects a cursor positioned just after the backslash
and leaves it just after the decoded sequence.
"""
import warnings

from _tcldata.reader.cursor import as_cursor
from _tcldata.reader.errors import MalformedEscapeError, TclDataWarning
from _tcldata.reader.whitespace import read_space_and_tabs

CONTROL_ESCAPES = {
    "a": "\x07",
    "b": "\x08",
    "f": "\x0c",
    "n": "\x0a",
    "r": "\x0d",
    "t": "\x09",
    "v": "\x0b",
}

OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdefABCDEF"


def read_digits(cursor, digits, max_count=None):
    """
    Read characters from digits until a character not in digits, end of
    input or max_count characters have been read. The first non-digit is
    left unread.
    """
    result = []
    next_char = cursor.peek()
    while next_char and next_char in digits:
        if max_count is not None and len(result) >= max_count:
            break
        result.append(cursor.read_one())
        next_char = cursor.peek()
    return "".join(result)


def read_octals(cursor, first_digit):
    """
    :param first_digit: The octal digit already read following the
        backslash.
    :returns: The character for the up to three digit octal value,
        truncated to 8 bits.
    """
    octals = first_digit + read_digits(cursor, OCTAL_DIGITS, max_count=2)
    return chr(int(octals, 8) & 0xFF)


def read_hex(cursor):
    """
    Read any number of hex digits, of which only the last two are used.

    :returns: The decoded character, or None if no hex digit follows.
    """
    hexes = read_digits(cursor, HEX_DIGITS)
    if not hexes:
        return None
    return chr(int(hexes[-2:], 16))


def read_unicode(cursor):
    """
    :returns: The character for one to four hex digits, or None if no hex
        digit follows.
    """
    hexes = read_digits(cursor, HEX_DIGITS, max_count=4)
    if not hexes:
        return None
    return chr(int(hexes, 16))


def read_escape(f, strict=False):
    """
    Decode one backslash sequence.

    >>> read_escape(io.StringIO("tab"))
    '\\t'
    >>> read_escape(io.StringIO("x41"))
    'A'

    :param f: Cursor or stream positioned just after a backslash.
    :param strict: If true, raise MalformedEscapeError for a backslash at end
        of input and for unknown escapes of letters and digits instead of
        keeping the character.
    :returns: The string replacing the backslash sequence.
    """
    cursor = as_cursor(f)
    start = cursor.position()
    next_char = cursor.read_one()

    if next_char is None:
        if strict:
            raise MalformedEscapeError(f"Backslash at end of input at {start}")
        warnings.warn(
            f"Backslash at end of input at {start} is kept as is",
            TclDataWarning,
            stacklevel=2,
        )
        return "\\"

    if next_char in CONTROL_ESCAPES:
        return CONTROL_ESCAPES[next_char]

    if next_char == "\n":
        read_space_and_tabs(cursor)
        return " "

    if next_char == "\\":
        return "\\"

    if next_char in OCTAL_DIGITS:
        return read_octals(cursor, next_char)

    if next_char == "x":
        # is this an escaped "x" or a hex char?
        return read_hex(cursor) or "x"

    if next_char == "u":
        return read_unicode(cursor) or "u"

    if strict and next_char.isascii() and next_char.isalnum():
        cursor.seek(start)
        raise MalformedEscapeError(f"Unknown escape sequence \\{next_char} at {start}")

    return next_char
