"""
Readers for the three kinds of words, see rules [3], [4] and [6] of the
Tcl Dodekalogue:

* words starting with a double quote end at the next unescaped double
  quote, and have backslash substitution performed.
* words starting with an open brace end at the matching close brace, and
  have only backslash-newline substitution performed.
* any other word ends at the first unescaped whitespace character, and has
  backslash substitution performed.

All readers take either a cursor or a seekable text stream. When a reader
fails, it seeks back to where it started reading and raises a TclReadError.
"""
from _tcldata.reader.cursor import as_cursor
from _tcldata.reader.errors import (
    TclReadError,
    UnterminatedBraceError,
    UnterminatedQuoteError,
)
from _tcldata.reader.escapes import read_escape
from _tcldata.reader.whitespace import is_whitespace, read_whitespace


def read_quotes(f, strict=False):
    """
    Read a double quoted word, yields "a<TAB>b" for a stream
    containing 'a\\tb" c' (the opening quote already read).

    :param f: Cursor or stream positioned just after the opening quote.
    :returns: The decoded contents, without the closing quote, which is
        consumed.
    """
    cursor = as_cursor(f)
    start = cursor.position()
    value = []

    char = cursor.read_one()
    while char != '"':
        if char is None:
            cursor.seek(start)
            raise UnterminatedQuoteError(
                f"Reached end of input while reading quoted word starting at {start}",
                start,
            )
        if char == "\\":
            try:
                char = read_escape(cursor, strict)
            except TclReadError:
                cursor.seek(start)
                raise
        value.append(char)
        char = cursor.read_one()

    return "".join(value)


def read_braces(f):
    """
    Read a braced word, yields 'a {b} c' for a stream containing
    'a {b} c} d' (the opening brace already read).

    Backslash followed by newline is folded into a single space, every
    other backslash is kept together with the character following it, and
    that character is not counted as a brace.

    :param f: Cursor or stream positioned just after the opening brace.
    :returns: The contents up to the matching close brace, which is consumed.
    """
    cursor = as_cursor(f)
    start = cursor.position()
    value = []

    brace_count = 1
    while True:
        char = cursor.read_one()

        if char is None:
            cursor.seek(start)
            raise UnterminatedBraceError(
                f"Reached end of input while reading braced word starting at {start}"
                f" with {brace_count} unmatched open brace(s)",
                start,
            )

        if char == "\\":
            next_char = cursor.peek()
            if next_char == "\n":
                value.append(read_escape(cursor))
            elif next_char:
                value.append(char + cursor.read_one())
            else:
                value.append(char)
        elif char == "{":
            brace_count += 1
            value.append(char)
        elif char == "}":
            brace_count -= 1
            if brace_count == 0:
                break
            value.append(char)
        else:
            value.append(char)

    return "".join(value)


def read_plain(f, strict=False):
    """
    Read a word that is neither quoted nor braced, that is, everything up
    to the first unescaped whitespace character. The whitespace is not
    consumed.
    """
    cursor = as_cursor(f)
    start = cursor.position()
    value = []

    next_char = cursor.peek()
    while next_char and not is_whitespace(next_char):
        char = cursor.read_one()
        if char == "\\":
            try:
                char = read_escape(cursor, strict)
            except TclReadError:
                cursor.seek(start)
                raise
        value.append(char)
        next_char = cursor.peek()

    return "".join(value)


def read_word(f, strict=False):
    """
    Skip leading whitespace and read the next word.

    >>> stream = io.StringIO('This "is a" word')
    >>> read_word(stream), read_word(stream), read_word(stream)
    ('This', 'is a', 'word')
    >>> read_word(stream) is None
    True

    :param f: Cursor or seekable text stream.
    :param strict: Raise MalformedEscapeError for backslash sequences which
        can not be classified, see read_escape.
    :returns: The decoded word, or None if the end of input is reached
        before any word. Note that the empty word "" is a valid word.
    """
    cursor = as_cursor(f)
    read_whitespace(cursor)

    start = cursor.position()
    char = cursor.read_one()
    if char is None:
        return None

    try:
        if char == '"':
            return read_quotes(cursor, strict)
        if char == "{":
            return read_braces(cursor)
        cursor.seek(start)
        return read_plain(cursor, strict)
    except TclReadError:
        cursor.seek(start)
        raise


def read_to_next_word(f, strict=False):
    """
    Move past the word at the cursor and the whitespace following it. If
    the cursor is on whitespace, only the whitespace is consumed.

    :returns: The word moved past, or None if only whitespace was consumed.
    """
    cursor = as_cursor(f)

    if is_whitespace(cursor.peek()):
        read_whitespace(cursor)
        return None

    word = read_word(cursor, strict)
    read_whitespace(cursor)
    return word


def move_to_word(f, num_of_words=1, strict=False):
    """
    Apply read_to_next_word num_of_words times, ie. for a stream containing
    "This is {a reading} test", move_to_word(stream, 3) leaves the stream
    at "test".
    """
    cursor = as_cursor(f)
    for _ in range(num_of_words):
        read_to_next_word(cursor, strict)
