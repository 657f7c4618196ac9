from _tcldata.reader.cursor import as_cursor

WHITESPACE = " \t\n\r\f\v"
SPACE_AND_TABS = " \t"


def is_whitespace(char):
    """
    :returns: Whether char is a single word separating character. The empty
        string (end of input) is not whitespace.
    """
    return len(char) == 1 and char in WHITESPACE


def read_characters_in(f, charset):
    cursor = as_cursor(f)
    value = []
    next_char = cursor.peek()
    while next_char and next_char in charset:
        value.append(cursor.read_one())
        next_char = cursor.peek()
    return "".join(value)


def read_whitespace(f):
    """
    Read the run of whitespace at the start of the cursor, leaving the
    cursor at the first non-whitespace character or at end of input.

    :returns: The whitespace read, possibly empty.
    """
    return read_characters_in(f, WHITESPACE)


def read_space_and_tabs(f):
    """
    Same as read_whitespace, but stops at any character that is neither
    space nor horizontal tab (including newlines).
    """
    return read_characters_in(f, SPACE_AND_TABS)
