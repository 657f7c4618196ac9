"""
A cursor is the character source read by every reader in this package. It
supports reading one character, peeking ahead, and returning to any position
previously obtained from it.

End of input is signalled by read_one() returning None, never by an
exception.
"""
from abc import ABC, abstractmethod

from _tcldata.reader.errors import WrongFileModeError


class AbstractCursor(ABC):
    @abstractmethod
    def read_one(self):
        """
        :returns: The next character, advancing the cursor past it, or
            None at end of input.
        """
        pass

    @abstractmethod
    def position(self):
        """
        :returns: An opaque token that can be given to seek.
        """
        pass

    @abstractmethod
    def seek(self, token):
        pass

    def peek(self, num_chars=1):
        """
        :returns: Up to num_chars characters following the cursor, without
            moving it. Fewer characters are returned at end of input.
        """
        start = self.position()
        result = []
        for _ in range(num_chars):
            char = self.read_one()
            if char is None:
                break
            result.append(char)
        self.seek(start)
        return "".join(result)


class StreamCursor(AbstractCursor):
    """
    Cursor over a seekable text stream, such as io.StringIO or a file
    opened in text mode. The stream is never closed by the cursor.
    """

    def __init__(self, stream):
        self.stream = stream

    def read_one(self):
        char = self.stream.read(1)
        if isinstance(char, bytes):
            raise WrongFileModeError("Tcl data must be read from a text stream!")
        return char or None

    def position(self):
        return self.stream.tell()

    def seek(self, token):
        self.stream.seek(token)

    def peek(self, num_chars=1):
        start = self.stream.tell()
        result = self.stream.read(num_chars)
        self.stream.seek(start)
        if isinstance(result, bytes):
            raise WrongFileModeError("Tcl data must be read from a text stream!")
        return result


class StringCursor(AbstractCursor):
    """
    Cursor over an in-memory string, positions are indices into the string.

    >>> cursor = StringCursor("ab")
    >>> cursor.peek(2)
    'ab'
    >>> cursor.read_one()
    'a'
    >>> cursor.position()
    1
    """

    def __init__(self, text, pos=0):
        self.text = text
        self.pos = 0
        self.seek(pos)

    def read_one(self):
        if self.pos >= len(self.text):
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    def position(self):
        return self.pos

    def seek(self, token):
        if not 0 <= token <= len(self.text):
            raise ValueError(
                f"Cursor position {token} is outside of text of length {len(self.text)}"
            )
        self.pos = token

    def peek(self, num_chars=1):
        return self.text[self.pos : self.pos + num_chars]


def as_cursor(source):
    """
    :param source: Either a cursor or a seekable text stream.
    :returns: source if it is already a cursor, otherwise a StreamCursor
        reading from source.
    """
    if isinstance(source, AbstractCursor):
        return source
    if all(hasattr(source, attr) for attr in ("read", "tell", "seek")):
        return StreamCursor(source)
    raise TypeError(
        f"Expected a cursor or a seekable text stream, got {type(source).__name__}"
    )
