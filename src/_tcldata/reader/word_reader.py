from _tcldata.reader.cursor import as_cursor
from _tcldata.reader.whitespace import read_whitespace
from _tcldata.reader.word import Word
from _tcldata.reader.word_kind import WordKind
from _tcldata.reader.words import read_word


class TclWordReader:
    """
    Iterable of the words in a cursor or seekable text stream, reading
    from the current position until end of input.

    >>> words = TclWordReader(io.StringIO('set a {b c}'))
    >>> [w.value for w in words]
    ['set', 'a', 'b c']

    Iterating consumes the stream, the reader does not own it and will
    not close it.
    """

    def __init__(self, source, strict=False):
        """
        :param source: A cursor or seekable text stream.
        :param strict: See read_escape.
        """
        self.cursor = as_cursor(source)
        self.strict = strict

    def read_word(self):
        """
        :returns: The next Word, or None at end of input.
        """
        read_whitespace(self.cursor)
        start = self.cursor.position()
        kind = WordKind.from_first_char(self.cursor.peek())

        value = read_word(self.cursor, self.strict)
        if value is None:
            return None
        return Word(kind, value, start, self.cursor.position())

    def __iter__(self):
        word = self.read_word()
        while word is not None:
            yield word
            word = self.read_word()
