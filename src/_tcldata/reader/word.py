from dataclasses import dataclass

from _tcldata.reader.word_kind import WordKind


@dataclass
class Word:
    """
    A word read from tcl data, together with how it was quoted and
    where it was found.

    start is the cursor position of the first character of the word
    (the opening delimiter for quoted and braced words) and end the
    position just past its last character.
    """

    kind: WordKind
    value: str
    start: object
    end: object

    def get_source(self, cursor):
        """
        :returns: The undecoded text of the word, including delimiters.
            Leaves the cursor where it was.
        """
        go_back = cursor.position()
        cursor.seek(self.start)
        source = []
        while cursor.position() != self.end:
            char = cursor.read_one()
            if char is None:
                break
            source.append(char)
        cursor.seek(go_back)
        return "".join(source)
