"""
In this module, a reader is a function that takes a cursor (or a seekable
text stream, which is wrapped in a cursor) and reads one lexical unit of tcl
data from it: a word, a backslash sequence or a run of whitespace. If an
error occurs, the reader winds back the cursor to the position where it
started reading the failing word and raises a TclReadError.

Only the word level syntax of tcl is covered, see rules [3], [4], [6] and
[9] of the Tcl Dodekalogue. Command substitution ([...]) and variable
substitution ($...) are not performed, brackets and dollar signs are read as
ordinary characters.

The end of input is not an error: read_word returns None when there are no
more words, which is distinct from the empty word "" (as in `""` or `{}`).
"""

from .cursor import AbstractCursor, StreamCursor, StringCursor, as_cursor
from .errors import (
    MalformedEscapeError,
    TclDataWarning,
    TclReadError,
    UnterminatedBraceError,
    UnterminatedQuoteError,
    UnterminatedWordError,
    WrongFileModeError,
)
from .escapes import read_escape
from .whitespace import read_space_and_tabs, read_whitespace
from .word import Word
from .word_kind import WordKind
from .word_reader import TclWordReader
from .words import (
    move_to_word,
    read_braces,
    read_plain,
    read_quotes,
    read_to_next_word,
    read_word,
)

__all__ = [
    "AbstractCursor",
    "MalformedEscapeError",
    "StreamCursor",
    "StringCursor",
    "TclDataWarning",
    "TclReadError",
    "TclWordReader",
    "UnterminatedBraceError",
    "UnterminatedQuoteError",
    "UnterminatedWordError",
    "Word",
    "WordKind",
    "WrongFileModeError",
    "as_cursor",
    "move_to_word",
    "read_braces",
    "read_escape",
    "read_plain",
    "read_quotes",
    "read_space_and_tabs",
    "read_to_next_word",
    "read_whitespace",
    "read_word",
]
