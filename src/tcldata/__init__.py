import tcldata.version
from _tcldata.reader import (
    AbstractCursor,
    MalformedEscapeError,
    StreamCursor,
    StringCursor,
    TclDataWarning,
    TclReadError,
    TclWordReader,
    UnterminatedBraceError,
    UnterminatedQuoteError,
    UnterminatedWordError,
    Word,
    WordKind,
    WrongFileModeError,
    move_to_word,
    read_braces,
    read_escape,
    read_quotes,
    read_space_and_tabs,
    read_to_next_word,
    read_whitespace,
    read_word,
)
from _tcldata.reading import lazy_read, read, split

__version__ = tcldata.version.version

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
    "lazy_read",
    "move_to_word",
    "read",
    "read_braces",
    "read_escape",
    "read_quotes",
    "read_space_and_tabs",
    "read_to_next_word",
    "read_whitespace",
    "read_word",
    "split",
]
