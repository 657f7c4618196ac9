import pathlib
from contextlib import contextmanager

from _tcldata.reader import StringCursor, TclWordReader


def read(filelike, strict=False, encoding="utf-8"):
    """
    Reads all words of tcl data, ie. words = read("/my/file.tcl").

    >>> read(io.StringIO('a "b c" {d {e}}'))
    ['a', 'b c', 'd {e}']

    :param filelike: A path or a seekable text stream.
    :returns: The list of decoded words.
    """
    with lazy_read(filelike, strict=strict, encoding=encoding) as words:
        return [word.value for word in words]


def split(text, strict=False):
    """
    :returns: The list of decoded words in the given string.
    """
    return [word.value for word in TclWordReader(StringCursor(text), strict=strict)]


@contextmanager
def lazy_read(filelike, strict=False, encoding="utf-8"):
    """
    Context manager giving an iterator of Words, which are read from
    filelike as the iterator is consumed. Paths are opened and closed by
    lazy_read, streams are left open.
    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rt", encoding=encoding)

    try:
        yield iter(TclWordReader(file_stream, strict=strict))
    finally:
        if did_open:
            file_stream.close()
