class TclReadError(Exception):
    """
    Base class for errors raised while reading words. A reader raising a
    TclReadError has wound the cursor back to where the failing word started.
    """

    pass


class UnterminatedWordError(TclReadError):
    """
    Raised when the end of input is reached before the delimiter that
    closes a quoted or braced word.
    """

    def __init__(self, message, start):
        super().__init__(message)
        self.start = start


class UnterminatedQuoteError(UnterminatedWordError):
    pass


class UnterminatedBraceError(UnterminatedWordError):
    pass


class MalformedEscapeError(TclReadError):
    """
    Raised in strict mode for backslash sequences that can not be
    classified, such as a backslash at the end of input.
    """

    pass


class WrongFileModeError(TclReadError):
    """
    Thrown when tcl data is read from a stream opened in binary mode.
    """

    pass


class TclDataWarning(UserWarning):
    pass
