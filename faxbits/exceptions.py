"""
Exceptions raised while reading fax-encoded data.
"""


class FaxException(Exception):
    pass


class EndOfData(FaxException, EOFError):
    """Ran out of input in the middle of a bit field.

    Only bit-granular reads raise this.  Byte-granular lookahead
    returns a sentinel instead.
    """


class FaxValueError(FaxException, ValueError):
    pass


class FaxTypeError(FaxException, TypeError):
    pass
