"""Coercion of filter parameter values.

Decode parameters come out of a PDF dictionary, where anything can be
anything.  These accept the types that make sense and raise
`FaxTypeError` for the rest, leaving the decision of what to do about
it to the caller.
"""

from faxbits.exceptions import FaxTypeError


def int_value(x: object) -> int:
    # bool is a subclass of int, but /Columns true is not a number
    if isinstance(x, bool):
        raise FaxTypeError("Integer required: %r" % (x,))
    if isinstance(x, float) and x.is_integer():
        return int(x)
    if not isinstance(x, int):
        raise FaxTypeError("Integer required: %r" % (x,))
    return x


def bool_value(x: object) -> bool:
    if not isinstance(x, bool):
        raise FaxTypeError("Boolean required: %r" % (x,))
    return x
