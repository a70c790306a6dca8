"""Decode parameters for the CCITTFaxDecode filter.

See Table 11 in Section 7.4.6 of the PDF 1.7 Reference.  The decoder
needs exactly seven of these, which are gathered into an immutable
`DecodeParams` once per stream.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Final, Mapping, Tuple

from typing_extensions import TypedDict

from faxbits import settings
from faxbits.casting import bool_value, int_value
from faxbits.exceptions import FaxTypeError, FaxValueError

logger: Final = logging.getLogger(__name__)


class DecodeParmsDict(TypedDict, total=False):
    """The parts of a /DecodeParms dictionary that we care about."""

    K: int
    Columns: int
    Rows: int
    BlackIs1: bool
    EndOfBlock: bool
    EndOfLine: bool
    EncodedByteAlign: bool


class Encoding(Enum):
    GROUP_4 = "G4"
    GROUP_3_1D = "G3-1D"
    GROUP_3_2D = "G3-2D"


@dataclass(frozen=True)
class DecodeParams:
    k: int = 0
    """Coding scheme: <0 for pure 2D (Group 4), 0 for pure 1D (Group 3),
    >0 for mixed 1D/2D (Group 3) with at most `k - 1` 2D lines between
    1D ones."""
    columns: int = 1728
    """Width of the image in pixels."""
    rows: int = 0
    """Height of the image in pixels, or 0 if not known in advance."""
    black_is_1: bool = False
    """Are 1 bits black (rather than white)?"""
    end_of_block: bool = True
    """Is the data terminated by an end-of-block pattern?"""
    end_of_line: bool = False
    """Must every row start with an end-of-line pattern?"""
    encoded_byte_align: bool = False
    """Does every encoded row start on a byte boundary?"""

    @property
    def encoding(self) -> Encoding:
        if self.k < 0:
            return Encoding.GROUP_4
        elif self.k == 0:
            return Encoding.GROUP_3_1D
        else:
            return Encoding.GROUP_3_2D

    @property
    def row_bytes(self) -> int:
        """Number of bytes in one decoded row."""
        return (self.columns + 7) // 8

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> "DecodeParams":
        """Create from a /DecodeParms dictionary.

        Missing entries get their default values from the PDF
        Reference.  Entries of the wrong type, or nonsensical ones like
        a negative /Columns, raise `FaxTypeError` or `FaxValueError` if
        `faxbits.settings.STRICT` is set, otherwise they are logged and
        replaced with the default.
        """
        fields: Dict[str, object] = {}
        for key, (field, cast, valid) in PARAMS.items():
            if key not in params:
                continue
            value = params[key]
            try:
                value = cast(value)
                if not valid(value):
                    raise FaxValueError("Invalid /%s: %r" % (key, value))
            except (FaxTypeError, FaxValueError) as e:
                if settings.STRICT:
                    raise
                logger.warning("%s, using default", e)
                continue
            fields[field] = value
        for key in params:
            if key not in PARAMS:
                logger.debug("Ignoring decode parameter /%s", key)
        return cls(**fields)  # type: ignore[arg-type]

    def as_dict(self) -> DecodeParmsDict:
        """Convert back to /DecodeParms form, with every entry filled in."""
        return DecodeParmsDict(
            K=self.k,
            Columns=self.columns,
            Rows=self.rows,
            BlackIs1=self.black_is_1,
            EndOfBlock=self.end_of_block,
            EndOfLine=self.end_of_line,
            EncodedByteAlign=self.encoded_byte_align,
        )


def _any(_: object) -> bool:
    return True


def _positive(x: int) -> bool:
    return x > 0


def _non_negative(x: int) -> bool:
    return x >= 0


# PDF key => (field name, type coercion, validity check)
ParamSpec = Tuple[str, Callable[[object], Any], Callable[[Any], bool]]
PARAMS: Final[Dict[str, ParamSpec]] = {
    "K": ("k", int_value, _any),
    "Columns": ("columns", int_value, _positive),
    "Rows": ("rows", int_value, _non_negative),
    "BlackIs1": ("black_is_1", bool_value, _any),
    "EndOfBlock": ("end_of_block", bool_value, _any),
    "EndOfLine": ("end_of_line", bool_value, _any),
    "EncodedByteAlign": ("encoded_byte_align", bool_value, _any),
}
