"""
Bits and pieces for CCITT fax (Group 3 and 4) decoding.

This is the part of a CCITTFaxDecode filter that isn't the actual
decoding algorithm: a reader for the bits of the encoded data, the
decode parameters that tell the decoder what to expect, and views on
the decoded rows.

Basic usage:

    params = DecodeParams.from_dict(stream_params)
    reader = BitReader(data)
    bit = reader.read_bit()
    code = reader.read_bits(12)
    reader.byte_align()
    byte = reader.next()  # -1 at end of data, never an exception
"""

from faxbits.bitreader import BitReader
from faxbits.byterange import ByteRange, iter_rows
from faxbits.exceptions import EndOfData, FaxException
from faxbits.params import DecodeParams, Encoding
from faxbits._version import __version__  # noqa: F401

__all__ = [
    "BitReader",
    "ByteRange",
    "DecodeParams",
    "EndOfData",
    "Encoding",
    "FaxException",
    "iter_rows",
]
