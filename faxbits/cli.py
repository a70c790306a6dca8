"""Dump the bits of a file, for staring at fax data.

Reads a file (or part of one) with a `BitReader` and prints it as a
sequence of fixed-width fields, one per line, each one preceded by the
byte offset and bit index (0 = most significant) where it starts:

    $ faxbits --width 4 foo.g4
    0.0: 1011 11
    0.4: 0010 2

You probably want to look at an image stream that you extracted with
something like `playa --stream 42 foo.pdf`, since PDF fax images are
rarely found in their natural habitat.  To look at the encoded rows of
a stream with /EncodedByteAlign, use `--align`, which skips to the next
byte after every field.

If the data runs out in the middle of a field, that is noted on
standard error and the dump stops there.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

from faxbits.bitreader import BitReader
from faxbits.exceptions import EndOfData, FaxValueError


def make_argparse() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("file", type=Path)
    parser.add_argument(
        "-s",
        "--offset",
        type=int,
        default=0,
        help="Byte offset at which to start reading",
    )
    parser.add_argument(
        "-n",
        "--length",
        type=int,
        help="Number of bytes to read (default: to the end of the file)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=8,
        help="Width of each field in bits",
    )
    parser.add_argument(
        "-a",
        "--align",
        action="store_true",
        help="Skip to the next byte boundary after each field",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        help="File to write output (or - for standard output)",
        type=argparse.FileType("wt"),
        default="-",
    )
    parser.add_argument(
        "--debug",
        help="Very verbose debugging output",
        action="store_true",
    )
    return parser


def bit_position(reader: BitReader) -> Tuple[int, int]:
    """Get the byte offset and bit index of the next bit to be read."""
    if reader.aligned:
        return reader.position, 0
    return reader.position - 1, 7 - reader.shift


def dump_bits(reader: BitReader, args: argparse.Namespace) -> None:
    """Write out fields until the data runs out."""
    while not reader.at_end:
        offset, bit = bit_position(reader)
        try:
            value = reader.read_bits(args.width)
        except EndOfData:
            print(
                f"Truncated field at {offset}.{bit} (wanted {args.width} bits)",
                file=sys.stderr,
            )
            break
        print(f"{offset}.{bit}: {value:0{args.width}b} {value}", file=args.outfile)
        if args.align:
            reader.byte_align()


def main(argv=None) -> None:
    parser = make_argparse()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.width <= 0:
        parser.error(f"Field width must be positive, not {args.width}")
    try:
        data = args.file.read_bytes()
    except OSError as e:
        parser.error(f"Could not read {args.file}:\n{e}")
    end = None if args.length is None else args.offset + args.length
    try:
        reader = BitReader(data, args.offset, end)
    except FaxValueError as e:
        parser.error(f"Bad range:\n{e}")
    dump_bits(reader, args)


if __name__ == "__main__":
    main()
