"""Bit-level reader for CCITT fax data.

Fax data (ITU-T T.4 and T.6) is a stream of variable-length codes
packed most-significant-bit first into bytes.  The decoder needs to
pull it apart one bit at a time, occasionally skip to the next byte
boundary (with /EncodedByteAlign), and occasionally peek at whole
bytes when scanning for end-of-line or end-of-block markers.

There are two ways of running out of data and they are different on
purpose: `BitReader.read_bit` (and so `BitReader.read_bits`) raises
`EndOfData`, because running out in the middle of a code means the
stream is truncated, while `BitReader.next` returns `BitReader.EOD`
(-1), because hitting the end while looking for a marker is perfectly
normal.
"""

import logging
from typing import TYPE_CHECKING, Final, Union

from faxbits.exceptions import EndOfData, FaxValueError

if TYPE_CHECKING:
    from faxbits.byterange import ByteRange

logger: Final = logging.getLogger(__name__)
BufferLike = Union[bytes, bytearray, memoryview]


class BitReader:
    """Sequential reader over the bits of `buffer[start:end]`.

    The cursor consists of three pieces of state:

    - `position`: offset of the next byte to be fetched from the buffer
    - `shift`: index (7 = most significant) of the next bit to be
      returned from `current_byte`, or -1 if the current byte is used
      up (or was thrown away by `byte_align`), in which case the next
      bit read fetches a new byte from `position`
    - `current_byte`: the byte at `position - 1`, meaningful only when
      `shift` is not -1

    The buffer is borrowed, not copied, so don't modify it while
    reading.  A reader is meant to be used for one decoding pass on
    one thread.

    Note that `next` works on `position` alone.  If you mix it with
    `read_bit`, the unread bits of `current_byte` are still there
    waiting for you afterwards, and `next` will have returned the byte
    *after* them.  This is how it is supposed to work, but it can be
    surprising.
    """

    EOD: Final = -1

    __slots__ = ("_buffer", "_start", "_end", "position", "shift", "current_byte")

    def __init__(
        self, buffer: BufferLike, start: int = 0, end: Union[int, None] = None
    ) -> None:
        view = memoryview(buffer)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self._buffer = view.toreadonly()
        if end is None:
            end = len(self._buffer)
        if not 0 <= start <= end <= len(self._buffer):
            raise FaxValueError(
                "Invalid range [%d, %d) for buffer of length %d"
                % (start, end, len(self._buffer))
            )
        self._start = start
        self._end = end
        self.position = start
        self.shift = -1
        self.current_byte = 0

    @classmethod
    def from_range(cls, byte_range: "ByteRange") -> "BitReader":
        """Read the bits of a `ByteRange`."""
        return cls(byte_range.buffer, byte_range.start, byte_range.end)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def aligned(self) -> bool:
        """Is the next bit the first one of a fresh byte?"""
        return self.shift < 0

    @property
    def remaining(self) -> int:
        """Number of whole bytes not yet fetched."""
        return self._end - self.position

    @property
    def at_end(self) -> bool:
        """Would the next `read_bit` raise `EndOfData`?"""
        return self.shift < 0 and self.position >= self._end

    def read_bit(self) -> int:
        """Read a single bit, fetching a new byte if needed.

        Raises:
          EndOfData: if a new byte is needed and there isn't one.  The
            reader is left as it was.
        """
        if self.shift < 0:
            if self.position >= self._end:
                logger.debug("End of data reading bit: %r", self)
                raise EndOfData(
                    "End of data at byte %d (range ends at %d)"
                    % (self.position, self._end)
                )
            self.current_byte = self._buffer[self.position]
            self.position += 1
            self.shift = 7
        bit = (self.current_byte >> self.shift) & 1
        self.shift -= 1
        return bit

    def read_bits(self, n: int) -> int:
        """Read `n` bits, most significant first, as an unsigned integer.

        Fields can straddle byte boundaries.  If the data runs out
        partway through, `EndOfData` is raised and the bits read up to
        that point are lost.
        """
        if n < 0:
            raise FaxValueError("Cannot read %d bits" % n)
        result = 0
        for i in range(n - 1, -1, -1):
            result |= self.read_bit() << i
        # No sign bit to worry about, but keep it honest
        return result & ((1 << n) - 1)

    def byte_align(self) -> None:
        """Throw away the rest of the current byte, if any."""
        self.shift = -1

    def next(self) -> int:
        """Read the next whole byte, or return `EOD` if there are none.

        This ignores (and does not modify) the bit cursor.
        """
        if self.position >= self._end:
            return self.EOD
        byte = self._buffer[self.position]
        self.position += 1
        return byte

    def __repr__(self) -> str:
        return "<BitReader position=%d shift=%d current_byte=0x%02x range=[%d, %d)>" % (
            self.position,
            self.shift,
            self.current_byte,
            self._start,
            self._end,
        )
