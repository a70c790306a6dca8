"""Views of decoded data.

Decoded rows are handed back as `ByteRange` objects pointing into the
decoder's output buffer, so nothing is copied until somebody actually
asks for the bytes.
"""

import logging
from dataclasses import dataclass, field
from typing import Final, Iterator

from faxbits import settings
from faxbits.bitreader import BufferLike
from faxbits.exceptions import FaxValueError
from faxbits.params import DecodeParams

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ByteRange:
    """Read-only window on `buffer[start:end]`.

    The buffer is shared, not copied: it belongs to whoever created it
    and has to stay alive (and unchanged) as long as the range is in
    use.
    """

    buffer: BufferLike = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise FaxValueError(
                "Invalid range [%d, %d) for buffer of length %d"
                % (self.start, self.end, len(self.buffer))
            )

    def __len__(self) -> int:
        return self.end - self.start

    def view(self) -> memoryview:
        """Get a read-only memoryview of the range (no copying)."""
        return memoryview(self.buffer).toreadonly()[self.start : self.end]

    def tobytes(self) -> bytes:
        return self.view().tobytes()

    def __bytes__(self) -> bytes:
        return self.tobytes()


def iter_rows(buffer: BufferLike, params: DecodeParams) -> Iterator[ByteRange]:
    """Split decoded image data into rows.

    Each row is `params.row_bytes` long.  If the data doesn't divide
    evenly, the last, short row is returned anyway, unless
    `faxbits.settings.STRICT` is set, in which case `FaxValueError` is
    raised.
    """
    size = params.row_bytes
    length = len(buffer)
    extra = length % size
    if extra:
        if settings.STRICT:
            raise FaxValueError(
                "Data length %d is not a multiple of row length %d" % (length, size)
            )
        logger.warning(
            "Data length %d is not a multiple of row length %d, last row is short",
            length,
            size,
        )
    for start in range(0, length, size):
        yield ByteRange(buffer, start, min(start + size, length))
