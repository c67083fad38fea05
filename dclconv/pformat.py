#
# DCL 'P' variant: pixel skips coded as run lengths, literal colors,
# and optional stamping of each color onto following scanlines. Skipped
# pixels are resolved by a final gap-fill pass.
#

import logging

from .bitcursor import BitCursor
from .dclexceptions import StreamOverrun

log = logging.getLogger(__name__)


# a run prefix this long marks the end of the stream
SENTINEL_BITS = 24

# stamp offsets in bytes, all close to one 640 pixel scanline
STAMP_NEAR_LEFT = 1914
STAMP_LEFT = 1917
STAMP_BELOW = 1920
STAMP_RIGHT = 1923
STAMP_NEAR_RIGHT = 1926


class PFormatDecoder:
    """Decoder for the run-length and color stamping variant.

    Gaps left between literal colors stay zero until :func:`fill_gaps`
    replaces them. Gaps before the first literal take the last literal
    color read from the stream.
    """

    def __init__(self, data: bytes, capacity: int, pos: int = 2) -> None:
        self.cursor = BitCursor(data, pos)
        self.capacity = capacity
        self.output = bytearray(capacity)
        self.last = b"\x00\x00\x00"

    def read_run_length(self) -> int | None:
        """Return the number of pixels to skip, or None at end of stream."""
        cursor = self.cursor
        command = cursor.read_bits(2)
        if command < 2:
            return command
        if command == 2:
            return cursor.read_bits(2) + 2
        bits = 3
        while cursor.read_bit():
            bits += 1
            if bits >= SENTINEL_BITS:
                return None
        return (1 << bits) - 1 + cursor.read_bits(bits) - 1

    def read_stamp_increment(self) -> int | None:
        """Return the next stamp offset, or None when the stamp loop ends."""
        cursor = self.cursor
        code = cursor.read_bits(2)
        if code == 1:
            return STAMP_LEFT
        if code == 2:
            return STAMP_BELOW
        if code == 3:
            return STAMP_RIGHT
        if not cursor.read_bit():
            return None
        return STAMP_NEAR_RIGHT if cursor.read_bit() else STAMP_NEAR_LEFT

    def stamp(self, pos: int, color: bytes) -> None:
        output = self.output
        while True:
            increment = self.read_stamp_increment()
            if increment is None:
                break
            pos += increment
            if pos + 2 >= self.capacity:
                break
            output[pos : pos + 3] = color

    def run(self) -> bytearray:
        cursor = self.cursor
        pos = 0
        try:
            while pos < self.capacity:
                run_length = self.read_run_length()
                if run_length is None:
                    log.debug("P stream sentinel at %r", cursor)
                    break
                pos += run_length * 3
                if pos >= self.capacity:
                    break
                color = bytes(
                    (cursor.read_bits(8), cursor.read_bits(8), cursor.read_bits(8))
                )
                self.output[pos : pos + 3] = color
                self.last = color
                if cursor.read_bit():
                    self.stamp(pos, color)
                pos += 3
        except StreamOverrun:
            # the block is fixed size; running out of bits ends the image
            log.debug("P stream exhausted at output offset %d", pos)
        # leading gaps take the last literal color of the stream
        fill_gaps(self.output, self.last)
        return self.output


def fill_gaps(buf: bytearray, last: bytes = b"\x00\x00\x00") -> None:
    """Replace each zero pixel with the last non-zero pixel before it.

    A true black pixel is indistinguishable from a gap and is replaced as
    well. Zero pixels before the first colored one get `last`.
    """
    for i in range(0, len(buf) - 2, 3):
        if buf[i] == 0 and buf[i + 1] == 0 and buf[i + 2] == 0:
            buf[i : i + 3] = last
        else:
            last = bytes(buf[i : i + 3])


def pdecode(data: bytes, capacity: int) -> bytes:
    """Decode a 'P' block into a gap-filled buffer of `capacity` bytes."""
    return bytes(PFormatDecoder(data, capacity).run())
