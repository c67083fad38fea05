#
# DCL 'L' variant: literal runs plus back-references into a 64 KiB
# lookup table that is filled with every emitted byte.
#

import logging

from .bitcursor import BitCursor
from .dclexceptions import DecodeOverflow

log = logging.getLogger(__name__)


TABLE_SIZE = 0x10000
TABLE_MASK = 0xFFFF


class LFormatDecoder:
    def __init__(self, data: bytes, capacity: int, pos: int = 2) -> None:
        self.cursor = BitCursor(data, pos)
        self.capacity = capacity
        self.output = bytearray(capacity)
        self.outpos = 0
        self.table = bytearray(TABLE_SIZE)

    def emit(self, value: int) -> None:
        if self.outpos >= self.capacity:
            raise DecodeOverflow(
                "L stream produces more than %d bytes" % self.capacity,
            )
        self.output[self.outpos] = value
        self.outpos += 1
        # the table slot follows the output length, not the written index
        self.table[self.outpos & TABLE_MASK] = value

    def run(self) -> bytearray:
        cursor = self.cursor
        while True:
            while cursor.read_bit():
                self.emit(cursor.read_bits(8))

            offset = cursor.read_bits(16)
            if offset == 0:
                break

            length = cursor.read_bits(4) + 2
            # length + 1 bytes; the source index counts from offset, not
            # back from the output position.
            for i in range(length + 1):
                self.emit(self.table[(i + offset) & TABLE_MASK])

        log.debug(
            "L stream ended at %r after %d bytes", cursor, self.outpos
        )
        return self.output


def ldecode(data: bytes, capacity: int) -> bytes:
    """Decode an 'L' block into a zero-filled buffer of `capacity` bytes."""
    return bytes(LFormatDecoder(data, capacity).run())
