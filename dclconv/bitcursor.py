"""MSB-first bit reader shared by the DCL decoders."""

from .dclexceptions import StreamOverrun


class BitCursor:
    """Sequential bit reader over a fixed byte buffer.

    Bits are taken from the most significant end of each byte first. The
    cursor owns its position; every decode call makes its own instance.

    :param data: the buffer to read from.
    :param pos: index of the first byte to read.
    """

    __slots__ = ("data", "limit", "pos", "mask")

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.limit = len(data)
        self.pos = pos
        self.mask = 0x80

    def __repr__(self) -> str:
        return "<BitCursor pos=%d mask=0x%02x limit=%d>" % (
            self.pos,
            self.mask,
            self.limit,
        )

    def tell(self) -> tuple[int, int]:
        return self.pos, self.mask

    def read_bit(self) -> bool:
        if self.pos >= self.limit:
            raise StreamOverrun(
                "bit read past end of stream at byte %d" % self.pos,
            )
        bit = (self.data[self.pos] & self.mask) != 0
        self.mask >>= 1
        if self.mask == 0:
            self.mask = 0x80
            self.pos += 1
        return bit

    def read_bits(self, count: int) -> int:
        """Read `count` bits; the first bit read is the most significant."""
        value = 0
        for _ in range(count):
            value <<= 1
            if self.read_bit():
                value |= 1
        return value
