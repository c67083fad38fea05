"""Reading DCL blocks and dispatching them to the matching decoder."""

import logging
from typing import BinaryIO

from . import settings
from .dclexceptions import TruncatedInput, UnsupportedFormat
from .lformat import ldecode
from .pformat import pdecode

log = logging.getLogger(__name__)


WIDTH = 640
HEIGHT = 480
BLOCK_SIZE = 0xE1000

# byte 1 of the header is reserved; the bitstream begins after it
HEADER_SIZE = 2

TAG_L = ord("L")
TAG_P = ord("P")

DECODERS = {
    TAG_L: ldecode,
    TAG_P: pdecode,
}


class DCLImage:
    """A decoded 640x480 picture in the decoder's own channel order."""

    def __init__(self, tag: str, width: int, height: int, data: bytes) -> None:
        if len(data) != width * height * 3:
            raise ValueError(
                "pixel buffer of %d bytes does not match %dx%d"
                % (len(data), width, height),
            )
        self.tag = tag
        self.width = width
        self.height = height
        self.data = data

    def __repr__(self) -> str:
        return "<DCLImage %s %dx%d>" % (self.tag, self.width, self.height)

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        i = (y * self.width + x) * 3
        return self.data[i], self.data[i + 1], self.data[i + 2]


def read_block(fp: BinaryIO) -> bytes:
    """Read one compressed block from `fp`.

    Bytes after the block are ignored. A short file raises TruncatedInput
    unless settings.STRICT is turned off, in which case the block is padded
    with zeros.
    """
    block = fp.read(BLOCK_SIZE)
    if len(block) < BLOCK_SIZE:
        if settings.STRICT:
            raise TruncatedInput(
                "expected %d bytes, got %d" % (BLOCK_SIZE, len(block)),
            )
        log.warning(
            "Padding short block of %d bytes to %d", len(block), BLOCK_SIZE
        )
        block = block.ljust(BLOCK_SIZE, b"\x00")
    return block


def decode_block(block: bytes) -> DCLImage:
    if len(block) < HEADER_SIZE:
        raise TruncatedInput("block has no header")
    tag = block[0]
    try:
        decoder = DECODERS[tag]
    except KeyError:
        raise UnsupportedFormat(
            "Unsupported DCL format: tag %r" % bytes([tag])
        ) from None
    log.debug("Decoding %s block of %d bytes", chr(tag), len(block))
    data = decoder(block, WIDTH * HEIGHT * 3)
    return DCLImage(chr(tag), WIDTH, HEIGHT, data)


def decode(fp: BinaryIO) -> DCLImage:
    return decode_block(read_block(fp))


def decode_file(path: str) -> DCLImage:
    with open(path, "rb") as fp:
        return decode(fp)
