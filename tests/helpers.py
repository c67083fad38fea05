from dclconv.dcl import BLOCK_SIZE


def pack_bits(bits):
    """Pack a string of '0'/'1' characters MSB first, padding with zeros.

    Spaces are ignored so fields can be written apart.
    """
    bits = bits.replace(" ", "")
    bits += "0" * (-len(bits) % 8)
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def field(value, width):
    return format(value, "0%db" % width)


def make_block(tag, bits="", size=BLOCK_SIZE):
    """Build a compressed block: tag, reserved byte, payload, zero padding."""
    block = tag + b"\x00" + pack_bits(bits)
    return block.ljust(size, b"\x00")
