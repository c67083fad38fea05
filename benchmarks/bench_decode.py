"""Benchmarks for full-block DCL decoding."""

import random
from typing import Any

import pytest

from dclconv.bitcursor import BitCursor
from dclconv.dcl import BLOCK_SIZE, HEIGHT, WIDTH, decode_block
from dclconv.pformat import fill_gaps


def lblock_of_literals(count: int) -> bytes:
    """An 'L' block of `count` literal bytes followed by the end code."""
    bits = "".join("1" + format(i & 0xFF, "08b") for i in range(count))
    bits += "0" * 17
    bits += "0" * (-len(bits) % 8)
    payload = int(bits, 2).to_bytes(len(bits) // 8, "big")
    return (b"L\x00" + payload).ljust(BLOCK_SIZE, b"\x00")


class TestDecodeBenchmarks:
    @pytest.fixture
    def random_block(self) -> bytes:
        rng = random.Random(0)
        return bytes(rng.getrandbits(8) for _ in range(BLOCK_SIZE))

    def test_read_bits(self, benchmark: Any, random_block: bytes) -> None:
        """Benchmark read_bits() - every decoder goes through it."""

        def read_all() -> int:
            cursor = BitCursor(random_block, 2)
            total = 0
            for _ in range(100_000):
                total += cursor.read_bits(8)
            return total

        assert benchmark(read_all) > 0

    def test_decode_l_literals(self, benchmark: Any) -> None:
        block = lblock_of_literals(WIDTH * HEIGHT)
        image = benchmark(decode_block, block)
        assert image.get_pixel(0, 0) == (0, 1, 2)

    def test_decode_p_zero_payload(self, benchmark: Any) -> None:
        block = b"P\x00".ljust(BLOCK_SIZE, b"\x00")
        image = benchmark(decode_block, block)
        assert image.tag == "P"

    def test_fill_gaps(self, benchmark: Any) -> None:
        def fill() -> bytearray:
            buf = bytearray(WIDTH * HEIGHT * 3)
            buf[0:3] = b"\x01\x02\x03"
            fill_gaps(buf)
            return buf

        assert benchmark(fill)[-3:] == b"\x01\x02\x03"
