import pytest

from dclconv.dclexceptions import DecodeOverflow, StreamOverrun
from dclconv.lformat import LFormatDecoder, ldecode
from helpers import field, pack_bits

A = "1 " + field(0x41, 8)
B = "1 " + field(0x42, 8)
END = "0 " + field(0, 16)


def backref(offset, length_field):
    return "0 " + field(offset, 16) + " " + field(length_field, 4)


def lstream(*parts):
    return b"L\x00" + pack_bits(" ".join(parts))


class TestLFormatDecoder:
    def test_literals(self):
        assert ldecode(lstream(A, B, END), 4) == b"AB\x00\x00"

    def test_immediate_end(self):
        assert ldecode(lstream(END), 8) == bytes(8)

    def test_backref_to_fresh_slots(self):
        data = lstream(A, B, backref(1, 0), END)
        assert ldecode(data, 8) == b"ABABA\x00\x00\x00"

    def test_backref_repeats_its_own_output(self):
        data = lstream(A, backref(1, 15), END)
        assert ldecode(data, 20) == b"A" * 19 + b"\x00"

    def test_backref_offset_wraps(self):
        data = lstream(A, backref(0xFFFF, 0), END)
        assert ldecode(data, 4) == b"A\x00\x00A"

    def test_backref_addresses_by_offset_not_distance(self):
        # the same offset reads the same table slots wherever it appears
        data = lstream(A, B, A, B, B, backref(1, 0), END)
        assert ldecode(data, 8) == b"ABABBABA"

    def test_literals_after_backref(self):
        data = lstream(A, backref(1, 0), B, END)
        assert ldecode(data, 6) == b"AAAAB\x00"

    def test_table_is_fresh_per_call(self):
        ldecode(lstream(A, B, END), 4)
        assert ldecode(lstream(backref(1, 0), END), 4) == bytes(4)

    def test_table_slot_follows_output_length(self):
        decoder = LFormatDecoder(lstream(A, B, END), 4)
        decoder.run()
        assert decoder.table[1:3] == b"AB"
        assert decoder.table[0] == 0
        assert decoder.outpos == 2

    def test_literal_overflow(self):
        with pytest.raises(DecodeOverflow):
            ldecode(lstream(A, B, A, END), 2)

    def test_backref_overflow(self):
        with pytest.raises(DecodeOverflow):
            ldecode(lstream(A, backref(1, 15), END), 10)

    def test_missing_terminator(self):
        with pytest.raises(StreamOverrun):
            ldecode(b"L\x00\xff", 16)

    def test_all_ones_payload_is_bounded(self):
        with pytest.raises((DecodeOverflow, StreamOverrun)):
            ldecode(b"L\x00" + b"\xff" * 64, 16)
