"""
test_bits.py
------------

Tests for fixed-width arithmetic helpers.
"""

from smallprng.utils.bits import MASK32, MASK64, mask, rotl, shl, wrap


class TestRotl:
    def test_carries_high_bit_around(self):
        assert rotl(0x8000000000000001, 1, 64) == 0x3
        assert rotl(0x80000000, 1, 32) == 0x1

    def test_zero_and_full_rotation_are_identity(self):
        x = 0x0123456789ABCDEF
        assert rotl(x, 0, 64) == x
        assert rotl(x, 64, 64) == x

    def test_inverse_rotation(self):
        x = 0xDEADBEEF
        assert rotl(rotl(x, 13, 32), 32 - 13, 32) == x

    def test_result_stays_in_width(self):
        assert rotl(MASK64, 29, 64) == MASK64
        assert rotl(MASK32, 21, 32) == MASK32


class TestWrapAndShift:
    def test_wrap(self):
        assert wrap(2**64 + 5, 64) == 5
        assert wrap(-1, 64) == MASK64
        assert wrap(-1, 32) == MASK32

    def test_shl_drops_high_bits(self):
        assert shl(0xFFFFFFFF, 4, 32) == 0xFFFFFFF0
        assert shl(1 << 63, 1, 64) == 0

    def test_mask(self):
        assert mask(8) == 0xFF
        assert mask(64) == MASK64
