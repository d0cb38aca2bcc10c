"""
test_packing.py
---------------

Tests for BitPacker.

Coverage:
- Byte packing reproduces the little-endian layout of raw words
- Words consumed == ceil(len * nbits / width) without a filter
- Rejection filter skips units and pulls fresh words when exhausted
- Empty requests draw nothing
- Validation errors
"""

import math

import numpy as np
import pytest

from smallprng.engines import Seiran128Engine, SFC32Engine
from smallprng.utils.packing import (
    BYTES,
    PRINTABLE_ASCII,
    BitPacker,
    is_printable_ascii,
    pack_bits,
)


def _units_to_word(units, nbits):
    word = 0
    for i, u in enumerate(units):
        word |= u << (i * nbits)
    return word


# ============================================================================
# Byte packing
# ============================================================================


class TestBytes:
    def test_seiran_reference_bytes(self, seiran401):
        out = BYTES.pack(seiran401, 9)
        assert out.dtype == np.uint8
        assert out.tolist() == [0x5F, 0x30, 0x45, 0xD2, 0x29, 0x36, 0x4E, 0x8D, 0x31]

    @pytest.mark.parametrize("length", [1, 7, 8, 9, 13, 64, 100])
    def test_little_endian_layout_64(self, length):
        e = Seiran128Engine()
        e.init(99)
        twin = e.copy()

        out = BYTES.pack(e, length)

        n_words = math.ceil(length * 8 / 64)
        raw = b"".join(twin.next().to_bytes(8, "little") for _ in range(n_words))
        assert out.tobytes() == raw[:length]
        # both engines consumed exactly n_words
        assert e.state == twin.state

    @pytest.mark.parametrize("length", [1, 3, 4, 5, 13, 50])
    def test_little_endian_layout_32(self, sfc32_pre, length):
        twin = sfc32_pre.copy()

        out = BYTES.pack(sfc32_pre, length)

        n_words = math.ceil(length * 8 / 32)
        raw = b"".join(twin.next().to_bytes(4, "little") for _ in range(n_words))
        assert out.tobytes() == raw[:length]
        assert sfc32_pre.state == twin.state

    def test_leftover_bits_do_not_carry_between_calls(self, list_engine):
        e = list_engine([0x44332211, 0x88776655], width=32)
        assert BYTES.pack(e, 1).tolist() == [0x11]
        # next call starts on a fresh word
        assert BYTES.pack(e, 1).tolist() == [0x55]


# ============================================================================
# Filtering
# ============================================================================


class TestFilter:
    def test_rejected_units_are_skipped(self, list_engine):
        # 7-bit units, 4 per 32-bit word; top 4 bits of each word unused
        w1 = _units_to_word([0x01, 0x41, 0x7F, 0x20], 7)
        w2 = _units_to_word([0x7E, 0x00, 0x00, 0x00], 7)
        e = list_engine([w1, w2], width=32)

        out = PRINTABLE_ASCII.pack(e, 3)

        assert out.tobytes() == b"A ~"
        assert e.calls == 2

    def test_all_rejected_word_pulls_another(self, list_engine):
        w1 = _units_to_word([0x00, 0x01, 0x02, 0x7F], 7)
        w2 = _units_to_word([0x5A, 0x00, 0x00, 0x00], 7)
        e = list_engine([w1, w2], width=32)
        assert PRINTABLE_ASCII.pack(e, 1).tobytes() == b"Z"

    def test_custom_predicate(self, list_engine):
        e = list_engine([0x04030201], width=32)
        out = pack_bits(e, 8, 2, accept=lambda u: u % 2 == 0)
        assert out.tolist() == [2, 4]

    def test_printable_range(self):
        assert is_printable_ascii(0x20)
        assert is_printable_ascii(0x7E)
        assert not is_printable_ascii(0x1F)
        assert not is_printable_ascii(0x7F)

    def test_text_stream_range_and_length(self, seiran401):
        out = PRINTABLE_ASCII.pack(seiran401, 500)
        assert len(out) == 500
        assert out.min() >= 0x20
        assert out.max() <= 0x7E


# ============================================================================
# Edge cases
# ============================================================================


class TestEdgeCases:
    def test_zero_length_draws_nothing(self, list_engine):
        e = list_engine([], width=64)
        assert BYTES.pack(e, 0).size == 0
        assert PRINTABLE_ASCII.pack(e, 0).size == 0
        assert e.calls == 0

    def test_zero_nbits_draws_nothing(self, list_engine):
        e = list_engine([], width=32)
        assert BitPacker(0).pack(e, 10).size == 0
        assert e.calls == 0

    def test_zero_length_leaves_stream_untouched(self, seiran401):
        baseline = seiran401.copy()
        BYTES.pack(seiran401, 0)
        assert seiran401.next() == baseline.next()

    def test_wider_dtype(self, list_engine):
        e = list_engine([0xAAAABBBB], width=32)
        out = BitPacker(16, dtype=np.uint16).pack(e, 2)
        assert out.dtype == np.uint16
        assert out.tolist() == [0xBBBB, 0xAAAA]

    def test_negative_length(self):
        with pytest.raises(ValueError, match="length"):
            BYTES.pack(SFC32Engine(), -1)

    def test_nbits_wider_than_source(self):
        packer = BitPacker(40, dtype=np.uint64)
        with pytest.raises(ValueError, match="exceeds"):
            packer.pack(SFC32Engine(), 1)

    def test_nbits_must_fit_dtype(self):
        with pytest.raises(ValueError, match="does not fit"):
            BitPacker(9)

    def test_negative_nbits(self):
        with pytest.raises(ValueError):
            BitPacker(-1)
