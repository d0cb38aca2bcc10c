"""
utils
=====

Shared utility functions and helpers for smallprng.

This subpackage provides:
- bits : fixed-width wraparound arithmetic (mask, wrap, shl, rotl).
- packing : BitPacker, slicing raw words into narrower units with optional rejection.
- ids : checksummed text encoding for random identifier blobs.
- rng : JAX PRNG keys derived from a generator stream.
- diagnostics : byte histograms, chi-square and monobit checks.

MVP implementation
------------------
- packing: 8-bit byte stream and 7-bit printable-ASCII stream.
- diagnostics: scipy.stats.chisquare over byte counts.
- rng: legacy raw uint32[2] keys.
"""

from .bits import MASK32, MASK64, mask, rotl, shl, wrap
from .diagnostics import (
    byte_histogram,
    chisquare_bytes,
    monobit_fraction,
    print_summary,
    summary,
)
from .ids import decode_opaque_id, encode_opaque_id
from .packing import BYTES, PRINTABLE_ASCII, BitPacker, is_printable_ascii, pack_bits
from .rng import jax_key, jax_keys

__all__ = [
    # bits
    "MASK32",
    "MASK64",
    "mask",
    "wrap",
    "shl",
    "rotl",
    # packing
    "BitPacker",
    "pack_bits",
    "is_printable_ascii",
    "BYTES",
    "PRINTABLE_ASCII",
    # ids
    "encode_opaque_id",
    "decode_opaque_id",
    # diagnostics
    "byte_histogram",
    "chisquare_bytes",
    "monobit_fraction",
    "summary",
    "print_summary",
    # rng
    "jax_key",
    "jax_keys",
]
