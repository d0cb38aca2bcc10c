"""
bits.py
-------

Fixed-width integer helpers.

Python integers never overflow, so every engine step is written in terms of
these helpers to get modular (wraparound) semantics at 32 or 64 bits.

Examples
--------
>>> from smallprng.utils.bits import rotl, wrap
>>> hex(rotl(0x8000000000000001, 1, 64))
'0x3'
>>> wrap(2**64 + 5, 64)
5
"""

from __future__ import annotations

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


def mask(width: int) -> int:
    """Return the all-ones word of ``width`` bits."""
    return (1 << width) - 1


def wrap(x: int, width: int) -> int:
    """Reduce ``x`` modulo ``2**width`` (negative values included)."""
    return x & ((1 << width) - 1)


def shl(x: int, r: int, width: int) -> int:
    """Left shift within ``width`` bits; bits shifted out are lost."""
    return (x << r) & ((1 << width) - 1)


def rotl(x: int, r: int, width: int) -> int:
    """
    Rotate ``x`` left by ``r`` bits inside a ``width``-bit word.

    Parameters
    ----------
    x : int
        Unsigned word, assumed already reduced to ``width`` bits.
    r : int
        Rotation amount; taken modulo ``width``.
    width : int
        Word size in bits.

    Returns
    -------
    int
        The rotated word.
    """
    r %= width
    m = (1 << width) - 1
    return ((x << r) & m) | (x >> (width - r))
