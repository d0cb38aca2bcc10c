"""
packing.py
----------

Bit packing of raw generator words into narrower output units.

A BitPacker drains words from any engine (anything with ``width`` and
``next()``) and slices them, low bits first, into ``nbits``-wide units.
An optional acceptance predicate rejects units; a rejected unit is simply
dropped and the next one is drawn from the remaining (or a fresh) word.

Residual bits never carry over between calls: each ``pack`` starts with an
empty buffer, and leftover bits of the last word are discarded.

Examples
--------
>>> from smallprng.engines import Seiran128Engine
>>> from smallprng.utils.packing import BYTES
>>> e = Seiran128Engine()
>>> e.init(401)
>>> BYTES.pack(e, 9).tolist()
[95, 48, 69, 210, 41, 54, 78, 141, 49]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

if TYPE_CHECKING:
    from smallprng.engines.base import Engine


def is_printable_ascii(unit: int) -> bool:
    """Return True for printable ASCII (0x20 through 0x7E)."""
    return 0x20 <= unit <= 0x7E


@dataclass(frozen=True)
class BitPacker:
    """
    Packs fixed-width generator words into ``nbits``-wide output units.

    Attributes
    ----------
    nbits : int
        Width of each output unit. Must fit in ``dtype`` and must not exceed
        the width of the source engine.
    accept : Callable[[int], bool] | None
        Optional predicate; units for which it returns False are skipped.
    dtype : numpy dtype, default=np.uint8
        Element type of the returned array.

    Notes
    -----
    With a filter, the number of words consumed is unbounded in principle.
    In practice the engines are close to uniform, so the expected number of
    draws per accepted unit is ``2**nbits / n_accepted``.
    """

    nbits: int
    accept: Callable[[int], bool] | None = None
    dtype: type = np.uint8

    def __post_init__(self):
        """Validate configuration."""
        if self.nbits < 0:
            raise ValueError(f"nbits must be non-negative, got {self.nbits}")
        capacity = np.iinfo(self.dtype).bits
        if self.nbits > capacity:
            raise ValueError(
                f"nbits={self.nbits} does not fit in {np.dtype(self.dtype).name}"
            )

    def pack(self, source: Engine, length: int) -> np.ndarray:
        """
        Draw ``length`` output units from ``source``.

        Parameters
        ----------
        source : Engine
            Word source; only ``source.width`` and ``source.next()`` are used.
        length : int
            Number of units to produce.

        Returns
        -------
        np.ndarray, shape (length,)
            Packed units. Empty (and no words drawn) when ``length == 0`` or
            ``nbits == 0``.

        Raises
        ------
        ValueError
            If ``length`` is negative or ``nbits`` exceeds the source width.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        width = source.width
        nbits = self.nbits
        if nbits > width:
            raise ValueError(
                f"nbits={nbits} exceeds the {width}-bit word width of the source"
            )

        out = np.zeros(length, dtype=self.dtype)
        if nbits == 0:
            return out[:0]

        unit_mask = (1 << nbits) - 1
        accept = self.accept
        rand = 0
        bits = 0
        i = 0
        while i < length:
            if bits < nbits:
                rand = source.next()
                bits = width
            unit = rand & unit_mask
            rand >>= nbits
            bits -= nbits
            if accept is not None and not accept(unit):
                continue
            out[i] = unit
            i += 1
        return out


def pack_bits(
    source: Engine,
    nbits: int,
    length: int,
    accept: Callable[[int], bool] | None = None,
) -> np.ndarray:
    """Functional shortcut for ``BitPacker(nbits, accept).pack(source, length)``."""
    return BitPacker(nbits, accept).pack(source, length)


# Raw byte stream
BYTES = BitPacker(8)

# 7-bit units restricted to printable ASCII
PRINTABLE_ASCII = BitPacker(7, accept=is_printable_ascii)
