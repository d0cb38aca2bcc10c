"""
base.py
-------

Generator facade over a raw word engine.

Provides:
- next() --> raw word
- next_bool(), next_u8() .. next_u64() --> typed scalars
- next_words(n) --> raw words as a numpy array
- next_array(n), next_blob(n) --> byte streams (8-bit packing)
- next_text(n) --> printable ASCII string (7-bit packing with rejection)
- next_opaque_id() --> encoded 10-byte identifier

Design
------
The facade owns exactly one engine and never buffers bits between calls,
so the output of any call depends only on the engine state at that point.
Algorithm-specific seeding and jumps live in the subclasses
(smallprng.generators.seiran, smallprng.generators.sfc).
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from smallprng.engines.base import Engine
from smallprng.utils.bits import mask
from smallprng.utils.ids import encode_opaque_id
from smallprng.utils.packing import BYTES, PRINTABLE_ASCII

OPAQUE_ID_BYTES = 10

_WORD_DTYPES = {32: np.uint32, 64: np.uint64}


class Generator:
    """
    Typed extraction on top of an Engine.

    Parameters
    ----------
    engine : Engine
        Raw word source. The generator takes ownership of it.

    Notes
    -----
    Not thread-safe: every method mutates the engine state.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @property
    def width(self) -> int:
        """Raw word width in bits."""
        return self.engine.width

    @property
    def state(self) -> tuple[int, ...]:
        """Engine state words. Assign a tuple of the same shape to restore."""
        return self.engine.state

    @state.setter
    def state(self, words: tuple[int, ...]) -> None:
        self.engine.state = words

    def copy(self) -> Generator:
        """Return an independent generator continuing from the same state."""
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.engine = self.engine.copy()
        return clone

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def next(self) -> int:
        """Return the next raw word."""
        return self.engine.next()

    def next_bool(self) -> bool:
        """Return the lowest bit of one raw word as a bool."""
        return self.engine.next() & 1 == 1

    def _next_bits(self, nbits: int) -> int:
        if nbits <= self.engine.width:
            return self.engine.next() & mask(nbits)
        # 32-bit engines: first word is the low half
        lo = self.engine.next()
        hi = self.engine.next()
        return (lo | (hi << 32)) & mask(nbits)

    def next_u8(self) -> int:
        return self._next_bits(8)

    def next_u16(self) -> int:
        return self._next_bits(16)

    def next_u32(self) -> int:
        return self._next_bits(32)

    def next_u64(self) -> int:
        """
        Return a 64-bit unsigned integer.

        On 64-bit engines this is one raw word. On 32-bit engines two words
        are drawn; the first supplies the low 32 bits, the second the high.
        """
        return self._next_bits(64)

    # ------------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------------

    def next_words(self, n: int) -> np.ndarray:
        """
        Draw ``n`` raw words.

        Returns
        -------
        np.ndarray, shape (n,)
            ``uint32`` or ``uint64`` depending on the engine width.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        dtype = _WORD_DTYPES[self.engine.width]
        return np.array([self.engine.next() for _ in range(n)], dtype=dtype)

    def next_array(self, n: int) -> np.ndarray:
        """
        Draw ``n`` bytes as a ``uint8`` array.

        Bytes are the little-endian byte order of successive raw words;
        unused bytes of the last word are discarded.
        """
        return BYTES.pack(self.engine, n)

    def next_blob(self, n: int) -> bytes:
        """Same stream as ``next_array`` but returned as ``bytes``."""
        return self.next_array(n).tobytes()

    def next_text(self, n: int) -> str:
        """
        Draw a string of ``n`` printable ASCII characters (0x20 to 0x7E).

        Raises
        ------
        RuntimeError
            If the filtered stream fails to decode. This indicates a broken
            packer and cannot happen with the printable-ASCII filter.
        """
        raw = PRINTABLE_ASCII.pack(self.engine, n).tobytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RuntimeError(
                "printable-ASCII packer produced undecodable bytes"
            ) from exc

    def next_opaque_id(self, encoder: Callable[[bytes], object] | None = None):
        """
        Encode a fresh 10-byte blob as an opaque identifier.

        Parameters
        ----------
        encoder : Callable[[bytes], Any], optional
            Blob-to-identifier encoder. Defaults to
            smallprng.utils.ids.encode_opaque_id.
        """
        encoder = encoder or encode_opaque_id
        return encoder(self.next_blob(OPAQUE_ID_BYTES))

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.engine.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(engine={self.engine!r})"

