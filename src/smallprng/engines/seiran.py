"""
seiran.py
---------

Seiran128: a 128-bit xorshift-rotate generator with 64-bit output.

State is two 64-bit words ``(a, b)``. Seeding expands one 64-bit seed with
the PCG/Knuth MMIX LCG constants; jumps advance the state by 2^32, 2^64 or
2^96 steps via characteristic-polynomial jump tables.

Examples
--------
>>> from smallprng.engines import Seiran128Engine
>>> e = Seiran128Engine()
>>> e.init(401)
>>> hex(e.next())
'0x8d4e3629d245305f'
"""

from __future__ import annotations

from smallprng.engines.base import Engine
from smallprng.utils.bits import MASK64, rotl, shl

# LCG multiplier / increment used for seed expansion
C1 = 6364136223846793005
C2 = 1442695040888963407

# Jump polynomials, low word first
JUMP32 = (0x40165CBAE9CA6DEB, 0x688E6BFC19485AB1)
JUMP64 = (0xF4DF34E424CA5C56, 0x2FE2DE5C2E12F601)
JUMP96 = (0x185F4DF8B7634607, 0x95A98C7025F908B2)


class Seiran128Engine(Engine):
    """
    Seiran128 state and transition functions.

    Attributes
    ----------
    a, b : int
        The two 64-bit state words. Both are zero until ``init`` is called.
    """

    width = 64

    def __init__(self) -> None:
        self.a = 0
        self.b = 0

    def init(self, seed: int) -> None:
        """
        Seed the state from a single 64-bit value.

        Parameters
        ----------
        seed : int
            Any integer; reduced modulo 2^64 first.
        """
        a = ((seed & MASK64) * C1 + C2) & MASK64
        self.a = a
        self.b = (a * C1 + C2) & MASK64

    def next(self) -> int:
        a, b = self.a, self.b
        result = (rotl(((a + b) * 9) & MASK64, 29, 64) + a) & MASK64
        self.a = a ^ rotl(b, 29, 64)
        self.b = a ^ shl(b, 9, 64)
        return result

    def jump(self, poly: tuple[int, int]) -> None:
        """
        Advance the state by the distance encoded in ``poly``.

        Parameters
        ----------
        poly : tuple[int, int]
            128-bit jump polynomial as two 64-bit words, low word first.

        Notes
        -----
        Bits are consumed from bit 0 of the low word upwards. For every bit
        the pre-step state is accumulated when the bit is set, then the
        state is stepped once regardless.
        """
        t0 = 0
        t1 = 0
        for word in poly:
            for bit in range(64):
                if (word >> bit) & 1:
                    t0 ^= self.a
                    t1 ^= self.b
                self.next()
        self.a = t0
        self.b = t1

    def jump32(self) -> None:
        """Advance as if ``next()`` had been called 2^32 times."""
        self.jump(JUMP32)

    def jump64(self) -> None:
        """Advance as if ``next()`` had been called 2^64 times."""
        self.jump(JUMP64)

    def jump96(self) -> None:
        """Advance as if ``next()`` had been called 2^96 times."""
        self.jump(JUMP96)

    @property
    def state(self) -> tuple[int, int]:
        return (self.a, self.b)

    @state.setter
    def state(self, words: tuple[int, int]) -> None:
        a, b = words
        self.a = a & MASK64
        self.b = b & MASK64
