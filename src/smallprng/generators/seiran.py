"""
seiran.py
---------

Seiran128 generator facade.

Examples
--------
>>> from smallprng import Seiran128
>>> g = Seiran128(seed=401)
>>> hex(g.next())
'0x8d4e3629d245305f'
>>> g.jump32()
>>> g.next_text(8)  # doctest: +SKIP
"""

from __future__ import annotations

from smallprng.engines.seiran import Seiran128Engine
from smallprng.generators.base import Generator


class Seiran128(Generator):
    """
    Seiran128 generator.

    Parameters
    ----------
    seed : int, optional
        When given, the state is seeded immediately. Otherwise the state
        stays all-zero until ``init`` is called.
    """

    def __init__(self, seed: int | None = None):
        super().__init__(Seiran128Engine())
        if seed is not None:
            self.init(seed)

    def init(self, seed: int) -> None:
        """Reseed from a 64-bit integer."""
        self.engine.init(seed)

    def jump32(self) -> None:
        """Skip ahead 2^32 outputs."""
        self.engine.jump32()

    def jump64(self) -> None:
        """Skip ahead 2^64 outputs."""
        self.engine.jump64()

    def jump96(self) -> None:
        """Skip ahead 2^96 outputs."""
        self.engine.jump96()
