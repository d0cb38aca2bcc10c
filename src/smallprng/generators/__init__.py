"""
generators
==========

User-facing generators: an engine plus typed extraction.

This subpackage provides:
- Generator : engine-agnostic facade (bools, fixed-width ints, bytes, text, ids).
- Seiran128 : Seiran128 facade with 2^32 / 2^64 / 2^96 jumps.
- SFC32, SFC64 : SFC facades with init / init3 / init_pre seeding.
- sfc64a, sfc64b, sfc32a, sfc32b, sfc32c : preset factories (pre-seeded).
- make_generator : string-based construction through GENERATORS.
"""

from __future__ import annotations

from .base import OPAQUE_ID_BYTES, Generator
from .seiran import Seiran128
from .sfc import SFC32, SFC64, from_preset, sfc32a, sfc32b, sfc32c, sfc64a, sfc64b

# Registry for string-based generator selection
GENERATORS = {
    "seiran128": Seiran128,
    "sfc64a": sfc64a,
    "sfc64b": sfc64b,
    "sfc32a": sfc32a,
    "sfc32b": sfc32b,
    "sfc32c": sfc32c,
}


def make_generator(name: str, seed: int | None = None) -> Generator:
    """
    Build a generator by registry name.

    Parameters
    ----------
    name : str
        Key of ``GENERATORS``.
    seed : int, optional
        Seed passed to ``init``. When omitted, SFC presets keep their
        ``init_pre`` seeding and Seiran128 stays zero-state.

    Raises
    ------
    ValueError
        If ``name`` is not registered.
    """
    if name not in GENERATORS:
        raise ValueError(
            f"Unknown generator: {name}. Use one of {sorted(GENERATORS)}."
        )
    g = GENERATORS[name]()
    if seed is not None:
        g.init(seed)
    return g


__all__ = [
    "Generator",
    "OPAQUE_ID_BYTES",
    "Seiran128",
    "SFC32",
    "SFC64",
    "from_preset",
    "sfc64a",
    "sfc64b",
    "sfc32a",
    "sfc32b",
    "sfc32c",
    "GENERATORS",
    "make_generator",
]
