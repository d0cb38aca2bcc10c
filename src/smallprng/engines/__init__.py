"""
engines
=======

Raw word generators.

This subpackage provides:
- Engine : abstract base (``width`` + ``next()``), consumed by the bit packer.
- Seiran128Engine : 128-bit state, 64-bit output, with 2^32/2^64/2^96 jumps.
- SFCEngine : Small Fast Chaotic generator, generic over 32/64-bit words.
- SFC32Engine, SFC64Engine : width-fixed SFC engines.
- SFCParams and presets : (width, p, q, r) parameter sets.

Engines only produce raw words. Typed extraction (bools, bytes, text)
lives in smallprng.generators.
"""

from .base import Engine
from .seiran import JUMP32, JUMP64, JUMP96, Seiran128Engine
from .sfc import (
    DEFAULT_SEEDS,
    NOT_RECOMMENDED,
    SFC32A,
    SFC32B,
    SFC32C,
    SFC64A,
    SFC64B,
    SFC_PRESETS,
    SFC32Engine,
    SFC64Engine,
    SFCEngine,
    SFCParams,
)

__all__ = [
    # Base
    "Engine",
    # Seiran128
    "Seiran128Engine",
    "JUMP32",
    "JUMP64",
    "JUMP96",
    # SFC
    "SFCEngine",
    "SFC32Engine",
    "SFC64Engine",
    "SFCParams",
    "SFC64A",
    "SFC64B",
    "SFC32A",
    "SFC32B",
    "SFC32C",
    "SFC_PRESETS",
    "NOT_RECOMMENDED",
    "DEFAULT_SEEDS",
]
