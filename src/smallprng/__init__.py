"""
smallprng
=========

Small, fast, deterministic pseudo-random number generators.

This package implements two non-cryptographic generator families with
bit-exact reference outputs:

- Seiran128 : 128-bit xorshift-rotate generator, 64-bit output, with
  jump-ahead by 2^32, 2^64 and 2^96 steps.
- SFC ("Small Fast Chaotic") : 32- and 64-bit variants, parameterized by
  rotation/shift constants (p, q, r).

They are meant for simulations, sampling, procedural generation and test
fixtures. Do not use them where an adversary must not predict the output.

----------------------------------------------------------------------
Workflow
----------------------------------------------------------------------

Core design
-----------
1. Engines (engines/):
   - Own the state words and implement init / next (/ jump).
   - Expose a single capability to the rest of the package: ``width``
     and ``next()``.

2. BitPacker (utils/packing.py):
   - Slices raw words into narrower units, low bits first.
   - Optional acceptance filter with redraw on reject.

3. Generators (generators/):
   - Facade over one engine: next_bool, next_u8..next_u64, next_array,
     next_blob, next_text, next_opaque_id.

Unified import style
--------------------
Top-level:
  from smallprng import Seiran128, SFC64, SFC32, make_generator

Subpackages:
  from smallprng.engines import Seiran128Engine, SFC64Engine, SFCParams
  from smallprng.generators import sfc64a, sfc32a, GENERATORS
  from smallprng.utils import BitPacker, jax_key, chisquare_bytes

Data flow
---------
seed --> engine state --> raw words --> BitPacker --> typed output

Thread safety
-------------
None. Every call mutates state; guard shared instances with a lock.
"""

from .engines import (
    Engine,
    Seiran128Engine,
    SFC32Engine,
    SFC64Engine,
    SFCEngine,
    SFCParams,
)
from .generators import (
    GENERATORS,
    SFC32,
    SFC64,
    Generator,
    Seiran128,
    make_generator,
    sfc32a,
    sfc32b,
    sfc32c,
    sfc64a,
    sfc64b,
)
from .utils import BitPacker, decode_opaque_id, encode_opaque_id

__version__ = "0.1.0"

__all__ = [
    # Engines
    "Engine",
    "Seiran128Engine",
    "SFCEngine",
    "SFC32Engine",
    "SFC64Engine",
    "SFCParams",
    # Generators
    "Generator",
    "Seiran128",
    "SFC32",
    "SFC64",
    "sfc64a",
    "sfc64b",
    "sfc32a",
    "sfc32b",
    "sfc32c",
    "GENERATORS",
    "make_generator",
    # Utils
    "BitPacker",
    "encode_opaque_id",
    "decode_opaque_id",
]
