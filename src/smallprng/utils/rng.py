"""
rng.py
------

JAX interop for smallprng generators.

JAX uses explicit, splittable PRNG keys rather than stateful generators.
These helpers derive raw (``uint32[2]``) JAX keys from a smallprng stream so
that a single seeded generator can drive both host-side sampling and
``jax.random`` calls reproducibly.

MVP implementation:
- One key per ``next_u64()`` draw, high word first.

Examples
--------
>>> import jax.random as jr
>>> from smallprng import Seiran128
>>> from smallprng.utils.rng import jax_key, jax_keys
>>> g = Seiran128(seed=0)
>>> key = jax_key(g)
>>> x = jr.normal(key, (3,))
>>> k1, k2 = jax_keys(g, 2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp
import numpy as np

from smallprng.utils.bits import MASK32

if TYPE_CHECKING:
    from smallprng.generators import Generator


def _key_words(word: int) -> list[int]:
    return [(word >> 32) & MASK32, word & MASK32]


def jax_key(generator: Generator) -> jax.Array:
    """
    Derive a raw JAX PRNG key from one 64-bit draw.

    Parameters
    ----------
    generator : Generator
        Source generator; advanced by one ``next_u64()`` call.

    Returns
    -------
    jax.Array, shape (2,), dtype uint32
        Key usable with any ``jax.random`` function.
    """
    words = np.array(_key_words(generator.next_u64()), dtype=np.uint32)
    return jnp.asarray(words)


def jax_keys(generator: Generator, num: int) -> jax.Array:
    """
    Derive ``num`` raw JAX PRNG keys.

    Parameters
    ----------
    generator : Generator
        Source generator; advanced by ``num`` ``next_u64()`` calls.
    num : int
        Number of keys to return.

    Returns
    -------
    jax.Array, shape (num, 2), dtype uint32
        Stacked keys, unpackable like the output of ``jax.random.split``.
    """
    if num <= 0:
        raise ValueError(f"num must be positive, got {num}")
    words = np.array(
        [_key_words(generator.next_u64()) for _ in range(num)], dtype=np.uint32
    )
    return jnp.asarray(words)
