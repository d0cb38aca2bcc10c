"""
test_rng.py
-----------

Tests for JAX key derivation.
"""

import jax.numpy as jnp
import jax.random as jr
import pytest

from smallprng import SFC32, Seiran128
from smallprng.utils.rng import jax_key, jax_keys


class TestJaxKey:
    def test_shape_and_dtype(self):
        key = jax_key(Seiran128(seed=0))
        assert key.shape == (2,)
        assert key.dtype == jnp.uint32

    def test_words_come_from_next_u64(self):
        g, twin = Seiran128(seed=17), Seiran128(seed=17)
        key = jax_key(g)
        word = twin.next_u64()
        assert int(key[0]) == word >> 32
        assert int(key[1]) == word & 0xFFFFFFFF

    def test_deterministic(self):
        k1 = jax_key(SFC32(seed=3))
        k2 = jax_key(SFC32(seed=3))
        assert jnp.array_equal(k1, k2)

    def test_usable_with_jax_random(self):
        key = jax_key(Seiran128(seed=1))
        x = jr.normal(key, (3,))
        assert x.shape == (3,)


class TestJaxKeys:
    def test_shape(self):
        keys = jax_keys(Seiran128(seed=0), 3)
        assert keys.shape == (3, 2)

    def test_keys_are_distinct_and_unpackable(self):
        k1, k2 = jax_keys(Seiran128(seed=0), 2)
        assert not jnp.array_equal(k1, k2)
        assert not jnp.allclose(jr.uniform(k1, (4,)), jr.uniform(k2, (4,)))

    def test_matches_repeated_jax_key(self):
        g, twin = SFC32(seed=4), SFC32(seed=4)
        keys = jax_keys(g, 2)
        assert jnp.array_equal(keys[0], jax_key(twin))
        assert jnp.array_equal(keys[1], jax_key(twin))

    def test_nonpositive_num(self):
        with pytest.raises(ValueError):
            jax_keys(Seiran128(seed=0), 0)
