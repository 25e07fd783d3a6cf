"""Tests for tolerance-aware comparisons."""

import jax.numpy as jnp

from expandax import equals, larger, smaller


def test_equals_absorbs_rounding_noise():
    a = jnp.asarray(0.1 + 0.2, dtype=jnp.float64)
    b = jnp.asarray(0.3, dtype=jnp.float64)
    assert bool(a != b)
    assert bool(equals(a, b))


def test_equals_scales_with_magnitude():
    big = jnp.asarray(1.0e12, dtype=jnp.float64)
    eps = jnp.finfo(jnp.float64).eps
    assert bool(equals(big, big * (1.0 + 0.5 * eps)))
    assert not bool(equals(big, big + 1.0))


def test_equals_handles_infinities():
    inf = jnp.asarray(jnp.inf, dtype=jnp.float64)
    assert bool(equals(inf, inf))
    assert not bool(equals(inf, -inf))


def test_strict_orderings_ignore_near_equal_values():
    a = jnp.asarray(0.1 + 0.2, dtype=jnp.float64)
    b = jnp.asarray(0.3, dtype=jnp.float64)
    assert not bool(smaller(b, a))
    assert not bool(larger(a, b))
    assert bool(smaller(jnp.asarray(1.0), jnp.asarray(2.0)))
    assert bool(larger(jnp.asarray(2.0), jnp.asarray(1.0)))


def test_comparisons_broadcast_over_arrays():
    values = jnp.array([-1.0, 0.0, 1.0])
    assert jnp.array_equal(smaller(values, 0.0), jnp.array([True, False, False]))
    assert jnp.array_equal(larger(values, 0.0), jnp.array([False, False, True]))
    assert jnp.array_equal(equals(values, 0.0), jnp.array([False, True, False]))
