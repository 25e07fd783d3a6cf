"""Tolerance-aware floating-point comparisons.

Two values are considered equal when they differ by at most one machine
epsilon scaled by ``max(1, |a|, |b|)``.  ``smaller`` and ``larger`` are
strict orderings that treat such near-equal values as not ordered, which is
what the angular expansion relies on when deciding whether a longitude lies
past an interval end.
"""

from __future__ import annotations

import jax.numpy as jnp
from jaxtyping import Array


def _epsilon(a, b):
    dtype = jnp.result_type(a, b)
    if not jnp.issubdtype(dtype, jnp.floating):
        return jnp.asarray(0, dtype=dtype)
    return jnp.finfo(dtype).eps


def equals(a, b) -> Array:
    """Return whether ``a`` and ``b`` are equal within relative epsilon."""

    a = jnp.asarray(a)
    b = jnp.asarray(b)
    diff = jnp.abs(a - b)
    scale = jnp.maximum(jnp.maximum(jnp.abs(a), jnp.abs(b)), 1)
    return (a == b) | (jnp.isfinite(diff) & (diff <= _epsilon(a, b) * scale))


def smaller(a, b) -> Array:
    """Strict ``a < b`` that is false for near-equal values."""

    return ~equals(a, b) & (jnp.asarray(a) < jnp.asarray(b))


def larger(a, b) -> Array:
    """Strict ``a > b`` that is false for near-equal values."""

    return ~equals(a, b) & (jnp.asarray(a) > jnp.asarray(b))


__all__ = ["equals", "larger", "smaller"]
