"""Tests for ordering strategy selection."""

import jax.numpy as jnp
import pytest

from expandax import natural_greater, natural_less, reversed_ordering, select_strategy


def test_default_strategies_follow_sign():
    assert select_strategy(None, 1, 0) is natural_less
    assert select_strategy(None, -1, 3) is natural_greater


def test_single_comparator_applies_to_every_dimension():
    def always(a, b):
        return jnp.asarray(True)

    assert select_strategy(always, 1, 0) is always
    assert select_strategy(always, -1, 7) is always


def test_sequence_selects_per_dimension_with_defaults():
    flipped = reversed_ordering(natural_less)
    strategies = [None, flipped]
    assert select_strategy(strategies, 1, 0) is natural_less
    assert select_strategy(strategies, 1, 1) is flipped


def test_sequence_too_short_raises():
    with pytest.raises(ValueError, match="no entry for dimension 2"):
        select_strategy([None, None], 1, 2)


def test_unknown_sign_raises():
    with pytest.raises(ValueError, match="Unsupported strategy sign"):
        select_strategy(None, 0, 0)


def test_reversed_ordering_swaps_arguments():
    flipped = reversed_ordering(natural_less)
    assert bool(flipped(jnp.asarray(2.0), jnp.asarray(1.0)))
    assert not bool(flipped(jnp.asarray(1.0), jnp.asarray(2.0)))
    assert bool(natural_greater(jnp.asarray(2.0), jnp.asarray(1.0)))
