"""Ordering strategies for the Cartesian expansion loop.

A strategy is a binary predicate over coordinates.  ``less`` decides whether
a point coordinate extends a box minimum and ``greater`` whether it extends
the maximum.  Callers pass either ``None`` (natural numeric ordering), one
comparator applied to every dimension, or a sequence holding one entry per
dimension (each entry may itself be ``None``).
"""

from __future__ import annotations

from typing import Literal, Optional, Sequence, Union

import jax.numpy as jnp
from beartype.typing import Callable
from jaxtyping import Array

Comparator = Callable[[Array, Array], Array]
StrategySpec = Optional[Union[Comparator, Sequence[Optional[Comparator]]]]
Sign = Literal[1, -1]


def natural_less(a: Array, b: Array) -> Array:
    return jnp.asarray(a) < jnp.asarray(b)


def natural_greater(a: Array, b: Array) -> Array:
    return jnp.asarray(a) > jnp.asarray(b)


def reversed_ordering(comparator: Comparator) -> Comparator:
    """Return ``comparator`` with its arguments swapped.

    ``reversed_ordering(natural_less)`` behaves like ``natural_greater``, so
    passing it as the ``less`` strategy for one axis makes that axis grow
    its minimum when the coordinate is numerically larger.
    """

    def reversed_comparator(a: Array, b: Array) -> Array:
        return comparator(b, a)

    return reversed_comparator


def default_strategy(sign: Sign) -> Comparator:
    """Natural ordering for ``sign`` (1 extends minima, -1 extends maxima)."""

    if sign == 1:
        return natural_less
    if sign == -1:
        return natural_greater
    raise ValueError(f"Unsupported strategy sign {sign!r}. Supported: (1, -1)")


def select_strategy(strategy: StrategySpec, sign: Sign, dimension: int) -> Comparator:
    """Resolve the comparator used on ``dimension``."""

    if strategy is None:
        return default_strategy(sign)
    if callable(strategy):
        return strategy
    if dimension >= len(strategy):
        raise ValueError(
            f"Strategy sequence of length {len(strategy)} has no entry for "
            f"dimension {dimension}"
        )
    selected = strategy[dimension]
    if selected is None:
        return default_strategy(sign)
    return selected


__all__ = [
    "Comparator",
    "Sign",
    "StrategySpec",
    "default_strategy",
    "natural_greater",
    "natural_less",
    "reversed_ordering",
    "select_strategy",
]
