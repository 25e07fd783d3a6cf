"""Smoke run: grow Cartesian and geographic envelopes from random points.

Run:
    python examples/envelope_smoke.py --n 256 --seed 0
"""

from __future__ import annotations

import argparse
import logging

import jax
import jax.numpy as jnp

from expandax import CARTESIAN, GEOGRAPHIC_DEGREE, Box, Point, envelope, expand


def _make_points(n: int, seed: int) -> tuple[jax.Array, jax.Array]:
    key = jax.random.PRNGKey(seed)
    k1, k2, k3 = jax.random.split(key, 3)
    positions = jax.random.normal(k1, (n, 3))
    # Cluster around the antimeridian so wraparound is exercised.
    lons = 180.0 + 15.0 * jax.random.normal(k2, (n,))
    lats = jax.random.uniform(k3, (n,), minval=-60.0, maxval=60.0)
    return positions, jnp.stack([lons, lats], axis=1)


def _describe(label: str, box: Box) -> None:
    print(
        f"{label:>10}: min={jnp.round(box.min_corner, 3).tolist()} "
        f"max={jnp.round(box.max_corner, 3).tolist()}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--n", type=int, default=256)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    positions, lonlat = _make_points(args.n, args.seed)

    _describe("cartesian", envelope(positions, CARTESIAN))
    _describe("geographic", envelope(lonlat, GEOGRAPHIC_DEGREE))

    polar = Box.from_bounds([0.0, 90.0], [0.0, 90.0], GEOGRAPHIC_DEGREE)
    expand(polar, Point.of(-40.0, 60.0, coordinate_system=GEOGRAPHIC_DEGREE))
    _describe("pole box", polar)


if __name__ == "__main__":
    main()
