"""Kernels that absorb a point into a box.

Both kernels are pure: they take corner arrays (or the four angular bounds)
and return updated copies.  Guarded paths are selected with ``jnp.where`` so
the kernels can run under ``jax.jit``, ``jax.vmap`` and ``lax.scan``.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import NamedTuple, Optional

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, Real, jaxtyped

from .comparisons import equals, larger, smaller
from .dtypes import result_coord_dtype
from .normalize import (
    normalize_spheroidal_box_coordinates,
    normalize_spheroidal_coordinates,
)
from .strategies import StrategySpec, select_strategy
from .units import AngularUnits, convert_coordinates

logger = logging.getLogger(__name__)

# Guarded paths of the angular expander; exactly one fires per call.
CASE_POLE_POINT = 0
CASE_POLE_BOX = 1
CASE_GENERAL = 2

ANGULAR_CASE_NAMES: tuple[str, ...] = ("pole_point", "pole_box", "general")


class ExpansionEvent(NamedTuple):
    """Metadata describing one eager expansion call."""

    variant: str
    case: str
    dimension: int
    box_family: str
    point_family: str


def log_expansion_event(
    event: ExpansionEvent,
    *,
    level: int = logging.DEBUG,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log an expansion event using the provided (or module) logger."""

    target_logger = logger or logging.getLogger(__name__)
    target_logger.log(
        level,
        "Expanded %s box by %s point via %s/%s (dim=%d)",
        event.box_family,
        event.point_family,
        event.variant,
        event.case,
        event.dimension,
    )


@jaxtyped(typechecker=beartype)
def expand_cartesian_corners(
    min_corner: Real[Array, " dim"],
    max_corner: Real[Array, " dim"],
    point: Real[Array, " dim"],
    less: StrategySpec = None,
    greater: StrategySpec = None,
) -> tuple[Array, Array]:
    """Return corners grown so that they contain ``point``.

    Dimensions are visited in increasing order.  On each one the ``less``
    and ``greater`` strategies are both consulted; they are independent, so
    a non-standard pair may move both bounds on the same axis.
    """

    dtype = jnp.result_type(min_corner, max_corner, point)
    mins = min_corner.astype(dtype)
    maxs = max_corner.astype(dtype)
    coords = point.astype(dtype)

    for dimension in range(coords.shape[0]):
        less_fn = select_strategy(less, 1, dimension)
        greater_fn = select_strategy(greater, -1, dimension)
        coord = coords[dimension]
        mins = mins.at[dimension].set(
            jnp.where(less_fn(coord, mins[dimension]), coord, mins[dimension])
        )
        maxs = maxs.at[dimension].set(
            jnp.where(greater_fn(coord, maxs[dimension]), coord, maxs[dimension])
        )
    return mins, maxs


def _expand_longitude(
    lon_min: Array,
    lon_max: Array,
    p_lon: Array,
    units: AngularUnits,
) -> tuple[Array, Array]:
    period = units.period

    below = smaller(p_lon, lon_min)
    shifted = p_lon + period
    # Outside on both readings: grow whichever end needs the shorter arc.
    below_outside = below & larger(shifted, lon_max)
    below_grow_min = below_outside & smaller(lon_min - p_lon, shifted - lon_max)
    below_grow_max = below_outside & ~below_grow_min

    # p_lon <= half_period, hence lon_max <= half_period on this path.
    above = ~below & larger(p_lon, lon_max)
    above_wrap = (
        above & (lon_min < 0) & larger(p_lon - lon_max, period - p_lon + lon_min)
    )
    above_set = above & ~above_wrap

    new_lon_min = jnp.where(below_grow_min | above_wrap, p_lon, lon_min)
    new_lon_max = jnp.where(
        below_grow_max,
        shifted,
        jnp.where(
            above_wrap,
            lon_max + period,
            jnp.where(above_set, p_lon, lon_max),
        ),
    )
    return new_lon_min, new_lon_max


@jaxtyped(typechecker=beartype)
def expand_angular_bounds(
    lon_min: Float[Array, ""],
    lat_min: Float[Array, ""],
    lon_max: Float[Array, ""],
    lat_max: Float[Array, ""],
    p_lon: Float[Array, ""],
    p_lat: Float[Array, ""],
    box_units: AngularUnits,
    point_units: AngularUnits,
) -> tuple[Array, Array, Array, Array, Array]:
    """Absorb an angular point into angular box bounds.

    The point is normalized in ``point_units`` and converted to
    ``box_units``; the box is canonicalized in ``box_units``.  Returns the
    updated ``(lon_min, lat_min, lon_max, lat_max)`` in ``box_units`` plus
    the code of the guarded path that produced them (``CASE_POLE_POINT``,
    ``CASE_POLE_BOX`` or ``CASE_GENERAL``).

    Latitudes must lie in ``[-max_latitude, max_latitude]``; anything else,
    NaN included, gives an undefined result.
    """

    dtype = result_coord_dtype(lon_min, lat_min, lon_max, lat_max, p_lon, p_lat)

    p_lon, p_lat = normalize_spheroidal_coordinates(
        p_lon.astype(dtype), p_lat.astype(dtype), point_units
    )
    p_lon, p_lat = convert_coordinates(p_lon, p_lat, point_units, box_units)

    b_lon_min, b_lat_min, b_lon_max, b_lat_max = normalize_spheroidal_box_coordinates(
        lon_min.astype(dtype),
        lat_min.astype(dtype),
        lon_max.astype(dtype),
        lat_max.astype(dtype),
        box_units,
    )

    max_latitude = box_units.max_latitude
    pole_point = equals(jnp.abs(p_lat), max_latitude)
    pole_box = (
        ~pole_point
        & equals(b_lat_min, b_lat_max)
        & equals(jnp.abs(b_lat_min), max_latitude)
    )
    case = jnp.where(
        pole_point,
        CASE_POLE_POINT,
        jnp.where(pole_box, CASE_POLE_BOX, CASE_GENERAL),
    )

    # Latitude update is the same min/max on every path.
    new_lat_min = jnp.minimum(b_lat_min, p_lat)
    new_lat_max = jnp.maximum(b_lat_max, p_lat)

    general_lon_min, general_lon_max = _expand_longitude(
        b_lon_min, b_lon_max, p_lon, box_units
    )
    new_lon_min = jnp.where(
        pole_point,
        b_lon_min,
        jnp.where(pole_box, p_lon, general_lon_min),
    )
    new_lon_max = jnp.where(
        pole_point,
        b_lon_max,
        jnp.where(pole_box, p_lon, general_lon_max),
    )
    return new_lon_min, new_lat_min, new_lon_max, new_lat_max, case


@partial(jax.jit, static_argnames=("box_units", "point_units"))
@jaxtyped(typechecker=beartype)
def expand_angular_bounds_jit(
    lon_min: Array,
    lat_min: Array,
    lon_max: Array,
    lat_max: Array,
    p_lon: Array,
    p_lat: Array,
    *,
    box_units: AngularUnits,
    point_units: AngularUnits,
) -> tuple[Array, Array, Array, Array, Array]:
    """JIT-compiled wrapper around :func:`expand_angular_bounds`.

    Compilation specialises on the two unit systems.
    """

    return expand_angular_bounds(
        lon_min, lat_min, lon_max, lat_max, p_lon, p_lat, box_units, point_units
    )


__all__ = [
    "ANGULAR_CASE_NAMES",
    "CASE_GENERAL",
    "CASE_POLE_BOX",
    "CASE_POLE_POINT",
    "ExpansionEvent",
    "expand_angular_bounds",
    "expand_angular_bounds_jit",
    "expand_cartesian_corners",
    "log_expansion_event",
]
