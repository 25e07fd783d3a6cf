"""Canonicalization of angular coordinates and boxes.

Longitudes are wrapped into ``(-P/2, P/2]`` for the period ``P`` of the unit
system.  Latitudes are never modified here: values outside
``[-max_latitude, max_latitude]`` are a caller error and are rejected by the
public expansion entry points rather than silently reflected or clamped.
"""

from __future__ import annotations

import jax.numpy as jnp
from jaxtyping import Array

from .comparisons import equals, smaller
from .units import AngularUnits


def normalize_longitude(longitude: Array, units: AngularUnits) -> Array:
    """Wrap ``longitude`` into ``(-half_period, half_period]``."""

    longitude = jnp.asarray(longitude)
    half = units.half_period
    period = units.period

    up = jnp.mod(longitude + half, period) - half
    up = jnp.where(equals(up, -half), half, up)
    down = half - jnp.mod(half - longitude, period)

    wrapped = jnp.where(
        longitude > half,
        up,
        jnp.where(longitude < -half, down, longitude),
    )
    return jnp.where(equals(jnp.abs(longitude), half), half, wrapped)


def normalize_spheroidal_coordinates(
    longitude: Array,
    latitude: Array,
    units: AngularUnits,
    *,
    normalize_poles: bool = True,
) -> tuple[Array, Array]:
    """Canonicalize a point; at a pole its longitude collapses to zero."""

    longitude = normalize_longitude(longitude, units)
    latitude = jnp.asarray(latitude)
    if normalize_poles:
        at_pole = equals(jnp.abs(latitude), units.max_latitude)
        longitude = jnp.where(at_pole, jnp.zeros_like(longitude), longitude)
    return longitude, latitude


def is_band(longitude_min: Array, longitude_max: Array, units: AngularUnits) -> Array:
    """Whether raw longitudes span at least a full period."""

    return ~smaller(jnp.abs(longitude_min - longitude_max), units.period)


def normalize_spheroidal_box_coordinates(
    longitude_min: Array,
    latitude_min: Array,
    longitude_max: Array,
    latitude_max: Array,
    units: AngularUnits,
) -> tuple[Array, Array, Array, Array]:
    """Canonicalize box bounds into the unwrapped straddling form.

    Both straddling inputs, ``(170, -170)`` and ``(170, 190)`` in degrees,
    come out as ``(170, 190)``: after wrapping, ``longitude_max`` is shifted
    up by one period whenever it lies below ``longitude_min``.  A box
    degenerated to one pole gets zero longitudes and a box whose raw span
    covers a full period becomes the band ``[-P/2, P/2]``.
    """

    band = is_band(longitude_min, longitude_max, units)

    lon_min = normalize_longitude(longitude_min, units)
    lon_max = normalize_longitude(longitude_max, units)
    lat_min = jnp.asarray(latitude_min)
    lat_max = jnp.asarray(latitude_max)

    south = equals(lat_min, units.min_latitude) & equals(lat_max, units.min_latitude)
    north = equals(lat_min, units.max_latitude) & equals(lat_max, units.max_latitude)
    pole = south | north
    crossing = lon_min > lon_max

    zero = jnp.zeros_like(lon_min)
    new_lon_min = jnp.where(
        pole,
        zero,
        jnp.where(band, units.min_longitude, lon_min),
    )
    new_lon_max = jnp.where(
        pole,
        zero,
        jnp.where(
            band,
            units.max_longitude,
            jnp.where(crossing, lon_max + units.period, lon_max),
        ),
    )
    return new_lon_min, lat_min, new_lon_max, lat_max


__all__ = [
    "is_band",
    "normalize_longitude",
    "normalize_spheroidal_box_coordinates",
    "normalize_spheroidal_coordinates",
]
