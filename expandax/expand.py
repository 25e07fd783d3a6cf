"""Public box-by-point expansion API for Expandax."""

from __future__ import annotations

from typing import Literal, Optional

import jax.numpy as jnp
from beartype import beartype
from jax import core as jax_core
from jax import lax
from jaxtyping import Array, ArrayLike, jaxtyped

from . import _expand_impl
from .comparisons import equals
from .config import DEFAULT_EXPAND_CONFIG, ExpandConfig
from .coordinate_systems import CoordinateSystem
from .dtypes import result_coord_dtype
from .geometry import Box, Point
from .strategies import StrategySpec

ExpansionEvent = _expand_impl.ExpansionEvent
log_expansion_event = _expand_impl.log_expansion_event
expand_angular_bounds = _expand_impl.expand_angular_bounds
expand_angular_bounds_jit = _expand_impl.expand_angular_bounds_jit
expand_cartesian_corners = _expand_impl.expand_cartesian_corners

ExpandVariant = Literal["cartesian", "angular"]

_VARIANT_BY_FAMILY: dict[str, ExpandVariant] = {
    "cartesian": "cartesian",
    "spherical_equatorial": "angular",
    "geographic": "angular",
}


def select_expand_variant(
    box_system: CoordinateSystem,
    point_system: CoordinateSystem,
) -> ExpandVariant:
    """Pick the expansion algorithm for a box/point coordinate-system pair."""

    if box_system.family != point_system.family:
        raise ValueError(
            "Mismatched coordinate families: box is "
            f"'{box_system.family}', point is '{point_system.family}'"
        )
    variant = _VARIANT_BY_FAMILY.get(box_system.family)
    if variant is None:
        supported = ", ".join(f"'{name}'" for name in sorted(_VARIANT_BY_FAMILY))
        raise ValueError(
            f"Unsupported coordinate family '{box_system.family}'. "
            f"Supported: ({supported})"
        )
    return variant


def _is_traced(*values) -> bool:
    return any(isinstance(value, jax_core.Tracer) for value in values)


def _validate_dimensions(box: Box, coords: Array) -> None:
    if coords.shape[-1] != box.dimension:
        raise ValueError(
            f"point dimension {coords.shape[-1]} does not match box "
            f"dimension {box.dimension}"
        )


def _validate_angular_systems(box: Box, point_system: CoordinateSystem) -> None:
    for name, system in (("box", box.coordinate_system), ("point", point_system)):
        if not system.is_angular:
            raise ValueError(
                f"{name} coordinate system '{system.family}' is not angular"
            )
    if box.dimension < 2:
        raise ValueError(
            f"angular boxes need longitude and latitude, got dimension {box.dimension}"
        )


def _validate_latitudes(latitudes: Array, max_latitude: float, label: str) -> None:
    latitudes = jnp.asarray(latitudes)
    inside = (jnp.abs(latitudes) <= max_latitude) | equals(
        jnp.abs(latitudes), max_latitude
    )
    if not bool(jnp.all(inside)):
        raise ValueError(
            f"{label} latitude outside [-{max_latitude}, {max_latitude}]: "
            f"{latitudes.tolist()}"
        )


def _validate_angular_box(box: Box) -> None:
    max_latitude = box.coordinate_system.units.max_latitude
    _, lat_min, _, lat_max = box.bounds()
    _validate_latitudes(jnp.stack([lat_min, lat_max]), max_latitude, "box")
    if bool(lat_min > lat_max):
        raise ValueError(
            f"box latitude bounds are inverted: lat_min={float(lat_min)} > "
            f"lat_max={float(lat_max)}"
        )


def _emit(
    config: ExpandConfig,
    variant: str,
    case: str,
    box: Box,
    point_system: CoordinateSystem,
) -> None:
    log_expansion_event(
        ExpansionEvent(
            variant=variant,
            case=case,
            dimension=box.dimension,
            box_family=box.coordinate_system.family,
            point_family=point_system.family,
        ),
        level=config.log_level,
    )


@jaxtyped(typechecker=beartype)
def expand_cartesian(
    box: Box,
    point: Point,
    less: StrategySpec = None,
    greater: StrategySpec = None,
    *,
    config: Optional[ExpandConfig] = None,
) -> Box:
    """Grow ``box`` in place so it contains ``point``; returns ``box``.

    Coordinates are compared as-is on every dimension with the ``less`` and
    ``greater`` strategies (natural ordering when ``None``).
    """

    config = config or DEFAULT_EXPAND_CONFIG
    if config.check_preconditions:
        _validate_dimensions(box, point.coords)

    box.min_corner, box.max_corner = expand_cartesian_corners(
        box.min_corner, box.max_corner, point.coords, less, greater
    )
    if not _is_traced(box.min_corner, point.coords):
        _emit(config, "cartesian", "loop", box, point.coordinate_system)
    return box


@jaxtyped(typechecker=beartype)
def expand_angular(
    box: Box,
    point: Point,
    *,
    config: Optional[ExpandConfig] = None,
) -> Box:
    """Grow a longitude/latitude ``box`` in place so it contains ``point``.

    The point is converted into the box's angular units.  The result is
    written in canonical form: longitudes wrapped into the half-open period
    range, with ``lon_max`` shifted by one period when the interval crosses
    the antimeridian.  Latitudes outside ``[-max_latitude, max_latitude]``
    raise ``ValueError`` when precondition checks are enabled.
    """

    config = config or DEFAULT_EXPAND_CONFIG
    _validate_angular_systems(box, point.coordinate_system)
    traced = _is_traced(box.min_corner, box.max_corner, point.coords)
    if config.check_preconditions and not traced:
        _validate_dimensions(box, point.coords)
        _validate_angular_box(box)
        _validate_latitudes(
            point.coords[1], point.coordinate_system.units.max_latitude, "point"
        )

    dtype = result_coord_dtype(box.min_corner, box.max_corner, point.coords)
    lon_min, lat_min, lon_max, lat_max = (
        jnp.asarray(bound, dtype=dtype) for bound in box.bounds()
    )
    *bounds, case = expand_angular_bounds(
        lon_min,
        lat_min,
        lon_max,
        lat_max,
        jnp.asarray(point.coords[0], dtype=dtype),
        jnp.asarray(point.coords[1], dtype=dtype),
        box.coordinate_system.units,
        point.coordinate_system.units,
    )
    box.assign_bounds(*bounds)

    if not traced:
        case_name = _expand_impl.ANGULAR_CASE_NAMES[int(case)]
        _emit(config, "angular", case_name, box, point.coordinate_system)
    return box


@jaxtyped(typechecker=beartype)
def expand(
    box: Box,
    point: Point,
    less: StrategySpec = None,
    greater: StrategySpec = None,
    *,
    config: Optional[ExpandConfig] = None,
) -> Box:
    """Grow ``box`` in place by ``point`` using the variant for their systems.

    Ordering strategies only apply to the Cartesian variant; passing them
    for an angular pair raises ``ValueError``.
    """

    variant = select_expand_variant(box.coordinate_system, point.coordinate_system)
    if variant == "cartesian":
        return expand_cartesian(box, point, less, greater, config=config)
    if less is not None or greater is not None:
        raise ValueError("ordering strategies are not supported for angular boxes")
    return expand_angular(box, point, config=config)


@jaxtyped(typechecker=beartype)
def expand_many(
    box: Box,
    points: ArrayLike,
    less: StrategySpec = None,
    greater: StrategySpec = None,
    *,
    point_system: Optional[CoordinateSystem] = None,
    config: Optional[ExpandConfig] = None,
) -> Box:
    """Absorb every row of ``points`` into ``box`` in order; returns ``box``.

    ``points`` has shape ``(N, D)`` and is expressed in ``point_system``
    (the box's system when ``None``).  Rows are folded with ``lax.scan``,
    so the result matches calling :func:`expand` once per row.
    """

    config = config or DEFAULT_EXPAND_CONFIG
    point_system = point_system or box.coordinate_system
    variant = select_expand_variant(box.coordinate_system, point_system)
    points = jnp.asarray(points)
    if points.ndim != 2:
        raise ValueError(f"points must have shape (N, D), got {points.shape}")

    traced = _is_traced(box.min_corner, box.max_corner, points)
    if config.check_preconditions and not traced:
        _validate_dimensions(box, points)

    if variant == "cartesian":

        def cartesian_step(carry, coords):
            mins, maxs = carry
            return expand_cartesian_corners(mins, maxs, coords, less, greater), None

        dtype = jnp.result_type(box.min_corner, box.max_corner, points)
        (box.min_corner, box.max_corner), _ = lax.scan(
            cartesian_step,
            (box.min_corner.astype(dtype), box.max_corner.astype(dtype)),
            points.astype(dtype),
        )
        if not traced:
            _emit(config, variant, "scan", box, point_system)
        return box

    if less is not None or greater is not None:
        raise ValueError("ordering strategies are not supported for angular boxes")
    _validate_angular_systems(box, point_system)
    if config.check_preconditions and not traced:
        _validate_angular_box(box)
        _validate_latitudes(points[:, 1], point_system.units.max_latitude, "point")

    box_units = box.coordinate_system.units
    point_units = point_system.units

    def angular_step(carry, coords):
        *bounds, _ = expand_angular_bounds(
            *carry, coords[0], coords[1], box_units, point_units
        )
        return tuple(bounds), None

    dtype = result_coord_dtype(box.min_corner, box.max_corner, points)
    initial = tuple(jnp.asarray(bound, dtype=dtype) for bound in box.bounds())
    final, _ = lax.scan(angular_step, initial, points.astype(dtype))
    box.assign_bounds(*final)
    if not traced:
        _emit(config, variant, "scan", box, point_system)
    return box


@jaxtyped(typechecker=beartype)
def envelope(
    points: ArrayLike,
    coordinate_system: CoordinateSystem,
    less: StrategySpec = None,
    greater: StrategySpec = None,
    *,
    config: Optional[ExpandConfig] = None,
) -> Box:
    """Smallest box, grown point by point, that contains every row of ``points``.

    Starts from the degenerate box on the first row, so custom orderings
    need no matching empty box.
    """

    points = jnp.asarray(points)
    if points.ndim != 2 or points.shape[0] == 0:
        raise ValueError(
            f"envelope needs a non-empty (N, D) array of points, got {points.shape}"
        )
    box = Box.from_point(Point(points[0], coordinate_system))
    return expand_many(box, points, less, greater, config=config)


__all__ = [
    "ExpandVariant",
    "ExpansionEvent",
    "envelope",
    "expand",
    "expand_angular",
    "expand_angular_bounds",
    "expand_angular_bounds_jit",
    "expand_cartesian",
    "expand_cartesian_corners",
    "expand_many",
    "log_expansion_event",
    "select_expand_variant",
]
