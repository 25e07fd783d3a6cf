"""Box and point containers consumed by the expansion algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import jax
import jax.numpy as jnp
from jaxtyping import Array

from .coordinate_systems import CARTESIAN, CoordinateSystem
from .dtypes import COORD_DTYPE

Corner = Literal["min", "max"]


def _as_corner_array(values) -> Array:
    array = jnp.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"corner coordinates must be 1-D, got shape {array.shape}")
    return array


@dataclass(frozen=True)
class Point:
    """Immutable coordinate tuple tagged with its coordinate system."""

    coords: Array
    coordinate_system: CoordinateSystem = CARTESIAN

    @classmethod
    def of(cls, *coords, coordinate_system: CoordinateSystem = CARTESIAN) -> "Point":
        return cls(_as_corner_array(coords), coordinate_system)

    @property
    def dimension(self) -> int:
        return int(self.coords.shape[0])

    def get(self, dimension: int) -> Array:
        return self.coords[dimension]

    def __getitem__(self, dimension: int) -> Array:
        return self.get(dimension)


@dataclass
class Box:
    """Mutable box defined by a minimum and a maximum corner.

    On angular coordinate systems dimension 0 is longitude and dimension 1
    is latitude.  The longitude pair may be stored straddling the periodic
    cut either as ``min > max`` (``170, -170``) or unwrapped with ``max``
    beyond the half period (``170, 190``); expansion always writes the
    unwrapped form.
    """

    min_corner: Array
    max_corner: Array
    coordinate_system: CoordinateSystem = field(default=CARTESIAN)

    def __post_init__(self) -> None:
        self.min_corner = _as_corner_array(self.min_corner)
        self.max_corner = _as_corner_array(self.max_corner)
        if self.min_corner.shape != self.max_corner.shape:
            raise ValueError(
                "min_corner and max_corner must share a shape, got "
                f"{self.min_corner.shape} and {self.max_corner.shape}"
            )

    @classmethod
    def from_bounds(
        cls,
        min_corner,
        max_corner,
        coordinate_system: CoordinateSystem = CARTESIAN,
    ) -> "Box":
        return cls(jnp.asarray(min_corner), jnp.asarray(max_corner), coordinate_system)

    @classmethod
    def from_point(cls, point: Point) -> "Box":
        """Degenerate box whose corners both sit on ``point``."""

        return cls(point.coords, point.coords, point.coordinate_system)

    @classmethod
    def inverse(
        cls,
        dimension: int,
        coordinate_system: CoordinateSystem = CARTESIAN,
        dtype=COORD_DTYPE,
    ) -> "Box":
        """Empty box (``min=+inf``, ``max=-inf``) that any point expands."""

        return cls(
            jnp.full((dimension,), jnp.inf, dtype=dtype),
            jnp.full((dimension,), -jnp.inf, dtype=dtype),
            coordinate_system,
        )

    @property
    def dimension(self) -> int:
        return int(self.min_corner.shape[0])

    def get(self, corner: Corner, dimension: int) -> Array:
        return self._corner(corner)[dimension]

    def set(self, corner: Corner, dimension: int, value) -> None:
        updated = self._corner(corner).at[dimension].set(value)
        if corner == "min":
            self.min_corner = updated
        else:
            self.max_corner = updated

    def bounds(self) -> tuple[Array, Array, Array, Array]:
        """Return ``(lon_min, lat_min, lon_max, lat_max)`` of an angular box."""

        return (
            self.min_corner[0],
            self.min_corner[1],
            self.max_corner[0],
            self.max_corner[1],
        )

    def assign_bounds(self, lon_min, lat_min, lon_max, lat_max) -> None:
        lower = jnp.stack([jnp.asarray(lon_min), jnp.asarray(lat_min)])
        upper = jnp.stack([jnp.asarray(lon_max), jnp.asarray(lat_max)])
        dtype = jnp.result_type(self.min_corner, self.max_corner, lower, upper)
        self.min_corner = self.min_corner.astype(dtype).at[:2].set(lower.astype(dtype))
        self.max_corner = self.max_corner.astype(dtype).at[:2].set(upper.astype(dtype))

    def _corner(self, corner: Corner) -> Array:
        if corner == "min":
            return self.min_corner
        if corner == "max":
            return self.max_corner
        raise ValueError(f"Unsupported corner '{corner}'. Supported: ('max', 'min')")


def _register_pytrees() -> None:
    if getattr(Box, "_expandax_pytree_registered", False):
        return

    def flatten_point(point: Point):
        return (point.coords,), point.coordinate_system

    def unflatten_point(coordinate_system, children):
        point = object.__new__(Point)
        object.__setattr__(point, "coords", children[0])
        object.__setattr__(point, "coordinate_system", coordinate_system)
        return point

    def flatten_box(box: Box):
        return (box.min_corner, box.max_corner), box.coordinate_system

    def unflatten_box(coordinate_system, children):
        # Bypass __post_init__: leaves may be tracers or placeholder objects.
        box = object.__new__(Box)
        box.min_corner, box.max_corner = children
        box.coordinate_system = coordinate_system
        return box

    jax.tree_util.register_pytree_node(Point, flatten_point, unflatten_point)
    jax.tree_util.register_pytree_node(Box, flatten_box, unflatten_box)
    Box._expandax_pytree_registered = True


_register_pytrees()

__all__ = ["Box", "Corner", "Point"]
