"""Angular unit systems and conversions between them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from jaxtyping import Array

UnitName = Literal["degree", "radian"]


@dataclass(frozen=True)
class AngularUnits:
    """Constants describing one angular unit system on the spheroid."""

    name: UnitName
    period: float
    max_latitude: float
    # Multiplying by this factor converts a value in these units to radians.
    to_radians: float

    @property
    def half_period(self) -> float:
        return 0.5 * self.period

    @property
    def min_latitude(self) -> float:
        return -self.max_latitude

    @property
    def min_longitude(self) -> float:
        return -self.half_period

    @property
    def max_longitude(self) -> float:
        return self.half_period


DEGREE = AngularUnits(
    name="degree",
    period=360.0,
    max_latitude=90.0,
    to_radians=math.pi / 180.0,
)

RADIAN = AngularUnits(
    name="radian",
    period=2.0 * math.pi,
    max_latitude=0.5 * math.pi,
    to_radians=1.0,
)

_UNITS: dict[str, AngularUnits] = {
    DEGREE.name: DEGREE,
    RADIAN.name: RADIAN,
}


def available_units() -> tuple[str, ...]:
    """Return the registered angular unit names."""

    return tuple(sorted(_UNITS))


def resolve_units(units: AngularUnits | str) -> AngularUnits:
    """Return the :class:`AngularUnits` named by ``units``."""

    if isinstance(units, AngularUnits):
        return units
    resolved = _UNITS.get(units)
    if resolved is None:
        supported = ", ".join(f"'{name}'" for name in available_units())
        raise ValueError(
            f"Unsupported angular units '{units}'. Supported: ({supported})"
        )
    return resolved


def convert_coordinates(
    longitude: Array,
    latitude: Array,
    from_units: AngularUnits,
    to_units: AngularUnits,
) -> tuple[Array, Array]:
    """Convert a longitude/latitude pair between angular unit systems.

    Conversion is a single multiplication, so a value normalized into the
    canonical range of ``from_units`` lands in the canonical range of
    ``to_units``.
    """

    if from_units == to_units:
        return longitude, latitude
    factor = from_units.to_radians / to_units.to_radians
    return longitude * factor, latitude * factor


__all__ = [
    "DEGREE",
    "RADIAN",
    "AngularUnits",
    "UnitName",
    "available_units",
    "convert_coordinates",
    "resolve_units",
]
