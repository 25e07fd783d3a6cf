"""Coordinate-system descriptors used to route expansion variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .units import DEGREE, RADIAN, AngularUnits, resolve_units

CoordinateFamily = Literal["cartesian", "spherical_equatorial", "geographic"]

ANGULAR_FAMILIES: tuple[str, ...] = ("spherical_equatorial", "geographic")
COORDINATE_FAMILIES: tuple[str, ...] = ("cartesian",) + ANGULAR_FAMILIES


@dataclass(frozen=True)
class CoordinateSystem:
    """Family plus (for angular families) the unit system of a geometry."""

    family: CoordinateFamily
    units: Optional[AngularUnits] = None

    def __post_init__(self) -> None:
        if self.family not in COORDINATE_FAMILIES:
            supported = ", ".join(f"'{name}'" for name in COORDINATE_FAMILIES)
            raise ValueError(
                f"Unsupported coordinate family '{self.family}'. "
                f"Supported: ({supported})"
            )
        if self.family == "cartesian" and self.units is not None:
            raise ValueError("cartesian coordinate systems carry no angular units")
        if self.family != "cartesian" and self.units is None:
            raise ValueError(f"{self.family} coordinate systems require units")

    @property
    def is_angular(self) -> bool:
        return self.family in ANGULAR_FAMILIES


def spherical_equatorial(units: AngularUnits | str = "degree") -> CoordinateSystem:
    """Spherical-equatorial system (longitude, latitude) in ``units``."""

    return CoordinateSystem("spherical_equatorial", resolve_units(units))


def geographic(units: AngularUnits | str = "degree") -> CoordinateSystem:
    """Geographic system (longitude, latitude on a spheroid) in ``units``."""

    return CoordinateSystem("geographic", resolve_units(units))


CARTESIAN = CoordinateSystem("cartesian")
SPHERICAL_EQUATORIAL_DEGREE = CoordinateSystem("spherical_equatorial", DEGREE)
SPHERICAL_EQUATORIAL_RADIAN = CoordinateSystem("spherical_equatorial", RADIAN)
GEOGRAPHIC_DEGREE = CoordinateSystem("geographic", DEGREE)
GEOGRAPHIC_RADIAN = CoordinateSystem("geographic", RADIAN)

__all__ = [
    "ANGULAR_FAMILIES",
    "CARTESIAN",
    "COORDINATE_FAMILIES",
    "GEOGRAPHIC_DEGREE",
    "GEOGRAPHIC_RADIAN",
    "SPHERICAL_EQUATORIAL_DEGREE",
    "SPHERICAL_EQUATORIAL_RADIAN",
    "CoordinateFamily",
    "CoordinateSystem",
    "geographic",
    "spherical_equatorial",
]
