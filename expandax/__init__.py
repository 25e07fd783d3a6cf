"""Expandax: box-by-point expansion for Cartesian and angular bounding volumes."""

from jax import config as _jax_config

# Angular tolerance checks rely on float64 machine epsilon.
_jax_config.update("jax_enable_x64", True)

from .comparisons import equals, larger, smaller
from .config import DEFAULT_EXPAND_CONFIG, ExpandConfig
from .coordinate_systems import (
    CARTESIAN,
    GEOGRAPHIC_DEGREE,
    GEOGRAPHIC_RADIAN,
    SPHERICAL_EQUATORIAL_DEGREE,
    SPHERICAL_EQUATORIAL_RADIAN,
    CoordinateFamily,
    CoordinateSystem,
    geographic,
    spherical_equatorial,
)
from .dtypes import COORD_DTYPE
from .expand import (
    ExpandVariant,
    ExpansionEvent,
    envelope,
    expand,
    expand_angular,
    expand_angular_bounds,
    expand_angular_bounds_jit,
    expand_cartesian,
    expand_cartesian_corners,
    expand_many,
    log_expansion_event,
    select_expand_variant,
)
from .geometry import Box, Point
from .normalize import (
    normalize_longitude,
    normalize_spheroidal_box_coordinates,
    normalize_spheroidal_coordinates,
)
from .strategies import (
    natural_greater,
    natural_less,
    reversed_ordering,
    select_strategy,
)
from .units import (
    DEGREE,
    RADIAN,
    AngularUnits,
    available_units,
    convert_coordinates,
    resolve_units,
)

__all__ = [
    "CARTESIAN",
    "COORD_DTYPE",
    "DEFAULT_EXPAND_CONFIG",
    "DEGREE",
    "GEOGRAPHIC_DEGREE",
    "GEOGRAPHIC_RADIAN",
    "RADIAN",
    "SPHERICAL_EQUATORIAL_DEGREE",
    "SPHERICAL_EQUATORIAL_RADIAN",
    "AngularUnits",
    "Box",
    "CoordinateFamily",
    "CoordinateSystem",
    "ExpandConfig",
    "ExpandVariant",
    "ExpansionEvent",
    "Point",
    "available_units",
    "convert_coordinates",
    "envelope",
    "equals",
    "expand",
    "expand_angular",
    "expand_angular_bounds",
    "expand_angular_bounds_jit",
    "expand_cartesian",
    "expand_cartesian_corners",
    "expand_many",
    "geographic",
    "larger",
    "log_expansion_event",
    "natural_greater",
    "natural_less",
    "normalize_longitude",
    "normalize_spheroidal_box_coordinates",
    "normalize_spheroidal_coordinates",
    "resolve_units",
    "reversed_ordering",
    "select_expand_variant",
    "select_strategy",
    "smaller",
    "spherical_equatorial",
]
