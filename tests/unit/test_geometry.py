"""Tests for box and point containers."""

import jax
import jax.numpy as jnp
import pytest

from expandax import CARTESIAN, GEOGRAPHIC_DEGREE, Box, Point


def test_point_accessors():
    point = Point.of(1.0, 2.0, 3.0)
    assert point.dimension == 3
    assert float(point[1]) == 2.0
    assert float(point.get(2)) == 3.0
    assert point.coordinate_system == CARTESIAN


def test_point_is_immutable():
    point = Point.of(1.0, 2.0)
    with pytest.raises(AttributeError):
        point.coords = jnp.zeros(2)


def test_box_accessors_and_setters():
    box = Box.from_bounds([0.0, 0.0], [1.0, 1.0])
    assert box.dimension == 2
    box.set("min", 1, -2.0)
    box.set("max", 0, 5.0)
    assert float(box.get("min", 1)) == -2.0
    assert float(box.get("max", 0)) == 5.0
    assert jnp.array_equal(box.min_corner, jnp.array([0.0, -2.0]))


def test_box_rejects_unknown_corner():
    box = Box.from_bounds([0.0], [1.0])
    with pytest.raises(ValueError, match="Unsupported corner 'mid'"):
        box.get("mid", 0)


def test_box_rejects_mismatched_corners():
    with pytest.raises(ValueError, match="must share a shape"):
        Box.from_bounds([0.0, 0.0], [1.0, 1.0, 1.0])
    with pytest.raises(ValueError, match="must be 1-D"):
        Box.from_bounds([[0.0]], [[1.0]])


def test_inverse_box_is_empty():
    box = Box.inverse(3)
    assert box.dimension == 3
    assert bool(jnp.all(jnp.isposinf(box.min_corner)))
    assert bool(jnp.all(jnp.isneginf(box.max_corner)))


def test_from_point_builds_degenerate_box():
    point = Point.of(10.0, 20.0, coordinate_system=GEOGRAPHIC_DEGREE)
    box = Box.from_point(point)
    assert jnp.array_equal(box.min_corner, box.max_corner)
    assert box.coordinate_system == GEOGRAPHIC_DEGREE


def test_angular_bounds_round_trip_through_assign():
    box = Box.from_bounds([0, 0], [10, 10], GEOGRAPHIC_DEGREE)
    box.assign_bounds(
        jnp.asarray(-5.5), jnp.asarray(1.0), jnp.asarray(185.0), jnp.asarray(2.0)
    )
    lon_min, lat_min, lon_max, lat_max = box.bounds()
    assert float(lon_min) == -5.5
    assert float(lon_max) == 185.0
    assert jnp.issubdtype(box.min_corner.dtype, jnp.floating)


def test_assign_bounds_keeps_extra_dimensions():
    box = Box.from_bounds([0.0, 0.0, -100.0], [1.0, 1.0, 100.0], GEOGRAPHIC_DEGREE)
    box.assign_bounds(
        jnp.asarray(2.0), jnp.asarray(3.0), jnp.asarray(4.0), jnp.asarray(5.0)
    )
    assert jnp.array_equal(box.min_corner, jnp.array([2.0, 3.0, -100.0]))
    assert jnp.array_equal(box.max_corner, jnp.array([4.0, 5.0, 100.0]))


def test_box_and_point_are_pytrees():
    box = Box.from_bounds([0.0, 1.0], [2.0, 3.0], GEOGRAPHIC_DEGREE)
    point = Point.of(4.0, 5.0, coordinate_system=GEOGRAPHIC_DEGREE)

    leaves, treedef = jax.tree_util.tree_flatten(box)
    assert len(leaves) == 2
    rebuilt = jax.tree_util.tree_unflatten(treedef, leaves)
    assert rebuilt.coordinate_system == GEOGRAPHIC_DEGREE

    doubled = jax.tree_util.tree_map(lambda x: 2 * x, point)
    assert isinstance(doubled, Point)
    assert jnp.array_equal(doubled.coords, jnp.array([8.0, 10.0]))
