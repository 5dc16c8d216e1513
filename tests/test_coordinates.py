"""Tests for the skyframes.coordinates module.

Covers spherical/Cartesian conversion with the elevation convention,
round-trip validation, the degenerate origin, and the haversine angular
distance.
"""

import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from skyframes.coordinates import (
    position_cartesian_to_spherical,
    position_spherical_to_cartesian,
    spherical_distance,
)
from skyframes.errors import DegenerateOriginError, DimensionMismatchError

# ──────────────────────────────────────────────
# Tolerance constants (float64)
# ──────────────────────────────────────────────

_TOL = 1e-12
_REL_TOL = 1e-9
_DEG_TOL = 1e-9


# ──────────────────────────────────────────────
# Spherical -> Cartesian
# ──────────────────────────────────────────────


class TestSphericalToCartesian:
    def test_origin_direction(self):
        """lon=0, lat=0 → x-axis."""
        xyz = position_spherical_to_cartesian(1.0, 0.0, 0.0)
        assert jnp.allclose(xyz, jnp.array([1.0, 0.0, 0.0]), atol=_TOL)

    def test_90deg_lon(self):
        xyz = position_spherical_to_cartesian(1.0, 90.0, 0.0, use_degrees=True)
        assert jnp.allclose(xyz, jnp.array([0.0, 1.0, 0.0]), atol=_TOL)

    def test_north_pole_elevation_convention(self):
        """lat=+90° is the +z axis (elevation, not co-latitude)."""
        xyz = position_spherical_to_cartesian(1.0, 123.0, 90.0, use_degrees=True)
        assert jnp.allclose(xyz, jnp.array([0.0, 0.0, 1.0]), atol=_TOL)

    def test_south_pole(self):
        xyz = position_spherical_to_cartesian(2.0, 0.0, -math.pi / 2.0)
        assert jnp.allclose(xyz, jnp.array([0.0, 0.0, -2.0]), atol=_TOL)

    def test_radius_scales(self):
        xyz = position_spherical_to_cartesian(5.0, 0.4, -0.3)
        assert jnp.abs(jnp.linalg.norm(xyz) - 5.0) < _TOL

    def test_formula(self):
        r, lon, lat = 3.0, 1.1, 0.4
        xyz = position_spherical_to_cartesian(r, lon, lat)
        expected = jnp.array(
            [
                r * math.cos(lon) * math.cos(lat),
                r * math.sin(lon) * math.cos(lat),
                r * math.sin(lat),
            ]
        )
        assert jnp.allclose(xyz, expected, atol=_TOL)

    def test_zero_radius(self):
        xyz = position_spherical_to_cartesian(0.0, 1.0, 0.5)
        assert jnp.array_equal(xyz, jnp.zeros(3))

    def test_array_input(self):
        lon = jnp.array([0.0, 90.0, 180.0])
        lat = jnp.array([0.0, 0.0, 0.0])
        xyz = position_spherical_to_cartesian(1.0, lon, lat, use_degrees=True)
        assert xyz.shape == (3, 3)
        assert jnp.allclose(xyz[:, 1], jnp.array([0.0, 1.0, 0.0]), atol=_TOL)


# ──────────────────────────────────────────────
# Cartesian -> Spherical
# ──────────────────────────────────────────────


class TestCartesianToSpherical:
    def test_x_axis(self):
        r, lon, lat = position_cartesian_to_spherical(jnp.array([2.0, 0.0, 0.0]))
        assert jnp.abs(r - 2.0) < _TOL
        assert jnp.abs(lon) < _TOL
        assert jnp.abs(lat) < _TOL

    def test_negative_y_longitude_range(self):
        """Longitude is returned in (-180, 180]."""
        _, lon, _ = position_cartesian_to_spherical(
            jnp.array([0.0, -1.0, 0.0]), use_degrees=True
        )
        assert jnp.abs(lon + 90.0) < _DEG_TOL

    def test_negative_x_longitude_is_180(self):
        _, lon, _ = position_cartesian_to_spherical(
            jnp.array([-1.0, 0.0, 0.0]), use_degrees=True
        )
        assert jnp.abs(lon - 180.0) < _DEG_TOL

    def test_pole(self):
        r, lon, lat = position_cartesian_to_spherical(
            jnp.array([0.0, 0.0, 3.0]), use_degrees=True
        )
        assert jnp.abs(r - 3.0) < _TOL
        assert jnp.abs(lon) < _DEG_TOL
        assert jnp.abs(lat - 90.0) < _DEG_TOL

    def test_list_input(self):
        r, lon, lat = position_cartesian_to_spherical([1.0, 1.0, 0.0], use_degrees=True)
        assert jnp.abs(r - math.sqrt(2.0)) < _TOL
        assert jnp.abs(lon - 45.0) < _DEG_TOL

    def test_array_of_points(self):
        xyz = jnp.array([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]])
        out = position_cartesian_to_spherical(xyz, use_degrees=True)
        assert out.shape == (3, 2)
        assert jnp.allclose(out[1], jnp.array([0.0, 90.0]), atol=_DEG_TOL)

    def test_degenerate_origin(self):
        with pytest.raises(DegenerateOriginError):
            position_cartesian_to_spherical(jnp.array([0.0, 0.0, 0.0]))

    def test_degenerate_origin_negative_zero(self):
        with pytest.raises(DegenerateOriginError):
            position_cartesian_to_spherical(jnp.array([-0.0, 0.0, -0.0]))

    def test_degenerate_origin_in_array(self):
        xyz = jnp.array([[1.0, 0.0], [0.0, 0.0], [0.0, 0.0]])
        with pytest.raises(DegenerateOriginError):
            position_cartesian_to_spherical(xyz)

    def test_tiny_radius_is_not_degenerate(self):
        """The origin check is exact: a tiny non-zero radius is accepted."""
        r, lon, _ = position_cartesian_to_spherical(jnp.array([0.0, 1e-150, 0.0]))
        assert r > 0.0
        assert jnp.abs(lon - math.pi / 2.0) < _TOL

    def test_wrong_shape(self):
        with pytest.raises(DimensionMismatchError):
            position_cartesian_to_spherical(jnp.array([1.0, 2.0]))


# ──────────────────────────────────────────────
# Round trips
# ──────────────────────────────────────────────


class TestRoundTrip:
    def test_cartesian_roundtrip(self):
        rng = np.random.default_rng(7)
        points = rng.normal(scale=10.0, size=(3, 200))
        sph = position_cartesian_to_spherical(points)
        back = position_spherical_to_cartesian(sph[0], sph[1], sph[2])
        scale = np.linalg.norm(points, axis=0)
        assert jnp.all(jnp.abs(back - points) <= _REL_TOL * scale)

    def test_spherical_roundtrip_degrees(self):
        lon = jnp.linspace(-179.0, 179.0, 37)
        lat = jnp.linspace(-89.0, 89.0, 37)
        xyz = position_spherical_to_cartesian(1.0, lon, lat, use_degrees=True)
        r, lon_b, lat_b = position_cartesian_to_spherical(xyz, use_degrees=True)
        assert jnp.allclose(r, 1.0, atol=_TOL)
        assert jnp.allclose(lon_b, lon, atol=_DEG_TOL)
        assert jnp.allclose(lat_b, lat, atol=_DEG_TOL)


# ──────────────────────────────────────────────
# Angular distance
# ──────────────────────────────────────────────


class TestSphericalDistance:
    def test_identity_is_zero(self):
        assert float(spherical_distance(123.4, -56.7, 123.4, -56.7)) == 0.0

    def test_symmetry(self):
        d1 = spherical_distance(10.0, 20.0, 200.0, -35.0)
        d2 = spherical_distance(200.0, -35.0, 10.0, 20.0)
        assert float(d1) == float(d2)

    def test_quarter_circle(self):
        assert jnp.abs(spherical_distance(0.0, 0.0, 90.0, 0.0) - 90.0) < _DEG_TOL

    def test_pole_to_equator(self):
        assert jnp.abs(spherical_distance(45.0, 90.0, 300.0, 0.0) - 90.0) < _DEG_TOL

    def test_antipodal(self):
        d = spherical_distance(0.0, 0.0, 180.0, 0.0)
        assert jnp.isfinite(d)
        assert jnp.abs(d - 180.0) < 1e-6

    def test_antipodal_rounding_above_one(self):
        """Antipodal pairs whose haversine term rounds above 1 stay finite."""
        lat = jnp.linspace(-1.5, 1.5, 1001)
        hav = jnp.sin(lat) * jnp.sin(lat) + jnp.cos(lat) * jnp.cos(-lat) * (
            jnp.sin(-jnp.pi / 2.0) * jnp.sin(-jnp.pi / 2.0)
        )
        assert jnp.any(hav > 1.0)

        d = spherical_distance(0.0, lat, jnp.pi, -lat, use_degrees=False)
        assert jnp.all(jnp.isfinite(d))
        assert jnp.allclose(d, jnp.pi, atol=1e-6)

    def test_radians(self):
        d = spherical_distance(0.0, 0.0, 0.0, math.pi / 4.0, use_degrees=False)
        assert jnp.abs(d - math.pi / 4.0) < _TOL

    def test_degrees_and_radians_agree(self):
        d_deg = spherical_distance(10.0, 20.0, 30.0, 40.0)
        d_rad = spherical_distance(
            math.radians(10.0),
            math.radians(20.0),
            math.radians(30.0),
            math.radians(40.0),
            use_degrees=False,
        )
        assert jnp.abs(math.radians(float(d_deg)) - d_rad) < _TOL

    def test_small_separation(self):
        """One milliarcsecond along the equator is resolved accurately."""
        mas = 1.0 / 3600.0 / 1000.0
        d = spherical_distance(10.0, 0.0, 10.0 + mas, 0.0)
        assert jnp.abs(d - mas) / mas < 1e-6

    def test_against_law_of_cosines(self):
        lon1, lat1, lon2, lat2 = map(math.radians, (15.0, -10.0, 80.0, 35.0))
        expected = math.acos(
            math.sin(lat1) * math.sin(lat2)
            + math.cos(lat1) * math.cos(lat2) * math.cos(lon1 - lon2)
        )
        d = spherical_distance(lon1, lat1, lon2, lat2, use_degrees=False)
        assert jnp.abs(d - expected) < 1e-10

    def test_vectorised(self):
        lon2 = jnp.array([0.0, 30.0, 60.0, 90.0])
        d = spherical_distance(0.0, 0.0, lon2, jnp.zeros(4))
        assert jnp.allclose(d, lon2, atol=_DEG_TOL)


# ──────────────────────────────────────────────
# JAX compatibility
# ──────────────────────────────────────────────


class TestJAXCompatibility:
    def test_spherical_to_cartesian_jit(self):
        fn = jax.jit(position_spherical_to_cartesian, static_argnames=("use_degrees",))
        xyz = fn(1.0, 0.2, 0.1)
        assert jnp.allclose(xyz, position_spherical_to_cartesian(1.0, 0.2, 0.1), atol=_TOL)

    def test_cartesian_to_spherical_jit(self):
        fn = jax.jit(position_cartesian_to_spherical)
        out = fn(jnp.array([1.0, 1.0, 1.0]))
        assert jnp.allclose(out, position_cartesian_to_spherical(jnp.array([1.0, 1.0, 1.0])), atol=_TOL)

    def test_origin_under_jit_maps_to_zero(self):
        """Tracing skips the exact-origin check; eager calls raise DegenerateOriginError (see test_degenerate_origin)."""
        out = jax.jit(position_cartesian_to_spherical)(jnp.zeros(3))
        assert jnp.array_equal(out, jnp.zeros(3))

    def test_distance_vmap(self):
        lon2 = jnp.array([10.0, 20.0, 30.0])
        d = jax.vmap(lambda l2: spherical_distance(0.0, 0.0, l2, 0.0))(lon2)
        assert jnp.allclose(d, lon2, atol=_DEG_TOL)
