"""Tests for the skyframes.config module."""

import jax.numpy as jnp
import pytest

from skyframes.config import get_dtype, set_dtype
from skyframes.coordinates import position_spherical_to_cartesian
from skyframes.frames import resolve_frame_matrix, transform
from skyframes.rotations import Rx, is_rotation_matrix
from skyframes.rotations._tolerance import get_rotation_epsilon


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_x64_enabled(self):
        assert jnp.asarray(1.0).dtype == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")


class TestDtypePropagation:
    def test_float64_outputs(self):
        xyz = position_spherical_to_cartesian(1.0, 0.3, 0.2)
        assert xyz.dtype == jnp.float64

    def test_float32_outputs(self):
        set_dtype(jnp.float32)
        xyz = position_spherical_to_cartesian(1.0, 0.3, 0.2)
        assert xyz.dtype == jnp.float32

    def test_frame_matrix_follows_dtype(self):
        set_dtype(jnp.float32)
        R = resolve_frame_matrix("ICRS2GAL")
        assert R.dtype == jnp.float32

    def test_float32_transform_close_to_float64(self):
        ref = transform("ICRS2GAL", 10.0, 20.0)
        set_dtype(jnp.float32)
        low = transform("ICRS2GAL", 10.0, 20.0)
        assert low.dtype == jnp.float32
        assert jnp.allclose(low, ref, atol=1e-3)


class TestRotationEpsilon:
    def test_float64(self):
        assert get_rotation_epsilon() == 1e-12

    def test_float32(self):
        set_dtype(jnp.float32)
        assert get_rotation_epsilon() == 1e-6

    def test_float16(self):
        set_dtype(jnp.float16)
        assert get_rotation_epsilon() == 1e-3

    def test_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_rotation_epsilon() == 2e-2

    def test_bfloat16_looser_than_float16(self):
        set_dtype(jnp.float16)
        half = get_rotation_epsilon()
        set_dtype(jnp.bfloat16)
        assert get_rotation_epsilon() > half

    @pytest.mark.parametrize("dtype", [jnp.float64, jnp.float32, jnp.float16, jnp.bfloat16])
    def test_elementary_rotation_accepted_under_each_dtype(self, dtype):
        set_dtype(dtype)
        R = Rx(0.3)
        assert R.dtype == dtype
        assert is_rotation_matrix(R)
