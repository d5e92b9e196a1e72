"""Tests for the skyframes.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from skyframes.config import get_angle_tolerance, get_dtype, set_dtype
from skyframes.coordinates import spherical_to_cartesian
from skyframes.frames import apply_transformation, rotation_icrs_to_galactic
from skyframes.linalg import dot


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True

    def test_logs_change(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="skyframes.config"):
            set_dtype(jnp.float32)
        assert "float32" in caplog.text


class TestDtypePropagation:
    def test_rotation_matrix_dtype(self):
        set_dtype(jnp.float32)
        assert rotation_icrs_to_galactic().dtype == jnp.float32

    def test_spherical_dtype(self):
        set_dtype(jnp.float32)
        assert spherical_to_cartesian(1.0, 0.1, 0.2).dtype == jnp.float32

    def test_dot_dtype(self):
        set_dtype(jnp.float32)
        assert dot([1.0, 2.0], [3.0, 4.0]).dtype == jnp.float32

    def test_float32_transformation_precision(self):
        set_dtype(jnp.float32)
        a, b = apply_transformation("ICRS2GAL", 10.0, 20.0)
        ra, dec = apply_transformation("GAL2ICRS", a, b)
        assert abs(float(ra) - 10.0) < 1e-3
        assert abs(float(dec) - 20.0) < 1e-3
        assert apply_transformation("ICRS2GAL", 10.0, 20.0).dtype == jnp.float32


class TestAngleTolerance:
    def test_float64_tolerance(self):
        set_dtype(jnp.float64)
        assert get_angle_tolerance() == 1e-12

    def test_float32_tolerance(self):
        set_dtype(jnp.float32)
        assert get_angle_tolerance() == 1e-6

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_angle_tolerance() == 1e-3

    def test_bfloat16_tolerance(self):
        set_dtype(jnp.bfloat16)
        assert get_angle_tolerance() == 1e-3
