"""Tests for angle unit conversions and sexagesimal parsing."""

import math

import jax
import jax.numpy as jnp
import pytest

from skyframes.errors import FormatError
from skyframes.utils import (
    arcmin2degrees,
    arcmin2radians,
    arcsec2degrees,
    arcsec2radians,
    degrees,
    from_radians,
    parse_dms_to_degrees,
    parse_hms_to_degrees,
    parse_signed_dms_to_degrees,
    radians,
    split_string,
    to_radians,
)


# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------


class TestUnitConversions:
    def test_radians(self):
        assert radians(180.0) == pytest.approx(math.pi)

    def test_degrees(self):
        assert degrees(math.pi / 2) == pytest.approx(90.0)

    @pytest.mark.parametrize("angle", [-720.0, -90.0, 0.0, 1e-6, 33.3, 359.999])
    def test_inverse(self, angle):
        assert degrees(radians(angle)) == pytest.approx(angle, abs=1e-12)

    def test_arcsec2degrees(self):
        assert arcsec2degrees(3600.0) == 1.0

    def test_arcmin2degrees(self):
        assert arcmin2degrees(30.0) == 0.5

    def test_arcsec2radians(self):
        assert arcsec2radians(3600.0) == pytest.approx(math.pi / 180.0)

    def test_arcmin2radians(self):
        assert arcmin2radians(60.0) == pytest.approx(math.pi / 180.0)

    def test_arrays(self):
        out = radians(jnp.array([0.0, 90.0, 180.0]))
        assert jnp.allclose(out, jnp.array([0.0, math.pi / 2, math.pi]))

    def test_jit(self):
        assert float(jax.jit(arcsec2radians)(3600.0)) == pytest.approx(math.pi / 180.0)


class TestUseDegreesHelpers:
    def test_to_radians_converts(self):
        assert float(to_radians(180.0, True)) == pytest.approx(math.pi)

    def test_to_radians_passthrough(self):
        assert float(to_radians(1.25, False)) == 1.25

    def test_from_radians_converts(self):
        assert float(from_radians(math.pi, True)) == pytest.approx(180.0)

    def test_from_radians_passthrough(self):
        assert float(from_radians(1.25, False)) == 1.25


# ---------------------------------------------------------------------------
# String splitting
# ---------------------------------------------------------------------------


class TestSplitString:
    def test_basic(self):
        assert split_string("10:20:30", ":") == ["10", "20", "30"]

    def test_skip_empty(self):
        assert split_string("10::30:", ":") == ["10", "30"]

    def test_keep_empty(self):
        assert split_string("10::30", ":", skip_empty=False) == ["10", "", "30"]

    def test_no_delimiter(self):
        assert split_string("42.5", ":") == ["42.5"]

    def test_empty_string(self):
        assert split_string("", ":") == []


# ---------------------------------------------------------------------------
# Sexagesimal parsing
# ---------------------------------------------------------------------------


class TestParseDms:
    def test_three_fields(self):
        assert parse_dms_to_degrees("10:30:00") == 10.5

    def test_seconds(self):
        assert parse_dms_to_degrees("00:00:36") == pytest.approx(0.01)

    def test_fractional_seconds(self):
        assert parse_dms_to_degrees("12:34:56.7") == pytest.approx(
            12.0 + 34.0 / 60.0 + 56.7 / 3600.0
        )

    def test_two_fields(self):
        assert parse_dms_to_degrees("10:30") == 10.5

    def test_one_field(self):
        assert parse_dms_to_degrees("42.25") == 42.25

    def test_negative_degrees_adds_minutes(self):
        assert parse_dms_to_degrees("-10:30:00") == -10.0 + 0.5

    def test_negative_zero_degrees(self):
        assert parse_dms_to_degrees("-00:30:00") == 0.5

    def test_negative_seconds(self):
        assert parse_dms_to_degrees("-28:56:10.2") == pytest.approx(
            -28.0 + (56.0 + 10.2 / 60.0) / 60.0
        )

    def test_custom_delimiter(self):
        assert parse_dms_to_degrees("10 30 00", delimiter=" ") == 10.5

    def test_repeated_delimiters_are_collapsed(self):
        assert parse_dms_to_degrees("10  30  00", delimiter=" ") == 10.5

    def test_four_fields_raises(self):
        with pytest.raises(FormatError, match="1 to 3 fields"):
            parse_dms_to_degrees("1:2:3:4")

    def test_empty_raises(self):
        with pytest.raises(FormatError):
            parse_dms_to_degrees("")

    @pytest.mark.parametrize("text", ["ab:30:00", "10:3x:00", "10:30:--"])
    def test_non_numeric_raises(self, text):
        with pytest.raises(FormatError, match="Non-numeric"):
            parse_dms_to_degrees(text)

    def test_format_error_chains_cause(self):
        with pytest.raises(FormatError) as excinfo:
            parse_dms_to_degrees("10:xx:00")
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestParseHms:
    def test_one_hour(self):
        assert parse_hms_to_degrees("01:00:00") == 15.0

    def test_galactic_centre_ra(self):
        assert parse_hms_to_degrees("17:45:37.2") == pytest.approx(266.405)

    def test_custom_delimiter(self):
        assert parse_hms_to_degrees("12h30h00", delimiter="h") == 187.5

    def test_four_fields_raises(self):
        with pytest.raises(FormatError):
            parse_hms_to_degrees("1:2:3:4")


class TestParseSignedDms:
    def test_sign_applies_to_whole_angle(self):
        assert parse_signed_dms_to_degrees("-10:30:00") == -10.5

    def test_negative_zero_degrees(self):
        assert parse_signed_dms_to_degrees("-00:30:00") == -0.5

    def test_declination(self):
        assert parse_signed_dms_to_degrees("-28:56:10.2") == pytest.approx(
            -(28.0 + 56.0 / 60.0 + 10.2 / 3600.0)
        )

    def test_positive_matches_unsigned(self):
        assert parse_signed_dms_to_degrees("+12:34:56") == parse_dms_to_degrees("12:34:56")

    def test_four_fields_raises(self):
        with pytest.raises(FormatError, match="1 to 3 fields"):
            parse_signed_dms_to_degrees("-1:2:3:4")

    def test_non_numeric_raises(self):
        with pytest.raises(FormatError, match="Non-numeric"):
            parse_signed_dms_to_degrees("-10:xx:00")
