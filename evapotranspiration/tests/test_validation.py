"""
Unit tests for validation guards.

Tests range checks for angles, day numbers, hour counts and monthly series.
"""

import math

import pytest

from evapotranspiration.core.conversion import deg_to_rad
from evapotranspiration.utils.exceptions import LengthMismatchError, OutOfRangeError
from evapotranspiration.utils.validation import (
    MAXSOLDEC_RADIANS,
    MINSOLDEC_RADIANS,
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_monthly_series,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
)


class TestBounds:
    """Test precomputed validation bounds."""

    def test_solar_declination_bounds(self):
        """Solar declination bounds are +/- 23.5 degrees."""
        assert MAXSOLDEC_RADIANS == pytest.approx(0.41015, abs=1e-5)
        assert MINSOLDEC_RADIANS == pytest.approx(-0.41015, abs=1e-5)


class TestCheckDayHours:
    """Test day-hours guard."""

    @pytest.mark.parametrize("hours", [0.0, 12.5, 24.0])
    def test_valid(self, hours):
        assert check_day_hours(hours, "sun_hours") is None

    @pytest.mark.parametrize("hours", [-0.1, 24.01, float("nan")])
    def test_invalid(self, hours):
        with pytest.raises(OutOfRangeError) as excinfo:
            check_day_hours(hours, "sun_hours")
        assert excinfo.value.arg_name == "sun_hours"
        assert excinfo.value.valid_range == (0.0, 24.0)
        assert "sun_hours" in str(excinfo.value)


class TestCheckDoy:
    """Test day-of-year guard."""

    @pytest.mark.parametrize("doy", [1, 180, 365, 366])
    def test_valid(self, doy):
        assert check_doy(doy) is None

    @pytest.mark.parametrize("doy", [0, 367, -5])
    def test_invalid(self, doy):
        with pytest.raises(OutOfRangeError) as excinfo:
            check_doy(doy)
        assert excinfo.value.value == doy
        assert excinfo.value.arg_name == "doy"
        assert excinfo.value.valid_range == (1, 366)


class TestCheckLatitude:
    """Test latitude guard."""

    @pytest.mark.parametrize(
        "latitude", [deg_to_rad(-90.0), -math.pi / 2, 0.0, 0.7, math.pi / 2, deg_to_rad(90.0)]
    )
    def test_valid(self, latitude):
        assert check_latitude_rad(latitude) is None

    @pytest.mark.parametrize("latitude", [math.pi / 2 + 1e-6, -2.0, 90.0])
    def test_invalid(self, latitude):
        with pytest.raises(OutOfRangeError) as excinfo:
            check_latitude_rad(latitude)
        assert excinfo.value.arg_name == "latitude"

    def test_is_value_error(self):
        """Range errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_latitude_rad(3.0)


class TestCheckSolDec:
    """Test solar declination guard."""

    @pytest.mark.parametrize("sd", [-0.41, 0.0, 0.409, 0.41])
    def test_valid(self, sd):
        assert check_sol_dec_rad(sd) is None

    @pytest.mark.parametrize("sd", [-0.42, 0.5])
    def test_invalid(self, sd):
        with pytest.raises(OutOfRangeError) as excinfo:
            check_sol_dec_rad(sd)
        assert excinfo.value.arg_name == "sol_dec"


class TestCheckSunsetHourAngle:
    """Test sunset hour angle guard."""

    @pytest.mark.parametrize("sha", [0.0, 1.527, deg_to_rad(180.0)])
    def test_valid(self, sha):
        assert check_sunset_hour_angle_rad(sha) is None

    @pytest.mark.parametrize("sha", [-0.01, math.pi + 0.01])
    def test_invalid(self, sha):
        with pytest.raises(OutOfRangeError):
            check_sunset_hour_angle_rad(sha)


class TestCheckMonthlySeries:
    """Test monthly series length guard."""

    def test_valid(self):
        assert check_monthly_series([0.0] * 12, "monthly_t") is None

    @pytest.mark.parametrize("length", [0, 11, 13])
    def test_invalid(self, length):
        with pytest.raises(LengthMismatchError) as excinfo:
            check_monthly_series([1.0] * length, "monthly_t")
        error = excinfo.value
        assert error.arg_name == "monthly_t"
        assert error.actual_length == length
        assert error.expected_length == 12
        assert f"length {length}" in error.message


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
