"""
Validation utilities for the evapotranspiration package.

Guards for range-restricted quantities (angles, day numbers, hour counts)
and for the length of monthly series. Each guard returns ``None`` when the
value is acceptable and raises otherwise. NaN never satisfies a bound.
"""

from typing import Sized

from evapotranspiration.core.constants import HOURS_PER_DAY, MONTHS_PER_YEAR
from evapotranspiration.core.conversion import deg_to_rad
from evapotranspiration.utils.exceptions import LengthMismatchError, OutOfRangeError


# Latitude
MINLAT_RADIANS = deg_to_rad(-90.0)
MAXLAT_RADIANS = deg_to_rad(90.0)

# Solar declination
MINSOLDEC_RADIANS = deg_to_rad(-23.5)
MAXSOLDEC_RADIANS = deg_to_rad(23.5)

# Sunset hour angle
MINSHA_RADIANS = 0.0
MAXSHA_RADIANS = deg_to_rad(180.0)

# Day of the year
MIN_DOY = 1
MAX_DOY = 366


def _in_range(value, low, high) -> bool:
    return low <= value <= high


def check_day_hours(hours: float, arg_name: str) -> None:
    """
    Check that a number of hours within a day is in the range 0-24.

    Args:
        hours: Daylight or sunshine hours
        arg_name: Name of the argument being checked, used in the error

    Raises:
        OutOfRangeError: If hours is outside 0-24
    """
    if not _in_range(hours, 0.0, HOURS_PER_DAY):
        raise OutOfRangeError(
            f"{arg_name} should be in the range 0-24: {hours}",
            arg_name=arg_name,
            value=hours,
            valid_range=(0.0, HOURS_PER_DAY)
        )


def check_doy(doy: int) -> None:
    """
    Check that the day of the year is in the range 1-366.

    Leap years are not checked; 366 is always accepted.
    """
    if not _in_range(doy, MIN_DOY, MAX_DOY):
        raise OutOfRangeError(
            f"day of the year (doy) must be in range {MIN_DOY}-{MAX_DOY}: {doy}",
            arg_name="doy",
            value=doy,
            valid_range=(MIN_DOY, MAX_DOY)
        )


def check_latitude_rad(latitude: float) -> None:
    """Check latitude lies within -pi/2 to pi/2 radians."""
    if not _in_range(latitude, MINLAT_RADIANS, MAXLAT_RADIANS):
        raise OutOfRangeError(
            f"latitude outside valid range {MINLAT_RADIANS!r} to {MAXLAT_RADIANS!r} rad: {latitude!r}",
            arg_name="latitude",
            value=latitude,
            valid_range=(MINLAT_RADIANS, MAXLAT_RADIANS)
        )


def check_sol_dec_rad(sd: float) -> None:
    """
    Check solar declination lies within -23.5 to +23.5 degrees (in radians).
    """
    if not _in_range(sd, MINSOLDEC_RADIANS, MAXSOLDEC_RADIANS):
        raise OutOfRangeError(
            f"solar declination outside valid range {MINSOLDEC_RADIANS!r} to {MAXSOLDEC_RADIANS!r} rad: {sd!r}",
            arg_name="sol_dec",
            value=sd,
            valid_range=(MINSOLDEC_RADIANS, MAXSOLDEC_RADIANS)
        )


def check_sunset_hour_angle_rad(sha: float) -> None:
    """Check sunset hour angle lies within 0 to 180 degrees (in radians)."""
    if not _in_range(sha, MINSHA_RADIANS, MAXSHA_RADIANS):
        raise OutOfRangeError(
            f"sunset hour angle outside valid range {MINSHA_RADIANS!r} to {MAXSHA_RADIANS!r} rad: {sha!r}",
            arg_name="sha",
            value=sha,
            valid_range=(MINSHA_RADIANS, MAXSHA_RADIANS)
        )


def check_monthly_series(values: Sized, arg_name: str) -> None:
    """
    Check that a monthly series holds exactly one value per month.

    Args:
        values: Sequence of monthly values, January first
        arg_name: Name of the argument being checked, used in the error

    Raises:
        LengthMismatchError: If the series is not of length 12
    """
    if len(values) != MONTHS_PER_YEAR:
        raise LengthMismatchError(
            f"{arg_name} should be length {MONTHS_PER_YEAR} but is length {len(values)}.",
            arg_name=arg_name,
            actual_length=len(values),
            expected_length=MONTHS_PER_YEAR
        )
