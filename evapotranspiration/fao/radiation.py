"""
Solar geometry and radiation balance (FAO-56, Chapter 3).

Angles are in radians, radiation in MJ m-2 day-1.

Formulas:
    Ra  = (24*60/pi) * Gsc * dr * (ws*sin(phi)*sin(delta) + cos(phi)*cos(delta)*sin(ws))
    Rso = (0.75 + 2e-5*z) * Ra
    Rs  = (as + bs*n/N) * Ra
    Rn  = Rns - Rnl
"""

import numpy as np

from ..core.constants import (
    ANGSTROM_A,
    ANGSTROM_B,
    DEFAULT_ALBEDO,
    HARGREAVES_ADJ_COASTAL,
    HARGREAVES_ADJ_INTERIOR,
    HOURS_PER_DAY,
    SOLAR_CONSTANT,
    STEFAN_BOLTZMANN_CONSTANT,
)
from ..utils.exceptions import OutOfRangeError
from ..utils.logger import Logger
from ..utils.validation import (
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
)


# ============================================================================
# SOLAR GEOMETRY
# ============================================================================

def sol_dec(day_of_year: int) -> float:
    """
    Solar declination from day of the year (FAO-56 eq. 24).

    Args:
        day_of_year: Day of the year (1 to 365, or 366 in a leap year)

    Returns:
        Solar declination (radians)
    """
    check_doy(day_of_year)
    return 0.409 * np.sin(((2.0 * np.pi / 365.0) * day_of_year - 1.39))


def inv_rel_dist_earth_sun(day_of_year: int) -> float:
    """
    Inverse relative distance between earth and sun (FAO-56 eq. 23).

    Args:
        day_of_year: Day of the year (1 to 365, or 366 in a leap year)

    Returns:
        Inverse relative distance (dimensionless)
    """
    check_doy(day_of_year)
    return 1 + (0.033 * np.cos((2.0 * np.pi / 365.0) * day_of_year))


def sunset_hour_angle(latitude: float, sol_dec: float) -> float:
    """
    Sunset hour angle (FAO-56 eq. 25).

    Beyond the polar circles the sun may not rise or set at all, pushing
    -tan(lat)*tan(dec) outside [-1, 1]. The value is clamped so that polar
    day gives pi and polar night gives 0.

    Args:
        latitude: Latitude (radians), negative for the southern hemisphere
        sol_dec: Solar declination (radians)

    Returns:
        Sunset hour angle (radians)
    """
    check_latitude_rad(latitude)
    check_sol_dec_rad(sol_dec)

    cos_sha = -np.tan(latitude) * np.tan(sol_dec)
    if not -1.0 <= cos_sha <= 1.0:
        Logger.debug(f"Clamping cos(sunset hour angle) {cos_sha:.4f} into [-1, 1] for latitude {latitude:.4f} rad")
    # Keep within the acos domain
    return np.arccos(min(max(cos_sha, -1.0), 1.0))


def daylight_hours(sha: float) -> float:
    """
    Daylight hours from sunset hour angle (FAO-56 eq. 34).

    Args:
        sha: Sunset hour angle (radians)

    Returns:
        Daylight hours
    """
    check_sunset_hour_angle_rad(sha)
    return (HOURS_PER_DAY / np.pi) * sha


# ============================================================================
# SHORTWAVE RADIATION
# ============================================================================

def et_rad(latitude: float, sol_dec: float, sha: float, ird: float) -> float:
    """
    Daily extraterrestrial radiation (FAO-56 eq. 21).

    Args:
        latitude: Latitude (radians)
        sol_dec: Solar declination (radians), see ``sol_dec``
        sha: Sunset hour angle (radians), see ``sunset_hour_angle``
        ird: Inverse relative distance earth-sun, see ``inv_rel_dist_earth_sun``

    Returns:
        Extraterrestrial radiation (MJ m-2 day-1)
    """
    check_latitude_rad(latitude)
    check_sol_dec_rad(sol_dec)
    check_sunset_hour_angle_rad(sha)

    tmp1 = (24.0 * 60.0) / np.pi
    tmp2 = sha * np.sin(latitude) * np.sin(sol_dec)
    tmp3 = np.cos(latitude) * np.cos(sol_dec) * np.sin(sha)
    return tmp1 * SOLAR_CONSTANT * ird * (tmp2 + tmp3)


def cs_rad(altitude: float, et_rad: float) -> float:
    """
    Clear sky radiation (FAO-56 eq. 37).

    Args:
        altitude: Elevation above sea level (m)
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Clear sky radiation (MJ m-2 day-1)
    """
    return (0.00002 * altitude + 0.75) * et_rad


def sol_rad_from_sun_hours(daylight_hours: float, sunshine_hours: float, et_rad: float) -> float:
    """
    Incoming solar radiation from sunshine duration, Angstrom formula
    (FAO-56 eq. 35).

    With no daylight (polar night) the relative sunshine term is dropped
    and ``as * et_rad`` is returned, which is 0 since extraterrestrial
    radiation is 0 then.

    Args:
        daylight_hours: Maximum possible sunshine duration (hours)
        sunshine_hours: Actual sunshine duration (hours)
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Incoming solar radiation (MJ m-2 day-1)
    """
    check_day_hours(sunshine_hours, 'sun_hours')
    check_day_hours(daylight_hours, 'daylight_hours')

    if daylight_hours == 0:
        return ANGSTROM_A * et_rad

    tmp1 = ANGSTROM_B * sunshine_hours / daylight_hours
    return (tmp1 + ANGSTROM_A) * et_rad


def sol_rad_from_t(et_rad: float, cs_rad: float, tmin: float, tmax: float, coastal: bool) -> float:
    """
    Incoming solar radiation from temperature range, Hargreaves radiation
    formula (FAO-56 eq. 50).

    The result never exceeds clear sky radiation.

    Args:
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)
        cs_rad: Clear sky radiation (MJ m-2 day-1)
        tmin: Daily minimum temperature (degC)
        tmax: Daily maximum temperature (degC)
        coastal: True for coastal locations (on or adjacent to the coast of a
            large land mass and where air masses are influenced by a nearby
            water body), False for interior locations

    Returns:
        Incoming solar radiation (MJ m-2 day-1)
    """
    adj = HARGREAVES_ADJ_COASTAL if coastal else HARGREAVES_ADJ_INTERIOR

    sol_rad = adj * np.sqrt(tmax - tmin) * et_rad
    if sol_rad > cs_rad:
        Logger.debug(f"Solar radiation {sol_rad:.3f} capped at clear sky radiation {cs_rad:.3f}")
    return min(sol_rad, cs_rad)


def sol_rad_island(et_rad: float) -> float:
    """
    Incoming solar radiation on small islands (FAO-56 eq. 51).

    Only valid for island land masses of 20 km or less along their
    perpendicular axis, at elevations up to 100 m.
    """
    return (0.7 * et_rad) - 4.0


# ============================================================================
# NET RADIATION
# ============================================================================

def net_in_sol_rad(sol_rad: float, albedo: float = DEFAULT_ALBEDO) -> float:
    """
    Net incoming shortwave radiation (FAO-56 eq. 38).

    Args:
        sol_rad: Gross incoming solar radiation (MJ m-2 day-1)
        albedo: Albedo of the crop; 0.23 for the grass reference crop

    Returns:
        Net incoming shortwave radiation (MJ m-2 day-1)
    """
    return (1 - albedo) * sol_rad


def net_out_lw_rad(tmin: float, tmax: float, sol_rad: float, cs_rad: float, avp: float) -> float:
    """
    Net outgoing longwave radiation (FAO-56 eq. 39).

    Args:
        tmin: Absolute daily minimum temperature (K)
        tmax: Absolute daily maximum temperature (K)
        sol_rad: Solar radiation (MJ m-2 day-1)
        cs_rad: Clear sky radiation (MJ m-2 day-1)
        avp: Actual vapour pressure (kPa)

    Returns:
        Net outgoing longwave radiation (MJ m-2 day-1)

    Raises:
        OutOfRangeError: If clear sky radiation is not positive, as during
            polar night, where Rs/Rso is undefined
    """
    if not cs_rad > 0:
        raise OutOfRangeError(
            f"cs_rad must be positive to form Rs/Rso but is {cs_rad}",
            arg_name="cs_rad",
            value=cs_rad,
            valid_range=(0.0, float("inf"))
        )

    tmp1 = STEFAN_BOLTZMANN_CONSTANT * ((np.power(tmax, 4) + np.power(tmin, 4)) / 2)
    tmp2 = 0.34 - (0.14 * np.sqrt(avp))
    tmp3 = 1.35 * (sol_rad / cs_rad) - 0.35
    return tmp1 * tmp2 * tmp3


def net_rad(ni_sw_rad: float, no_lw_rad: float) -> float:
    """
    Daily net radiation at the crop surface (FAO-56 eq. 40).

    Args:
        ni_sw_rad: Net incoming shortwave radiation (MJ m-2 day-1)
        no_lw_rad: Net outgoing longwave radiation (MJ m-2 day-1)

    Returns:
        Net radiation (MJ m-2 day-1)
    """
    return ni_sw_rad - no_lw_rad


# ============================================================================
# SOIL HEAT FLUX
# ============================================================================

def monthly_soil_heat_flux(t_month_prev: float, t_month_next: float) -> float:
    """
    Monthly soil heat flux from the previous and next month mean
    temperatures (FAO-56 eq. 43).

    Returns:
        Soil heat flux (MJ m-2 day-1)
    """
    return 0.07 * (t_month_next - t_month_prev)


def monthly_soil_heat_flux2(t_month_prev: float, t_month_cur: float) -> float:
    """
    Monthly soil heat flux when the next month is unknown (FAO-56 eq. 44).

    Returns:
        Soil heat flux (MJ m-2 day-1)
    """
    return 0.14 * (t_month_cur - t_month_prev)
