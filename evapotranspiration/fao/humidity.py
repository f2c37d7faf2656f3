"""
Vapour pressure and humidity formulas (FAO-56, Chapter 3).

All temperatures in degC, vapour pressures in kPa, relative humidity in
percent.
"""

import numpy as np


def svp_from_t(t: float) -> float:
    """
    Saturation vapour pressure from temperature (FAO-56 eq. 11).

    Args:
        t: Temperature (degC)

    Returns:
        Saturation vapour pressure (kPa)
    """
    return 0.6108 * np.exp((17.27 * t) / (t + 237.3))


def mean_svp(tmin: float, tmax: float) -> float:
    """
    Mean saturation vapour pressure from daily extremes (FAO-56 eq. 12).

    Args:
        tmin: Minimum temperature (degC)
        tmax: Maximum temperature (degC)

    Returns:
        Mean saturation vapour pressure (kPa)
    """
    return (svp_from_t(tmin) + svp_from_t(tmax)) / 2.0


def delta_svp(t: float) -> float:
    """
    Slope of the saturation vapour pressure curve (FAO-56 eq. 13).

    Args:
        t: Air temperature (degC); use mean air temperature for daily
            calculations

    Returns:
        Slope of the saturation vapour pressure curve (kPa degC-1)
    """
    tmp = 4098 * (0.6108 * np.exp((17.27 * t) / (t + 237.3)))
    return tmp / np.power((t + 237.3), 2)


def avp_from_tmin(tmin: float) -> float:
    """
    Actual vapour pressure assuming dewpoint equals minimum temperature
    (FAO-56 eq. 48).

    Reasonable where the reference crop is well watered; may not hold in
    arid regions.
    """
    return 0.611 * np.exp((17.27 * tmin) / (tmin + 237.3))


def avp_from_tdew(tdew: float) -> float:
    """Actual vapour pressure from dewpoint temperature (FAO-56 eq. 14)."""
    return 0.6108 * np.exp((17.27 * tdew) / (tdew + 237.3))


def avp_from_twet_tdry(twet: float, tdry: float, svp_twet: float, psy_const: float) -> float:
    """
    Actual vapour pressure from wet and dry bulb temperatures (FAO-56 eq. 15).

    Args:
        twet: Wet bulb temperature (degC)
        tdry: Dry bulb temperature (degC)
        svp_twet: Saturation vapour pressure at the wet bulb temperature (kPa)
        psy_const: Psychrometric constant of the psychrometer (kPa degC-1),
            see ``psy_const_of_psychrometer``

    Returns:
        Actual vapour pressure (kPa)
    """
    return svp_twet - (psy_const * (tdry - twet))


def avp_from_rhmin_rhmax(svp_tmin: float, svp_tmax: float, rh_min: float, rh_max: float) -> float:
    """
    Actual vapour pressure from minimum and maximum relative humidity
    (FAO-56 eq. 17).

    Args:
        svp_tmin: Saturation vapour pressure at daily minimum temperature (kPa)
        svp_tmax: Saturation vapour pressure at daily maximum temperature (kPa)
        rh_min: Minimum relative humidity (%)
        rh_max: Maximum relative humidity (%)

    Returns:
        Actual vapour pressure (kPa)
    """
    tmp1 = svp_tmin * (rh_max / 100.0)
    tmp2 = svp_tmax * (rh_min / 100.0)
    return (tmp1 + tmp2) / 2.0


def avp_from_rhmax(svp_tmin: float, rh_max: float) -> float:
    """
    Actual vapour pressure from maximum relative humidity (FAO-56 eq. 18).

    Use where errors in RHmin measurement are large.
    """
    return svp_tmin * (rh_max / 100.0)


def avp_from_rhmean(svp_tmin: float, svp_tmax: float, rh_mean: float) -> float:
    """Actual vapour pressure from mean relative humidity (FAO-56 eq. 19)."""
    return (rh_mean / 100.0) * ((svp_tmax + svp_tmin) / 2.0)


def rh_from_avp_svp(avp: float, svp: float) -> float:
    """
    Relative humidity from actual and saturation vapour pressure (FAO-56 eq. 10).

    Returns:
        Relative humidity (%)
    """
    return 100.0 * avp / svp


def daily_mean_t(tmin: float, tmax: float) -> float:
    """Daily mean temperature from daily minimum and maximum (FAO-56 eq. 9)."""
    return (tmax + tmin) / 2.0
