"""
Reference evapotranspiration equations.

Formulas:
    FAO-56 Penman-Monteith (eq. 6):
        ETo = [0.408*D*(Rn - G) + g*(900/T)*u2*(es - ea)] / [D + g*(1 + 0.34*u2)]
    Hargreaves (eq. 52):
        ETo = 0.0023 * (Tmean + 17.8) * (Tmax - Tmin)^0.5 * 0.408 * Ra

Where:
    - D  = slope of the saturation vapour pressure curve (kPa degC-1)
    - g  = psychrometric constant (kPa degC-1)
    - Rn = net radiation, G = soil heat flux (MJ m-2 day-1)
    - T  = air temperature at 2 m (K)
    - u2 = wind speed at 2 m (m s-1)
"""

import numpy as np

from ..core.constants import ENERGY_TO_EVAPORATION


def fao56_penman_monteith(net_rad: float, t: float, ws: float, svp: float, avp: float,
                          delta_svp: float, psy: float, shf: float = 0.0) -> float:
    """
    Reference evapotranspiration for a hypothetical short grass surface using
    the FAO-56 Penman-Monteith equation.

    Args:
        net_rad: Net radiation at the crop surface (MJ m-2 day-1)
        t: Air temperature at 2 m height (K)
        ws: Wind speed at 2 m height (m s-1), see ``wind_speed_2m``
        svp: Saturation vapour pressure (kPa)
        avp: Actual vapour pressure (kPa)
        delta_svp: Slope of the saturation vapour pressure curve (kPa degC-1)
        psy: Psychrometric constant (kPa degC-1)
        shf: Soil heat flux (MJ m-2 day-1); negligible for daily steps

    Returns:
        Reference evapotranspiration (mm day-1)
    """
    denominator = delta_svp + (psy * (1 + 0.34 * ws))
    a1 = ENERGY_TO_EVAPORATION * (net_rad - shf) * delta_svp / denominator
    a2 = 900 * ws / t * (svp - avp) * psy / denominator
    return a1 + a2


def hargreaves(tmin: float, tmax: float, tmean: float, et_rad: float) -> float:
    """
    Reference evapotranspiration over grass using the Hargreaves equation.

    Only air temperature and extraterrestrial radiation are required.
    tmax is expected to be at least tmin.

    Args:
        tmin: Daily minimum temperature (degC)
        tmax: Daily maximum temperature (degC)
        tmean: Daily mean temperature (degC)
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Reference evapotranspiration (mm day-1)
    """
    return 0.0023 * (tmean + 17.8) * np.power(tmax - tmin, 0.5) * ENERGY_TO_EVAPORATION * et_rad


def energy2evap(energy: float) -> float:
    """
    Convert energy (MJ m-2 day-1) to equivalent evaporation (mm day-1).
    """
    return ENERGY_TO_EVAPORATION * energy
