"""
FAO-56 physical formula library.

Every function of the submodules is re-exported here so formulas can be
called as ``fao.svp_from_t(...)``.
"""

from ..core.constants import SOLAR_CONSTANT, STEFAN_BOLTZMANN_CONSTANT
from .atmosphere import (
    PsychrometerType,
    atm_pressure,
    psy_const,
    psy_const_of_psychrometer,
    wind_speed_2m
)
from .humidity import (
    svp_from_t,
    mean_svp,
    delta_svp,
    avp_from_tmin,
    avp_from_tdew,
    avp_from_twet_tdry,
    avp_from_rhmin_rhmax,
    avp_from_rhmax,
    avp_from_rhmean,
    rh_from_avp_svp,
    daily_mean_t
)
from .radiation import (
    sol_dec,
    inv_rel_dist_earth_sun,
    sunset_hour_angle,
    daylight_hours,
    et_rad,
    cs_rad,
    sol_rad_from_sun_hours,
    sol_rad_from_t,
    sol_rad_island,
    net_in_sol_rad,
    net_out_lw_rad,
    net_rad,
    monthly_soil_heat_flux,
    monthly_soil_heat_flux2
)
from .reference_et import (
    fao56_penman_monteith,
    hargreaves,
    energy2evap
)

__all__ = [
    # Constants
    'SOLAR_CONSTANT',
    'STEFAN_BOLTZMANN_CONSTANT',

    # Atmosphere
    'PsychrometerType',
    'atm_pressure',
    'psy_const',
    'psy_const_of_psychrometer',
    'wind_speed_2m',

    # Humidity
    'svp_from_t',
    'mean_svp',
    'delta_svp',
    'avp_from_tmin',
    'avp_from_tdew',
    'avp_from_twet_tdry',
    'avp_from_rhmin_rhmax',
    'avp_from_rhmax',
    'avp_from_rhmean',
    'rh_from_avp_svp',
    'daily_mean_t',

    # Radiation
    'sol_dec',
    'inv_rel_dist_earth_sun',
    'sunset_hour_angle',
    'daylight_hours',
    'et_rad',
    'cs_rad',
    'sol_rad_from_sun_hours',
    'sol_rad_from_t',
    'sol_rad_island',
    'net_in_sol_rad',
    'net_out_lw_rad',
    'net_rad',
    'monthly_soil_heat_flux',
    'monthly_soil_heat_flux2',

    # Reference ET
    'fao56_penman_monteith',
    'hargreaves',
    'energy2evap',
]
