"""Core module for the evapotranspiration package."""

from .constants import (
    SOLAR_CONSTANT,
    STEFAN_BOLTZMANN_CONSTANT,
    DEFAULT_ALBEDO,
    CELSIUS_TO_KELVIN,
    MONTHDAYS,
    LEAP_MONTHDAYS,
    is_leap_year,
    days_in_months,
)
from .conversion import (
    celsius_to_kelvin,
    kelvin_to_celsius,
    deg_to_rad,
    rad_to_deg,
    kph_to_mps,
)

__all__ = [
    'SOLAR_CONSTANT',
    'STEFAN_BOLTZMANN_CONSTANT',
    'DEFAULT_ALBEDO',
    'CELSIUS_TO_KELVIN',
    'MONTHDAYS',
    'LEAP_MONTHDAYS',
    'is_leap_year',
    'days_in_months',
    'celsius_to_kelvin',
    'kelvin_to_celsius',
    'deg_to_rad',
    'rad_to_deg',
    'kph_to_mps',
]
