"""
Evapotranspiration - reference and potential evapotranspiration estimates.

This package provides tools for:
- Estimating reference ETo with the FAO-56 Penman-Monteith and Hargreaves
  equations
- Estimating monthly PET with the Thornthwaite (1948) method
- Deriving missing meteorological inputs (vapour pressure, radiation,
  psychrometric constant, wind speed at 2 m) with the FAO-56 formulas
- Converting between the units those formulas expect

Logging is disabled for the package until ``Logger.setup`` is called.
"""

from loguru import logger

__version__ = "1.0.0"
__author__ = "Evapotranspiration Development Team"

# Core modules
from evapotranspiration.core import (
    celsius_to_kelvin,
    kelvin_to_celsius,
    deg_to_rad,
    rad_to_deg,
    kph_to_mps,
)

# FAO-56 formulas
from evapotranspiration import fao
from evapotranspiration.fao import PsychrometerType

# Thornthwaite
from evapotranspiration.thornthwaite import (
    thornthwaite,
    monthly_mean_daylight_hours,
)

# Utilities
from evapotranspiration.utils import (
    Logger,
    EvapotranspirationError,
    InputValidationError,
    OutOfRangeError,
    LengthMismatchError,
    InvalidArgumentError,
    ConfigurationError,
)

logger.disable("evapotranspiration")

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Conversion
    'celsius_to_kelvin',
    'kelvin_to_celsius',
    'deg_to_rad',
    'rad_to_deg',
    'kph_to_mps',

    # FAO
    'fao',
    'PsychrometerType',

    # Thornthwaite
    'thornthwaite',
    'monthly_mean_daylight_hours',

    # Utilities
    'Logger',
    'EvapotranspirationError',
    'InputValidationError',
    'OutOfRangeError',
    'LengthMismatchError',
    'InvalidArgumentError',
    'ConfigurationError',
]
