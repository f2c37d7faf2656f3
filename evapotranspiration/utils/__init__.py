"""
Utility modules for the evapotranspiration package.

Provides logging, validation, and exception handling utilities.
"""

from .logger import Logger
from .validation import (
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
    check_monthly_series
)
from .exceptions import (
    EvapotranspirationError,
    InputValidationError,
    OutOfRangeError,
    LengthMismatchError,
    InvalidArgumentError,
    ConfigurationError
)

__all__ = [
    # Logger
    "Logger",

    # Validation
    "check_day_hours",
    "check_doy",
    "check_latitude_rad",
    "check_sol_dec_rad",
    "check_sunset_hour_angle_rad",
    "check_monthly_series",

    # Exceptions
    "EvapotranspirationError",
    "InputValidationError",
    "OutOfRangeError",
    "LengthMismatchError",
    "InvalidArgumentError",
    "ConfigurationError"
]
