"""
Atmospheric parameters for FAO-56 reference evapotranspiration.

Reference: Allen, R.G., Pereira, L.S., Raes, D. and Smith, M. (1998)
Crop evapotranspiration. FAO Irrigation and Drainage Paper 56, Chapter 3.
"""

from enum import IntEnum

import numpy as np

from ..core.constants import PSY_CONST_COEFFICIENT
from ..utils.exceptions import InvalidArgumentError


class PsychrometerType(IntEnum):
    """Ventilation of the psychrometer used to measure wet/dry bulb temperature."""

    # Asmann type, air movement of about 5 m s-1
    VENTILATED = 1
    # Natural ventilation, air movement of about 1 m s-1
    NATURAL = 2
    # Non-ventilated, installed indoors
    NON_VENTILATED = 3


def atm_pressure(altitude: float) -> float:
    """
    Estimate atmospheric pressure from altitude (FAO-56 eq. 7).

    Assumes a standard atmosphere at 20 degC.

    Args:
        altitude: Elevation above sea level (m)

    Returns:
        Atmospheric pressure (kPa)
    """
    tmp = (293.0 - (0.0065 * altitude)) / 293.0
    return np.power(tmp, 5.26) * 101.3


def psy_const(atmos_pres: float) -> float:
    """
    Psychrometric constant for a ventilated psychrometer (FAO-56 eq. 8).

    Args:
        atmos_pres: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa degC-1)
    """
    return PSY_CONST_COEFFICIENT * atmos_pres


def psy_const_of_psychrometer(psychrometer: int, atmos_pres: float) -> float:
    """
    Psychrometric constant for a specific type of psychrometer.

    Args:
        psychrometer: ``PsychrometerType`` member or its integer value
            (1 ventilated, 2 naturally ventilated, 3 non-ventilated)
        atmos_pres: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa degC-1)

    Raises:
        InvalidArgumentError: If psychrometer is not 1, 2 or 3
    """
    match psychrometer:
        case PsychrometerType.VENTILATED:
            psy_coeff = 0.000662
        case PsychrometerType.NATURAL:
            psy_coeff = 0.000800
        case PsychrometerType.NON_VENTILATED:
            psy_coeff = 0.001200
        case _:
            allowed = tuple(int(member) for member in PsychrometerType)
            raise InvalidArgumentError(
                f"psychrometer should be in range 1 to 3: {psychrometer!r}",
                arg_name="psychrometer",
                value=psychrometer,
                allowed=allowed
            )

    return psy_coeff * atmos_pres


def wind_speed_2m(ws: float, z: float) -> float:
    """
    Convert wind speed measured at height z to 2 m (FAO-56 eq. 47).

    Args:
        ws: Wind speed at height z (m s-1)
        z: Measurement height above the ground surface (m)

    Returns:
        Wind speed at 2 m (m s-1)
    """
    return ws * (4.87 / np.log((67.8 * z) - 5.42))
