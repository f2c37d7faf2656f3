"""Unit conversions used throughout the FAO-56 formulas."""

import numpy as np

from .constants import CELSIUS_TO_KELVIN


def celsius_to_kelvin(celsius: float) -> float:
    """Convert temperature in degrees Celsius to Kelvin."""
    return celsius + CELSIUS_TO_KELVIN


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert temperature in Kelvin to degrees Celsius."""
    return kelvin - CELSIUS_TO_KELVIN


def deg_to_rad(degrees: float) -> float:
    """Convert angular degrees to radians."""
    return degrees * (np.pi / 180.0)


def rad_to_deg(radians: float) -> float:
    """Convert radians to angular degrees."""
    return radians * (180.0 / np.pi)


def kph_to_mps(kph: float) -> float:
    """Convert km/hr to m/s."""
    return kph * 1000.0 / 3600.0


__all__ = [
    'celsius_to_kelvin', 'kelvin_to_celsius', 'deg_to_rad', 'rad_to_deg',
    'kph_to_mps'
]
