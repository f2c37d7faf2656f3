"""Physical constants and FAO-56 default coefficients."""

# ============================================================================
# RADIATION CONSTANTS
# ============================================================================

# Solar constant (MJ m-2 min-1)
SOLAR_CONSTANT = 0.0820

# Stefan-Boltzmann constant (MJ K-4 m-2 day-1)
STEFAN_BOLTZMANN_CONSTANT = 0.000000004903

# Albedo of the hypothetical grass reference crop (dimensionless)
DEFAULT_ALBEDO = 0.23

# Angstrom coefficients for solar radiation from sunshine duration
ANGSTROM_A = 0.25
ANGSTROM_B = 0.50

# Hargreaves radiation adjustment coefficients
HARGREAVES_ADJ_INTERIOR = 0.16
HARGREAVES_ADJ_COASTAL = 0.19

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Psychrometric constant per kPa of atmospheric pressure
PSY_CONST_COEFFICIENT = 0.000665

# Converts MJ m-2 day-1 to mm day-1 of evaporated water
ENERGY_TO_EVAPORATION = 0.408

# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

CELSIUS_TO_KELVIN = 273.15

# ============================================================================
# TIME CONSTANTS
# ============================================================================

HOURS_PER_DAY = 24.0
MONTHS_PER_YEAR = 12

MONTHDAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_MONTHDAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int = None) -> tuple:
    """
    Number of days in each month of a year.

    Args:
        year: Calendar year. ``None`` means a normal (non-leap) year.

    Returns:
        Tuple of 12 day counts, January first
    """
    if year is None or not is_leap_year(year):
        return MONTHDAYS
    return LEAP_MONTHDAYS


__all__ = [
    'SOLAR_CONSTANT', 'STEFAN_BOLTZMANN_CONSTANT', 'DEFAULT_ALBEDO',
    'ANGSTROM_A', 'ANGSTROM_B', 'HARGREAVES_ADJ_INTERIOR',
    'HARGREAVES_ADJ_COASTAL', 'PSY_CONST_COEFFICIENT', 'ENERGY_TO_EVAPORATION',
    'CELSIUS_TO_KELVIN', 'HOURS_PER_DAY', 'MONTHS_PER_YEAR', 'MONTHDAYS',
    'LEAP_MONTHDAYS', 'is_leap_year', 'days_in_months'
]
