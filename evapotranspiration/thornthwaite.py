"""
Monthly potential evapotranspiration using the Thornthwaite (1948) method.

Thornthwaite equation:
    PET = 1.6 * (L/12) * (N/30) * (10*Ta / I)^a

Where:
    - Ta = mean daily air temperature of the month (degC, negative set to 0)
    - N  = number of days in the month
    - L  = mean day length of the month (hours)
    - I  = heat index, sum of (Tai/5)^1.514 over the 12 months
    - a  = 6.75e-7*I^3 - 7.71e-5*I^2 + 1.792e-2*I + 0.49239

Reference:
    Thornthwaite CW (1948) An approach toward a rational classification of
    climate. Geographical Review, 38, 55-94.
"""

from typing import Optional, Sequence

import numpy as np

from evapotranspiration.core.constants import MONTHS_PER_YEAR, days_in_months
from evapotranspiration.fao import radiation
from evapotranspiration.utils.logger import Logger
from evapotranspiration.utils.validation import check_latitude_rad, check_monthly_series


def heat_index(monthly_t: Sequence[float]) -> float:
    """
    Thornthwaite heat index of a year.

    Months at or below 0 degC contribute nothing.

    Args:
        monthly_t: Mean daily air temperature of each month (degC)

    Returns:
        Heat index (dimensionless)
    """
    adj_monthly_t = np.maximum(np.asarray(monthly_t, dtype=float), 0.0)
    ratio = adj_monthly_t / 5.0
    return float(np.sum(np.power(ratio[ratio > 0.0], 1.514)))


def thornthwaite(
    monthly_t: Sequence[float],
    monthly_mean_dlh: Sequence[float],
    year: Optional[int] = None
) -> np.ndarray:
    """
    Estimate monthly potential evapotranspiration using the Thornthwaite
    (1948) method.

    When every month is at or below 0 degC the heat index is zero and no
    month can evaporate, so twelve zeros are returned.

    Args:
        monthly_t: Mean daily air temperature of each month of the year,
            January first (degC)
        monthly_mean_dlh: Mean daily daylight hours of each month of the year
            (hours), see ``monthly_mean_daylight_hours``
        year: Year for which PET is required. Only used to give February 29
            days in a leap year; ``None`` means a non-leap year.

    Returns:
        Estimated potential evapotranspiration of each month (mm/month)

    Raises:
        LengthMismatchError: If either series is not of length 12
    """
    check_monthly_series(monthly_t, "monthly_t")
    check_monthly_series(monthly_mean_dlh, "monthly_mean_dlh")

    month_days = np.asarray(days_in_months(year), dtype=float)

    # Negative temperatures should be set to zero
    adj_monthly_t = np.maximum(np.asarray(monthly_t, dtype=float), 0.0)
    dlh = np.asarray(monthly_mean_dlh, dtype=float)

    hi = heat_index(adj_monthly_t)
    if hi == 0.0:
        Logger.warning("Thornthwaite heat index is zero (all months <= 0 degC); returning zero PET")
        return np.zeros(MONTHS_PER_YEAR)

    a = (6.75e-07 * hi ** 3) - (7.71e-05 * hi ** 2) + (1.792e-02 * hi) + 0.49239
    Logger.debug(f"Thornthwaite heat index {hi:.4f}, exponent {a:.4f}")

    # Multiply by 10 to convert cm/month --> mm/month
    return 1.6 * (dlh / 12.0) * (month_days / 30.0) * np.power(10.0 * adj_monthly_t / hi, a) * 10.0


def monthly_mean_daylight_hours(latitude: float, year: Optional[int] = None) -> np.ndarray:
    """
    Mean daily daylight hours of each month of a year for a given latitude.

    Every day of the year is evaluated and averaged within its month.

    Args:
        latitude: Latitude (radians)
        year: Year for which the daylight hours are required. Only used to
            give February 29 days in a leap year; ``None`` means a non-leap
            year.

    Returns:
        Mean daily daylight hours of each month, January first (hours)

    Raises:
        OutOfRangeError: If latitude is outside -pi/2 to pi/2
    """
    check_latitude_rad(latitude)

    monthly_mean_dlh = np.zeros(MONTHS_PER_YEAR)
    doy = 1  # Day of the year
    for month, mdays in enumerate(days_in_months(year)):
        dlh = 0.0  # Cumulative daylight hours for the month
        for _ in range(mdays):
            sd = radiation.sol_dec(doy)
            sha = radiation.sunset_hour_angle(latitude, sd)
            dlh += radiation.daylight_hours(sha)
            doy += 1
        monthly_mean_dlh[month] = dlh / mdays

    return monthly_mean_dlh
