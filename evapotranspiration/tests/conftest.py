"""
Pytest configuration and fixtures for evapotranspiration tests.

Provides FAO-56 worked-example inputs shared across test modules.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def brussels_july():
    """Inputs of FAO-56 Example 18: Brussels, 6 July, 50 deg 48' N, 100 m."""
    return {
        "net_rad": 13.28,        # MJ m-2 day-1
        "t": 16.9 + 273.15,      # K
        "ws": 2.078,             # m s-1
        "svp": 1.997,            # kPa
        "avp": 1.409,            # kPa
        "delta_svp": 0.122,      # kPa degC-1
        "psy": 0.0666,           # kPa degC-1
        "shf": 0.0,              # MJ m-2 day-1
    }


@pytest.fixture
def rio_september():
    """Inputs of FAO-56 Example 8: 20 deg S on 3 September."""
    from evapotranspiration.core.conversion import deg_to_rad

    return {
        "latitude": deg_to_rad(-20.0),
        "day_of_year": 246,
    }


@pytest.fixture
def constant_climate():
    """Twelve identical months: 20 degC with 12 daylight hours."""
    return {
        "monthly_t": [20.0] * 12,
        "monthly_mean_dlh": [12.0] * 12,
    }


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from evapotranspiration.utils.logger import Logger

    Logger.configure_for_testing()
    yield
