"""Configuration module for the evapotranspiration package."""

from .settings import (
    LOGGING,
    default_config,
    load_config,
)

__all__ = [
    'LOGGING',
    'default_config',
    'load_config',
]
