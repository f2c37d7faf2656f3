"""Configuration settings for the evapotranspiration package."""

import copy
import json
from pathlib import Path
from typing import Optional, Union

import yaml

from ..utils.exceptions import ConfigurationError

# ============================================================================
# PATHS
# ============================================================================

# Base project directory
BASE_DIR = Path(__file__).resolve().parent.parent

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOGGING = {
    "level": "INFO",
    "format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
    "console": True,
    "file_log": False,
    "log_file": str(BASE_DIR / "logs" / "evapotranspiration.log"),
    "rotation": "10 MB",
    "retention": "10 files"
}

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def default_config() -> dict:
    """Return a fresh copy of the default configuration."""
    return {"logging": copy.deepcopy(LOGGING)}


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load configuration from a YAML or JSON file.

    Values in the file override the package defaults section by section;
    keys absent from the file keep their default.

    Args:
        config_path: Path to a ``.yaml``, ``.yml`` or ``.json`` file. ``None``
            returns the defaults.

    Returns:
        Configuration dictionary with a ``logging`` section, plus any other
        sections present in the file

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            suffix, or does not contain a mapping
    """
    config = default_config()
    if config_path is None:
        return config

    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            config_param="config_path"
        )

    if config_path.suffix not in SUPPORTED_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported config format: {config_path.suffix}. Use .yaml or .json",
            config_param="config_path"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix == ".json":
                loaded = json.load(f)
            else:
                loaded = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Error loading config {config_path}: {e}",
            config_param="config_path"
        ) from e

    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(loaded).__name__}",
            config_param="config_path"
        )

    return _deep_merge(config, loaded)
