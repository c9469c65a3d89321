"""
Configuration management for the GMS demo
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

# Max features for feature detection
MAX_FEATURES = 10000

# Config file picked up from the working directory when present
CONFIG_FILENAME = "gmsdemo.yaml"


@dataclass(frozen=True)
class GmsConfig:
    """Rotation/scale support flags for one GMS run and the window it is shown in."""
    rotation: bool
    scale: bool
    window_name: str


GMS_CONFIGURATIONS: List[GmsConfig] = [
    GmsConfig(rotation=False, scale=False, window_name="GMS No Rotation or Scale Support"),
    GmsConfig(rotation=True, scale=True, window_name="GMS with Rotation and Scale Support"),
    GmsConfig(rotation=False, scale=True, window_name="GMS with Scale Support and No Rotation"),
]

DEFAULT_CONFIG = {
    "inputs": {
        "image1": "dog01.jpg",
        "image2": "dog02.jpg"
    },
    "display": {
        "source_windows": ["Dog01 Image", "Dog02 Image"]
    },
    "logging": {
        "level": "INFO",
        "log_file": None
    }
}


class ConfigError(Exception):
    """Raised when a config file cannot be read or parsed."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, layering a YAML file over DEFAULT_CONFIG.

    Args:
        path: Optional YAML file. Missing files are ignored.

    Returns:
        A fresh configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None or not Path(path).is_file():
        return config

    try:
        with open(path, 'r') as f:
            overrides = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e

    if overrides is None:
        return config
    if not isinstance(overrides, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return _deep_merge(config, overrides)
