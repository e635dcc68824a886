# MIT License (see LICENSE)
"""
JSON loading and saving of cloth configurations.

Only start-up configuration is stored; simulation state is never saved.

JSON Schema Overview:
---------------------
{
  "rows": int,                     # Default: 10
  "cols": int,                     # Default: 10
  "start_distance": float,         # Initial grid spacing, default: 20
  "rest_length": float,            # Link rest length, default: 20
  "iterations": int,               # Relaxation passes, default: 1
  "particle_radius": float,        # Default: 3
  "intersect_threshold": float,    # Pick radius, default: 6
  "gravity": [gx, gy, gz],         # Default: [0, 98.2, 0] (y down)
  "dt": float,                     # Fixed timestep, default: 0.01666667
  "jitter": float,                 # Default: 1
  "velocity_jitter": float,        # Default: 0
  "damping": float,                # In [0, 1], default: 0
  "clamp_each_iteration": bool,    # Default: false
  "pins": "default" | "none",      # Default: "default"
  "seed": int | null,              # Default: null
  "window": [width, height],       # Default: [800, 600]
  "title": string                  # Default: "Cloth"
}
Every key is optional. Unknown keys are rejected.
"""
from __future__ import annotations
from dataclasses import fields
from typing import Any
import json
import logging

from ..config import ClothConfig

logger = logging.getLogger(__name__)

_FIELDS = {f.name for f in fields(ClothConfig)}
_DEFAULTS = ClothConfig()


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a config file without validation.

    Args:
        path: Path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(data: dict[str, Any]) -> ClothConfig:
    """
    Build a ClothConfig from a parsed JSON object.

    Raises:
        ValueError: If data is not an object, contains unknown keys, or
            describes an invalid configuration.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

    unknown = sorted(set(data) - _FIELDS)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    kwargs = dict(data)
    for key in ("gravity", "window"):
        if key in kwargs:
            kwargs[key] = tuple(kwargs[key])
    return ClothConfig(**kwargs)


def load_config(path: str) -> ClothConfig:
    """
    Load and validate a configuration file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the configuration is invalid.
    """
    config = config_from_json(load_config_raw(path))
    logger.info("Loaded config from %s (%dx%d grid)", path, config.rows, config.cols)
    return config


def config_to_json(config: ClothConfig) -> dict[str, Any]:
    """
    Serialize a configuration, keeping only non-default values.

    config_from_json(config_to_json(c)) == c.
    """
    result = {}
    for name in sorted(_FIELDS):
        value = getattr(config, name)
        if value == getattr(_DEFAULTS, name):
            continue
        result[name] = list(value) if isinstance(value, tuple) else value
    return result


def save_config(config: ClothConfig, path: str, indent: int = 2) -> None:
    """Write a configuration to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)
    logger.info("Saved config to %s", path)
