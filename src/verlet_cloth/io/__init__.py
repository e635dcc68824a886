# MIT License (see LICENSE)
"""
Configuration file I/O.

Typical usage:
    from verlet_cloth.io import load_config, save_config

    config = load_config("cloth.json")
    save_config(config, "copy.json")
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    "config_from_json",
    # Saving
    "save_config",
    "config_to_json",
]
