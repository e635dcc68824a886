# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Vectors are plain numpy float64 arrays of shape (3,). Arithmetic operators
(`+`, `-`, scalar `*`) return new arrays, while `+=` / `-=` update in place.
The z component is carried through every operation even though the cloth
is laid out in the xy-plane.
"""
from __future__ import annotations
import numbers

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always returns a copy so callers never alias the input.
    """
    return np.array(x, dtype=np.float64)


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v) -> np.ndarray:
    """
    Convert a 2- or 3-component array-like to a 3-vector.

    Two components are padded with z = 0.

    Raises:
        ValueError: If v does not have 2 or 3 components.
    """
    a = f64(v).reshape(-1)
    if a.shape == (2,):
        return np.array([a[0], a[1], 0.0], dtype=np.float64)
    if a.shape != (3,):
        raise ValueError(f"Expected a 2 or 3 component vector, got shape {a.shape}")
    return a


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3-vector. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def length(v: np.ndarray) -> float:
    """Euclidean length sqrt(x² + y² + z²)."""
    return float(np.sqrt(norm2(v)))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return length(a - b)


def check_count(name: str, value, minimum: int = 1) -> int:
    """
    Validate an integer count such as a grid size or a pass count.

    Raises:
        ValueError: If value is not an integer (bools included) or is
            below minimum.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return int(value)
