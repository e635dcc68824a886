# MIT License (see LICENSE)
"""
Core type definitions for the cloth simulation.

Particles are stored as a structure of arrays: three contiguous (N, 3)
float64 arrays indexed by a dense integer particle id in [0, N). There is
no explicit velocity. It is implied by the difference between the current
and previous positions (position-Verlet):

    v ≈ (x(t) - x(t - dt)) / dt

Mass is implicitly 1 for every particle, so force and acceleration are
interchangeable throughout the engine.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64


@dataclass
class ParticleStore:
    """
    Fixed-size particle state.

    Attributes:
        positions: Current positions, shape (N, 3).
        previous_positions: Positions one step ago, shape (N, 3). Defaults
            to a copy of positions (zero initial velocity).
        forces: Accumulated forces, shape (N, 3). Defaults to zeros.

    Note:
        The arrays are copied on init and never resized. Rows are addressed
        by particle id; ids coming from outside the engine should be passed
        through check_id() first so a bad id fails at construction time
        instead of silently wrapping (numpy accepts negative indices).
    """
    positions: np.ndarray
    previous_positions: np.ndarray | None = None
    forces: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.positions = _as_rows(self.positions, "positions")
        n = self.positions.shape[0]
        if n == 0:
            raise ValueError("ParticleStore needs at least one particle")

        if self.previous_positions is None:
            self.previous_positions = self.positions.copy()
        else:
            self.previous_positions = _as_rows(self.previous_positions, "previous_positions")

        if self.forces is None:
            self.forces = np.zeros_like(self.positions)
        else:
            self.forces = _as_rows(self.forces, "forces")

        for name in ("previous_positions", "forces"):
            if getattr(self, name).shape != self.positions.shape:
                raise ValueError(
                    f"{name} has shape {getattr(self, name).shape}, "
                    f"expected {self.positions.shape}"
                )

    @classmethod
    def zeros(cls, count: int) -> "ParticleStore":
        """Allocate count particles at the origin."""
        if count <= 0:
            raise ValueError(f"Particle count must be positive, got {count}")
        return cls(positions=np.zeros((count, 3), dtype=np.float64))

    @property
    def count(self) -> int:
        return int(self.positions.shape[0])

    def __len__(self) -> int:
        return self.count

    def check_id(self, idx: int) -> int:
        """
        Validate a particle id.

        Returns:
            The id as a plain int.

        Raises:
            IndexError: If idx is outside [0, count).
        """
        i = int(idx)
        if i != idx or not 0 <= i < self.count:
            raise IndexError(f"Particle id {idx} out of range [0, {self.count})")
        return i

    def clear_forces(self) -> None:
        """Reset accumulated forces to zero for the next step."""
        self.forces[:] = 0.0

    def implicit_velocities(self) -> np.ndarray:
        """Per-particle displacement over the last step, x(t) - x(t - dt)."""
        return self.positions - self.previous_positions

    def copy(self) -> "ParticleStore":
        """Deep snapshot of all three arrays."""
        return ParticleStore(
            positions=self.positions,
            previous_positions=self.previous_positions,
            forces=self.forces,
        )


def _as_rows(a, name: str) -> np.ndarray:
    arr = f64(a)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (N, 3), got {arr.shape}")
    return arr
