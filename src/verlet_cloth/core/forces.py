# MIT License (see LICENSE)
"""
Force generators for the cloth simulation.

Forces are accumulated into ParticleStore.forces between integration steps.
The pattern is always reset-then-accumulate:

    clear_forces(store)
    apply_gravity(store, g)
    ...

so that nothing carries over from one step to the next. With unit mass
the accumulated force is also the acceleration used by the integrator.
"""
from __future__ import annotations

import numpy as np

from ..types import ParticleStore


def clear_forces(store: ParticleStore) -> None:
    """Zero the force accumulator of every particle."""
    store.clear_forces()


def apply_gravity(store: ParticleStore, g: np.ndarray) -> None:
    """
    Add a constant gravity vector to every particle's force.

    Implements F = m * g with m = 1.

    Args:
        store: Particles to act on (forces modified in-place).
        g: Gravitational acceleration [gx, gy, gz].
    """
    store.forces += g
