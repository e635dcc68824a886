# MIT License (see LICENSE)
"""
Diagnostics for verifying simulation health.

Numeric corruption is not self-healing in a Verlet cloth: a single NaN in a
position spreads to its neighbours through the constraint pass and stays
forever. These helpers are cheap enough to call every frame in tests, and the
frame driver reports them when a run stops.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import ParticleStore
from ..constraints.solver import StructuralConstraint
from ..util import distance


def all_finite(store: ParticleStore) -> bool:
    """True if no position or previous position is NaN or infinite."""
    return bool(
        np.isfinite(store.positions).all()
        and np.isfinite(store.previous_positions).all()
    )


def within_bounds(store: ParticleStore, width: float, height: float, tol: float = 0.0) -> bool:
    """True if every particle lies in [0, width] x [0, height] (z ignored)."""
    x = store.positions[:, 0]
    y = store.positions[:, 1]
    return bool(
        (x >= -tol).all() and (x <= width + tol).all()
        and (y >= -tol).all() and (y <= height + tol).all()
    )


def max_constraint_error(
    store: ParticleStore,
    constraints: Iterable[StructuralConstraint],
) -> float:
    """
    Largest absolute deviation |distance - rest_length| over all constraints.

    Returns 0.0 for an empty constraint set.
    """
    worst = 0.0
    pos = store.positions
    for c in constraints:
        d = distance(pos[c.idx_2], pos[c.idx_1])
        worst = max(worst, abs(d - c.rest_length))
    return worst


def implicit_kinetic_energy(store: ParticleStore, dt: float) -> float:
    """
    Kinetic energy estimated from the implicit velocity.

    T = Σ 0.5 * |x(t) - x(t-dt)|² / dt²   (unit mass)
    """
    v = store.implicit_velocities() / dt
    return float(0.5 * np.sum(v * v))
