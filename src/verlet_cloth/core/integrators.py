# MIT License (see LICENSE)
"""
Position-Verlet integration.

The position form of Verlet stores no velocity. The displacement over the
previous step stands in for it:

    x(t+dt) = x(t) + (x(t) - x(t-dt)) * (1 - damping) + a(t) * dt²

With damping = 0 this is the classic Störmer-Verlet update. The step size
is a fixed constant supplied by the caller and is never derived from the
measured frame time.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration#Basic_Störmer–Verlet
    Jakobsen, "Advanced Character Physics", GDC 2001.
"""
from __future__ import annotations

from ..types import ParticleStore


def verlet_step(store: ParticleStore, dt: float, damping: float = 0.0) -> None:
    """
    Advance every particle by one position-Verlet step.

    Uses the forces currently held in the store, so they must have been
    accumulated before the call.

    Args:
        store: Particles to integrate (modified in-place).
        dt: Timestep in seconds.
        damping: Fraction of the implicit velocity removed per step, in
            [0, 1]. 0 keeps the undamped update.

    Raises:
        ValueError: If damping is outside [0, 1].
    """
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be in [0, 1], got {damping}")

    pos = store.positions
    prev = store.previous_positions

    new_pos = pos + (pos - prev) * (1.0 - damping) + store.forces * (dt * dt)

    # previous <- pre-update position, position <- new position
    prev[:] = pos
    pos[:] = new_pos
