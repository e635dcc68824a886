# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force generators: clear_forces, apply_gravity.
    - Integrators: position-Verlet.
    - Invariants: finiteness, bounds and constraint-error checks.

Typical usage:
    from verlet_cloth.core import clear_forces, apply_gravity, verlet_step

    verlet_step(store, dt=1/60)
    clear_forces(store)
    apply_gravity(store, np.array([0.0, 98.2, 0.0]))
"""
from .forces import clear_forces, apply_gravity
from .integrators import verlet_step
from .invariants import (
    all_finite,
    within_bounds,
    max_constraint_error,
    implicit_kinetic_energy,
)

__all__ = [
    # Forces
    "clear_forces",
    "apply_gravity",
    # Integrators
    "verlet_step",
    # Invariants
    "all_finite",
    "within_bounds",
    "max_constraint_error",
    "implicit_kinetic_energy",
]
