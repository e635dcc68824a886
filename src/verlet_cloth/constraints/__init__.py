# MIT License (see LICENSE)
"""
Constraint types and the relaxation solver.

This subpackage provides:
    - StructuralConstraint: Fixed distance between two particles.
    - PinConstraint: Particle fixed to a world point.
    - DragConstraint: Pointer-driven transient pin.
    - relax: Boundary clamp plus iterated projection of all of the above.

Typical usage:
    from verlet_cloth.constraints import StructuralConstraint, relax

    links = [StructuralConstraint(0, 1, rest_length=20.0)]
    relax(store, links, iterations=5, bounds=(800, 600))
"""
from .solver import (
    StructuralConstraint,
    PinConstraint,
    DragConstraint,
    validate_constraints,
    clamp_to_bounds,
    solve_structural_constraints,
    enforce_pins,
    enforce_drag,
    relax,
)

__all__ = [
    # Types
    "StructuralConstraint",
    "PinConstraint",
    "DragConstraint",
    # Solver steps
    "validate_constraints",
    "clamp_to_bounds",
    "solve_structural_constraints",
    "enforce_pins",
    "enforce_drag",
    "relax",
]
