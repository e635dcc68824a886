# MIT License (see LICENSE)
"""
Constraint types and the relaxation solver.

Constraints are satisfied by projecting positions directly (no impulses,
no velocities): each pass moves particles so that one constraint holds
exactly, then moves on to the next one. Repeating the pass converges
towards a state where all constraints hold at once. This is a
Gauss-Seidel style relaxation, so later constraints see the corrections
made by earlier ones within the same pass.

Per frame the order is:
    1. Boundary clamp (once, or per pass when requested)
    2. Structural (distance) constraints
    3. Pin constraints
    4. Drag constraint
with steps 2-4 repeated `iterations` times. Later steps overwrite earlier
ones for the same particle, so a pin always beats the structural pass and
the drag always beats a pin.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence
import logging

import numpy as np

from ..constants import DEGENERATE_EPS
from ..types import ParticleStore
from ..util import as_vec3, vec3, length, check_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuralConstraint:
    """
    Keeps two particles at a fixed distance (one cloth "thread").

    Attributes:
        idx_1: First particle id. Moves along +delta when stretched.
        idx_2: Second particle id. Moves along -delta when stretched.
        rest_length: Target distance, positive.

    Raises:
        ValueError: If the ids coincide or rest_length is not positive.
    """
    idx_1: int
    idx_2: int
    rest_length: float

    def __post_init__(self) -> None:
        if self.idx_1 == self.idx_2:
            raise ValueError(f"Constraint connects particle {self.idx_1} to itself")
        if not self.rest_length > 0:
            raise ValueError(f"rest_length must be positive, got {self.rest_length}")


@dataclass(frozen=True)
class PinConstraint:
    """
    Fixes a particle to a world point.

    Attributes:
        idx: Pinned particle id.
        point: World position [x, y, z] (2 components are padded with z=0).
    """
    idx: int
    point: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", as_vec3(self.point))


@dataclass
class DragConstraint:
    """
    Transient pin driven by the pointer.

    While active, particle_id is forced onto target_point after every other
    constraint in each pass.
    """
    active: bool = False
    particle_id: int = 0
    target_point: np.ndarray = field(default_factory=vec3)

    def hold(self, idx: int, point) -> None:
        """Start holding particle idx at point."""
        self.active = True
        self.particle_id = int(idx)
        self.target_point = as_vec3(point)

    def move_to(self, point) -> None:
        """Update the target while holding."""
        self.target_point = as_vec3(point)

    def release(self) -> None:
        self.active = False


def validate_constraints(
    store: ParticleStore,
    constraints: Sequence[StructuralConstraint] = (),
    pins: Sequence[PinConstraint] = (),
) -> None:
    """
    Check every referenced particle id against the store.

    Raises:
        IndexError: If any id is out of range.
    """
    for c in constraints:
        store.check_id(c.idx_1)
        store.check_id(c.idx_2)
    for p in pins:
        store.check_id(p.idx)


def clamp_to_bounds(store: ParticleStore, width: float, height: float) -> None:
    """
    Clamp every position into [0, width] x [0, height].

    z is left unconstrained. Clamping is idempotent.
    """
    pos = store.positions
    np.clip(pos[:, 0], 0.0, width, out=pos[:, 0])
    np.clip(pos[:, 1], 0.0, height, out=pos[:, 1])


def solve_structural_constraints(
    store: ParticleStore,
    constraints: Sequence[StructuralConstraint],
) -> int:
    """
    One sequential pass over all distance constraints.

    For each constraint:
        delta = p2 - p1
        diff  = (|delta| - rest_length) / |delta|
        p1 += 0.5 * diff * delta
        p2 -= 0.5 * diff * delta

    Both ends have unit mass, so the correction is split 50/50 and the
    midpoint of the pair does not move.

    Returns:
        Number of constraints skipped because their particles coincide.
    """
    pos = store.positions
    skipped = 0
    for c in constraints:
        i, j = c.idx_1, c.idx_2
        delta = pos[j] - pos[i]
        delta_len = length(delta)

        # No direction to push along
        if delta_len < DEGENERATE_EPS:
            skipped += 1
            continue

        diff = (delta_len - c.rest_length) / delta_len
        correction = delta * (0.5 * diff)
        pos[i] += correction
        pos[j] -= correction

    if skipped:
        logger.debug("Skipped %d zero-length constraint(s)", skipped)
    return skipped


def enforce_pins(store: ParticleStore, pins: Sequence[PinConstraint]) -> None:
    """Move each pinned particle onto its pin point."""
    pos = store.positions
    for p in pins:
        pos[p.idx] = p.point


def enforce_drag(store: ParticleStore, drag: DragConstraint | None) -> None:
    """Move the held particle onto the pointer target, if a drag is active."""
    if drag is not None and drag.active:
        store.positions[drag.particle_id] = drag.target_point


def relax(
    store: ParticleStore,
    constraints: Sequence[StructuralConstraint],
    pins: Sequence[PinConstraint] = (),
    drag: DragConstraint | None = None,
    iterations: int = 1,
    bounds: tuple[float, float] | None = None,
    clamp_each_iteration: bool = False,
) -> int:
    """
    Project positions onto the constraint set.

    Args:
        store: Particles (positions modified in-place).
        constraints: Structural constraints, solved in sequence order.
        pins: Pin constraints.
        drag: Optional pointer drag, applied last.
        iterations: Number of relaxation passes, at least 1.
        bounds: (width, height) for the boundary clamp, or None to skip it.
        clamp_each_iteration: Clamp before every pass instead of once.

    Returns:
        Total number of degenerate constraint skips across all passes.

    Raises:
        ValueError: If iterations is not an integer >= 1.
    """
    check_count("iterations", iterations)

    if bounds is not None:
        clamp_to_bounds(store, *bounds)

    skipped = 0
    for it in range(iterations):
        if clamp_each_iteration and bounds is not None and it > 0:
            clamp_to_bounds(store, *bounds)
        skipped += solve_structural_constraints(store, constraints)
        enforce_pins(store, pins)
        enforce_drag(store, drag)
    return skipped
