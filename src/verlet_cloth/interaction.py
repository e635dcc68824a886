# MIT License (see LICENSE)
"""
Pointer interaction: picking and dragging particles.

The controller is a two-state machine over a DragConstraint:

    Idle    --button down and a particle under the pointer-->  Holding
    Holding --button still down-->  Holding (target follows the pointer)
    Holding --button released-->    Idle

The held particle is fixed for the whole press; moving the pointer over
another particle while holding does not switch to it.
"""
from __future__ import annotations
import logging

from .constants import INTERSECT_THRESHOLD
from .constraints.solver import DragConstraint
from .types import ParticleStore
from .util import as_vec3, distance

logger = logging.getLogger(__name__)


def pick_particle(store: ParticleStore, point, threshold: float = INTERSECT_THRESHOLD) -> int | None:
    """
    Find a particle near a world point.

    Scans in id order and returns the first particle strictly closer than
    threshold, so the lowest id wins when several qualify.

    Args:
        store: Particles to search.
        point: World point [x, y] or [x, y, z].
        threshold: Pick radius.

    Returns:
        The particle id, or None if nothing is close enough.
    """
    p = as_vec3(point)
    for idx, pos in enumerate(store.positions):
        if distance(pos, p) < threshold:
            return idx
    return None


class InteractionController:
    """
    Translates pointer state into the drag constraint.

    Holds no simulation data of its own. Call update() once per frame,
    before the scene step.
    """

    def __init__(self, threshold: float = INTERSECT_THRESHOLD) -> None:
        self.threshold = threshold

    def update(
        self,
        drag: DragConstraint,
        store: ParticleStore,
        pointer_position: tuple[float, float],
        button_down: bool,
    ) -> DragConstraint:
        """
        Advance the drag state machine by one frame.

        Args:
            drag: Drag constraint to update (modified in-place).
            store: Particles, used to pick a particle on press.
            pointer_position: Pointer location in world coordinates.
            button_down: Whether the primary button is held.

        Returns:
            The same drag constraint, for chaining.
        """
        if not button_down:
            if drag.active:
                logger.debug("Released particle %d", drag.particle_id)
            drag.release()
            return drag

        # Pointer lives in the plane z = 0
        target = (float(pointer_position[0]), float(pointer_position[1]), 0.0)

        if drag.active:
            drag.move_to(target)
            return drag

        idx = pick_particle(store, target, self.threshold)
        if idx is not None:
            drag.hold(idx, target)
            logger.debug("Holding particle %d at (%.1f, %.1f)", idx, target[0], target[1])
        return drag
