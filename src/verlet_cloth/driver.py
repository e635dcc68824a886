# MIT License (see LICENSE)
"""
Frame driver: input, simulation and drawing, one frame at a time.

Each frame runs strictly in this order:
    1. Poll display size and pointer state.
    2. Update the drag constraint from the pointer.
    3. Step the scene (integrate, forces, solve).
    4. Draw links, particles and the diagnostic line.
    5. Present the frame.

Loop state that outlives a single frame (the drag constraint and the frame
timer) lives in an explicit SimulationState owned by the caller.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
import time

from .constants import PARTICLE_RADIUS, TEXT_POSITION, TEXT_SIZE, INTERSECT_THRESHOLD
from .constraints.solver import DragConstraint
from .core.invariants import all_finite, max_constraint_error
from .interaction import InteractionController
from .renderer.adapter import FrameBackend
from .scene import Scene

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """
    Per-run loop state.

    Attributes:
        drag: The pointer drag constraint.
        frame: Number of completed frames.
        last_frame_time: perf_counter() value at the end of the last frame.
        last_frame_seconds: Wall-clock duration of the last frame, shown in
            the diagnostic line. Has no influence on the timestep.
    """
    drag: DragConstraint = field(default_factory=DragConstraint)
    frame: int = 0
    last_frame_time: float = field(default_factory=time.perf_counter)
    last_frame_seconds: float = 0.0


def run_frame(
    scene: Scene,
    state: SimulationState,
    backend: FrameBackend,
    controller: InteractionController,
    particle_radius: float = PARTICLE_RADIUS,
) -> None:
    """
    Simulate and draw a single frame.

    Args:
        scene: The simulation world.
        state: Loop state (drag and timers, modified in-place).
        backend: Window/input/drawing collaborator.
        controller: Pointer to drag translation.
        particle_radius: Drawn particle radius.
    """
    width, height = backend.get_display_size()
    pointer, button_down = backend.get_pointer_state()

    controller.update(state.drag, scene.particles, pointer, button_down)
    scene.step(width, height, state.drag)

    backend.draw_scene(scene, particle_radius)
    now = time.perf_counter()
    state.last_frame_seconds = now - state.last_frame_time
    backend.draw_text(f"{state.last_frame_seconds:.4f}", TEXT_POSITION[0], TEXT_POSITION[1], TEXT_SIZE)

    state.last_frame_time = now
    state.frame += 1
    backend.present_frame()


def run(
    scene: Scene,
    backend: FrameBackend,
    frames: int | None = None,
    controller: InteractionController | None = None,
    state: SimulationState | None = None,
    particle_radius: float = PARTICLE_RADIUS,
) -> SimulationState:
    """
    Run frames until the count is reached or the backend asks to close.

    Args:
        scene: The simulation world.
        backend: Window/input/drawing collaborator.
        frames: Number of frames to run, or None to run until closed.
        controller: Pointer controller (default pick threshold if None).
        state: Loop state to continue from, or None for a fresh one.
        particle_radius: Drawn particle radius.

    Returns:
        The final loop state.
    """
    controller = controller or InteractionController(INTERSECT_THRESHOLD)
    state = state or SimulationState()

    logger.info("Running %s frames", "unbounded" if frames is None else frames)
    while frames is None or state.frame < frames:
        if backend.should_close():
            break
        run_frame(scene, state, backend, controller, particle_radius)

    if not all_finite(scene.particles):
        logger.error("Non-finite particle positions after %d frames", state.frame)
    logger.info(
        "Stopped after %d frames, t=%.3fs, max link error %.3f",
        state.frame, scene.time, max_constraint_error(scene.particles, scene.constraints),
    )
    return state
