# MIT License (see LICENSE)
"""
verlet_cloth - A real-time 2D cloth simulation engine.

A grid of point masses joined by distance constraints, integrated with
position-Verlet and relaxed by iterative constraint projection. Particles
can be pinned in place or dragged with the pointer.

Main entry points:
    - Scene: The simulation world (particles, links, pins) and its step.
    - ClothConfig: Start-up parameters for a grid cloth.
    - run / run_frame: The per-frame driver (input, step, draw, present).

Submodules:
    - constraints: Constraint types and the relaxation solver.
    - core: Forces, the Verlet integrator and health checks.
    - io: JSON configuration files.
    - renderer: Frame backends (headless, recording, text, pygame).

Example:
    from verlet_cloth import ClothConfig, Scene, run
    from verlet_cloth.renderer import NullBackend

    scene = Scene.from_config(ClothConfig(seed=1), 800, 600)
    run(scene, NullBackend((800, 600)), frames=120)
"""
from .config import ClothConfig
from .constraints.solver import StructuralConstraint, PinConstraint, DragConstraint
from .driver import SimulationState, run, run_frame
from .interaction import InteractionController, pick_particle
from .scene import Scene
from .types import ParticleStore

__all__ = [
    # Simulation
    "Scene",
    "ParticleStore",
    "ClothConfig",
    # Constraints
    "StructuralConstraint",
    "PinConstraint",
    "DragConstraint",
    # Interaction and frame loop
    "InteractionController",
    "pick_particle",
    "SimulationState",
    "run",
    "run_frame",
]
