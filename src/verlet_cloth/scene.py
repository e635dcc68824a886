# MIT License (see LICENSE)
"""
The simulation world and its per-frame step.

The Scene owns all particle and constraint storage. One call to step()
advances the cloth by one fixed timestep:
    1. Integration (position-Verlet with the forces from the last step).
    2. Force accumulation (reset, then gravity).
    3. Constraint solving (boundary clamp, then relaxation passes over
       structural links, pins and the pointer drag).

Structure:
    - Build a Scene with Scene.from_config() (grid cloth) or directly from
      a ParticleStore plus add_constraint()/add_pin().
    - Call scene.step(width, height, drag) once per frame.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

from .config import ClothConfig
from .constraints.solver import (
    StructuralConstraint,
    PinConstraint,
    DragConstraint,
    validate_constraints,
    relax,
)
from .core.forces import clear_forces, apply_gravity
from .core.integrators import verlet_step
from .grid import (
    UniformJitter,
    grid_positions,
    grid_constraints,
    default_pins,
)
from .profiler import Profiler
from .types import ParticleStore
from .util import as_vec3, check_count
from . import constants as C

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """
    Cloth simulation world.

    Attributes:
        particles: Particle state, owned by the scene.
        gravity: Constant gravity [gx, gy, gz] (default points down the screen).
        dt: Fixed timestep in seconds.
        iterations: Relaxation passes per step.
        damping: Fraction of implicit velocity removed per step.
        clamp_each_iteration: Clamp to bounds before every pass instead of once.
        profiler: Optional Profiler for phase timings.
        constraints: Structural links, solved in list order.
        pins: Pin constraints.
        time: Simulated time in seconds.
        step_count: Number of completed steps.
        last_skipped: Zero-length links skipped during the last step.
    """
    particles: ParticleStore
    gravity: tuple[float, float, float] = C.GRAVITY
    dt: float = C.TIME_STEP
    iterations: int = C.NUM_ITERATIONS
    damping: float = 0.0
    clamp_each_iteration: bool = False
    profiler: Profiler | None = None

    constraints: list[StructuralConstraint] = field(default_factory=list)
    pins: list[PinConstraint] = field(default_factory=list)
    time: float = 0.0
    step_count: int = 0
    last_skipped: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate parameters and every referenced particle id."""
        as_vec3(self.gravity)
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        check_count("iterations", self.iterations)
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be in [0, 1], got {self.damping}")
        validate_constraints(self.particles, self.constraints, self.pins)

    @classmethod
    def from_config(
        cls,
        config: ClothConfig,
        width: float,
        height: float,
        rng: UniformJitter | None = None,
        profiler: Profiler | None = None,
    ) -> "Scene":
        """
        Build the grid cloth described by config.

        Particle 0 starts at the centre of the width x height display area.

        Args:
            config: Start-up parameters.
            width, height: Current display size.
            rng: Jitter source. Defaults to one seeded with config.seed.
            profiler: Optional profiler to attach.
        """
        rng = rng or UniformJitter(config.seed)
        particles = grid_positions(
            config.rows,
            config.cols,
            config.start_distance,
            origin=(width / 2.0, height / 2.0),
            jitter=config.jitter,
            velocity_jitter=config.velocity_jitter,
            rng=rng,
        )
        links = grid_constraints(config.rows, config.cols, config.rest_length)
        pins = default_pins(particles, config.cols) if config.pins == "default" else []

        scene = cls(
            particles=particles,
            gravity=config.gravity,
            dt=config.dt,
            iterations=config.iterations,
            damping=config.damping,
            clamp_each_iteration=config.clamp_each_iteration,
            profiler=profiler,
            constraints=links,
            pins=pins,
        )
        logger.info(
            "Built %dx%d cloth: %d particles, %d links, %d pins",
            config.rows, config.cols, particles.count, len(links), len(pins),
        )
        return scene

    def add_constraint(self, idx_1: int, idx_2: int, rest_length: float) -> StructuralConstraint:
        """
        Add a structural link between two particles.

        Raises:
            IndexError: If either id is out of range.
            ValueError: If the ids coincide or rest_length <= 0.
        """
        c = StructuralConstraint(
            self.particles.check_id(idx_1),
            self.particles.check_id(idx_2),
            float(rest_length),
        )
        self.constraints.append(c)
        return c

    def add_pin(self, idx: int, point=None) -> PinConstraint:
        """
        Pin a particle to point (defaults to its current position).

        Raises:
            IndexError: If idx is out of range.
        """
        i = self.particles.check_id(idx)
        pin = PinConstraint(i, self.particles.positions[i] if point is None else point)
        self.pins.append(pin)
        return pin

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def step(self, width: float, height: float, drag: DragConstraint | None = None) -> None:
        """
        Advance the simulation by one fixed timestep.

        Args:
            width, height: Current world bounds for the boundary clamp.
            drag: Pointer drag to enforce after pins, or None.

        Raises:
            IndexError: If an active drag refers to an unknown particle.
        """
        if drag is not None and drag.active:
            self.particles.check_id(drag.particle_id)

        with self._section("integrate"):
            verlet_step(self.particles, self.dt, self.damping)

        with self._section("forces"):
            clear_forces(self.particles)
            apply_gravity(self.particles, as_vec3(self.gravity))

        with self._section("solve"):
            self.last_skipped = relax(
                self.particles,
                self.constraints,
                self.pins,
                drag,
                iterations=self.iterations,
                bounds=(width, height),
                clamp_each_iteration=self.clamp_each_iteration,
            )

        self.time += self.dt
        self.step_count += 1
