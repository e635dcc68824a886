# MIT License (see LICENSE)
"""
Cloth configuration.

A ClothConfig gathers every start-up constant of a run: the grid, the
solver settings and the window. Defaults reproduce the stock 10x10 cloth.
Configurations can be loaded from and saved to JSON with verlet_cloth.io.
"""
from __future__ import annotations
from dataclasses import dataclass

from . import constants as C
from .util import check_count

PIN_MODES = ("default", "none")


@dataclass(frozen=True)
class ClothConfig:
    """
    Start-up parameters for a cloth scene.

    Attributes:
        rows, cols: Grid dimensions.
        start_distance: Spacing of the initial grid layout.
        rest_length: Rest length of every structural link.
        iterations: Relaxation passes per frame.
        particle_radius: Drawn radius of each particle.
        intersect_threshold: Pick distance for dragging a particle.
        gravity: Constant acceleration [gx, gy, gz] (y points down).
        dt: Fixed simulation step in seconds.
        jitter: Half-width of the positional start-up jitter.
        velocity_jitter: Half-width of the previous-position jitter
            (0 starts the cloth at rest).
        damping: Fraction of implicit velocity removed per step, in [0, 1].
        clamp_each_iteration: Clamp to the window before every pass.
        pins: "default" pins the left, middle and right of the first row,
            "none" leaves the cloth free.
        seed: Seed for the jitter, None for a random cloth.
        window: Initial window size (width, height).
        title: Window title.
    """
    rows: int = C.NUM_ROWS
    cols: int = C.NUM_COLS
    start_distance: float = C.START_DISTANCE
    rest_length: float = C.REST_LENGTH
    iterations: int = C.NUM_ITERATIONS
    particle_radius: float = C.PARTICLE_RADIUS
    intersect_threshold: float = C.INTERSECT_THRESHOLD
    gravity: tuple[float, float, float] = C.GRAVITY
    dt: float = C.TIME_STEP
    jitter: float = C.JITTER
    velocity_jitter: float = 0.0
    damping: float = 0.0
    clamp_each_iteration: bool = False
    pins: str = "default"
    seed: int | None = None
    window: tuple[int, int] = (800, 600)
    title: str = "Cloth"

    def __post_init__(self) -> None:
        """Reject malformed configurations at construction time."""
        object.__setattr__(self, "gravity", tuple(float(g) for g in self.gravity))
        object.__setattr__(self, "window", tuple(int(w) for w in self.window))

        check_count("rows", self.rows)
        check_count("cols", self.cols)
        check_count("iterations", self.iterations)
        if self.start_distance <= 0:
            raise ValueError(f"start_distance must be positive, got {self.start_distance}")
        if self.rest_length <= 0:
            raise ValueError(f"rest_length must be positive, got {self.rest_length}")
        if self.particle_radius < 0 or self.intersect_threshold < 0:
            raise ValueError("particle_radius and intersect_threshold must be >= 0")
        if len(self.gravity) != 3:
            raise ValueError(f"gravity must have 3 components, got {len(self.gravity)}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.jitter < 0 or self.velocity_jitter < 0:
            raise ValueError("jitter and velocity_jitter must be >= 0")
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be in [0, 1], got {self.damping}")
        if self.pins not in PIN_MODES:
            raise ValueError(f"Unknown pin mode '{self.pins}', expected one of {PIN_MODES}")
        if len(self.window) != 2 or min(self.window) <= 0:
            raise ValueError(f"window must be two positive sizes, got {self.window}")

    @property
    def num_particles(self) -> int:
        return self.rows * self.cols
