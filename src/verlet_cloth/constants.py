# MIT License (see LICENSE)
"""
Default simulation constants.

Units are screen pixels and seconds. The y axis points down, so gravity
has a positive y component.
"""
from __future__ import annotations

# Grid layout
NUM_ROWS: int = 10
NUM_COLS: int = 10
START_DISTANCE: float = 20.0

# Rest length of every structural constraint. Equal to the nominal spacing,
# not to the jittered distance measured at start-up.
REST_LENGTH: float = 20.0

# Relaxation passes per frame. More passes give a stiffer cloth.
NUM_ITERATIONS: int = 1

PARTICLE_RADIUS: float = 3.0
INTERSECT_THRESHOLD: float = PARTICLE_RADIUS + 3.0

# 10 * 9.82 px/s², pointing down the screen
GRAVITY: tuple[float, float, float] = (0.0, 10.0 * 9.82, 0.0)

# Fixed step, decoupled from wall-clock frame time
TIME_STEP: float = 0.01666667

# Half-width of the uniform positional jitter applied at start-up
JITTER: float = 1.0

# Below this length a structural constraint has no usable direction and is
# skipped for the pass.
DEGENERATE_EPS: float = 1e-12

# Diagnostic overlay
TEXT_POSITION: tuple[float, float] = (20.0, 20.0)
TEXT_SIZE: float = 20.0
