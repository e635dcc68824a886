# MIT License (see LICENSE)
"""
Cloth construction: grid layout, structural links and default pins.

Particle ids are row-major: id = row * cols + col. Columns extend along +x
and rows along +y (down the screen), starting from an anchor point.
"""
from __future__ import annotations

import numpy as np

from .constants import JITTER
from .constraints.solver import StructuralConstraint, PinConstraint
from .types import ParticleStore
from .util import check_count


class UniformJitter:
    """
    Seeded uniform random source.

    Wraps numpy's Generator so a given seed always produces the same cloth.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def random_uniform(self, lo: float, hi: float, size=None):
        """Sample uniformly from [lo, hi)."""
        return self._rng.uniform(lo, hi, size)


def grid_positions(
    rows: int,
    cols: int,
    spacing: float,
    origin: tuple[float, float],
    jitter: float = JITTER,
    velocity_jitter: float = 0.0,
    rng: UniformJitter | None = None,
) -> ParticleStore:
    """
    Lay out rows x cols particles on a regular grid.

    Each x and y coordinate gets independent uniform jitter in
    [-jitter, jitter). The previous positions equal the positions (zero
    initial velocity) unless velocity_jitter > 0, in which case they get a
    second, independent jitter that seeds a small random initial motion.

    Args:
        rows, cols: Grid dimensions, both >= 1.
        spacing: Distance between neighbouring particles.
        origin: Position of particle 0 before jitter.
        jitter: Half-width of the positional jitter.
        velocity_jitter: Half-width of the previous-position jitter.
        rng: Random source. A fresh unseeded one is used if None.

    Raises:
        ValueError: If rows or cols is not an integer >= 1.
    """
    rows = check_count("rows", rows)
    cols = check_count("cols", cols)
    rng = rng or UniformJitter()

    n = rows * cols
    ids = np.arange(n)
    pos = np.zeros((n, 3), dtype=np.float64)
    pos[:, 0] = origin[0] + (ids % cols) * spacing
    pos[:, 1] = origin[1] + (ids // cols) * spacing
    if jitter > 0:
        pos[:, :2] += rng.random_uniform(-jitter, jitter, size=(n, 2))

    prev = pos.copy()
    if velocity_jitter > 0:
        prev[:, :2] += rng.random_uniform(-velocity_jitter, velocity_jitter, size=(n, 2))

    return ParticleStore(positions=pos, previous_positions=prev)


def grid_constraints(rows: int, cols: int, rest_length: float) -> list[StructuralConstraint]:
    """
    Build the horizontal and vertical neighbour links of a grid.

    Horizontal links come first (row by row), then vertical links (column
    by column). There are no shear or bending links. Every link gets the
    same nominal rest_length, regardless of the jittered start positions.
    """
    links = []

    # Horizontal
    for row in range(rows):
        for col in range(cols - 1):
            idx = row * cols + col
            links.append(StructuralConstraint(idx, idx + 1, rest_length))

    # Vertical
    for col in range(cols):
        for row in range(rows - 1):
            idx = row * cols + col
            links.append(StructuralConstraint(idx, idx + cols, rest_length))

    return links


def default_pins(store: ParticleStore, cols: int) -> list[PinConstraint]:
    """
    Pin the first row at its left end, middle and right end.

    Each pin holds its particle at the particle's current (already
    jittered) position. Duplicate ids on narrow grids are pinned once.
    """
    pins = []
    for idx in dict.fromkeys((0, cols // 2, cols - 1)):
        store.check_id(idx)
        pins.append(PinConstraint(idx, store.positions[idx]))
    return pins
