import numpy as np
import pytest
from verlet_cloth.config import ClothConfig
from verlet_cloth.constraints.solver import StructuralConstraint, DragConstraint
from verlet_cloth.core.invariants import all_finite, within_bounds, max_constraint_error
from verlet_cloth.profiler import Profiler
from verlet_cloth.scene import Scene
from verlet_cloth.types import ParticleStore


def test_square_settles_without_exploding():
    """
    2x2 grid, rest length 20, gravity only, no pins, 1 pass per frame,
    bounds 1000x1000. The square falls, folds over on the floor and stays
    finite and inside the box.
    """
    config = ClothConfig(rows=2, cols=2, rest_length=20.0, start_distance=20.0,
                         iterations=1, pins="none", seed=11)
    scene = Scene.from_config(config, 1000.0, 1000.0)

    assert len(scene.constraints) == 4
    assert scene.pins == []
    # Adjacent distances start at 20 ± the jitter (at most 2*sqrt(2))
    for c in scene.constraints:
        d = np.linalg.norm(scene.particles.positions[c.idx_2] - scene.particles.positions[c.idx_1])
        assert abs(d - 20.0) <= 2.0 * np.sqrt(2.0) + 1e-9

    for _ in range(3000):
        scene.step(1000.0, 1000.0)
        assert all_finite(scene.particles)

    # Relaxation runs after the clamp, so resting contact can dip below the
    # floor by a fraction of a pixel.
    assert within_bounds(scene.particles, 1000.0, 1000.0, tol=1.0)
    assert max_constraint_error(scene.particles, scene.constraints) < 1.0
    assert scene.particles.positions[:, 1].min() > 900.0


def test_pinned_particle_stays_put():
    """A single particle pinned at (50, 50) under gravity never moves."""
    scene = Scene(particles=ParticleStore(positions=[[50.0, 50.0, 0.0]]))
    scene.add_pin(0)

    for _ in range(500):
        scene.step(1000.0, 1000.0)
        np.testing.assert_array_equal(scene.particles.positions[0], [50.0, 50.0, 0.0])


def test_first_step_uses_prior_forces():
    """
    Integration uses the forces of the previous step, so a particle at rest
    does not move on step 1 and falls g*dt² on step 2.
    """
    scene = Scene(particles=ParticleStore(positions=[[100.0, 100.0, 0.0]]), gravity=(0.0, 98.2, 0.0), dt=0.01)

    scene.step(1000.0, 1000.0)
    np.testing.assert_allclose(scene.particles.positions[0], [100.0, 100.0, 0.0])

    scene.step(1000.0, 1000.0)
    np.testing.assert_allclose(scene.particles.positions[0], [100.0, 100.0 + 98.2 * 1e-4, 0.0])
    assert scene.time == pytest.approx(0.02)
    assert scene.step_count == 2


def test_default_cloth_keeps_pins():
    config = ClothConfig(seed=5)
    scene = Scene.from_config(config, 800.0, 600.0)

    assert scene.particles.count == 100
    assert len(scene.constraints) == 180
    assert [p.idx for p in scene.pins] == [0, 5, 9]
    # Particle 0 starts at the screen centre, give or take the jitter
    assert np.abs(scene.particles.positions[0, :2] - [400.0, 300.0]).max() <= 1.0

    mean_y_start = scene.particles.positions[:, 1].mean()
    for _ in range(300):
        scene.step(800.0, 600.0)

    assert all_finite(scene.particles)
    for p in scene.pins:
        np.testing.assert_array_equal(scene.particles.positions[p.idx], p.point)
    # Released from rest, the cloth can only sag
    assert scene.particles.positions[:, 1].mean() > mean_y_start + 1.0


def test_drag_moves_particle_in_scene():
    scene = Scene.from_config(ClothConfig(seed=2), 800.0, 600.0)
    drag = DragConstraint()
    drag.hold(55, (700.0, 100.0))

    scene.step(800.0, 600.0, drag)

    np.testing.assert_array_equal(scene.particles.positions[55], [700.0, 100.0, 0.0])


def test_construction_fails_fast():
    store = ParticleStore.zeros(2)
    with pytest.raises(IndexError):
        Scene(particles=store, constraints=[StructuralConstraint(0, 2, 1.0)])

    scene = Scene(particles=ParticleStore.zeros(2))
    with pytest.raises(IndexError):
        scene.add_pin(5)
    with pytest.raises(IndexError):
        scene.add_constraint(0, -1, 20.0)
    with pytest.raises(ValueError):
        scene.add_constraint(1, 1, 20.0)

    with pytest.raises(ValueError):
        Scene(particles=ParticleStore.zeros(1), iterations=0)
    with pytest.raises(ValueError):
        Scene(particles=ParticleStore.zeros(1), dt=0.0)
    with pytest.raises(ValueError):
        Scene(particles=ParticleStore.zeros(1), damping=2.0)
    with pytest.raises(ValueError, match="integer"):
        Scene(particles=ParticleStore.zeros(1), iterations=2.5)
    with pytest.raises(ValueError, match="integer"):
        Scene(particles=ParticleStore.zeros(1), iterations=True)

    drag = DragConstraint()
    drag.hold(99, (0.0, 0.0))
    with pytest.raises(IndexError):
        scene.step(100.0, 100.0, drag)


def test_profiler_sections():
    prof = Profiler()
    scene = Scene.from_config(ClothConfig(rows=3, cols=3, seed=0), 800.0, 600.0, profiler=prof)
    for _ in range(4):
        scene.step(800.0, 600.0)

    summary = prof.stats.summary()
    for name in ("integrate", "forces", "solve"):
        assert summary[name]["n"] == 4
        assert summary[name]["max_ms"] >= summary[name]["mean_ms"] >= 0.0


def test_gravity_change_applies_on_next_step():
    """Replacing scene.gravity after construction changes the force of the next step."""
    scene = Scene(particles=ParticleStore(np.array([[50.0, 50.0, 0.0]])))
    scene.step(100.0, 100.0)
    np.testing.assert_allclose(scene.particles.forces[0], [0.0, 98.2, 0.0])

    scene.gravity = (5.0, 0.0, 0.0)
    scene.step(100.0, 100.0)
    np.testing.assert_allclose(scene.particles.forces[0], [5.0, 0.0, 0.0])
    assert scene.last_skipped == 0
    assert "last_skipped" not in repr(scene)
