import numpy as np
import pytest
from verlet_cloth.types import ParticleStore


def test_defaults_start_at_rest():
    """previous_positions copies positions and forces start at zero."""
    pos = np.array([[1.0, 2.0, 0.0], [3.0, 4.0, 0.0]])
    store = ParticleStore(positions=pos)

    assert len(store) == 2
    np.testing.assert_array_equal(store.previous_positions, pos)
    np.testing.assert_array_equal(store.forces, np.zeros((2, 3)))
    np.testing.assert_array_equal(store.implicit_velocities(), np.zeros((2, 3)))

    # Input is copied, not aliased
    pos[0, 0] = 99.0
    assert store.positions[0, 0] == 1.0
    store.positions[1, 0] = 42.0
    assert store.previous_positions[1, 0] == 3.0


def test_zeros_and_validation():
    store = ParticleStore.zeros(4)
    assert store.count == 4
    assert store.positions.shape == (4, 3)

    with pytest.raises(ValueError):
        ParticleStore.zeros(0)
    with pytest.raises(ValueError):
        ParticleStore(positions=np.zeros((3, 2)))
    with pytest.raises(ValueError):
        ParticleStore(positions=np.zeros((3, 3)), forces=np.zeros((2, 3)))


def test_check_id():
    """Ids outside [0, N) fail fast, negative ids included."""
    store = ParticleStore.zeros(3)
    assert store.check_id(0) == 0
    assert store.check_id(np.int64(2)) == 2
    for bad in (-1, 3, 100):
        with pytest.raises(IndexError):
            store.check_id(bad)


def test_clear_forces_and_copy():
    store = ParticleStore.zeros(2)
    store.forces[:] = 5.0
    snap = store.copy()
    store.clear_forces()

    np.testing.assert_array_equal(store.forces, np.zeros((2, 3)))
    np.testing.assert_array_equal(snap.forces, np.full((2, 3), 5.0))
