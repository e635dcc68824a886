import numpy as np
import pytest
from verlet_cloth.util import f64, vec3, as_vec3, length, distance, norm2, check_count


def test_arithmetic_returns_new_values():
    """a + b, a - b and a * s must not alias their inputs."""
    a = vec3(1.0, 2.0, 3.0)
    b = vec3(4.0, 5.0, 6.0)

    s = a + b
    d = b - a
    m = a * 2.0
    s[0] = 100.0

    np.testing.assert_array_equal(a, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(d, [3.0, 3.0, 3.0])
    np.testing.assert_array_equal(m, [2.0, 4.0, 6.0])


def test_in_place_add_sub():
    a = vec3(1.0, 1.0, 1.0)
    a += vec3(1.0, 2.0, 3.0)
    np.testing.assert_array_equal(a, [2.0, 3.0, 4.0])
    a -= vec3(2.0, 3.0, 4.0)
    np.testing.assert_array_equal(a, [0.0, 0.0, 0.0])


def test_length_is_euclidean_in_3d():
    """|(2, 3, 6)| = 7, the z component counts."""
    assert length(vec3(2.0, 3.0, 6.0)) == pytest.approx(7.0)
    assert norm2(vec3(2.0, 3.0, 6.0)) == pytest.approx(49.0)
    assert distance(vec3(1.0, 1.0, 1.0), vec3(4.0, 5.0, 1.0)) == pytest.approx(5.0)


def test_as_vec3_pads_and_validates():
    np.testing.assert_array_equal(as_vec3((3, 4)), [3.0, 4.0, 0.0])
    np.testing.assert_array_equal(as_vec3([1, 2, 3]), [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        as_vec3([1.0, 2.0, 3.0, 4.0])


def test_f64_copies():
    src = np.array([1.0, 2.0, 3.0])
    out = f64(src)
    out[0] = 9.0
    assert src[0] == 1.0


def test_check_count_rejects_non_integers():
    assert check_count("rows", 3) == 3
    assert check_count("rows", np.int64(4)) == 4
    for bad in (2.5, 3.0, True, "3", None):
        with pytest.raises(ValueError, match="integer"):
            check_count("rows", bad)
    with pytest.raises(ValueError, match=">= 1"):
        check_count("rows", 0)
