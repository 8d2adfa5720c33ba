import math

import numpy as np
import pytest

from orrery.transforms import (
    look_at,
    normalize,
    perspective,
    rotation,
    scaling,
    translation,
)


def _apply(matrix, point):
    out = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return out[:3] / out[3]


def test_translation_moves_point_by_offset():
    offset = (3.0, -2.0, 5.5)
    point = (1.0, 1.0, 1.0)
    assert np.allclose(_apply(translation(offset), point), np.add(point, offset))


def test_translation_leaves_directions_untouched():
    m = translation((4.0, 5.0, 6.0))
    direction = np.array([1.0, 2.0, 3.0, 0.0])
    assert np.allclose(m @ direction, direction)


def test_scaling_diagonal_holds_factors():
    factors = (2.0, 3.0, 4.0)
    m = scaling(factors)
    assert np.allclose(np.diag(m)[:3], factors)
    assert m[3, 3] == 1.0


def test_translation_rejects_wrong_shape():
    with pytest.raises(ValueError):
        translation((1.0, 2.0))


def test_rotation_is_orthonormal_with_unit_determinant():
    r = rotation(0.7, (1.0, 2.0, -0.5))[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert math.isclose(np.linalg.det(r), 1.0, rel_tol=1e-9)


def test_rotation_quarter_turn_about_y_sends_x_to_minus_z():
    m = rotation(math.pi / 2, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(m, (1.0, 0.0, 0.0)), (0.0, 0.0, -1.0))


def test_rotation_axis_length_does_not_matter():
    assert np.allclose(rotation(1.2, (0.0, 5.0, 0.0)), rotation(1.2, (0.0, 1.0, 0.0)))


def test_rotation_preserves_axis():
    axis = (1.0, 1.0, 0.0)
    assert np.allclose(_apply(rotation(2.1, axis), axis), axis)


def test_rotation_zero_axis_is_rejected():
    with pytest.raises(ValueError):
        rotation(1.0, (0.0, 0.0, 0.0))


def test_normalize_gives_unit_length_same_direction():
    v = np.array([3.0, -4.0, 12.0])
    n = normalize(v)
    assert math.isclose(np.linalg.norm(n), 1.0)
    assert np.allclose(np.cross(n, v), 0.0)
    assert np.dot(n, v) > 0


def test_normalize_zero_vector_stays_zero():
    assert np.array_equal(normalize((0.0, 0.0, 0.0)), np.zeros(3))


def test_look_at_maps_eye_to_origin_and_center_onto_negative_z():
    eye = np.array([12.0, 8.0, 28.0])
    center = np.array([1.0, -2.0, 3.0])
    m = look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(m, eye), 0.0)
    mapped = _apply(m, center)
    assert np.allclose(mapped[:2], 0.0)
    assert math.isclose(mapped[2], -np.linalg.norm(center - eye))


def test_look_at_rotation_part_is_orthonormal():
    r = look_at((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))


@pytest.mark.parametrize("near,far", [(0.1, 1000.0), (1.0, 50.0)])
def test_perspective_maps_near_and_far_planes_to_ndc_bounds(near, far):
    m = perspective(math.radians(45.0), 16 / 9, near, far)
    assert math.isclose(_apply(m, (0.0, 0.0, -near))[2], -1.0, abs_tol=1e-9)
    assert math.isclose(_apply(m, (0.0, 0.0, -far))[2], 1.0, rel_tol=1e-6)


def test_perspective_aspect_scales_x_relative_to_y():
    aspect = 2560 / 1440
    m = perspective(math.radians(45.0), aspect, 0.1, 1000.0)
    assert math.isclose(m[1, 1] / m[0, 0], aspect)


@pytest.mark.parametrize("aspect,near,far", [(0.0, 0.1, 10.0), (1.0, 5.0, 5.0)])
def test_perspective_rejects_degenerate_input(aspect, near, far):
    with pytest.raises(ValueError):
        perspective(1.0, aspect, near, far)