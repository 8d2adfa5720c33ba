import math

import numpy as np
import pytest

from orrery.camera import SENSITIVITY, SPEED, Camera, Movement


def _assert_orthonormal(cam):
    basis = np.stack([cam.front, cam.right, cam.up])
    assert np.allclose(basis @ basis.T, np.identity(3))


def test_default_camera_looks_down_negative_z():
    cam = Camera()
    assert np.allclose(cam.front, (0.0, 0.0, -1.0), atol=1e-12)
    assert np.allclose(cam.right, (1.0, 0.0, 0.0), atol=1e-12)
    assert np.allclose(cam.up, cam.world_up, atol=1e-12)


def test_defaults_match_documented_constants():
    cam = Camera()
    assert cam.movement_speed == SPEED
    assert cam.mouse_sensitivity == SENSITIVITY
    assert cam.zoom == 45.0


@pytest.mark.parametrize("yaw,pitch", [(-117.0, -14.0), (30.0, 60.0), (200.0, -85.0)])
def test_basis_is_orthonormal(yaw, pitch):
    cam = Camera(position=(12.146158, 7.960372, 28.563208), yaw=yaw, pitch=pitch)
    _assert_orthonormal(cam)
    assert np.allclose(np.cross(cam.right, cam.up), -cam.front)


def test_pitch_sets_vertical_component_of_front():
    cam = Camera(pitch=30.0)
    assert math.isclose(cam.front[1], math.sin(math.radians(30.0)))


def test_forward_moves_speed_times_time_along_front():
    cam = Camera(position=(1.0, 2.0, 3.0), yaw=-117.0, pitch=-14.0)
    start = cam.position.copy()
    cam.process_keyboard(Movement.FORWARD, 0.5)
    delta = cam.position - start
    assert math.isclose(np.linalg.norm(delta), cam.movement_speed * 0.5)
    assert np.allclose(normalize_vec(delta), cam.front)


def normalize_vec(v):
    return v / np.linalg.norm(v)


@pytest.mark.parametrize(
    "there,back",
    [
        (Movement.FORWARD, Movement.BACKWARD),
        (Movement.LEFT, Movement.RIGHT),
        (Movement.UP, Movement.DOWN),
    ],
)
def test_opposite_moves_cancel(there, back):
    cam = Camera(position=(4.0, -1.0, 2.0), yaw=10.0, pitch=20.0)
    start = cam.position.copy()
    cam.process_keyboard(there, 0.25)
    assert not np.allclose(cam.position, start)
    cam.process_keyboard(back, 0.25)
    assert np.allclose(cam.position, start)


def test_left_moves_against_right_vector():
    cam = Camera()
    cam.process_keyboard(Movement.LEFT, 0.1)
    assert np.dot(cam.position, cam.right) < 0
    assert math.isclose(np.dot(cam.position, cam.front), 0.0, abs_tol=1e-12)


def test_up_moves_along_up_vector():
    cam = Camera(yaw=45.0, pitch=10.0)
    cam.process_keyboard(Movement.UP, 0.2)
    assert np.dot(cam.position, cam.up) > 0


def test_mouse_movement_scales_by_sensitivity():
    cam = Camera()
    cam.process_mouse_movement(50.0, 20.0)
    assert math.isclose(cam.yaw, -90.0 + 50.0 * SENSITIVITY)
    assert math.isclose(cam.pitch, 20.0 * SENSITIVITY)
    _assert_orthonormal(cam)


@pytest.mark.parametrize("offset,limit", [(10000.0, 89.0), (-10000.0, -89.0)])
def test_pitch_is_clamped_when_constrained(offset, limit):
    cam = Camera()
    cam.process_mouse_movement(0.0, offset, True)
    assert cam.pitch == limit


def test_pitch_is_free_when_not_constrained():
    cam = Camera()
    cam.process_mouse_movement(0.0, 1000.0, False)
    assert math.isclose(cam.pitch, 1000.0 * SENSITIVITY)


@pytest.mark.parametrize("offset,expected", [(100.0, 1.0), (-100.0, 45.0)])
def test_zoom_is_clamped(offset, expected):
    cam = Camera()
    cam.process_mouse_scroll(offset)
    assert cam.zoom == expected


def test_zoom_changes_within_range():
    cam = Camera()
    cam.process_mouse_scroll(5.0)
    assert math.isclose(cam.zoom, 45.0 - 5.0)


def test_view_matrix_puts_camera_at_origin_looking_down_negative_z():
    cam = Camera(position=(12.146158, 7.960372, 28.563208), yaw=-117.0, pitch=-14.0)
    view = cam.view_matrix()
    eye = view @ np.append(cam.position, 1.0)
    ahead = view @ np.append(cam.position + cam.front, 1.0)
    assert np.allclose(eye[:3], 0.0, atol=1e-9)
    assert np.allclose(ahead[:2], 0.0, atol=1e-9)
    assert ahead[2] < 0


def test_unknown_direction_rejected():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.process_keyboard("sideways", 1.0)


def test_position_must_be_three_components():
    with pytest.raises(ValueError):
        Camera(position=(1.0, 2.0))