import numpy as np
import pytest

from lshell.camera import PITCH_LIMIT, Camera, Key, look_at


def test_basis_is_orthonormal():
    cam = Camera(yaw=37.0, pitch=12.0)
    for vector in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert cam.front @ cam.right == pytest.approx(0.0, abs=1e-12)
    assert cam.front @ cam.up == pytest.approx(0.0, abs=1e-12)
    assert cam.right @ cam.up == pytest.approx(0.0, abs=1e-12)


def test_default_front_direction():
    assert np.allclose(Camera().front, [0.0, 0.0, 1.0])


@pytest.mark.parametrize("delta, limit", [(1000.0, PITCH_LIMIT), (-1000.0, -PITCH_LIMIT)])
def test_pitch_is_clamped(delta, limit):
    cam = Camera()
    cam.mouse_control(0.0, delta)
    assert cam.pitch == limit


def test_mouse_changes_yaw_by_scaled_delta():
    cam = Camera(yaw=10.0, turn_speed=1.0)
    cam.mouse_control(25.0, 0.0)
    assert cam.yaw == pytest.approx(35.0)


def test_forward_then_back_returns():
    cam = Camera(position=(1.0, 2.0, 3.0))
    start = cam.position.copy()
    cam.key_control({Key.W}, 0.3)
    cam.key_control({Key.S}, 0.3)
    assert np.allclose(cam.position, start)


def test_forward_moves_along_front_by_speed():
    cam = Camera(move_speed=4.0)
    start = cam.position.copy()
    cam.key_control({Key.W}, 0.25)
    delta = cam.position - start
    assert np.linalg.norm(delta) == pytest.approx(4.0 * 0.25)
    assert delta @ cam.front == pytest.approx(np.linalg.norm(delta))


def test_strafe_is_perpendicular_and_reversible():
    cam = Camera()
    start = cam.position.copy()
    cam.key_control({Key.A}, 0.5)
    assert (cam.position - start) @ cam.front == pytest.approx(0.0, abs=1e-12)
    cam.key_control({Key.D}, 0.5)
    assert np.allclose(cam.position, start)


def test_other_keys_do_not_move():
    cam = Camera()
    start = cam.position.copy()
    cam.key_control({32, 81}, 1.0)
    assert np.array_equal(cam.position, start)


def test_view_matrix_maps_eye_to_origin_and_target_ahead():
    cam = Camera(position=(2.0, -1.0, 4.0), yaw=20.0, pitch=-10.0)
    view = cam.view_matrix()
    eye = np.append(cam.position, 1.0)
    target = np.append(cam.position + cam.front, 1.0)
    assert np.allclose(view @ eye, [0.0, 0.0, 0.0, 1.0])
    assert np.allclose(view @ target, [0.0, 0.0, -1.0, 1.0])


def test_look_at_rotation_is_orthonormal():
    view = look_at([1.0, 2.0, 3.0], [4.0, 0.0, -1.0], [0.0, 1.0, 0.0])
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.allclose(view[3], [0.0, 0.0, 0.0, 1.0])