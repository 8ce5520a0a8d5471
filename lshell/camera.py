"""A first-person camera driven by movement keys and mouse deltas."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Container

import numpy as np

PITCH_LIMIT = 89.0


class Key(IntEnum):
    """Key codes that move the camera."""

    A = 65
    D = 68
    S = 83
    W = 87


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def look_at(eye, center, up) -> np.ndarray:
    """Return a right-handed 4x4 view matrix that acts on column vectors."""
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -(side @ eye)
    matrix[1, 3] = -(upward @ eye)
    matrix[2, 3] = forward @ eye
    return matrix


class Camera:
    """Position and orientation given by yaw and pitch in degrees."""

    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        world_up=(0.0, 1.0, 0.0),
        yaw: float = 90.0,
        pitch: float = 0.0,
        move_speed: float = 5.0,
        turn_speed: float = 0.5,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(world_up, dtype=float)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.move_speed = float(move_speed)
        self.turn_speed = float(turn_speed)
        self.front = np.array([0.0, 0.0, -1.0])
        self._update()

    def key_control(self, keys: Container[int], delta_time: float) -> None:
        """Move along the view direction for W/S and sideways for A/D."""
        velocity = self.move_speed * delta_time
        if Key.W in keys:
            self.position = self.position + self.front * velocity
        if Key.S in keys:
            self.position = self.position - self.front * velocity
        if Key.A in keys:
            self.position = self.position - self.right * velocity
        if Key.D in keys:
            self.position = self.position + self.right * velocity

    def mouse_control(self, x_change: float, y_change: float) -> None:
        """Turn by the scaled mouse deltas, keeping pitch within +/-89 degrees."""
        self.yaw += x_change * self.turn_speed
        self.pitch += y_change * self.turn_speed
        self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update()

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix looking along the current direction."""
        return look_at(self.position, self.position + self.front, self.up)

    def _update(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = _normalize(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))