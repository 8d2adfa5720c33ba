"""Fly-through camera driven by keyboard and mouse input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .transforms import look_at, normalize

__all__ = ["Movement", "Camera", "YAW", "PITCH", "SPEED", "SENSITIVITY", "ZOOM"]

YAW = -90.0
PITCH = 0.0
SPEED = 30.0
SENSITIVITY = 0.1
ZOOM = 45.0

_PITCH_LIMIT = 89.0
_ZOOM_MIN = 1.0
_ZOOM_MAX = 45.0


class Movement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


# Which basis vector each movement follows, and in which sense.
_MOVES = {
    Movement.FORWARD: ("front", 1.0),
    Movement.BACKWARD: ("front", -1.0),
    Movement.LEFT: ("right", -1.0),
    Movement.RIGHT: ("right", 1.0),
    Movement.UP: ("up", 1.0),
    Movement.DOWN: ("up", -1.0),
}


def _as_vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Camera:
    """Euler-angle camera; angles are in degrees."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    world_up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    yaw: float = YAW
    pitch: float = PITCH
    movement_speed: float = SPEED
    mouse_sensitivity: float = SENSITIVITY
    zoom: float = ZOOM
    front: np.ndarray = field(init=False)
    right: np.ndarray = field(init=False)
    up: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.position = _as_vec3(self.position)
        self.world_up = _as_vec3(self.world_up)
        self.front = np.array([0.0, 0.0, -1.0])
        self.update_vectors()

    def view_matrix(self) -> np.ndarray:
        """View matrix looking from the camera position along its front vector."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: Movement, delta_time: float) -> None:
        """Move the camera along one of its axes for ``delta_time`` seconds."""
        attribute, sense = _MOVES[Movement(direction)]
        velocity = self.movement_speed * delta_time
        self.position = self.position + sense * velocity * getattr(self, attribute)

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a mouse offset, optionally keeping pitch within ±89°."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self.update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by a scroll offset, keeping the field of view within 1°..45°."""
        self.zoom = min(max(self.zoom - yoffset, _ZOOM_MIN), _ZOOM_MAX)

    def update_vectors(self) -> None:
        """Recompute front, right and up from yaw, pitch and the world up vector."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = normalize(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))