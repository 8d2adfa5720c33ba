"""Planet table and the animation clock that drives orbits and spins."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .transforms import rotation, scaling, translation

__all__ = ["Planet", "SimulationState", "default_planets", "ORBIT_HEIGHT"]

# Planets are drawn slightly above the orbital plane of the sun's centre.
ORBIT_HEIGHT = 1.0

_AU_SCALE = 10.0
_ORBIT_OFFSET = 10.0
_SPEED_DIVISOR = 30.0

# name, texture, distance in AU, size, rotation speed, orbital speed
_PLANET_TABLE = (
    ("Mercury", "resources/2k_mercury.jpg", 0.39, 0.5, 10.5, 47.4),
    ("Venus", "resources/2k_venus_surface.jpg", 0.72, 1.0, 6.5, 35.0),
    ("Earth", "resources/2k_earth_daymap.jpg", 1.00, 1.0, 1674.0, 29.8),
    ("Mars", "resources/2k_mars.jpg", 1.52, 0.6, 868.0, 24.1),
    ("Jupiter", "resources/2k_jupiter.jpg", 5.20, 6.0, 453.0, 13.1),
    ("Saturn", "resources/2k_saturn.jpg", 9.58, 5.0, 34800.0, 9.7),
    ("Uranus", "resources/2k_uranus.jpg", 19.22, 3.0, 9000.0, 6.8),
    ("Neptune", "resources/2k_neptune.jpg", 30.05, 3.0, 9700.0, 5.4),
)


@dataclass(frozen=True)
class Planet:
    """A body circling the sun on a circular orbit in the XZ plane."""

    name: str
    texture: str
    distance: float
    size: float
    rotation_speed: float
    orbital_speed: float

    def orbit_radius(self) -> float:
        """Radius of the orbit line drawn for this planet."""
        return self.distance

    def orbital_position(self, animation_time: float) -> np.ndarray:
        """Position on the orbit after ``animation_time`` seconds of revolution."""
        angle = animation_time * self.orbital_speed
        return np.array(
            [self.distance * math.sin(angle), 0.0, self.distance * math.cos(angle)]
        )

    def model_matrix(self, animation_time: float, rotation_time: float) -> np.ndarray:
        """Model transform: placed on its orbit, scaled, then spun about +Y."""
        x, _, z = self.orbital_position(animation_time)
        return (
            translation((x, ORBIT_HEIGHT, z))
            @ scaling((self.size, self.size, self.size))
            @ rotation(self.rotation_speed * rotation_time, (0.0, 1.0, 0.0))
        )


def default_planets() -> list[Planet]:
    """The eight planets, in order from the sun."""
    return [
        Planet(
            name=name,
            texture=texture,
            distance=_ORBIT_OFFSET + au * _AU_SCALE,
            size=size,
            rotation_speed=spin / _SPEED_DIVISOR,
            orbital_speed=orbit / _SPEED_DIVISOR,
        )
        for name, texture, au, size, spin, orbit in _PLANET_TABLE
    ]


@dataclass
class SimulationState:
    """Which motions are running and how much time each has accumulated."""

    revolving: bool = True
    rotating: bool = False
    animation_time: float = 0.0
    rotation_time: float = 0.0

    def advance(self, delta_time: float) -> None:
        """Let ``delta_time`` seconds pass for every running motion."""
        if self.revolving:
            self.animation_time += delta_time
        if self.rotating:
            self.rotation_time += delta_time

    def toggle_revolution(self) -> int:
        """Pause or resume orbital motion; returns the new flags."""
        self.revolving = not self.revolving
        return self.flags()

    def toggle_rotation(self) -> int:
        """Pause or resume spinning; returns the new flags."""
        self.rotating = not self.rotating
        return self.flags()

    def flags(self) -> int:
        """Bit 0 set while revolving, bit 1 set while rotating."""
        return int(self.revolving) | (int(self.rotating) << 1)