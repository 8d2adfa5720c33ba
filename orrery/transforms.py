"""4x4 homogeneous transforms for column vectors (``matrix @ point``).

Matrices are row-major numpy arrays in the usual mathematical layout;
transpose them (or upload with transpose enabled) when handing them to
an API that expects column-major storage.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "normalize",
    "perspective",
    "look_at",
    "translation",
    "scaling",
    "rotation",
]


def _vec3(value, what: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"{what} must have exactly three components, got shape {arr.shape}")
    return arr


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length; a zero vector stays zero."""
    v = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        return np.zeros_like(v)
    return v / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth ``[-near, -far]`` to ``[-1, 1]``."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    depth = near - far
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (near + far) / depth
    m[2, 3] = 2.0 * near * far / depth
    m[3, 2] = -1.0
    return m


def look_at(eye, center, up) -> np.ndarray:
    """View matrix placing ``eye`` at the origin looking down -Z towards ``center``."""
    eye = _vec3(eye, "eye")
    center = _vec3(center, "center")
    up = _vec3(up, "up")
    forward = normalize(center - eye)
    side = normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    m = np.identity(4)
    m[0, :3] = side
    m[1, :3] = upward
    m[2, :3] = -forward
    m[0, 3] = -np.dot(side, eye)
    m[1, 3] = -np.dot(upward, eye)
    m[2, 3] = np.dot(forward, eye)
    return m


def translation(offset) -> np.ndarray:
    """Matrix that moves points by ``offset``."""
    m = np.identity(4)
    m[:3, 3] = _vec3(offset, "offset")
    return m


def scaling(factors) -> np.ndarray:
    """Matrix that scales each axis by the matching entry of ``factors``."""
    m = np.identity(4)
    m[:3, :3] = np.diag(_vec3(factors, "factors"))
    return m


def rotation(angle: float, axis) -> np.ndarray:
    """Matrix rotating by ``angle`` radians counter-clockwise about ``axis``."""
    k = normalize(_vec3(axis, "axis"))
    if not k.any():
        raise ValueError("rotation axis must be non-zero")
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    m = np.identity(4)
    m[:3, :3] = c * np.identity(3) + s * skew + (1.0 - c) * np.outer(k, k)
    return m