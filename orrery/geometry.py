"""Indexed meshes for spheres and orbit circles."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

__all__ = ["Mesh", "generate_sphere", "generate_circle"]


@dataclass(frozen=True, eq=False)
class Mesh:
    """Interleaved float32 vertex data with uint32 indices.

    ``layout`` gives the number of floats of each vertex attribute, in
    attribute-location order.
    """

    vertices: np.ndarray
    indices: np.ndarray
    layout: tuple[int, ...]

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def index_count(self) -> int:
        return int(self.indices.size)

    @property
    def stride(self) -> int:
        """Size of one vertex in bytes."""
        return sum(self.layout) * self.vertices.itemsize

    @property
    def attributes(self) -> tuple[tuple[int, int, int], ...]:
        """``(location, component count, byte offset)`` for each attribute."""
        result = []
        offset = 0
        for location, size in enumerate(self.layout):
            result.append((location, size, offset * self.vertices.itemsize))
            offset += size
        return tuple(result)

    @property
    def positions(self) -> np.ndarray:
        """The position columns of every vertex."""
        return self.vertices[:, : self.layout[0]]


def generate_sphere(radius: float, slices: int, stacks: int) -> Mesh:
    """UV sphere with positions, normals and texture coordinates.

    Rings run from the north pole (+Y) to the south pole; each ring repeats
    its first vertex at the seam so texture coordinates wrap cleanly.
    """
    if slices < 3 or stacks < 2 or radius <= 0:
        raise ValueError(
            "sphere needs at least 3 slices, 2 stacks and a positive radius"
        )

    ring, seg = np.meshgrid(
        np.arange(stacks + 1), np.arange(slices + 1), indexing="ij"
    )
    theta = ring * math.pi / stacks
    phi = seg * 2.0 * math.pi / slices
    y = radius * np.cos(theta)
    ring_radius = radius * np.sin(theta)
    x = ring_radius * np.cos(phi)
    z = ring_radius * np.sin(phi)
    u = seg / slices
    v = ring / stacks
    vertices = (
        np.stack([x, y, z, x / radius, y / radius, z / radius, u, v], axis=-1)
        .reshape(-1, 8)
        .astype(np.float32)
    )

    row = slices + 1
    band, col = np.meshgrid(np.arange(stacks), np.arange(slices), indexing="ij")
    k1 = band * row + col
    k2 = k1 + row
    indices = (
        np.stack([k1, k2, k1 + 1, k1 + 1, k2, k2 + 1], axis=-1)
        .reshape(-1)
        .astype(np.uint32)
    )
    return Mesh(vertices, indices, (3, 3, 2))


def generate_circle(radius: float, segments: int) -> Mesh:
    """Circle in the XY plane as line segments joining consecutive points."""
    if segments < 1:
        raise ValueError("circle needs at least one segment")
    angles = np.arange(segments + 1) * (2.0 * math.pi / segments)
    vertices = np.stack(
        [radius * np.cos(angles), radius * np.sin(angles)], axis=-1
    ).astype(np.float32)
    start = np.arange(segments)
    indices = np.stack([start, start + 1], axis=-1).reshape(-1).astype(np.uint32)
    return Mesh(vertices, indices, (2,))