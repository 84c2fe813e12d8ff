"""
Mesh builder for converting oriented boxes to renderable geometry.

Every mesh-producing feature (floor slabs, outer walls, interior walls,
room shells) is a set of boxes appended into shared vertex, normal, UV and
index buffers, then copied into a reusable RenderMesh handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .vector_math import (
    AXIS_BACK, AXIS_DOWN, AXIS_FORWARD, AXIS_LEFT, AXIS_RIGHT, AXIS_UP,
    identity_rotation, rotate,
)

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]

VERTICES_PER_BOX = 24
INDICES_PER_BOX = 36

# Fixed UV set per face; textures are not rescaled to the face size
FACE_UVS: Tuple[Vec2, Vec2, Vec2, Vec2] = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))

# Corner indices (into the 8 box corners) and local normal per face.
# Corner order is counter-clockwise seen from outside the face.
BOX_FACES: Tuple[Tuple[Tuple[int, int, int, int], Vec3], ...] = (
    ((3, 2, 6, 7), AXIS_FORWARD),  # Front  (+Z)
    ((1, 0, 4, 5), AXIS_BACK),     # Back   (-Z)
    ((0, 3, 7, 4), AXIS_LEFT),     # Left   (-X)
    ((2, 1, 5, 6), AXIS_RIGHT),    # Right  (+X)
    ((4, 7, 6, 5), AXIS_UP),       # Top    (+Y)
    ((0, 1, 2, 3), AXIS_DOWN),     # Bottom (-Y)
)

# Local corner signs: bottom ring p0..p3, then top ring p4..p7
_CORNER_SIGNS = np.array([
    [-1.0, -1.0, -1.0],
    [1.0, -1.0, -1.0],
    [1.0, -1.0, 1.0],
    [-1.0, -1.0, 1.0],
    [-1.0, 1.0, -1.0],
    [1.0, 1.0, -1.0],
    [1.0, 1.0, 1.0],
    [-1.0, 1.0, 1.0],
], dtype=np.float64)


class MeshIntegrityError(ValueError):
    """Raised when geometry violates a buffer invariant (a caller bug)."""


@dataclass
class MeshBuffers:
    """Parallel vertex/normal/UV lists plus a flat triangle index list."""
    vertices: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    uvs: List[Vec2] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    def clear(self):
        """Clear all mesh data."""
        self.vertices.clear()
        self.normals.clear()
        self.uvs.clear()
        self.indices.clear()

    def validate(self):
        """Raise MeshIntegrityError if the buffers are inconsistent."""
        n = len(self.vertices)
        if len(self.normals) != n or len(self.uvs) != n:
            raise MeshIntegrityError(
                f"Parallel buffer length mismatch: {n} vertices, "
                f"{len(self.normals)} normals, {len(self.uvs)} uvs"
            )
        if len(self.indices) % 3 != 0:
            raise MeshIntegrityError(f"Index count {len(self.indices)} is not a multiple of 3")
        for i in self.indices:
            if i < 0 or i >= n:
                raise MeshIntegrityError(f"Triangle index {i} outside vertex buffer of {n}")


def _add_face(v0: Vec3, v1: Vec3, v2: Vec3, v3: Vec3, normal: Vec3, buffers: MeshBuffers):
    """Append one quad as 4 vertices and 2 triangles."""
    index = len(buffers.vertices)

    buffers.vertices.extend((v0, v1, v2, v3))
    buffers.normals.extend((normal, normal, normal, normal))
    buffers.uvs.extend(FACE_UVS)
    buffers.indices.extend((
        index + 0, index + 1, index + 2,
        index + 0, index + 2, index + 3,
    ))


def append_box(size: Vec3, center: Vec3, buffers: MeshBuffers,
               rotation: Optional[np.ndarray] = None):
    """Append an oriented box to the buffers.

    Adds exactly 24 vertices, normals and UVs and 36 indices. Each face owns
    its 4 vertices so normals stay flat.

    Args:
        size: Full box extents (x, y, z) in local space
        center: World-space box center
        buffers: Target buffers, appended to in place
        rotation: Optional 3x3 rotation matrix (identity if omitted)

    Raises:
        MeshIntegrityError: If any size component is zero or negative
    """
    if any(s <= 0.0 for s in size):
        raise MeshIntegrityError(f"Box size must be positive on every axis, got {tuple(size)}")

    if rotation is None:
        rotation = identity_rotation()

    half = np.asarray(size, dtype=np.float64) * 0.5
    local = _CORNER_SIGNS * half
    world = local @ rotation.T + np.asarray(center, dtype=np.float64)
    corners = [(float(p[0]), float(p[1]), float(p[2])) for p in world]

    for (a, b, c, d), local_normal in BOX_FACES:
        normal = rotate(rotation, local_normal)
        _add_face(corners[a], corners[b], corners[c], corners[d], normal, buffers)


@dataclass
class RenderMesh:
    """Reusable mesh handle holding renderable arrays.

    Owned by the caller; assemblers clear and refill it in place.
    """
    name: str = "Mesh"
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.float32))
    normals: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.float32))
    uvs: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=np.float32))
    indices: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.uint32))
    bounds_min: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    bounds_max: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    def clear(self):
        """Clear all mesh data."""
        self.vertices = np.zeros((0, 3), dtype=np.float32)
        self.normals = np.zeros((0, 3), dtype=np.float32)
        self.uvs = np.zeros((0, 2), dtype=np.float32)
        self.indices = np.zeros((0, 3), dtype=np.uint32)
        self.bounds_min = (0.0, 0.0, 0.0)
        self.bounds_max = (0.0, 0.0, 0.0)

    def set_buffers(self, buffers: MeshBuffers):
        """Replace the mesh contents with ``buffers`` and recalculate bounds.

        The buffers are validated before anything is written, so a failed
        call leaves the previous contents untouched.
        """
        buffers.validate()

        if buffers.is_empty:
            self.clear()
            return

        vertices = np.array(buffers.vertices, dtype=np.float32)
        self.vertices = vertices
        self.normals = np.array(buffers.normals, dtype=np.float32)
        self.uvs = np.array(buffers.uvs, dtype=np.float32)
        self.indices = np.array(buffers.indices, dtype=np.uint32).reshape(-1, 3)
        self.bounds_min = tuple(float(v) for v in vertices.min(axis=0))
        self.bounds_max = tuple(float(v) for v in vertices.max(axis=0))


def finalize_mesh(buffers: MeshBuffers, target: Optional[RenderMesh], name: str) -> RenderMesh:
    """Write finished buffers into ``target`` (or a new mesh) and return it."""
    if target is None:
        target = RenderMesh(name=name)

    target.set_buffers(buffers)
    logger.debug("Mesh '%s': %d vertices, %d triangles",
                 target.name, target.vertex_count, target.triangle_count)
    return target
