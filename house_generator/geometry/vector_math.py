"""
Vector and rotation helpers for box geometry.

Rotations are 3x3 numpy matrices whose columns are the rotated local
X (right), Y (up) and Z (forward) axes. World space is Y-up.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]

EPSILON = 1e-6

WORLD_UP: Vec3 = (0.0, 1.0, 0.0)

# Local box axes
AXIS_RIGHT: Vec3 = (1.0, 0.0, 0.0)
AXIS_LEFT: Vec3 = (-1.0, 0.0, 0.0)
AXIS_UP: Vec3 = (0.0, 1.0, 0.0)
AXIS_DOWN: Vec3 = (0.0, -1.0, 0.0)
AXIS_FORWARD: Vec3 = (0.0, 0.0, 1.0)
AXIS_BACK: Vec3 = (0.0, 0.0, -1.0)


def identity_rotation() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def _normalize(v: np.ndarray) -> Optional[np.ndarray]:
    length = float(np.linalg.norm(v))
    if length < EPSILON:
        return None
    return v / length


def look_rotation(forward: Vec3, up: Vec3 = WORLD_UP) -> np.ndarray:
    """Rotation that points local +Z along ``forward`` with local +Y near ``up``.

    Args:
        forward: Direction the box length axis should face
        up: Reference up vector

    Returns:
        3x3 rotation matrix. Identity for a zero forward vector; when
        ``forward`` is parallel to ``up`` a fallback right axis is used.
    """
    f = _normalize(np.asarray(forward, dtype=np.float64))
    if f is None:
        return identity_rotation()

    u_ref = np.asarray(up, dtype=np.float64)
    right = _normalize(np.cross(u_ref, f))
    if right is None:
        # Looking straight along the up axis - pick any perpendicular right
        right = _normalize(np.cross(np.asarray(AXIS_FORWARD), f))
        if right is None:
            right = np.asarray(AXIS_RIGHT, dtype=np.float64)

    true_up = np.cross(f, right)

    rotation = np.empty((3, 3), dtype=np.float64)
    rotation[:, 0] = right
    rotation[:, 1] = true_up
    rotation[:, 2] = f
    return rotation


def rotate(rotation: np.ndarray, v: Vec3) -> Vec3:
    r = rotation @ np.asarray(v, dtype=np.float64)
    return (float(r[0]), float(r[1]), float(r[2]))


def yaw_degrees(rotation: np.ndarray) -> float:
    """Heading of the rotated forward axis, measured from +Z toward +X."""
    forward = rotation[:, 2]
    return math.degrees(math.atan2(forward[0], forward[2]))


def is_rotation(matrix: np.ndarray, tolerance: float = 1e-6) -> bool:
    """Check that ``matrix`` is a proper rotation (orthonormal, det +1)."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        return False
    if not np.allclose(m.T @ m, np.eye(3), atol=tolerance):
        return False
    return abs(float(np.linalg.det(m)) - 1.0) < tolerance
