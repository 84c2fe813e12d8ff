import unittest

import numpy as np

from house_generator.generators.bsp import WallSegment, generate_bsp_layout
from house_generator.geometry.house_mesh_builder import (
    INTERIOR_MESH_NAME, SHELL_MESH_NAME, build_house_shell, build_interior_walls,
)
from house_generator.geometry.mesh_builder import RenderMesh


def _box(mesh, n):
    """Vertices of the n-th box in a mesh."""
    return mesh.vertices[n * 24:(n + 1) * 24]


class TestHouseShell(unittest.TestCase):
    def test_full_shell_counts(self):
        mesh = build_house_shell(10.0, 10.0, 3.0, 0.2, 0.2)
        self.assertEqual(mesh.name, SHELL_MESH_NAME)
        self.assertEqual(mesh.vertex_count, 5 * 24)
        self.assertEqual(mesh.triangle_count, 5 * 12)

    def test_front_wall_box(self):
        mesh = build_house_shell(10.0, 10.0, 3.0, 0.2, 0.2)
        front = _box(mesh, 1)
        # size (10.4, 3, 0.2) centered at (0, 1.7, 5.1)
        np.testing.assert_allclose(front.min(axis=0), (-5.2, 0.2, 5.0), atol=1e-5)
        np.testing.assert_allclose(front.max(axis=0), (5.2, 3.2, 5.2), atol=1e-5)
        np.testing.assert_allclose(front.mean(axis=0), (0.0, 1.7, 5.1), atol=1e-5)

    def test_floor_box(self):
        mesh = build_house_shell(10.0, 8.0, 3.0, 0.2, 0.3)
        floor = _box(mesh, 0)
        np.testing.assert_allclose(floor.min(axis=0), (-5.0, 0.0, -4.0), atol=1e-5)
        np.testing.assert_allclose(floor.max(axis=0), (5.0, 0.3, 4.0), atol=1e-5)

    def test_side_walls(self):
        mesh = build_house_shell(10.0, 8.0, 3.0, 0.2, 0.2)
        back, left, right = _box(mesh, 2), _box(mesh, 3), _box(mesh, 4)
        np.testing.assert_allclose(back.mean(axis=0), (0.0, 1.7, -4.1), atol=1e-5)
        np.testing.assert_allclose(left.mean(axis=0), (-5.1, 1.7, 0.0), atol=1e-5)
        np.testing.assert_allclose(right.mean(axis=0), (5.1, 1.7, 0.0), atol=1e-5)
        # Side walls span the length plus both wall thicknesses
        np.testing.assert_allclose(left.min(axis=0)[2], -4.2, atol=1e-5)
        np.testing.assert_allclose(left.max(axis=0)[2], 4.2, atol=1e-5)

    def test_bounds(self):
        mesh = build_house_shell(10.0, 10.0, 3.0, 0.2, 0.2)
        np.testing.assert_allclose(mesh.bounds_min, (-5.2, 0.0, -5.2), atol=1e-5)
        np.testing.assert_allclose(mesh.bounds_max, (5.2, 3.2, 5.2), atol=1e-5)

    def test_toggles(self):
        self.assertEqual(build_house_shell(10, 10, 3, 0.2, 0.2, generate_walls=False).vertex_count, 24)
        self.assertEqual(build_house_shell(10, 10, 3, 0.2, 0.2, generate_floor=False).vertex_count, 96)
        empty = build_house_shell(10, 10, 3, 0.2, 0.2, generate_floor=False, generate_walls=False)
        self.assertTrue(empty.is_empty)

    def test_dimensions_clamped(self):
        mesh = build_house_shell(0.0, -2.0, 0.0, 0.0, 0.0, generate_walls=False)
        np.testing.assert_allclose(mesh.bounds_min, (-0.5, 0.0, -0.5), atol=1e-6)
        np.testing.assert_allclose(mesh.bounds_max, (0.5, 0.01, 0.5), atol=1e-6)

        walls = build_house_shell(4.0, 4.0, 0.0, 0.0, 0.2, generate_floor=False)
        np.testing.assert_allclose(walls.bounds_max, (2.01, 0.3, 2.01), atol=1e-6)

    def test_target_is_refilled(self):
        target = RenderMesh(name="Shell")
        first = build_house_shell(10, 10, 3, 0.2, 0.2, target=target)
        second = build_house_shell(6, 6, 3, 0.2, 0.2, generate_walls=False, target=target)
        self.assertIs(first, target)
        self.assertIs(second, target)
        self.assertEqual(target.vertex_count, 24)
        np.testing.assert_allclose(target.bounds_max, (3.0, 0.2, 3.0), atol=1e-6)


class TestInteriorWalls(unittest.TestCase):
    def test_none_and_empty(self):
        self.assertTrue(build_interior_walls(None, 3.0, 0.2).is_empty)
        self.assertTrue(build_interior_walls([], 3.0, 0.2).is_empty)

    def test_degenerate_segment_skipped(self):
        mesh = build_interior_walls([WallSegment((1.0, 1.0), (1.0, 1.0), 0.15)], 3.0, 0.2)
        self.assertEqual(mesh.name, INTERIOR_MESH_NAME)
        self.assertTrue(mesh.is_empty)

    def test_degenerate_segment_among_others(self):
        segments = [
            WallSegment((0.0, 0.0), (0.0, 0.0), 0.15),
            WallSegment((0.0, -2.0), (0.0, 2.0), 0.15),
        ]
        mesh = build_interior_walls(segments, 3.0, 0.2)
        self.assertEqual(mesh.vertex_count, 24)

    def test_vertical_segment(self):
        mesh = build_interior_walls([WallSegment((2.0, -6.0), (2.0, 6.0), 0.15)], 3.0, 0.2)
        np.testing.assert_allclose(mesh.bounds_min, (1.925, 0.2, -6.0), atol=1e-5)
        np.testing.assert_allclose(mesh.bounds_max, (2.075, 3.2, 6.0), atol=1e-5)

    def test_horizontal_segment(self):
        mesh = build_interior_walls([WallSegment((-6.0, 1.0), (6.0, 1.0), 0.15)], 3.0, 0.2)
        np.testing.assert_allclose(mesh.bounds_min, (-6.0, 0.2, 0.925), atol=1e-5)
        np.testing.assert_allclose(mesh.bounds_max, (6.0, 3.2, 1.075), atol=1e-5)

    def test_diagonal_segment(self):
        mesh = build_interior_walls([WallSegment((0.0, 0.0), (3.0, 4.0), 0.1)], 2.0, 0.2)
        np.testing.assert_allclose(mesh.vertices.mean(axis=0), (1.5, 1.2, 2.0), atol=1e-5)
        # Front face normal points along the segment
        np.testing.assert_allclose(mesh.normals[0], (0.6, 0.0, 0.8), atol=1e-6)

    def test_thin_segment_clamped(self):
        mesh = build_interior_walls([WallSegment((0.0, -1.0), (0.0, 1.0), 0.0)], 3.0, 0.2)
        np.testing.assert_allclose(mesh.bounds_min[0], -0.005, atol=1e-6)
        np.testing.assert_allclose(mesh.bounds_max[0], 0.005, atol=1e-6)

    def test_layout_walls(self):
        layout = generate_bsp_layout(12, 12, 4, (3, 3), (8, 8), 12345)
        mesh = build_interior_walls(layout.interior_walls, 3.0, 0.2)
        self.assertEqual(mesh.vertex_count, 24 * layout.wall_count)
        self.assertEqual(mesh.triangle_count, 12 * layout.wall_count)


if __name__ == '__main__':
    unittest.main()
