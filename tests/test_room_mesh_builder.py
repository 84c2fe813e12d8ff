import unittest

import numpy as np

from house_generator.generators.bsp import Rect, RoomSpec
from house_generator.geometry.mesh_builder import RenderMesh
from house_generator.geometry.room_mesh_builder import ROOM_MESH_NAME, build_room, build_rooms


def _room(cx, cz, width, length):
    bounds = Rect(cx - width * 0.5, cz - length * 0.5, width, length)
    return RoomSpec(center=(cx, cz), width=width, length=length, bounds=bounds)


class TestBuildRoom(unittest.TestCase):
    def test_single_room(self):
        mesh = build_room(_room(2.0, 3.0, 4.0, 2.0), 2.5, 0.1, 0.1)
        self.assertEqual(mesh.name, ROOM_MESH_NAME)
        self.assertEqual(mesh.vertex_count, 5 * 24)

        floor = mesh.vertices[0:24]
        np.testing.assert_allclose(floor.min(axis=0), (0.0, 0.0, 2.0), atol=1e-5)
        np.testing.assert_allclose(floor.max(axis=0), (4.0, 0.1, 4.0), atol=1e-5)

        front = mesh.vertices[24:48]
        np.testing.assert_allclose(front.mean(axis=0), (2.0, 1.35, 4.05), atol=1e-5)

    def test_walls_only(self):
        mesh = build_room(_room(0.0, 0.0, 3.0, 3.0), 2.5, 0.1, 0.1, generate_floor=False)
        self.assertEqual(mesh.vertex_count, 4 * 24)
        np.testing.assert_allclose(mesh.bounds_min, (-1.6, 0.1, -1.6), atol=1e-5)

    def test_target_reused(self):
        target = RenderMesh(name="Room")
        result = build_room(_room(0.0, 0.0, 3.0, 3.0), 2.5, 0.1, 0.1, target=target)
        self.assertIs(result, target)
        self.assertFalse(target.is_empty)


class TestBuildRooms(unittest.TestCase):
    def test_rooms_in_order(self):
        rooms = [_room(-3.0, 0.0, 2.0, 2.0), _room(3.0, 0.0, 2.0, 2.0)]
        mesh = build_rooms(rooms, 2.5, 0.1, 0.1)
        self.assertEqual(mesh.vertex_count, 10 * 24)
        first_floor = mesh.vertices[0:24].mean(axis=0)
        second_floor = mesh.vertices[5 * 24:6 * 24].mean(axis=0)
        self.assertAlmostEqual(float(first_floor[0]), -3.0, places=5)
        self.assertAlmostEqual(float(second_floor[0]), 3.0, places=5)
        self.assertEqual(int(mesh.indices.max()), 10 * 24 - 1)

    def test_empty_and_none(self):
        self.assertTrue(build_rooms([], 2.5, 0.1, 0.1).is_empty)
        self.assertTrue(build_rooms(None, 2.5, 0.1, 0.1).is_empty)

    def test_zero_size_room_skipped(self):
        rooms = [_room(0.0, 0.0, 0.0, 2.0), _room(5.0, 5.0, 2.0, 2.0)]
        with self.assertLogs("house_generator.geometry.room_mesh_builder", level="WARNING"):
            mesh = build_rooms(rooms, 2.5, 0.1, 0.1)
        self.assertEqual(mesh.vertex_count, 5 * 24)


if __name__ == '__main__':
    unittest.main()
