import tempfile
import unittest
from pathlib import Path

from house_generator.conversion.obj_writer import ObjWriter
from house_generator.geometry.house_mesh_builder import build_house_shell, build_interior_walls
from house_generator.geometry.mesh_builder import RenderMesh


class TestObjWriter(unittest.TestCase):
    def test_write_shell(self):
        writer = ObjWriter()
        writer.add_mesh(build_house_shell(10.0, 10.0, 3.0, 0.2, 0.2), "shell")
        self.assertEqual(writer.vertex_count, 120)
        self.assertEqual(writer.face_count, 60)

        with tempfile.TemporaryDirectory() as tmp:
            obj_path = Path(tmp) / "out" / "house.obj"
            writer.write(str(obj_path))

            lines = obj_path.read_text().splitlines()
            self.assertIn("mtllib house.mtl", lines)
            self.assertEqual(sum(1 for l in lines if l.startswith("v ")), 120)
            self.assertEqual(sum(1 for l in lines if l.startswith("vt ")), 120)
            self.assertEqual(sum(1 for l in lines if l.startswith("vn ")), 120)
            faces = [l for l in lines if l.startswith("f ")]
            self.assertEqual(len(faces), 60)
            self.assertEqual(faces[0], "f 1/1/1 2/2/2 3/3/3")

            mtl = (Path(tmp) / "out" / "house.mtl").read_text()
            self.assertIn("newmtl shell", mtl)

    def test_second_mesh_offsets_indices(self):
        writer = ObjWriter()
        writer.add_mesh(build_house_shell(10.0, 10.0, 3.0, 0.2, 0.2, generate_walls=False), "shell")
        walls = build_interior_walls([], 3.0, 0.2)
        writer.add_mesh(walls, "interior_walls")
        writer.add_mesh(build_house_shell(4.0, 4.0, 3.0, 0.2, 0.2, generate_walls=False), "floor")

        with tempfile.TemporaryDirectory() as tmp:
            obj_path = Path(tmp) / "two.obj"
            writer.write(str(obj_path), write_mtl=False)
            text = obj_path.read_text()
            self.assertNotIn("mtllib", text)
            self.assertIn("usemtl floor", text)
            self.assertIn("usemtl shell", text)
            self.assertIn("f 25/25/25 26/26/26 27/27/27", text)
            self.assertFalse((Path(tmp) / "two.mtl").exists())

    def test_empty_and_none_skipped(self):
        writer = ObjWriter()
        writer.add_mesh(None)
        writer.add_mesh(RenderMesh())
        self.assertEqual(writer.vertex_count, 0)
        self.assertEqual(writer.face_count, 0)


if __name__ == '__main__':
    unittest.main()
