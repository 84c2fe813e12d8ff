"""
Wavefront OBJ export for generated house meshes.

Writes positions, UVs and normals of one or more RenderMesh objects as a
single .obj (and optional .mtl), one material group per mesh.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from ..geometry.mesh_builder import RenderMesh

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


class ObjWriter:
    """Write RenderMesh geometry as Wavefront OBJ + optional MTL."""

    def __init__(self):
        self._vertices: List[Vec3] = []
        self._uvs: List[Vec2] = []
        self._normals: List[Vec3] = []
        self._faces: List[Tuple[Tuple[int, int, int], str]] = []  # (vertex indices 1-based, material)
        self._materials: Dict[str, bool] = {}

    def add_mesh(self, mesh: RenderMesh, material: str = "default"):
        """Append a mesh; its triangles are tagged with ``material``."""
        if mesh is None or mesh.is_empty:
            return

        base = len(self._vertices)
        for v, uv, n in zip(mesh.vertices, mesh.uvs, mesh.normals):
            self._vertices.append((float(v[0]), float(v[1]), float(v[2])))
            self._uvs.append((float(uv[0]), float(uv[1])))
            self._normals.append((float(n[0]), float(n[1]), float(n[2])))

        for tri in mesh.indices:
            self._faces.append((
                (base + int(tri[0]) + 1, base + int(tri[1]) + 1, base + int(tri[2]) + 1),
                material
            ))
        self._materials[material] = True

    def write(self, obj_path: str, write_mtl: bool = True):
        """Write .obj (and optionally .mtl) files."""
        obj_p = Path(obj_path)
        mtl_name = obj_p.stem + ".mtl"

        lines = []
        lines.append("# House Generator OBJ export")
        lines.append(f"# {len(self._vertices)} vertices, {len(self._faces)} faces")
        if write_mtl:
            lines.append(f"mtllib {mtl_name}")
        lines.append("")

        # Geometry is already Y-up, same as OBJ
        for v in self._vertices:
            lines.append(f"v {v[0]:.4f} {v[1]:.4f} {v[2]:.4f}")
        for uv in self._uvs:
            lines.append(f"vt {uv[0]:.4f} {uv[1]:.4f}")
        for n in self._normals:
            lines.append(f"vn {n[0]:.4f} {n[1]:.4f} {n[2]:.4f}")

        lines.append("")

        # Faces grouped by material, in insertion order within a group
        current_mat = None
        sorted_faces = sorted(self._faces, key=lambda f: f[1])
        for indices, mat in sorted_faces:
            if mat != current_mat:
                lines.append(f"usemtl {mat}")
                current_mat = mat
            face_str = " ".join(f"{i}/{i}/{i}" for i in indices)
            lines.append(f"f {face_str}")

        obj_p.parent.mkdir(parents=True, exist_ok=True)
        obj_p.write_text("\n".join(lines) + "\n")
        logger.info("OBJ written: %s (%d verts, %d faces)", obj_p, self.vertex_count, self.face_count)

        if write_mtl:
            self._write_mtl(str(obj_p.parent / mtl_name))

    def _write_mtl(self, mtl_path: str):
        lines = ["# House Generator MTL", ""]
        for mat in sorted(self._materials.keys()):
            lines.append(f"newmtl {mat}")
            lines.append("Ka 0.2 0.2 0.2")
            lines.append("Kd 0.8 0.8 0.8")
            lines.append("Ks 0.0 0.0 0.0")
            lines.append("d 1.0")
            lines.append("")
        Path(mtl_path).write_text("\n".join(lines) + "\n")

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def face_count(self) -> int:
        return len(self._faces)
