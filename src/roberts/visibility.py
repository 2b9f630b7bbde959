"""Roberts-style hidden-line removal in projected space.

Faces are classified by the sign of their normal against a fixed
screen-space view direction; an edge is drawn when any face it borders is
facing, and always when it borders no face at all. This is a convexity
heuristic: it is exact for convex outward-wound polyhedra under orthographic
projection and can misclassify concave shapes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .math3d import Vec3
from .mesh import Face, Mesh

logger = logging.getLogger(__name__)

Point3 = Tuple[float, float, float]

VIEW_DIRECTION = Vec3(0.0, 0.0, 1.0)


@dataclass
class RenderList:
    """Draw-only primitives in projected space.

    Polygons are filled first with depth testing, then lines are stroked
    on top with depth testing disabled.
    """

    polygons: List[Tuple[Point3, ...]] = field(default_factory=list)
    lines: List[Tuple[Point3, Point3]] = field(default_factory=list)


def _reference_triangle(face: Face) -> Optional[Tuple[int, int, int]]:
    if face.triangles:
        return face.triangles[0]
    if len(face.indices) >= 3:
        return face.indices[0], face.indices[1], face.indices[2]
    return None


def face_normal(face: Face, points: np.ndarray) -> Optional[Vec3]:
    """Normal of the face's first triangle, ``(v1 - v0) x (v2 - v0)``.

    Returns None when the face has too few vertices to define one.
    """
    tri = _reference_triangle(face)
    if tri is None:
        return None
    v0, v1, v2 = (Vec3.from_point(points[i]) for i in tri)
    return (v1 - v0).cross(v2 - v0)


def classify_faces(mesh: Mesh, view_direction: Vec3 = VIEW_DIRECTION, orientation: float = 1.0) -> None:
    """Set ``signed_facing_value`` and ``is_facing`` on every face of the mesh.

    ``orientation`` is -1 when the transform mirrors the object, which flips
    the winding of every polygon.
    """
    points = mesh.projected_vertices
    for face in mesh.faces:
        normal = face_normal(face, points)
        if normal is None:
            face.signed_facing_value = 0.0
            face.is_facing = False
            continue
        face.signed_facing_value = normal.dot(view_direction) * orientation
        face.is_facing = face.signed_facing_value > 0.0


def derive_edge_visibility(mesh: Mesh) -> List[bool]:
    visible: List[bool] = []
    for adjacent in mesh.edge_faces:
        if not adjacent:
            # Loose edge (gizmo or wireframe-only geometry).
            visible.append(True)
        else:
            visible.append(any(mesh.faces[i].is_facing for i in adjacent))
    mesh.edge_visible = visible
    return visible


def _point(points: np.ndarray, idx: int) -> Point3:
    p = points[idx]
    return float(p[0]), float(p[1]), float(p[2])


def _polygons_for(face: Face, points: np.ndarray) -> List[Tuple[Point3, ...]]:
    if face.triangles:
        return [tuple(_point(points, i) for i in tri) for tri in face.triangles]
    if len(face.indices) < 3:
        return []
    return [tuple(_point(points, i) for i in face.indices)]


def collect_primitives(mesh: Mesh) -> RenderList:
    points = mesh.projected_vertices
    out = RenderList()
    for face in mesh.faces:
        if face.is_facing:
            out.polygons.extend(_polygons_for(face, points))
    for edge, visible in zip(mesh.edges, mesh.edge_visible):
        if visible:
            out.lines.append((_point(points, edge.v1), _point(points, edge.v2)))
    return out


def facing_faces(mesh: Mesh) -> Sequence[int]:
    return [i for i, face in enumerate(mesh.faces) if face.is_facing]
