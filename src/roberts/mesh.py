from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError
from .math3d import DTYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    v1: int
    v2: int


@dataclass
class Face:
    """Planar polygon given as a cyclic list of vertex indices.

    ``triangles`` optionally decomposes a non-convex polygon for filling.
    ``signed_facing_value`` and ``is_facing`` are recomputed every frame.
    """

    indices: Tuple[int, ...]
    triangles: Tuple[Tuple[int, int, int], ...] = ()
    signed_facing_value: float = 0.0
    is_facing: bool = False

    def __post_init__(self) -> None:
        self.indices = tuple(int(i) for i in self.indices)
        self.triangles = tuple(tuple(int(i) for i in tri) for tri in self.triangles)
        for tri in self.triangles:
            if len(tri) != 3:
                raise InvalidArgumentError(f"triangle must have 3 indices, got {tri}")

    def sides(self) -> List[Tuple[int, int]]:
        """Consecutive vertex pairs of the polygon, closing back to the start."""
        n = len(self.indices)
        if n < 2:
            return []
        return [(self.indices[i], self.indices[(i + 1) % n]) for i in range(n)]


class Mesh:
    """Fixed topology plus the derived per-frame buffers of one object.

    Vertices are stored homogeneous (w = 1) in single precision. Topology is
    never resized after construction; the pipeline only replaces the derived
    buffers.
    """

    def __init__(
        self,
        vertices: Sequence[Sequence[float]],
        edges: Sequence[Tuple[int, int] | Edge],
        faces: Sequence[Sequence[int] | Face] = (),
        center: bool = True,
    ) -> None:
        self.vertices = _to_homogeneous(vertices)
        self.edges = [e if isinstance(e, Edge) else Edge(int(e[0]), int(e[1])) for e in edges]
        # Faces carry per-frame state, so each mesh owns its own copies.
        self.faces = [Face(f.indices, f.triangles) if isinstance(f, Face) else Face(tuple(f)) for f in faces]
        self._validate_indices()

        if center:
            self.center_on_origin()

        self.world_vertices: np.ndarray = self.vertices.copy()
        self.projected_vertices: np.ndarray = self.vertices.copy()
        self.edge_faces: List[List[int]] = []
        self.edge_visible: List[bool] = [True] * len(self.edges)
        self.unmatched_polygon_edges: List[Tuple[int, int, int]] = []
        self.build_edge_adjacency()

    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    def edge_count(self) -> int:
        return len(self.edges)

    def face_count(self) -> int:
        return len(self.faces)

    def _validate_indices(self) -> None:
        count = self.vertex_count()
        for edge in self.edges:
            for idx in (edge.v1, edge.v2):
                if not 0 <= idx < count:
                    raise InvalidArgumentError(f"edge {edge} references vertex {idx} (have {count})")
        for face in self.faces:
            for idx in face.indices + tuple(i for tri in face.triangles for i in tri):
                if not 0 <= idx < count:
                    raise InvalidArgumentError(f"face {face.indices} references vertex {idx} (have {count})")

    def bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        if self.vertex_count() == 0:
            zero = np.zeros(3, dtype=DTYPE)
            return zero, zero.copy()
        xyz = self.vertices[:, :3]
        return xyz.min(axis=0), xyz.max(axis=0)

    def center_on_origin(self) -> None:
        """Shift the object so its bounding box center sits at the local origin."""
        lo, hi = self.bounding_box()
        center = (lo + hi) / 2.0
        self.vertices[:, :3] -= center
        logger.debug("Centered mesh by %s", center.tolist())

    def build_edge_adjacency(self) -> List[List[int]]:
        """Record each face index against the declared edges along its boundary.

        A polygon side without a matching declared edge is flagged in
        ``unmatched_polygon_edges`` and logged; the mesh stays usable.
        """
        lookup: Dict[Tuple[int, int], int] = {}
        for idx, edge in enumerate(self.edges):
            key = (min(edge.v1, edge.v2), max(edge.v1, edge.v2))
            if key in lookup:
                logger.warning("Duplicate edge %s (already declared as #%d)", edge, lookup[key])
                continue
            lookup[key] = idx

        self.edge_faces = [[] for _ in self.edges]
        self.unmatched_polygon_edges = []
        for face_idx, face in enumerate(self.faces):
            for a, b in face.sides():
                edge_idx: Optional[int] = lookup.get((min(a, b), max(a, b)))
                if edge_idx is None:
                    self.unmatched_polygon_edges.append((face_idx, a, b))
                    continue
                if face_idx not in self.edge_faces[edge_idx]:
                    self.edge_faces[edge_idx].append(face_idx)

        if self.unmatched_polygon_edges:
            logger.warning(
                "%d polygon side(s) have no declared edge: %s",
                len(self.unmatched_polygon_edges),
                self.unmatched_polygon_edges,
            )
        return self.edge_faces

    def is_consistent(self) -> bool:
        return not self.unmatched_polygon_edges


def _to_homogeneous(vertices: Sequence[Sequence[float]]) -> np.ndarray:
    arr = np.array(vertices, dtype=DTYPE)
    if arr.size == 0:
        return np.zeros((0, 4), dtype=DTYPE)
    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise InvalidArgumentError(f"vertices must be (N, 3) or (N, 4), got shape {arr.shape}")
    if arr.shape[1] == 3:
        arr = np.hstack([arr, np.ones((arr.shape[0], 1), dtype=DTYPE)])
    return arr
