from __future__ import annotations

import logging
from typing import Optional, Sequence

from .math3d import Mat4, Vec3, as_mat4, transform_points
from .mesh import Mesh
from .visibility import (
    VIEW_DIRECTION,
    RenderList,
    classify_faces,
    collect_primitives,
    derive_edge_visibility,
    facing_faces,
)

logger = logging.getLogger(__name__)


class Pipeline:
    """Model/view/projection state of one mesh instance.

    Any matrix change recomputes the world and projected buffers in full and
    reclassifies faces and edges. Row vectors are used throughout:

        world     = v @ (view @ model)
        projected = world @ projection
    """

    def __init__(self, mesh: Mesh, view_direction: Vec3 | Sequence[float] = VIEW_DIRECTION) -> None:
        self.mesh = mesh
        if not isinstance(view_direction, Vec3):
            view_direction = Vec3.from_point(view_direction)
        self.view_direction = view_direction
        self.model = Mat4.identity()
        self.view = Mat4.identity()
        self.projection = Mat4.identity()
        self.recompute()

    def set_model(self, m) -> None:
        self.set_matrices(model=m)

    def set_view(self, m) -> None:
        self.set_matrices(view=m)

    def set_projection(self, m) -> None:
        self.set_matrices(projection=m)

    def set_matrices(self, model=None, view=None, projection=None) -> None:
        # Coerce everything before touching state so a bad argument changes nothing.
        new_model: Optional[Mat4] = as_mat4(model) if model is not None else None
        new_view: Optional[Mat4] = as_mat4(view) if view is not None else None
        new_projection: Optional[Mat4] = as_mat4(projection) if projection is not None else None

        if new_model is not None:
            self.model = new_model
        if new_view is not None:
            self.view = new_view
        if new_projection is not None:
            self.projection = new_projection
        self.recompute()

    def recompute(self) -> None:
        model_view = self.view @ self.model
        world = transform_points(self.mesh.vertices, model_view)
        projected = transform_points(world, self.projection)
        world.setflags(write=False)
        projected.setflags(write=False)
        self.mesh.world_vertices = world
        self.mesh.projected_vertices = projected

        # Only view @ model handedness counts; the ortho z flip keeps the sign of n.z.
        orientation = -1.0 if model_view.determinant3() < 0.0 else 1.0
        classify_faces(self.mesh, self.view_direction, orientation)
        derive_edge_visibility(self.mesh)
        logger.debug(
            "Recomputed %d vertices, %d facing faces, %d visible edges",
            self.mesh.vertex_count(),
            len(facing_faces(self.mesh)),
            sum(1 for v in self.mesh.edge_visible if v),
        )

    def render_list(self) -> RenderList:
        return collect_primitives(self.mesh)
