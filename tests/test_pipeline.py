import numpy as np
import pytest

from roberts.errors import InvalidArgumentError
from roberts.math3d import Mat4, Vec3
from roberts.pipeline import Pipeline

from viewer.shapes import create_letter_k


class TestPipeline:
    def test_defaults_to_identity(self, cube):
        pipeline = Pipeline(cube)
        for m in (pipeline.model, pipeline.view, pipeline.projection):
            np.testing.assert_array_equal(m.values, Mat4.identity().values)
        np.testing.assert_array_equal(cube.projected_vertices, cube.vertices)

    def test_set_model_recomputes(self, cube):
        pipeline = Pipeline(cube)
        pipeline.set_model(Mat4.translation(1.0, 2.0, 3.0))
        np.testing.assert_allclose(cube.world_vertices[:, :3], cube.vertices[:, :3] + [1.0, 2.0, 3.0])
        np.testing.assert_allclose(cube.projected_vertices, cube.world_vertices)

    def test_projection_applied_after_world(self, cube):
        pipeline = Pipeline(cube)
        pipeline.set_model(Mat4.translation(0.5, 0.0, 0.0))
        pipeline.set_projection(Mat4.scale(2.0, 2.0, 2.0))
        # (x + 0.5) * 2, not x * 2 + 0.5
        np.testing.assert_allclose(cube.projected_vertices[:, 0], (cube.vertices[:, 0] + 0.5) * 2.0)
        np.testing.assert_allclose(cube.projected_vertices[:, 3], 1.0)

    def test_view_then_model_order(self, cube):
        pipeline = Pipeline(cube)
        view = Mat4.scale(2.0, 1.0, 1.0)
        model = Mat4.translation(1.0, 0.0, 0.0)
        pipeline.set_matrices(model=model, view=view)
        # world = v @ (view @ model): scale first, then translate.
        np.testing.assert_allclose(cube.world_vertices[:, 0], cube.vertices[:, 0] * 2.0 + 1.0)

    def test_rejects_non_4x4_without_side_effects(self, cube):
        pipeline = Pipeline(cube)
        pipeline.set_model(Mat4.translation(0.25, 0.0, 0.0))
        model_before = pipeline.model.values.copy()
        world_before = cube.world_vertices.copy()
        projected_before = cube.projected_vertices.copy()
        facing_before = [f.is_facing for f in cube.faces]

        with pytest.raises(InvalidArgumentError):
            pipeline.set_model([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

        np.testing.assert_array_equal(pipeline.model.values, model_before)
        np.testing.assert_array_equal(cube.world_vertices, world_before)
        np.testing.assert_array_equal(cube.projected_vertices, projected_before)
        assert [f.is_facing for f in cube.faces] == facing_before

    def test_partial_set_is_atomic(self, cube):
        pipeline = Pipeline(cube)
        with pytest.raises(InvalidArgumentError):
            pipeline.set_matrices(model=Mat4.translation(5.0, 0.0, 0.0), projection=np.zeros((3, 4)))
        np.testing.assert_array_equal(pipeline.model.values, Mat4.identity().values)

    def test_recompute_is_idempotent(self):
        k = create_letter_k(0.1)
        pipeline = Pipeline(k)
        pipeline.set_model(Mat4.rotation_y(0.7) @ Mat4.rotation_x(0.3))
        first = k.projected_vertices.copy()
        facing = [f.signed_facing_value for f in k.faces]
        visible = list(k.edge_visible)
        pipeline.recompute()
        np.testing.assert_array_equal(k.projected_vertices, first)
        assert [f.signed_facing_value for f in k.faces] == facing
        assert k.edge_visible == visible

    def test_buffers_are_read_only(self, cube):
        Pipeline(cube)
        with pytest.raises(ValueError):
            cube.projected_vertices[0, 0] = 10.0

    def test_setter_copies_matrix(self, cube):
        pipeline = Pipeline(cube)
        m = Mat4.translation(1.0, 0.0, 0.0)
        pipeline.set_model(m)
        m.values[3, 0] = 9.0
        assert pipeline.model.values[3, 0] == 1.0

    def test_accepts_nested_lists(self, cube):
        pipeline = Pipeline(cube)
        pipeline.set_view([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 3, 0, 1]])
        np.testing.assert_allclose(cube.world_vertices[:, 1], cube.vertices[:, 1] + 3.0)

    def test_view_direction_accepts_tuple(self, unit_square):
        pipeline = Pipeline(unit_square, view_direction=(0.0, 0.0, 1.0))
        assert isinstance(pipeline.view_direction, Vec3)
        assert unit_square.faces[0].is_facing

    def test_view_direction_tuple_away_from_face(self, unit_square):
        Pipeline(unit_square, view_direction=(0, 0, -1))
        assert not unit_square.faces[0].is_facing
