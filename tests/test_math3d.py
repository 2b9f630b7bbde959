import math

import numpy as np
import pytest

from roberts.errors import DimensionMismatchError, InvalidArgumentError
from roberts.math3d import Mat4, Vec3, multiply, radians, transform_points, transform_vector

TOL = 1e-5


def _sample_matrix() -> Mat4:
    return (
        Mat4.translation(0.3, -0.2, 0.5)
        @ Mat4.rotation_x(0.4)
        @ Mat4.rotation_y(-1.1)
        @ Mat4.scale(2.0, 0.5, 1.5)
    )


class TestMat4:
    """matrix construction and composition"""

    def test_identity_law(self):
        m = _sample_matrix()
        I = Mat4.identity()
        np.testing.assert_allclose((I @ m).values, m.values, atol=TOL)
        np.testing.assert_allclose((m @ I).values, m.values, atol=TOL)

    def test_translate_origin(self):
        p = transform_vector((0.0, 0.0, 0.0, 1.0), Mat4.translation(0.5, -2.0, 3.25))
        assert p.tolist() == [0.5, -2.0, 3.25, 1.0]

    @pytest.mark.parametrize("theta", [0.0, 0.3, 1.0, math.pi / 2, 2.5, -4.0])
    def test_rotation_z_inverse(self, theta):
        m = Mat4.rotation_z(theta) @ Mat4.rotation_z(-theta)
        np.testing.assert_allclose(m.values, Mat4.identity().values, atol=TOL)

    def test_unit_scale_is_neutral(self):
        m = _sample_matrix()
        np.testing.assert_allclose((Mat4.scale(1, 1, 1) @ m).values, m.values, atol=TOL)
        np.testing.assert_allclose((m @ Mat4.scale(1, 1, 1)).values, m.values, atol=TOL)

    def test_rotation_direction(self):
        # Counter-clockwise quarter turns with row vectors.
        x = (1.0, 0.0, 0.0, 1.0)
        y = (0.0, 1.0, 0.0, 1.0)
        z = (0.0, 0.0, 1.0, 1.0)
        quarter = math.pi / 2
        np.testing.assert_allclose(transform_vector(x, Mat4.rotation_z(quarter)), y, atol=TOL)
        np.testing.assert_allclose(transform_vector(y, Mat4.rotation_x(quarter)), z, atol=TOL)
        np.testing.assert_allclose(transform_vector(z, Mat4.rotation_y(quarter)), x, atol=TOL)

    def test_reflection_is_involution(self):
        f = Mat4.reflection(True, False, False)
        points = np.array([[0.1, 0.2, 0.3, 1.0], [-1.0, 4.0, 0.0, 1.0]], dtype=np.float32)
        once = transform_points(points, f)
        assert once[0].tolist() == pytest.approx([-0.1, 0.2, 0.3, 1.0])
        twice = transform_points(once, f)
        np.testing.assert_allclose(twice, points, atol=TOL)

    def test_not_commutative(self):
        a = Mat4.translation(1.0, 0.0, 0.0)
        b = Mat4.rotation_z(math.pi / 2)
        assert not np.allclose((a @ b).values, (b @ a).values)

    def test_ortho_keeps_w(self):
        m = Mat4.ortho(-2.0, 2.0, -1.0, 1.0, -10.0, 10.0)
        p = transform_vector((2.0, 1.0, 5.0, 1.0), m)
        assert p.tolist() == pytest.approx([1.0, 1.0, -0.5, 1.0])

    def test_ortho_degenerate_volume(self):
        m = Mat4.ortho(1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
        np.testing.assert_array_equal(m.values, Mat4.identity().values)

    def test_single_precision(self):
        assert Mat4.identity().values.dtype == np.float32
        assert _sample_matrix().values.dtype == np.float32

    def test_construction(self):
        flat = Mat4(list(range(16)))
        nested = Mat4([[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]])
        np.testing.assert_array_equal(flat.values, nested.values)
        assert flat.to_list()[4] == 4.0
        with pytest.raises(InvalidArgumentError):
            Mat4([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        with pytest.raises(ValueError):
            Mat4([1.0, 2.0, 3.0])


class TestMultiply:
    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            multiply(np.identity(3), Mat4.identity())
        with pytest.raises(DimensionMismatchError):
            multiply(Mat4.identity(), [[1.0, 2.0], [3.0, 4.0]])

    def test_non_square_product(self):
        a = np.ones((4, 3))
        b = np.ones((3, 4))
        result = multiply(a, b)
        assert isinstance(result, Mat4)
        np.testing.assert_allclose(result.values, np.full((4, 4), 3.0))
        other = multiply(b, a)
        assert not isinstance(other, Mat4)
        assert other.shape == (3, 3)

    def test_transform_vector_length(self):
        with pytest.raises(InvalidArgumentError):
            transform_vector((1.0, 2.0, 3.0), Mat4.identity())


class TestVec3:
    def test_cross_right_hand(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)

    def test_from_point(self):
        assert Vec3.from_point(np.array([1.0, 2.0, 3.0, 1.0])) == Vec3(1.0, 2.0, 3.0)

    def test_radians(self):
        assert radians(180.0) == pytest.approx(math.pi)
        assert radians(-90.0) == pytest.approx(-math.pi / 2)
