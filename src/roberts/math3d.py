from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, List

import numpy as np

from .errors import DimensionMismatchError, InvalidArgumentError

DTYPE = np.float32


@dataclass
class Vec3:
    x: float
    y: float
    z: float

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def as_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    @staticmethod
    def from_point(point: Iterable[float]) -> "Vec3":
        """Drop the w component of a homogeneous point."""
        x, y, z = list(point)[:3]
        return Vec3(float(x), float(y), float(z))


def radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(max_val, value))


class Mat4:
    """4x4 homogeneous matrix, row-major, applied to row vectors (``v' = v @ M``).

    The handedness is right-handed: a positive angle rotates counter-clockwise
    when looking from the positive end of the axis toward the origin.
    Translation lives in the last row.
    """

    __slots__ = ("values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self.values = np.zeros((4, 4), dtype=DTYPE)
            return
        if isinstance(values, Mat4):
            self.values = values.values.copy()
            return
        try:
            arr = np.array(values, dtype=DTYPE)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Mat4 expects numeric data: {exc}") from exc
        if arr.shape == (16,):
            arr = arr.reshape(4, 4)
        if arr.shape != (4, 4):
            raise InvalidArgumentError(
                f"Mat4 expects 16 floats or a 4x4 matrix, got shape {arr.shape}"
            )
        self.values = arr

    @staticmethod
    def identity() -> "Mat4":
        return Mat4(np.identity(4, dtype=DTYPE))

    @staticmethod
    def translation(dx: float, dy: float, dz: float) -> "Mat4":
        mat = Mat4.identity()
        mat.values[3, 0] = dx
        mat.values[3, 1] = dy
        mat.values[3, 2] = dz
        return mat

    @staticmethod
    def scale(sx: float, sy: float, sz: float) -> "Mat4":
        mat = Mat4.identity()
        mat.values[0, 0] = sx
        mat.values[1, 1] = sy
        mat.values[2, 2] = sz
        return mat

    @staticmethod
    def rotation_x(angle: float) -> "Mat4":
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4([
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def rotation_y(angle: float) -> "Mat4":
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4([
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def rotation_z(angle: float) -> "Mat4":
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4([
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def reflection(flip_x: bool, flip_y: bool, flip_z: bool) -> "Mat4":
        """Mirror across the coordinate planes whose normal axis is flipped."""
        return Mat4.scale(
            -1.0 if flip_x else 1.0,
            -1.0 if flip_y else 1.0,
            -1.0 if flip_z else 1.0,
        )

    @staticmethod
    def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> "Mat4":
        """Orthographic projection matrix (OpenGL layout, z mapped into [-1, 1]).

        w stays 1 for every point, so projected coordinates need no divide.
        """
        rl = right - left
        tb = top - bottom
        fn = far - near
        if rl == 0 or tb == 0 or fn == 0:
            return Mat4.identity()
        return Mat4([
            2.0 / rl, 0.0, 0.0, 0.0,
            0.0, 2.0 / tb, 0.0, 0.0,
            0.0, 0.0, -2.0 / fn, 0.0,
            -(right + left) / rl, -(top + bottom) / tb, -(far + near) / fn, 1.0,
        ])

    def determinant3(self) -> float:
        """Determinant of the upper-left 3x3 (linear) block."""
        return float(np.linalg.det(self.values[:3, :3].astype(np.float64)))

    def __matmul__(self, other: "Mat4") -> "Mat4":
        # Row vectors: v @ (A @ B) applies A first, then B.
        return multiply(self, other)

    def __repr__(self) -> str:
        return f"Mat4({self.values.tolist()!r})"

    def to_list(self) -> List[float]:
        return [float(x) for x in self.values.reshape(16)]


def _as_matrix(value) -> np.ndarray:
    if isinstance(value, Mat4):
        return value.values
    arr = np.asarray(value, dtype=DTYPE)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"expected a 2-D matrix, got shape {arr.shape}")
    return arr


def multiply(a, b):
    """Matrix product ``a @ b``.

    Raises DimensionMismatchError when a's column count differs from b's
    row count. The result is a Mat4 whenever it is 4x4.
    """
    lhs = _as_matrix(a)
    rhs = _as_matrix(b)
    if lhs.shape[1] != rhs.shape[0]:
        raise DimensionMismatchError(
            f"cannot multiply {lhs.shape[0]}x{lhs.shape[1]} by {rhs.shape[0]}x{rhs.shape[1]}"
        )
    result = np.matmul(lhs, rhs).astype(DTYPE, copy=False)
    if result.shape == (4, 4):
        return Mat4(result)
    return result


def as_mat4(value) -> Mat4:
    """Coerce a matrix-like value to a fresh Mat4 or raise InvalidArgumentError."""
    return Mat4(value)


def transform_vector(v: Iterable[float], m: Mat4) -> np.ndarray:
    vec = np.asarray(list(v), dtype=DTYPE)
    if vec.shape != (4,):
        raise InvalidArgumentError(f"expected a homogeneous 4-vector, got shape {vec.shape}")
    return vec @ as_mat4(m).values


def transform_points(points: np.ndarray, m: Mat4) -> np.ndarray:
    """Transform every row of an (N, 4) array of homogeneous points."""
    return (np.asarray(points, dtype=DTYPE) @ m.values).astype(DTYPE, copy=False)
