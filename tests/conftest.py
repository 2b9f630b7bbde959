import pytest

from roberts.mesh import Mesh

CUBE_VERTICES = [
    (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
    (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
]
CUBE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
]
# Outward winding.
CUBE_FACES = [
    (0, 3, 2, 1),  # -z
    (4, 5, 6, 7),  # +z
    (0, 1, 5, 4),  # -y
    (2, 3, 7, 6),  # +y
    (0, 4, 7, 3),  # -x
    (1, 2, 6, 5),  # +x
]


@pytest.fixture
def cube() -> Mesh:
    return Mesh(CUBE_VERTICES, CUBE_EDGES, CUBE_FACES)


@pytest.fixture
def unit_square() -> Mesh:
    return Mesh([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
                [(0, 1), (1, 2), (2, 3), (3, 0)],
                [(0, 1, 2, 3)],
                center=False)
