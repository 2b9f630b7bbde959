from __future__ import annotations

from typing import List, Tuple

from roberts.mesh import Face, Mesh

# Outline of the letter, counter-clockwise seen from +z.
K_OUTLINE: List[Tuple[float, float]] = [
    (-0.2, 0.2),    # a
    (-0.2, -0.2),   # b
    (-0.1, -0.2),   # c
    (-0.1, -0.05),  # d
    (0.05, -0.2),   # e
    (0.15, -0.2),   # f
    (-0.05, 0.0),   # g
    (0.1, 0.2),     # h
    (0.0, 0.2),     # i
    (-0.1, 0.075),  # j
    (-0.1, 0.2),    # k
]

# Fan decomposition of the (non-convex) outline: stem, lower leg, upper arm.
K_TRIANGLES: List[Tuple[int, int, int]] = [
    (0, 1, 2), (0, 2, 3), (0, 3, 9), (0, 9, 10),
    (3, 4, 5), (3, 5, 6),
    (3, 6, 7), (3, 7, 8), (3, 8, 9),
]


def create_letter_k(depth: float = 0.1) -> Mesh:
    """Closed prism of the letter K: front cap at z=0, back cap at z=-depth.

    22 vertices, 33 edges, 2 caps + 11 side quads, all wound outward.
    """
    n = len(K_OUTLINE)
    vertices = [(x, y, 0.0) for x, y in K_OUTLINE]
    vertices += [(x, y, -depth) for x, y in K_OUTLINE]

    edges = [(i, (i + 1) % n) for i in range(n)]
    edges += [(n + i, n + (i + 1) % n) for i in range(n)]
    edges += [(i, n + i) for i in range(n)]

    front = Face(tuple(range(n)), tuple(K_TRIANGLES))
    # Back cap walks the outline in reverse so its normal points to -z.
    back = Face(
        tuple([n] + [n + i for i in range(n - 1, 0, -1)]),
        tuple((n + a, n + c, n + b) for a, b, c in K_TRIANGLES),
    )
    sides = [Face((i, n + i, n + (i + 1) % n, (i + 1) % n)) for i in range(n)]

    return Mesh(vertices, edges, [front, back] + sides)


def create_axes_gizmo(length: float = 1.0) -> Mesh:
    """Three loose axis lines through the origin, no faces."""
    vertices = [
        (-length, 0.0, 0.0), (length, 0.0, 0.0),
        (0.0, -length, 0.0), (0.0, length, 0.0),
        (0.0, 0.0, -length), (0.0, 0.0, length),
    ]
    edges = [(0, 1), (2, 3), (4, 5)]
    return Mesh(vertices, edges)
