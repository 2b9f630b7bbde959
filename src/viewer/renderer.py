from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from OpenGL import GL

from roberts.visibility import RenderList

from . import config

Color = Tuple[float, float, float]


class Renderer:
    """Immediate-mode drawing of already-projected primitives.

    The fixed-function matrices stay identity: every point handed in is in
    normalized device coordinates and must not be transformed again.
    """

    def __init__(self, line_width: float = config.LINE_WIDTH) -> None:
        self.line_width = line_width
        GL.glMatrixMode(GL.GL_PROJECTION)
        GL.glLoadIdentity()
        GL.glMatrixMode(GL.GL_MODELVIEW)
        GL.glLoadIdentity()
        GL.glDepthFunc(GL.GL_LESS)
        GL.glDisable(GL.GL_CULL_FACE)

    def begin(self, clear_color: Color = config.CLEAR_COLOR) -> None:
        GL.glClearColor(clear_color[0], clear_color[1], clear_color[2], 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

    def draw(self, items: RenderList, face_color: Color = config.FACE_COLOR, edge_color: Color = config.EDGE_COLOR) -> None:
        # Pass 1: fill facing polygons with depth testing.
        GL.glEnable(GL.GL_DEPTH_TEST)
        GL.glColor3f(*face_color)
        for polygon in items.polygons:
            GL.glBegin(GL.GL_TRIANGLES if len(polygon) == 3 else GL.GL_POLYGON)
            for p in polygon:
                GL.glVertex3f(*p)
            GL.glEnd()

        # Pass 2: stroke visible edges on top; the fill must never hide them.
        GL.glDisable(GL.GL_DEPTH_TEST)
        self.draw_lines(items.lines, [edge_color])

    def draw_lines(self, lines: Sequence[Tuple[Tuple[float, float, float], ...]], colors: Iterable[Color]) -> None:
        palette = list(colors)
        GL.glLineWidth(self.line_width)
        GL.glBegin(GL.GL_LINES)
        for i, (a, b) in enumerate(lines):
            GL.glColor3f(*palette[i % len(palette)])
            GL.glVertex3f(*a)
            GL.glVertex3f(*b)
        GL.glEnd()
