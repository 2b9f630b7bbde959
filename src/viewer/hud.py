from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pygame
from OpenGL import GL


@dataclass
class HUDInfo:
    position: tuple[float, float, float]
    scale: tuple[float, float, float]
    rotation: tuple[float, float, float]
    reflect: tuple[bool, bool, bool]
    bounce: str
    sweep: str
    fps: float
    facing: int = 0
    visible_edges: int = 0
    help_lines: List[str] = field(default_factory=list)


class HUD:
    """Text overlay drawn with pygame surfaces + glDrawPixels."""

    def __init__(self) -> None:
        self.font = pygame.font.SysFont("consolas", 15)
        self._surface_cache: dict[str, pygame.Surface] = {}

    def _text(self, s: str, color=(255, 255, 255)) -> pygame.Surface:
        key = f"{s}|{color}"
        surf = self._surface_cache.get(key)
        if surf is None:
            surf = self.font.render(s, True, color)
            if len(self._surface_cache) > 512:
                self._surface_cache.clear()
            self._surface_cache[key] = surf
        return surf

    def _blit(self, surf: pygame.Surface, x: int, y: int) -> None:
        # Bottom-left origin, window pixel coords.
        data = pygame.image.tostring(surf, "RGBA", True)
        GL.glWindowPos2i(int(x), int(y))
        GL.glDrawPixels(surf.get_width(), surf.get_height(), GL.GL_RGBA, GL.GL_UNSIGNED_BYTE, data)

    def render(self, info: HUDInfo) -> None:
        prev_blend = GL.glIsEnabled(GL.GL_BLEND)
        prev_depth = GL.glIsEnabled(GL.GL_DEPTH_TEST)
        if prev_depth:
            GL.glDisable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_BLEND)
        GL.glBlendFunc(GL.GL_SRC_ALPHA, GL.GL_ONE_MINUS_SRC_ALPHA)

        flips = "".join(axis for axis, on in zip("xyz", info.reflect) if on) or "-"
        lines = [
            "pos   {:+.2f} {:+.2f} {:+.2f}".format(*info.position),
            "scale {:.2f} {:.2f} {:.2f}".format(*info.scale),
            "rot   {:+.0f} {:+.0f} {:+.0f}".format(*info.rotation),
            f"reflect {flips}",
            f"bounce {info.bounce}   sweep {info.sweep}",
            f"faces {info.facing}  edges {info.visible_edges}",
            f"FPS: {info.fps:.0f}",
        ]

        vp = GL.glGetIntegerv(GL.GL_VIEWPORT)
        h = int(vp[3])
        y = h - 24
        for s in lines:
            self._blit(self._text(s), 12, y)
            y -= 18

        y = 12
        for s in reversed(info.help_lines):
            self._blit(self._text(s, (170, 170, 170)), 12, y)
            y += 17

        if not prev_blend:
            GL.glDisable(GL.GL_BLEND)
        if prev_depth:
            GL.glEnable(GL.GL_DEPTH_TEST)
