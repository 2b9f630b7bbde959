from __future__ import annotations

import logging

import pygame
from OpenGL.GL import glViewport

from roberts.time import Time

from .input import InputState

logger = logging.getLogger(__name__)


class App:
    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.init()

        # Legacy (compatibility) context: drawing uses immediate mode.
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 2)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 1)
        pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

        pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.width = width
        self.height = height
        self.time = Time()
        self.input = InputState()
        self.clock = pygame.time.Clock()
        glViewport(0, 0, width, height)
        logger.info("Window %dx%d created", width, height)

    def poll(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.width, self.height = event.w, event.h
                glViewport(0, 0, event.w, event.h)
        self.input.update()
        return not self.input.key(pygame.K_ESCAPE)

    def swap(self, fps_limit: int = 0) -> None:
        pygame.display.flip()
        if fps_limit:
            self.clock.tick(fps_limit)

    def shutdown(self) -> None:
        logger.info("Shutting down")
        pygame.quit()
