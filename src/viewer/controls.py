from __future__ import annotations

import logging

import pygame

from roberts.math3d import clamp

from . import config
from .controller import SceneController
from .input import InputState

logger = logging.getLogger(__name__)

HELP_LINES = [
    "Arrows / PgUp PgDn - move x y / z",
    "Q A, W S, E D - rotate x, y, z",
    "Z X - scale down / up",
    "F1 F2 F3 - reflect x / y / z",
    "B - bounce  N - bounce axis",
    "R - sweep  T - sweep plane",
    "Backspace - reset  Esc - quit",
]


def handle_input(scene: SceneController, inp: InputState, dt: float) -> None:
    """Apply held and pressed keys to the scene parameters."""
    params = scene.params
    changed = False

    lo, hi = config.POSITION_RANGE
    step = config.POSITION_SPEED * dt
    for attr, neg, pos in (
        ("x", pygame.K_LEFT, pygame.K_RIGHT),
        ("y", pygame.K_DOWN, pygame.K_UP),
        ("z", pygame.K_PAGEDOWN, pygame.K_PAGEUP),
    ):
        direction = inp.axis(neg, pos)
        if direction:
            value = getattr(params.position, attr) + direction * step
            setattr(params.position, attr, clamp(value, lo, hi))
            changed = True

    step = config.ROTATION_SPEED_DEG * dt
    for attr, neg, pos in (
        ("x", pygame.K_a, pygame.K_q),
        ("y", pygame.K_s, pygame.K_w),
        ("z", pygame.K_d, pygame.K_e),
    ):
        direction = inp.axis(neg, pos)
        if direction:
            value = getattr(params.rotation, attr) + direction * step
            setattr(params.rotation, attr, (value + 180.0) % 360.0 - 180.0)
            changed = True

    direction = inp.axis(pygame.K_z, pygame.K_x)
    if direction:
        lo, hi = config.SCALE_RANGE
        factor = 1.0 + direction * config.SCALE_SPEED * dt
        for attr in ("x", "y", "z"):
            setattr(params.scale, attr, clamp(getattr(params.scale, attr) * factor, lo, hi))
        changed = True

    for attr, key in (("reflect_x", pygame.K_F1), ("reflect_y", pygame.K_F2), ("reflect_z", pygame.K_F3)):
        if inp.key_pressed(key):
            setattr(params, attr, not getattr(params, attr))
            logger.debug("%s = %s", attr, getattr(params, attr))
            changed = True

    animator = scene.animator
    if inp.key_pressed(pygame.K_b):
        animator.bounce_enabled = not animator.bounce_enabled
    if inp.key_pressed(pygame.K_n):
        animator.cycle_bounce_axis()
    if inp.key_pressed(pygame.K_r):
        animator.sweep_enabled = not animator.sweep_enabled
    if inp.key_pressed(pygame.K_t):
        animator.cycle_sweep_plane()

    if inp.key_pressed(pygame.K_BACKSPACE):
        scene.reset()
        return
    if changed:
        scene.apply()
