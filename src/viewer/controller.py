from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Tuple

from roberts.math3d import Mat4, Vec3, radians
from roberts.pipeline import Pipeline
from roberts.time import clamp_delta
from roberts.visibility import RenderList

from . import config
from .shapes import create_axes_gizmo, create_letter_k

logger = logging.getLogger(__name__)


@dataclass
class ModelParams:
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    rotation: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))  # degrees
    reflect_x: bool = False
    reflect_y: bool = False
    reflect_z: bool = False


def build_model_matrix(params: ModelParams) -> Mat4:
    """model = T @ Rx @ Ry @ Rz @ S @ F, applied to row vectors as ``v @ model``.

    The product order is fixed; reordering changes what the viewer shows.
    """
    p = params.position
    s = params.scale
    r = params.rotation
    return (
        Mat4.translation(p.x, p.y, p.z)
        @ Mat4.rotation_x(radians(r.x))
        @ Mat4.rotation_y(radians(r.y))
        @ Mat4.rotation_z(radians(r.z))
        @ Mat4.scale(s.x, s.y, s.z)
        @ Mat4.reflection(params.reflect_x, params.reflect_y, params.reflect_z)
    )


class TranslationAxis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class RotationPlane(Enum):
    """Plane swept by the rotation; the value names the axis rotated about."""

    YZ = "x"
    XZ = "y"
    XY = "z"


Accessor = Tuple[Callable[[ModelParams], float], Callable[[ModelParams, float], None]]


def _component(attr: str, axis: str) -> Accessor:
    def get(params: ModelParams) -> float:
        return getattr(getattr(params, attr), axis)

    def put(params: ModelParams, value: float) -> None:
        setattr(getattr(params, attr), axis, value)

    return get, put


TRANSLATION_FIELDS: Dict[TranslationAxis, Accessor] = {
    axis: _component("position", axis.value) for axis in TranslationAxis
}
ROTATION_FIELDS: Dict[RotationPlane, Accessor] = {
    plane: _component("rotation", plane.value) for plane in RotationPlane
}


def _cycle(member: Enum) -> Enum:
    members = list(type(member))
    return members[(members.index(member) + 1) % len(members)]


class Animator:
    """Bounce along one translation axis and sweep one rotation plane."""

    def __init__(
        self,
        bounce_speed: float = config.BOUNCE_SPEED,
        bounce_limit: float = config.BOUNCE_LIMIT,
        sweep_speed: float = config.SWEEP_SPEED_DEG,
    ) -> None:
        self.bounce_axis = TranslationAxis.X
        self.sweep_plane = RotationPlane.XZ
        self.bounce_enabled = False
        self.sweep_enabled = False
        self.bounce_speed = bounce_speed
        self.bounce_limit = bounce_limit
        self.sweep_speed = sweep_speed
        self.direction = 1.0

    def cycle_bounce_axis(self) -> None:
        self.bounce_axis = _cycle(self.bounce_axis)

    def cycle_sweep_plane(self) -> None:
        self.sweep_plane = _cycle(self.sweep_plane)

    def advance(self, params: ModelParams, dt: float) -> bool:
        """Step the enabled animations; returns True when params changed."""
        dt = clamp_delta(dt)
        if dt == 0.0:
            return False
        changed = False
        if self.bounce_enabled:
            self._bounce(params, dt)
            changed = True
        if self.sweep_enabled:
            self._sweep(params, dt)
            changed = True
        return changed

    def _bounce(self, params: ModelParams, dt: float) -> None:
        get, put = TRANSLATION_FIELDS[self.bounce_axis]
        value = get(params) + self.direction * self.bounce_speed * dt
        if value > self.bounce_limit:
            value = self.bounce_limit
            self.direction = -1.0
        elif value < -self.bounce_limit:
            value = -self.bounce_limit
            self.direction = 1.0
        put(params, value)

    def _sweep(self, params: ModelParams, dt: float) -> None:
        get, put = ROTATION_FIELDS[self.sweep_plane]
        angle = get(params) + self.sweep_speed * dt
        while angle > 180.0:
            angle -= 360.0
        put(params, angle)


class SceneController:
    """Feeds parameters into the letter and gizmo pipelines each frame."""

    def __init__(self, view: Mat4 | None = None, projection: Mat4 | None = None) -> None:
        self.params = ModelParams()
        self.animator = Animator()
        self.letter = Pipeline(create_letter_k(config.LETTER_DEPTH))
        self.gizmo = Pipeline(create_axes_gizmo(config.GIZMO_LENGTH))
        if projection is None:
            projection = Mat4.ortho(
                config.ORTHO_LEFT, config.ORTHO_RIGHT,
                config.ORTHO_BOTTOM, config.ORTHO_TOP,
                config.ORTHO_NEAR, config.ORTHO_FAR,
            )
        view = view if view is not None else Mat4.identity()
        for pipeline in (self.letter, self.gizmo):
            pipeline.set_matrices(view=view, projection=projection)
        self.apply()

    def apply(self) -> None:
        self.letter.set_model(build_model_matrix(self.params))

    def update(self, dt: float) -> None:
        if self.animator.advance(self.params, dt):
            self.apply()

    def reset(self) -> None:
        self.params = ModelParams()
        self.animator.direction = 1.0
        self.apply()
        logger.info("Parameters reset")

    def letter_primitives(self) -> RenderList:
        return self.letter.render_list()

    def gizmo_primitives(self) -> RenderList:
        return self.gizmo.render_list()
