from __future__ import annotations

from roberts.logging_config import setup_logging
from roberts.visibility import facing_faces
from viewer import config
from viewer.app import App
from viewer.controller import SceneController
from viewer.controls import HELP_LINES, handle_input
from viewer.hud import HUD, HUDInfo
from viewer.renderer import Renderer


def main() -> None:
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    app = App(config.WINDOW_WIDTH, config.WINDOW_HEIGHT, config.WINDOW_TITLE)
    renderer = Renderer()
    hud = HUD()
    scene = SceneController()

    running = True
    while running:
        running = app.poll()
        delta = app.time.tick()

        handle_input(scene, app.input, delta)
        scene.update(delta)

        renderer.begin()
        # The gizmo has no faces, so only its lines are drawn.
        renderer.draw_lines(scene.gizmo_primitives().lines, config.GIZMO_COLORS)
        letter = scene.letter_primitives()
        renderer.draw(letter)

        params = scene.params
        animator = scene.animator
        info = HUDInfo(
            position=tuple(params.position.as_list()),
            scale=tuple(params.scale.as_list()),
            rotation=tuple(params.rotation.as_list()),
            reflect=(params.reflect_x, params.reflect_y, params.reflect_z),
            bounce=f"{animator.bounce_axis.name}{' on' if animator.bounce_enabled else ''}",
            sweep=f"{animator.sweep_plane.name}{' on' if animator.sweep_enabled else ''}",
            fps=app.time.fps,
            facing=len(facing_faces(scene.letter.mesh)),
            visible_edges=len(letter.lines),
            help_lines=HELP_LINES,
        )
        hud.render(info)

        app.swap(config.TARGET_FPS)

    app.shutdown()


if __name__ == "__main__":
    main()
