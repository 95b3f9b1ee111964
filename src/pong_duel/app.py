"""
Minimal main application for Pong Duel.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    BackendSettings,
    FontSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from pong_duel.constants import ASSETS_ROOT, BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def run():
    """
    Open the Pong Duel window and start at the main menu.

    Scenes come from `pong_duel.scenes` plus the built-in ones shipped with
    mini-arcade-core; drawing goes through the native SDL2 backend.
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "pong_duel.scenes", "mini_arcade_core.scenes"
    )

    font_path = ASSETS_ROOT / "fonts" / "default.ttf"

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Pong Duel",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        fonts=[FontSettings(name="default", path=str(font_path), size=24)],
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="menu",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Pong Duel...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
