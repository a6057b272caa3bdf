"""
Main application for Pong Arena.
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

from pong_arena.constants import ASSETS_ROOT, BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Pong Arena.

    - Auto-discovers scenes from the `pong_arena.scenes` package.
    - Uses a bundled font when one is present in the assets folder.
    - Runs the game with the initial scene set to "menu".
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "pong_arena.scenes", "mini_arcade_core.scenes"
    )

    font_path = ASSETS_ROOT / "fonts" / "pong_arena.ttf"
    fonts = (
        [FontSettings(name="default", path=str(font_path), size=24)]
        if font_path.exists()
        else []
    )

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Pong Arena",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        fonts=fonts,
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="menu",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Pong Arena...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
