"""
Pause overlay for Pong Arena.
"""

from __future__ import annotations

from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from pong_arena.scenes.commands import (
    BackToMenuCommand,
    ContinueCommand,
    RestartMatchCommand,
)


@register_scene("pause")
class PauseScene(BaseMenuScene):
    """
    Shown on top of a paused match: continue, restart or leave.
    """

    @property
    def menu_title(self) -> str | None:
        return "PAUSED"

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            overlay_color=(0, 0, 0, 0.5),
            panel_color=(20, 20, 20, 0.75),
            hint="T switches theme in game",
            hint_color=(200, 200, 200),
        )

    def menu_items(self):
        return [
            MenuItem("continue", "CONTINUE", ContinueCommand),
            MenuItem("restart", "RESTART", RestartMatchCommand),
            MenuItem("main_menu", "MAIN MENU", BackToMenuCommand),
        ]
