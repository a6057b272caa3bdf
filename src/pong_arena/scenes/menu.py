"""
Main menu scene for Pong Arena.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.runtime.context import RuntimeContext
from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from pong_arena import difficulty as levels
from pong_arena.constants import (
    BACKGROUND,
    BUTTON_BORDER,
    BUTTON_FILL,
    DIM,
    HIGHLIGHT,
    WHITE,
)
from pong_arena.scenes.commands import (
    CycleDifficultyCommand,
    StartGameCommand,
    ToggleThemeCommand,
)
from pong_arena.theme import palette_for


@register_scene("menu")
class MenuScene(BaseMenuScene):
    """
    Main menu scene for Pong Arena.

    Options:
        [0] Start Game
        [1] Cycle Difficulty
        [2] Toggle Theme
        [3] Quit
    """

    @property
    def menu_title(self) -> str | None:
        return "Pong Arena"

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            background_color=(*BACKGROUND, 1.0),
            button_enabled=True,
            button_fill=BUTTON_FILL,
            button_border=BUTTON_BORDER,
            button_selected_border=HIGHLIGHT,
            normal=DIM,
            selected=WHITE,
            hint="W/S or arrows move · LEFT/RIGHT change difficulty",
            hint_color=(200, 200, 200),
        )

    @staticmethod
    def get_difficulty_label(ctx: RuntimeContext) -> str:
        """
        Get the label for the difficulty menu item.

        :param ctx: RuntimeContext for the scene.
        :type ctx: RuntimeContext

        :return: Label string showing the current difficulty.
        :rtype: str
        """
        difficulty = levels.normalize(
            getattr(ctx.settings, "difficulty", None)
        )
        return f"DIFFICULTY: {difficulty.upper()}"

    @staticmethod
    def get_theme_label(ctx: RuntimeContext) -> str:
        """Label for the theme menu item."""
        theme = palette_for(getattr(ctx.settings, "theme", None)).name
        return f"THEME: {theme.upper()}"

    def menu_items(self):
        return [
            MenuItem("start", "START", StartGameCommand),
            MenuItem(
                "difficulty",
                "DIFFICULTY",
                CycleDifficultyCommand,
                label_fn=self.get_difficulty_label,
            ),
            MenuItem(
                "theme",
                "THEME",
                ToggleThemeCommand,
                label_fn=self.get_theme_label,
            ),
            MenuItem("quit", "QUIT", QuitCommand),
        ]
