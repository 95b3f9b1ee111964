"""
Minimal main menu scene for Pong Duel.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from pong_duel.constants import (
    BACKGROUND,
    BUTTON_BORDER,
    BUTTON_FILL,
    DIM,
    HIGHLIGHT,
    WHITE,
)
from pong_duel.scenes.commands import ShowHistoryCommand, StartGameCommand


@register_scene("menu")
class MenuScene(BaseMenuScene):
    """
    Simple main menu scene for Pong Duel.

    Options:
        [0] Start Game
        [1] Match History
        [2] Quit
    """

    @property
    def menu_title(self) -> str | None:
        return "Pong Duel"

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            background_color=(*BACKGROUND, 1.0),
            button_enabled=True,
            button_fill=BUTTON_FILL,
            button_border=BUTTON_BORDER,
            button_selected_border=HIGHLIGHT,
            normal=DIM,
            selected=WHITE,
            hint="Press ENTER to select · ESC to quit",
            hint_color=(200, 200, 200),
        )

    def menu_items(self):
        return [
            MenuItem("start", "START", StartGameCommand),
            MenuItem("history", "HISTORY", ShowHistoryCommand),
            MenuItem("quit", "QUIT", QuitCommand),
        ]
