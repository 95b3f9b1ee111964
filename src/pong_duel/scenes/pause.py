"""
Pause scene for Pong Duel.
Provides a menu to continue, restart the match or return to the main menu.
"""

from __future__ import annotations

from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from pong_duel.scenes.commands import (
    BackToMenuCommand,
    ContinueCommand,
    ResetFromPauseCommand,
)


@register_scene("pause")
class PauseScene(BaseMenuScene):
    """
    Pause scene shown over the running match.
    """

    @property
    def menu_title(self) -> str | None:
        return "PAUSED"

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            overlay_color=(0, 0, 0, 0.5),
            panel_color=(20, 20, 20, 0.75),
        )

    def menu_items(self):
        """Initialize the pause menu."""
        return [
            MenuItem("CONTINUE", "Continue", ContinueCommand),
            MenuItem("RESET", "Reset Match", ResetFromPauseCommand),
            MenuItem(
                "MAIN_MENU",
                "Main Menu",
                BackToMenuCommand,
            ),
        ]
