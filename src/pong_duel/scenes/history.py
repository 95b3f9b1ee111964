"""
Match history scene for Pong Duel.
"""

from __future__ import annotations

from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle
from mini_arcade_core.utils import logger

from pong_duel.constants import (
    BACKGROUND,
    DIM,
    HISTORY_DB_PATH,
    HISTORY_LIMIT,
    WHITE,
)
from pong_duel.history import (
    HistoryStoreError,
    SqliteHistoryStore,
    format_record,
)
from pong_duel.scenes.commands import BackToMenuCommand


@register_scene("history")
class HistoryScene(BaseMenuScene):
    """
    Lists the most recent matches, newest first.
    Every entry leads back to the main menu.
    """

    @property
    def menu_title(self) -> str | None:
        return "HISTORY"

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            background_color=(*BACKGROUND, 1.0),
            normal=DIM,
            selected=WHITE,
            hint="Press ENTER to go back",
            hint_color=(200, 200, 200),
        )

    @staticmethod
    def history_labels() -> list[str]:
        """
        Labels for the latest matches.

        :return: One label per match, or a placeholder when there are none.
        :rtype: list[str]
        """
        try:
            store = SqliteHistoryStore(HISTORY_DB_PATH)
            try:
                records = store.load_recent(HISTORY_LIMIT)
            finally:
                store.close()
        except HistoryStoreError as exc:
            logger.warning(f"Cannot read match history: {exc}")
            records = []

        if not records:
            return ["NO GAMES PLAYED YET"]
        return [format_record(record) for record in records]

    def menu_items(self):
        items = [
            MenuItem(f"match_{idx}", label, BackToMenuCommand)
            for idx, label in enumerate(self.history_labels())
        ]
        items.append(MenuItem("back", "BACK", BackToMenuCommand))
        return items
