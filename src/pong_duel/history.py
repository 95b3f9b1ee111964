"""
Match history persistence for Pong Duel.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Protocol, Union

from pong_duel.constants import AI_LABEL, HISTORY_DB_PATH, PLAYER_LABEL
from pong_duel.match import CompletedMatch


class HistoryStoreError(Exception):
    """Raised when match history cannot be read or written."""


class HistoryStore(Protocol):
    """
    Where finished matches go.

    Implementations report every read, write or close failure as
    :class:`HistoryStoreError`; the simulation keeps playing on that error
    and lets anything else propagate.
    """

    def append(self, record: CompletedMatch):
        """Store one finished match."""

    def load_recent(self, n: int) -> List[CompletedMatch]:
        """Return up to ``n`` matches, most recent first."""

    def close(self):
        """Release whatever the store holds open."""


class MemoryHistoryStore:
    """Keeps match history in a list for the lifetime of the process."""

    def __init__(self):
        self.records: List[CompletedMatch] = []

    def append(self, record: CompletedMatch):
        self.records.append(record)

    def load_recent(self, n: int) -> List[CompletedMatch]:
        if n <= 0:
            return []
        return list(reversed(self.records[-n:]))

    def close(self):
        pass


class SqliteHistoryStore:
    """Handles all interaction with the SQLite history database."""

    def __init__(self, db_file: Union[str, Path] = HISTORY_DB_PATH):
        self.db_file = Path(db_file)
        self.conn: sqlite3.Connection | None = None
        try:
            self.db_file.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(self.db_file))
            self.setup()
        except (sqlite3.Error, OSError) as exc:
            if self.conn is not None:
                self.conn.close()
                self.conn = None
            raise HistoryStoreError(
                f"Cannot open history database {self.db_file}"
            ) from exc

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Matches (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                player_score INTEGER NOT NULL,
                ai_score INTEGER NOT NULL,
                winner TEXT NOT NULL,
                played_at TEXT NOT NULL
            )
        """)
        self.conn.commit()

    def append(self, record: CompletedMatch):
        """Inserts one finished match."""
        try:
            self.conn.execute(
                "INSERT INTO Matches (player_score, ai_score, winner, played_at)"
                " VALUES (?, ?, ?, ?)",
                (
                    record.player_score,
                    record.ai_score,
                    record.winner,
                    record.timestamp.isoformat(),
                ),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            raise HistoryStoreError("Cannot save match") from exc

    def load_recent(self, n: int) -> List[CompletedMatch]:
        """Fetches the ``n`` latest matches, newest first."""
        if n <= 0:
            return []
        try:
            rows = self.conn.execute(
                """
                SELECT player_score, ai_score, winner, played_at
                FROM Matches
                ORDER BY id DESC
                LIMIT ?
                """,
                (n,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise HistoryStoreError("Cannot load match history") from exc

        return [
            CompletedMatch(
                player_score=player_score,
                ai_score=ai_score,
                winner=winner,
                timestamp=datetime.fromisoformat(played_at),
            )
            for player_score, ai_score, winner, played_at in rows
        ]

    def close(self):
        """Closes the database connection."""
        if self.conn is None:
            return
        try:
            self.conn.close()
        except sqlite3.Error as exc:
            raise HistoryStoreError("Cannot close history database") from exc


def format_record(record: CompletedMatch) -> str:
    """One-line summary of a finished match."""
    return (
        f"{PLAYER_LABEL}: {record.player_score} - {AI_LABEL}: {record.ai_score}"
        f" | Winner: {record.winner} | {record.timestamp:%Y-%m-%d %H:%M}"
    )
