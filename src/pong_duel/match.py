"""
Score keeping and match completion for Pong Duel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Literal, Optional

from mini_arcade_core.utils import logger

from pong_duel.constants import AI_LABEL, PLAYER_LABEL, WINNING_SCORE

Scorer = Literal["PLAYER", "AI"]


@dataclass(frozen=True)
class CompletedMatch:
    """
    Result of a finished match.

    :ivar player_score (int): Final score of the player.
    :ivar ai_score (int): Final score of the CPU.
    :ivar winner (str): Label of the winning side.
    :ivar timestamp (datetime): When the match ended.
    """

    player_score: int
    ai_score: int
    winner: str
    timestamp: datetime


@dataclass(frozen=True)
class ScoreOutcome:
    """
    What happened after a point was scored.

    :ivar completed (bool): Whether the point ended the match.
    :ivar record (Optional[CompletedMatch]): The finished match, if any.
    """

    completed: bool = False
    record: Optional[CompletedMatch] = None


def winner_label(player_score: int, ai_score: int) -> str:
    """Label of the side with more points; ties go to the CPU."""
    return PLAYER_LABEL if player_score > ai_score else AI_LABEL


@dataclass
class MatchState:
    """
    Running score of the current match.

    A match ends as soon as either side reaches ``winning_score``; the
    result is returned from :meth:`on_score` and a new match starts at 0-0
    straight away.

    :ivar player_score (int): Points of the player.
    :ivar ai_score (int): Points of the CPU.
    :ivar winning_score (int): Points needed to win.
    :ivar clock (Callable[[], datetime]): Time source for match records.
    """

    player_score: int = 0
    ai_score: int = 0
    winning_score: int = WINNING_SCORE
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    @property
    def scores(self) -> tuple[int, int]:
        """Current (player, ai) scores."""
        return self.player_score, self.ai_score

    def on_score(self, scorer: Scorer) -> ScoreOutcome:
        """
        Award a point and check for match completion.

        :param scorer: Side that won the point.
        :type scorer: Scorer

        :return: Outcome with the match record when the match ended.
        :rtype: ScoreOutcome
        """
        if scorer == "PLAYER":
            self.player_score += 1
        elif scorer == "AI":
            self.ai_score += 1
        else:
            raise ValueError(f"Unknown scorer: {scorer!r}")

        logger.debug(
            f"Point to {scorer}: {self.player_score}-{self.ai_score}"
        )

        if max(self.player_score, self.ai_score) < self.winning_score:
            return ScoreOutcome()

        record = CompletedMatch(
            player_score=self.player_score,
            ai_score=self.ai_score,
            winner=winner_label(self.player_score, self.ai_score),
            timestamp=self.clock(),
        )
        logger.info(
            f"Match complete: {record.player_score}-{record.ai_score}, "
            f"winner {record.winner}"
        )
        self.reset()
        return ScoreOutcome(completed=True, record=record)

    def reset(self):
        """Zero both scores."""
        self.player_score = 0
        self.ai_score = 0
