"""
Game session state
Holds the one game being played: secret, attempts left, status and history.
"""

import logging
from dataclasses import FrozenInstanceError, dataclass, field
from typing import List, Optional

from .config import NUM_OF_GUESSES
from .engine import Score, format_result, is_win, score_guess
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: Code
    exact: int
    color_only: int
    message: str


@dataclass
class Game:
    secret: Code
    attempts_left: int = NUM_OF_GUESSES
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)

    def __setattr__(self, name, value) -> None:
        # Secret is fixed for the whole session
        if name == "secret":
            if "secret" in self.__dict__:
                raise FrozenInstanceError("cannot reassign the secret of a game")
            value = tuple(value)
        super().__setattr__(name, value)

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    def guess(self, attempt: Code) -> Optional[GuessEntry]:
        """
        Apply one accepted guess.
        - winning guess -> "won", attempts unchanged
        - any other guess -> attempts_left - 1, "lost" when it reaches 0
        Returns the history entry, or None if the game had already ended.
        """
        if self.is_over:
            # Extra guesses after the end are ignored
            return None

        # --- length guard ---
        if len(self.secret) != len(attempt):
            raise ValueError(f"Guess must have exactly {len(self.secret)} digits.")

        attempt = tuple(attempt)
        score: Score = score_guess(self.secret, attempt)

        entry = GuessEntry(
            guess=attempt,
            exact=score.exact,
            color_only=score.color_only,
            message=format_result(score),
        )
        self.history.append(entry)

        if is_win(self.secret, attempt):
            self.status = "won"
        else:
            self.attempts_left -= 1
            if self.attempts_left <= 0:
                self.status = "lost"

        logger.debug(
            "Guess %s scored %d exact / %d color-only, %d attempts left",
            attempt, score.exact, score.color_only, self.attempts_left,
        )
        if self.is_over:
            logger.info("Game %s after %d guesses", self.status, len(self.history))

        return entry

    def abandon(self) -> None:
        """End an unfinished game as lost (no more input is coming)."""
        if self.is_over:
            return
        self.status = "lost"
        logger.info("Game abandoned with %d attempts left", self.attempts_left)
