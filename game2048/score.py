"""The player's current and best score."""

from __future__ import annotations

from typing import Optional

from game2048.logger import SimpleLogger, get_logger
from game2048.services import Signal

MAX_SCORE = 2**32 - 1


class ScoreProxy:
    """Holds the player's score; emits on_score_changed(current, best)."""

    def __init__(self, logger: Optional[SimpleLogger] = None) -> None:
        self.on_score_changed = Signal()
        self._logger = logger if logger is not None else get_logger()
        self._current_score = 0
        self._best_score = 0

    @property
    def current_score(self) -> int:
        return self._current_score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def is_new_record(self) -> bool:
        """True if the current score equals the best score."""
        return self._current_score == self._best_score

    def clear_current_score(self) -> None:
        """Reset the current score; the best score stays."""
        self._current_score = 0
        self._dispatch_score_changed()

    def add_score(self, points: int) -> None:
        """Add points to the current score and update the best score."""
        if points < 0:
            raise ValueError("points to add must not be negative")
        if self._current_score > MAX_SCORE - points:
            self._logger.warn("Score overflow, max value will be used.")
            self._current_score = MAX_SCORE
        else:
            self._current_score += points

        if self._current_score > self._best_score:
            self._best_score = self._current_score

        self._dispatch_score_changed()

    def _dispatch_score_changed(self) -> None:
        self.on_score_changed.emit(self._current_score, self._best_score)