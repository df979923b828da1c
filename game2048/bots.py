"""Bots that choose game moves."""

from __future__ import annotations

import abc
import random
from typing import AbstractSet, Optional, Sequence

from game2048.config import Move


class Bot(abc.ABC):
    """Common interface for all bots."""

    @abc.abstractmethod
    def calc_next_move(
        self,
        board_state: Sequence[Sequence[int]],
        available_moves: AbstractSet[Move],
    ) -> Move:
        """Return the move to make from the given board state."""


class PushTheTempoBot(Bot):
    """Picks a random move among the available ones."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def calc_next_move(
        self,
        board_state: Sequence[Sequence[int]],
        available_moves: AbstractSet[Move],
    ) -> Move:
        if not available_moves:
            return Move.INCORRECT_MOVE
        return self._rng.choice(sorted(available_moves))