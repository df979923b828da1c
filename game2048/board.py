"""The game board: a square grid of tiles holding powers of two."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from game2048.config import (
    GAME_BOARD_SIZE,
    NUM_INITIAL_RANDOM_TILES,
    NUMBER_ON_WIN_TILE,
    TILE_INITIAL_VALUE,
    Move,
)
from game2048.services import Signal

EMPTY_TILE_VALUE = -1

Coords = Tuple[int, int]


@dataclass(frozen=True)
class TileMove:
    """A tile moved from ``start`` to ``end``; both are (row, column)."""

    start: Coords
    end: Coords


class GameBoard:
    """Square grid of tiles.

    Each cell holds the power of two shown on the tile (10 for 1024) or
    ``EMPTY_TILE_VALUE``. The first index is the row, the second the column,
    and (0, 0) is the top left cell.

    Signals: ``on_board_state_set()`` when the whole board is set and
    ``on_tiles_moved(moves)`` with a list of :class:`TileMove` after a move.
    """

    def __init__(self, rng: Optional[random.Random] = None, size: int = GAME_BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.on_board_state_set = Signal()
        self.on_tiles_moved = Signal()
        self._rng = rng if rng is not None else random.Random()
        self._size = size
        self._cells: List[List[int]] = [[EMPTY_TILE_VALUE] * size for _ in range(size)]
        self._available_moves: Set[Move] = set()
        self._win_tile_acquired = False

    @property
    def size(self) -> int:
        return self._size

    @property
    def board_state(self) -> List[List[int]]:
        """A copy of the current cells, row by row."""
        return [list(row) for row in self._cells]

    @property
    def win_tile_acquired(self) -> bool:
        """True once a merge has produced the winning tile."""
        return self._win_tile_acquired

    @property
    def available_moves(self) -> FrozenSet[Move]:
        """Moves that can be made from the current state."""
        return frozenset(self._available_moves)

    @property
    def has_available_moves(self) -> bool:
        return bool(self._available_moves)

    def load(self, state: Sequence[Sequence[int]]) -> None:
        """Set the whole board from the given rows of tile values."""
        rows = [list(row) for row in state]
        if len(rows) != self._size or any(len(row) != self._size for row in rows):
            raise ValueError(f"board state must be {self._size}x{self._size}")
        if any(not isinstance(value, int) or value < EMPTY_TILE_VALUE for row in rows for value in row):
            raise ValueError(f"tile values must be integers not below {EMPTY_TILE_VALUE}")
        self._cells = rows
        self._win_tile_acquired = False
        self._update_available_moves()
        self.on_board_state_set.emit()

    def reset(self) -> None:
        """Empty the board and place the initial random tiles."""
        self._cells = [[EMPTY_TILE_VALUE] * self._size for _ in range(self._size)]
        self._win_tile_acquired = False
        self.place_random_tiles(NUM_INITIAL_RANDOM_TILES)

    def place_random_tiles(self, num_tiles: int) -> None:
        """Place up to ``num_tiles`` initial-value tiles on random empty cells."""
        empty_cells = [
            (row, column)
            for row, cells in enumerate(self._cells)
            for column, value in enumerate(cells)
            if value == EMPTY_TILE_VALUE
        ]
        self._rng.shuffle(empty_cells)
        for row, column in empty_cells[: max(num_tiles, 0)]:
            self._cells[row][column] = TILE_INITIAL_VALUE

        self._update_available_moves()
        self.on_board_state_set.emit()

    def make_move(self, move: Move) -> Optional[int]:
        """Make a move if it is available.

        Returns the score earned by the move, or None if it cannot be made.
        """
        if move not in self._available_moves:
            return None

        size = self._size
        start = 0 if move in (Move.LEFT, Move.UP) else size - 1
        end = size - 1 if start == 0 else 0
        delta = 1 if start == 0 else -1
        horizontal = move in (Move.LEFT, Move.RIGHT)

        def coords(outer: int, index: int) -> Coords:
            return (outer, index) if horizontal else (index, outer)

        def get(outer: int, index: int) -> int:
            row, column = coords(outer, index)
            return self._cells[row][column]

        def put(outer: int, index: int, value: int) -> None:
            row, column = coords(outer, index)
            self._cells[row][column] = value

        score = 0
        tile_moves: List[TileMove] = []

        # outer is the row for horizontal moves and the column for vertical ones
        for outer in range(size):
            current = start
            while current != end:
                current_value = get(outer, current)
                next_index = next(
                    (i for i in range(current + delta, end + delta, delta)
                     if get(outer, i) != EMPTY_TILE_VALUE),
                    None,
                )
                if next_index is None:
                    # everything after the current cell is empty
                    break

                check_value = get(outer, next_index)
                moved = merged = False
                if current_value == EMPTY_TILE_VALUE:
                    put(outer, current, check_value)
                    moved = True
                elif current_value == check_value:
                    merged_value = current_value + 1
                    put(outer, current, merged_value)
                    points = 1 << merged_value
                    if points >= NUMBER_ON_WIN_TILE:
                        self._win_tile_acquired = True
                    score += points
                    merged = True

                if moved or merged:
                    put(outer, next_index, EMPTY_TILE_VALUE)
                    tile_moves.append(TileMove(coords(outer, next_index), coords(outer, current)))

                # no double merges, but a moved tile may still merge
                if not moved:
                    current += delta

        self._update_available_moves()

        if tile_moves:
            self.on_tiles_moved.emit(tile_moves)

        return score

    def _update_available_moves(self) -> None:
        """A move is available if a tile has an empty or equal neighbour that way."""
        self._available_moves.clear()
        size = self._size
        directions = (
            (Move.LEFT, 0, -1),
            (Move.RIGHT, 0, 1),
            (Move.UP, -1, 0),
            (Move.DOWN, 1, 0),
        )
        for row, cells in enumerate(self._cells):
            for column, value in enumerate(cells):
                if value == EMPTY_TILE_VALUE:
                    continue
                for move, d_row, d_column in directions:
                    dest_row, dest_column = row + d_row, column + d_column
                    if 0 <= dest_row < size and 0 <= dest_column < size:
                        dest_value = self._cells[dest_row][dest_column]
                        if dest_value in (EMPTY_TILE_VALUE, value):
                            self._available_moves.add(move)
                if len(self._available_moves) == len(directions):
                    return