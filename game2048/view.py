"""Visual model of the game board: tiles, their layout and move animation."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from game2048.board import EMPTY_TILE_VALUE, GameBoard, TileMove
from game2048.config import (
    BOTTOM_UI_HEIGHT,
    FONT_NAME,
    GAME_BOARD_TILE_INDENT,
    GAME_TURN_DELAY,
    GAME_WINDOW_HEIGHT,
    TOP_UI_HEIGHT,
)
from game2048.services import Signal

Color = Tuple[int, int, int]
Position = Tuple[float, float]

# Background colours for tiles 2**1 .. 2**11; larger tiles use the last one.
TILE_COLORS: Tuple[Color, ...] = (
    (238, 228, 218),  # 2
    (237, 224, 200),  # 4
    (242, 177, 121),  # 8
    (245, 149, 99),  # 16
    (246, 124, 95),  # 32
    (246, 94, 59),  # 64
    (237, 207, 114),  # 128
    (237, 204, 97),  # 256
    (237, 200, 80),  # 512
    (237, 197, 63),  # 1024
    (237, 194, 46),  # 2048
)
SMALL_NUMBER_COLOR: Color = (119, 110, 101)  # for the 2 and 4 tiles
LARGE_NUMBER_COLOR: Color = (248, 244, 241)  # for all other tiles
TILE_FONT_SIZE = 32
BOARD_BACKGROUND_COLOR = (0.35, 0.35, 0.35, 1.0)

# A bit shorter than the turn delay so the animation ends before the next turn.
MOVE_ANIMATION_DURATION = GAME_TURN_DELAY - 0.05


class GameBoardTile:
    """One square tile on the board, showing a power of two."""

    def __init__(self, tile_size: float) -> None:
        if tile_size <= 0:
            raise ValueError("tile size must be positive")
        self.size = float(tile_size)
        self.font_name = FONT_NAME
        self.font_size = TILE_FONT_SIZE
        self.background_color: Color = (0, 0, 0)
        self.number_color: Color = (255, 255, 255)
        self.text = ""
        self.opacity = 255
        self.position: Position = (0.0, 0.0)
        self.default_position: Position = (0.0, 0.0)
        self.z_order = 0
        # destination of a running move animation, if any
        self.moving_to: Optional[Position] = None

    def set_tile_value(self, tile_value: int) -> None:
        """Show the number 2**tile_value; values below 1 hide the tile."""
        opacity = 0
        if tile_value >= 1:
            opacity = 255
            index = min(tile_value, len(TILE_COLORS)) - 1
            self.background_color = TILE_COLORS[index]
            self.number_color = SMALL_NUMBER_COLOR if tile_value <= 2 else LARGE_NUMBER_COLOR
            self.text = str(1 << tile_value)
        self.opacity = opacity

    def mark_current_position_as_default(self) -> None:
        """Remember the current position as the tile's home."""
        self.default_position = self.position

    def move_to_default_position(self) -> None:
        """Put the tile back at its home position at once."""
        self.position = self.default_position


class GameView:
    """Shows the board; emits ``on_tile_movement_animation_ended()``.

    A move on the board starts a tile animation that lasts until
    :meth:`finish_animation` is called.
    """

    def __init__(self, board: GameBoard) -> None:
        self.on_tile_movement_animation_ended = Signal()
        self._board = board
        self._animation_pending = False

        # the board lies between the top and bottom UI lines
        height = GAME_WINDOW_HEIGHT - TOP_UI_HEIGHT - BOTTOM_UI_HEIGHT
        count = board.size
        self.size: Tuple[float, float] = (height, height)
        self.tile_size = (height - (count + 1) * GAME_BOARD_TILE_INDENT) / count
        self.animation_duration = MOVE_ANIMATION_DURATION

        self._tiles: List[List[GameBoardTile]] = []
        for row in range(count):
            tiles_row = []
            for column in range(count):
                tile = GameBoardTile(self.tile_size)
                tile.position = (
                    GAME_BOARD_TILE_INDENT * (column + 1) + self.tile_size * column,
                    height - GAME_BOARD_TILE_INDENT * (row + 1) - self.tile_size * row,
                )
                tile.mark_current_position_as_default()
                tiles_row.append(tile)
            self._tiles.append(tiles_row)

        board.on_board_state_set.connect(self.show_actual_board_state)
        board.on_tiles_moved.connect(self._board_tiles_moved)

        self.show_actual_board_state()

    def tile(self, row: int, column: int) -> GameBoardTile:
        """The tile at (row, column)."""
        return self._tiles[row][column]

    @property
    def tiles(self) -> List[List[GameBoardTile]]:
        return [list(row) for row in self._tiles]

    @property
    def animation_pending(self) -> bool:
        """True while a tile move animation is running."""
        return self._animation_pending

    def show_actual_board_state(self) -> None:
        """Stop any animation and show the board as it is now."""
        self._discard_tile_move_actions()
        for tiles_row, values in zip(self._tiles, self._board.board_state):
            for tile, value in zip(tiles_row, values):
                tile.set_tile_value(value)

    def finish_animation(self) -> None:
        """End the running move animation and announce it."""
        if not self._animation_pending:
            return
        self.show_actual_board_state()
        self.on_tile_movement_animation_ended.emit()

    def render(self) -> str:
        """Text picture of the shown tiles, one line per row."""
        visible = [tile.text for row in self._tiles for tile in row if tile.opacity > 0]
        width = max((len(text) for text in visible), default=1)
        return "\n".join(
            " ".join(
                (tile.text if tile.opacity > 0 else ".").rjust(width) for tile in row
            )
            for row in self._tiles
        )

    def _board_tiles_moved(self, moves: Sequence[TileMove]) -> None:
        self._discard_tile_move_actions()
        if not moves:
            return
        for move in moves:
            tile = self.tile(*move.start)
            # moving tiles go above the others
            tile.z_order = 1
            tile.moving_to = self.tile(*move.end).default_position
        self._animation_pending = True

    def _discard_tile_move_actions(self) -> None:
        if not self._animation_pending:
            return
        self._animation_pending = False
        for row in self._tiles:
            for tile in row:
                tile.moving_to = None
                tile.move_to_default_position()
                tile.z_order = 0


__all__ = ["EMPTY_TILE_VALUE", "GameBoardTile", "GameView"]