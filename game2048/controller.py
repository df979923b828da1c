"""Main game logic: game states, moves and turns."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from game2048.board import GameBoard
from game2048.config import NUM_RANDOM_TILES_EACH_TURN, Move
from game2048.inputs import InputManager, Key
from game2048.score import ScoreProxy
from game2048.services import Signal


class GameState(IntEnum):
    """State of the game."""

    UNINITIALIZED = 0  # before initialization
    NEW_GAME_PREPARATION = 1  # preparing for a new game
    WAITING_FOR_INPUT = 2  # waiting for player or bot input
    GAME_TURN_IN_PROGRESS = 3  # waiting for the turn to end
    GAME_ENDED = 4  # won or lost


_KEY_MOVES = {
    Key.W: Move.UP,
    Key.UP_ARROW: Move.UP,
    Key.A: Move.LEFT,
    Key.LEFT_ARROW: Move.LEFT,
    Key.S: Move.DOWN,
    Key.DOWN_ARROW: Move.DOWN,
    Key.D: Move.RIGHT,
    Key.RIGHT_ARROW: Move.RIGHT,
}


class GameController:
    """Runs the game; emits ``on_game_state_changed(state)`` on every change.

    A turn started by a move lasts until :meth:`end_current_turn` is called,
    normally when the move animation has finished.
    """

    def __init__(
        self,
        board: GameBoard,
        score: ScoreProxy,
        input_manager: Optional[InputManager] = None,
    ) -> None:
        self.on_game_state_changed = Signal()
        self._board = board
        self._score = score
        self._state = GameState.UNINITIALIZED
        if input_manager is not None:
            input_manager.on_player_input.connect(self.handle_key)

    @property
    def current_game_state(self) -> GameState:
        return self._state

    def start_new_game(self) -> None:
        """Interrupt the current game and start a new one."""
        self._set_game_state(GameState.NEW_GAME_PREPARATION)
        self._board.reset()
        self._score.clear_current_score()
        self._set_game_state(GameState.WAITING_FOR_INPUT)

    def make_move(self, move: Move) -> bool:
        """Make a move if the game waits for one; True on success."""
        if self._state != GameState.WAITING_FOR_INPUT:
            return False
        move_score = self._board.make_move(move)
        if move_score is None:
            return False
        self._set_game_state(GameState.GAME_TURN_IN_PROGRESS)
        self._score.add_score(move_score)
        return True

    def end_current_turn(self) -> None:
        """End the turn: start the next one or end the game."""
        if self._board.win_tile_acquired:
            self._set_game_state(GameState.GAME_ENDED)
            return
        self._board.place_random_tiles(NUM_RANDOM_TILES_EACH_TURN)
        if self._board.has_available_moves:
            self._set_game_state(GameState.WAITING_FOR_INPUT)
        else:
            self._set_game_state(GameState.GAME_ENDED)

    def handle_key(self, key: Key) -> bool:
        """Make the move bound to a key; True if a move was made."""
        if self._state != GameState.WAITING_FOR_INPUT:
            return False
        return self.make_move(_KEY_MOVES.get(key, Move.INCORRECT_MOVE))

    def _set_game_state(self, new_state: GameState) -> None:
        if self._state == new_state:
            return
        self._state = new_state
        self.on_game_state_changed.emit(new_state)