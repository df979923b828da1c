"""Lets a bot play the game."""

from __future__ import annotations

from typing import Optional

from game2048.board import GameBoard
from game2048.bots import Bot
from game2048.controller import GameController, GameState
from game2048.inputs import InputManager
from game2048.services import Signal

# A bot that fails to make a valid move this many times in a row is stopped.
MAX_MOVE_ATTEMPTS = 10


class BotController:
    """Switches a bot on and off; emits ``on_bot_state_changed(enabled)``."""

    def __init__(
        self,
        controller: GameController,
        board: GameBoard,
        bot: Bot,
        input_manager: Optional[InputManager] = None,
    ) -> None:
        self.on_bot_state_changed = Signal()
        self._controller = controller
        self._board = board
        self._bot = bot
        self._input_manager = input_manager
        self._enabled = False

    @property
    def bot_enabled(self) -> bool:
        return self._enabled

    def toggle_bot(self) -> None:
        """Enable the bot if it is disabled, disable it otherwise."""
        self._enabled = not self._enabled

        # the player cannot play while the bot does
        if self._input_manager is not None:
            self._input_manager.set_player_input_allowed(not self._enabled)

        if self._enabled:
            self._controller.on_game_state_changed.connect(self._game_state_changed)
            if self._controller.current_game_state == GameState.WAITING_FOR_INPUT:
                self._make_move()
        else:
            self._controller.on_game_state_changed.disconnect(self._game_state_changed)

        self.on_bot_state_changed.emit(self._enabled)

    def _game_state_changed(self, new_state: GameState) -> None:
        if not self._enabled:
            return
        if new_state in (GameState.NEW_GAME_PREPARATION, GameState.GAME_ENDED):
            self.toggle_bot()
        elif new_state == GameState.WAITING_FOR_INPUT:
            self._make_move()

    def _make_move(self) -> None:
        for _ in range(MAX_MOVE_ATTEMPTS):
            move = self._bot.calc_next_move(self._board.board_state, self._board.available_moves)
            if self._controller.make_move(move):
                return
        self.toggle_bot()