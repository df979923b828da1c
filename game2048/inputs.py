"""Player keyboard input."""

from __future__ import annotations

from enum import Enum

from game2048.services import Signal


class Key(Enum):
    """Keyboard keys the game can receive."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    UP_ARROW = "up"
    LEFT_ARROW = "left"
    DOWN_ARROW = "down"
    RIGHT_ARROW = "right"
    SPACE = "space"
    ENTER = "enter"
    ESCAPE = "escape"


CONTROL_KEYS = frozenset(
    {
        Key.W, Key.UP_ARROW,
        Key.A, Key.LEFT_ARROW,
        Key.S, Key.DOWN_ARROW,
        Key.D, Key.RIGHT_ARROW,
    }
)


class InputManager:
    """Turns released keys into ``on_player_input(key)`` for control keys."""

    def __init__(self) -> None:
        self.on_player_input = Signal()
        self._player_input_allowed = True

    @property
    def player_input_allowed(self) -> bool:
        return self._player_input_allowed

    def set_player_input_allowed(self, value: bool) -> None:
        """Allow or block player input; blocked input is not passed on."""
        self._player_input_allowed = bool(value)

    def key_released(self, key: Key) -> bool:
        """Handle a released key; True if it was passed on as player input."""
        if not self._player_input_allowed or key not in CONTROL_KEYS:
            return False
        self.on_player_input.emit(key)
        return True