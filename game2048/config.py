"""Game settings and the enumerations shared across the game."""

from __future__ import annotations

from enum import IntEnum


class Move(IntEnum):
    """Possible in-game moves."""

    INCORRECT_MOVE = 0  # a move that cannot be performed
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class LanguageId(IntEnum):
    """Ids of the languages the game can be shown in."""

    FIRST_ELEMENT = 0
    NOT_INITIALIZED = 1
    UNSUPPORTED = 2
    EN = 3
    RU = 4
    CS = 5
    LAST_ELEMENT = 6

    def is_supported(self) -> bool:
        """True if the id lies strictly between the range markers."""
        return LanguageId.FIRST_ELEMENT < self < LanguageId.LAST_ELEMENT


class LocalizedStringId(IntEnum):
    """Ids of the localized strings used in the game."""

    EMPTY_LOCALE = 0  # special locale that holds an empty string

    LANGUAGE_NAME = 1

    # top ui
    GAME_DESCRIPTION = 2
    NEW_GAME = 3
    CURRENT_SCORE_TITLE = 4
    BEST_SCORE_TITLE = 5

    # bottom ui
    LANGUAGE = 6
    START_BOT = 7
    STOP_BOT = 8
    BOT_ENABLED = 9

    # end game window
    END_GAME_WINDOW_WIN = 10
    END_GAME_WINDOW_LOSE = 11
    END_GAME_WINDOW_SCORE = 12
    END_GAME_WINDOW_NEW_RECORD = 13
    END_GAME_WINDOW_PLAY_AGAIN = 14


# Base

GAME_WINDOW_WIDTH = 800.0
GAME_WINDOW_HEIGHT = 600.0
DEFAULT_LANGUAGE = LanguageId.EN

# UI

TOP_UI_HEIGHT = 120.0
BOTTOM_UI_HEIGHT = 50.0
FONT_NAME = "Roboto-Regular.ttf"
DEFAULT_FONT_SIZE = 16.0

# View

# Indent between board tiles and between the board and the UI lines.
GAME_BOARD_TILE_INDENT = 10

# Game

# The board holds this many tiles horizontally and vertically.
GAME_BOARD_SIZE = 4
# Delay between game turns, in seconds.
GAME_TURN_DELAY = 0.4
# Random tiles placed on an empty board when a new game starts.
NUM_INITIAL_RANDOM_TILES = 2
# Random tiles added to the board each turn, if there is room.
NUM_RANDOM_TILES_EACH_TURN = 2
# Initial tile value, a power of two: 2**1 == 2.
TILE_INITIAL_VALUE = 1
# The game is won when a tile with this number appears.
NUMBER_ON_WIN_TILE = 2048