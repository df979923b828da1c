"""The 2048 sliding-tile puzzle: board, scoring, game states, a random-move bot and a text view of the board."""

__version__ = "0.1.0"