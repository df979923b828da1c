# game2048

The game logic of the 2048 puzzle: slide numbered tiles on a 4×4 grid. When
two tiles with the same number touch, they merge into one tile with double the
value. Reaching a 2048 tile wins the game. When no move is left, the game is
lost.

The package keeps a current and a best score, manages game states and turns,
has a bot that plays random moves, and keeps a visual model of the board that
can be printed as text.

## Installation

```
pip install .
```

## The board

```python
from game2048.board import GameBoard
from game2048.config import Move

board = GameBoard()
board.reset()
print(board.board_state)
if Move.LEFT in board.available_moves:
    score = board.make_move(Move.LEFT)
```

The board stores each tile as a power of two: 1 is the tile 2, 10 is the tile
1024, and -1 is an empty cell. Row 0 is the top row. `make_move` returns the
points earned by the move, or `None` if the move is not available. `load`
sets the whole board from rows of values, which is handy for tests and
puzzles. A `random.Random` can be passed to `GameBoard` for reproducible
tile placement.

`reset` places two tiles with the value 2 on an empty board.

## A whole game

`GameController` runs the game through its states (`GameState`). A move
starts a turn, and the turn lasts until `end_current_turn` is called. The
`GameView` starts a move animation for every move and emits
`on_tile_movement_animation_ended` when `finish_animation` is called, so the
two are wired together:

```python
from game2048.board import GameBoard
from game2048.config import Move
from game2048.controller import GameController
from game2048.score import ScoreProxy
from game2048.view import GameView

board = GameBoard()
score = ScoreProxy()
view = GameView(board)
controller = GameController(board, score)
view.on_tile_movement_animation_ended.connect(controller.end_current_turn)

controller.start_new_game()
print(view.render())

if controller.make_move(Move.LEFT):
    view.finish_animation()   # ends the turn; two new tiles are placed if there is room
print(view.render())
print(score.current_score, score.best_score)
```

Keyboard-style input goes through `game2048.inputs.InputManager`: pass it to
`GameController` and call `key_released(Key.LEFT_ARROW)` and the like; the
W/A/S/D and arrow keys are turned into moves.

## The bot

`game2048.bots.PushTheTempoBot` picks a random available move.
`game2048.bot_controller.BotController` lets it play:

```python
from game2048.bot_controller import BotController
from game2048.bots import PushTheTempoBot

bot = BotController(controller, board, PushTheTempoBot())
bot.toggle_bot()
while bot.bot_enabled and view.animation_pending:
    view.finish_animation()
print(view.render())
```

The bot switches itself off when the game ends or a new game starts, and
blocks player input on an `InputManager` given to it while it plays.

## Other modules

- `game2048.config` holds the game settings and the `Move`, `LanguageId` and
  `LocalizedStringId` enumerations.
- `game2048.services` has `Signal`, the handler lists used for all events,
  and `ServiceLocator`, a registry of shared services.
- `game2048.logger` has `SimpleLogger`, which collects messages and writes
  them to `log.txt` on `flush`; `get_logger` returns the shared one.

## What the package does not do

There is no command to run and no interactive front end: the game is driven
from Python code. Localized strings are not loaded or shown (only their ids
exist in `game2048.config`), and there are no score panels, buttons or
end-of-game window; `GameView.render` is the only picture of the game.

## Running the tests

```
pip install .[test]
pytest
```