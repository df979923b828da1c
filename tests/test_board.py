import random

import pytest

from game2048.board import EMPTY_TILE_VALUE, GameBoard, TileMove
from game2048.config import (
    GAME_BOARD_SIZE,
    NUM_INITIAL_RANDOM_TILES,
    TILE_INITIAL_VALUE,
    Move,
)

E = EMPTY_TILE_VALUE


def empty_state():
    return [[E] * GAME_BOARD_SIZE for _ in range(GAME_BOARD_SIZE)]


def tile_mass(state):
    return sum(2**v for row in state for v in row if v != E)


def make_board(state, seed=1):
    board = GameBoard(random.Random(seed))
    board.load(state)
    return board


def test_new_board_is_empty_and_has_no_moves():
    board = GameBoard(random.Random(0))
    assert board.board_state == empty_state()
    assert not board.has_available_moves
    assert board.available_moves == frozenset()


def test_reset_places_initial_tiles():
    board = GameBoard(random.Random(3))
    board.reset()
    values = [v for row in board.board_state for v in row]
    assert values.count(TILE_INITIAL_VALUE) == NUM_INITIAL_RANDOM_TILES
    assert values.count(E) == GAME_BOARD_SIZE**2 - NUM_INITIAL_RANDOM_TILES
    assert board.has_available_moves
    assert board.win_tile_acquired is False


def test_reset_is_deterministic_with_seed():
    first = GameBoard(random.Random(42))
    second = GameBoard(random.Random(42))
    first.reset()
    second.reset()
    assert first.board_state == second.board_state


def test_reset_emits_board_state_set():
    board = GameBoard(random.Random(0))
    calls = []
    board.on_board_state_set.connect(lambda: calls.append(True))
    board.reset()
    assert calls == [True]


def test_place_random_tiles_only_fills_empty_cells():
    state = empty_state()
    state[0] = [5, 6, 7, 8]
    board = make_board(state)
    board.place_random_tiles(100)
    result = board.board_state
    assert result[0] == [5, 6, 7, 8]
    assert all(v == TILE_INITIAL_VALUE for row in result[1:] for v in row)


def test_place_random_tiles_on_full_board_changes_nothing():
    state = [[1, 2, 3, 4], [5, 6, 7, 8], [1, 2, 3, 4], [5, 6, 7, 8]]
    board = make_board(state)
    board.place_random_tiles(2)
    assert board.board_state == state
    assert not board.has_available_moves


def test_board_state_is_a_copy():
    board = make_board(empty_state())
    snapshot = board.board_state
    snapshot[0][0] = 9
    assert board.board_state[0][0] == E


@pytest.mark.parametrize(
    "bad_state",
    [
        [[E] * 4] * 3,
        [[E] * 3] * 4,
        [[E, E, E, -2]] + [[E] * 4] * 3,
    ],
)
def test_load_rejects_bad_state(bad_state):
    board = GameBoard(random.Random(0))
    with pytest.raises(ValueError):
        board.load(bad_state)


def test_corner_tile_available_moves():
    state = empty_state()
    state[0][0] = 1
    board = make_board(state)
    assert board.available_moves == {Move.RIGHT, Move.DOWN}


def test_unavailable_move_returns_none_and_keeps_board():
    state = empty_state()
    state[0][0] = 1
    board = make_board(state)
    assert board.make_move(Move.LEFT) is None
    assert board.make_move(Move.INCORRECT_MOVE) is None
    assert board.board_state == state


def test_single_tile_slides_to_edge():
    state = empty_state()
    state[2][1] = 3
    board = make_board(state)
    moved = []
    board.on_tiles_moved.connect(moved.append)
    assert board.make_move(Move.RIGHT) == 0
    assert board.board_state[2][GAME_BOARD_SIZE - 1] == 3
    assert board.board_state[2][1] == E
    assert moved == [[TileMove((2, 1), (2, GAME_BOARD_SIZE - 1))]]


def test_vertical_move_reports_row_column_coords():
    state = empty_state()
    state[3][2] = 4
    board = make_board(state)
    moved = []
    board.on_tiles_moved.connect(moved.append)
    board.make_move(Move.UP)
    assert board.board_state[0][2] == 4
    assert moved == [[TileMove((3, 2), (0, 2))]]


def test_merge_of_two_twos_scores_four():
    state = empty_state()
    state[0][0] = 1
    state[0][3] = 1
    board = make_board(state)
    assert board.make_move(Move.LEFT) == 4
    assert board.board_state[0][0] == 2
    assert tile_mass(board.board_state) == tile_mass(state)


def test_no_double_merge_in_one_move():
    state = empty_state()
    state[1] = [1, 1, 1, 1]
    board = make_board(state)
    score = board.make_move(Move.LEFT)
    assert board.board_state[1] == [2, 2, E, E]
    assert score == 8


@pytest.mark.parametrize("move", [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT])
def test_moves_conserve_tile_mass(move):
    state = [[1, E, 1, 2], [E, 2, 2, E], [3, 3, E, 1], [1, E, E, 1]]
    board = make_board(state)
    score = board.make_move(move)
    assert score is not None and score >= 0
    assert tile_mass(board.board_state) == tile_mass(state)
    tile_count_before = sum(v != E for row in state for v in row)
    tile_count_after = sum(v != E for row in board.board_state for v in row)
    assert tile_count_after <= tile_count_before


def test_opposite_edge_move_keeps_board_when_packed():
    state = empty_state()
    state[0] = [1, 2, 3, 4]
    board = make_board(state)
    assert Move.LEFT not in board.available_moves
    assert Move.RIGHT not in board.available_moves
    assert board.available_moves == {Move.DOWN}


def test_win_tile_acquired_on_merge():
    state = empty_state()
    state[0][0] = 10
    state[1][0] = 10
    board = make_board(state)
    assert board.win_tile_acquired is False
    score = board.make_move(Move.UP)
    assert board.win_tile_acquired is True
    assert score == 2 ** 11


def test_load_resets_win_flag():
    state = empty_state()
    state[0][0] = 10
    state[0][1] = 10
    board = make_board(state)
    board.make_move(Move.LEFT)
    board.load(empty_state())
    assert board.win_tile_acquired is False


def test_full_board_without_pairs_has_no_moves():
    state = [[1, 2, 1, 2], [2, 1, 2, 1], [1, 2, 1, 2], [2, 1, 2, 1]]
    board = make_board(state)
    assert not board.has_available_moves
    for move in (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT):
        assert board.make_move(move) is None