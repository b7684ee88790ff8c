# tests/test_snake_rules.py
import random
import numpy as np
import pytest

from core.interfaces import Direction, InvalidConfiguration, TickOutcome
from core.snake_rules import GameState, step_position

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def test_new_game_has_only_the_head_on_board(game_factory):
    g = game_factory()
    assert g.head == (3, 3)
    assert g.board[3, 3] == 3
    assert np.count_nonzero(g.board) == 1
    assert g.direction is None
    assert g.level == 3
    assert g.food == (0, 0)
    assert g.step_count == 0
    assert g.outcome is TickOutcome.MOVED

def test_moving_right_leaves_decaying_trail(game_factory):
    g = game_factory()
    assert g.tick(RIGHT) is TickOutcome.MOVED
    assert g.head == (3, 4)
    assert g.board[3, 4] == 3 and g.board[3, 3] == 2

    g.tick(RIGHT)
    assert g.head == (3, 5)
    assert (g.board[3, 5], g.board[3, 4], g.board[3, 3]) == (3, 2, 1)
    assert np.count_nonzero(g.board) == 3
    assert g.step_count == 2

def test_tail_expires_after_level_ticks(game_factory):
    g = game_factory()
    for _ in range(3):
        g.tick(RIGHT)
    assert g.board[3, 3] == 0
    assert np.count_nonzero(g.board) == 3

def test_wraps_horizontally_on_3x3(game_factory):
    g = game_factory(3, 3, 3)
    heads = []
    for _ in range(3):
        assert g.tick(LEFT) is TickOutcome.MOVED
        heads.append(g.head)
    assert heads == [(1, 0), (1, 2), (1, 1)]

def test_wraps_vertically_on_3x3(game_factory):
    g = game_factory(3, 3, 3)
    heads = []
    for _ in range(3):
        g.tick(UP)
        heads.append(g.head)
    assert heads == [(0, 1), (2, 1), (1, 1)]

@pytest.mark.parametrize("h,w", [(1, 1), (1, 4), (3, 5), (7, 7)])
def test_step_position_stays_in_bounds(h, w):
    for r in range(h):
        for c in range(w):
            for d in Direction:
                nr, nc = step_position((r, c), d, h, w)
                assert 0 <= nr < h and 0 <= nc < w
                assert step_position((nr, nc), d.opposite, h, w) == (r, c)
            assert step_position((r, c), None, h, w) == (r, c)

def test_reversal_is_ignored_other_turns_taken(game_factory):
    g = game_factory()
    g.tick(RIGHT)
    g.tick(LEFT)
    assert g.direction is RIGHT and g.head == (3, 5)
    g.tick(UP)
    assert g.direction is UP and g.head == (2, 5)
    g.tick(DOWN)
    assert g.direction is UP and g.head == (1, 5)
    g.tick(UP)
    assert g.direction is UP and g.head == (0, 5)
    g.tick(None)
    assert g.head == (6, 5)

def test_first_input_may_be_any_direction(game_factory):
    g = game_factory()
    g.tick(LEFT)
    assert g.direction is LEFT and g.head == (3, 2)

def test_eating_adjacent_food_grows_and_moves_food(game_factory, scripted):
    # food at (3,4); first relocation draw hits the body at (3,3) and is redrawn
    rng = scripted([3, 4, 3, 3, 0, 0])
    g = GameState(7, 7, 3, rng=rng)
    assert g.food == (3, 4)

    assert g.tick(RIGHT) is TickOutcome.ATE
    assert g.level == 4
    assert g.food == (0, 0)
    assert g.board[3, 4] == 4
    assert rng.calls == 6

    assert g.tick(RIGHT) is TickOutcome.MOVED
    assert g.level == 4

def test_food_drawn_on_center_is_eaten_by_first_placement(game_factory):
    g = game_factory(draws=(3, 3, 0, 0))
    assert g.outcome is TickOutcome.ATE
    assert g.level == 4
    assert g.food == (0, 0)
    assert g.step_count == 0

def test_running_into_body_collides_and_freezes(game_factory):
    g = game_factory(3, 3, 9)
    assert g.tick(RIGHT) is TickOutcome.MOVED
    assert g.tick(RIGHT) is TickOutcome.MOVED
    assert g.tick(RIGHT) is TickOutcome.COLLIDED
    assert g.terminated
    assert g.head == (1, 1)

    before = g.board.copy()
    assert g.tick(UP) is TickOutcome.COLLIDED
    assert np.array_equal(g.board, before)
    assert g.direction is RIGHT and g.head == (1, 1)

def test_full_board_ends_game_instead_of_hanging(scripted):
    g = GameState(2, 1, 1, rng=scripted([0, 0, 0, 1]))
    assert g.food == (0, 0) and g.head == (0, 1)

    assert g.tick(LEFT) is TickOutcome.ATE
    assert g.food == (0, 1)
    assert g.tick(LEFT) is TickOutcome.BOARD_FULL
    assert g.terminated
    assert g.food is None
    assert g.level == 3
    assert g.render() == "-\n#@\n-\n"

def test_single_cell_board_is_full_immediately(scripted):
    g = GameState(1, 1, 1, rng=scripted([0]))
    assert g.outcome is TickOutcome.BOARD_FULL
    assert g.food is None

@pytest.mark.parametrize("args", [(0, 7, 3), (7, 0, 3), (7, 7, 0), (-2, 7, 3), (7, 2.5, 3), (True, 7, 3)])
def test_invalid_configuration_rejected(args):
    with pytest.raises(InvalidConfiguration):
        GameState(*args)

def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        GameState(7, 7, -1)

INPUTS = [RIGHT, None, None, DOWN, None, LEFT, None, None, UP, RIGHT, None, DOWN] * 20

def test_same_seed_same_inputs_same_boards():
    a = GameState(9, 9, 3, rng=random.Random(42))
    b = GameState(9, 9, 3, rng=random.Random(42))
    for d in INPUTS:
        assert a.tick(d) is b.tick(d)
        assert np.array_equal(a.board, b.board)
        assert a.food == b.food and a.head == b.head

def test_level_only_changes_on_food():
    g = GameState(8, 6, 2, rng=random.Random(7))
    for d in INPUTS:
        prev_level = g.level
        outcome = g.tick(d)
        assert (g.board >= 0).all()
        assert g.board[g.head] == g.level
        if outcome is TickOutcome.ATE:
            assert g.level == prev_level + 1
            assert g.food != g.head
            assert g.board[g.food] == 0
        elif outcome is TickOutcome.MOVED:
            assert g.level == prev_level
        else:
            break

def test_clone_is_independent_and_replays_identically():
    g = GameState(9, 9, 3, rng=random.Random(3))
    g.tick(RIGHT)
    a, b = g.clone(), g.clone()
    for d in INPUTS[:60]:
        a.tick(d)
        b.tick(d)
    assert np.array_equal(a.board, b.board) and a.food == b.food
    assert g.step_count == 1 and g.head == (4, 5)

def test_board_view_is_read_only(game_factory):
    g = game_factory()
    with pytest.raises(ValueError):
        g.board[0, 0] = 5

def test_reset_after_collision(game_factory):
    g = game_factory(3, 3, 9)
    for _ in range(3):
        g.tick(RIGHT)
    assert g.terminated
    g.reset()
    assert not g.terminated
    assert g.level == 9 and g.step_count == 0 and g.direction is None
    assert g.head == (1, 1) and np.count_nonzero(g.board) == 1

def test_snapshot_is_a_copy(game_factory):
    g = game_factory()
    g.tick(RIGHT)
    snap = g.snapshot()
    assert snap.head == (3, 4) and snap.direction is RIGHT
    assert snap.body_cells == 2
    assert (snap.grid_w, snap.grid_h) == (7, 7)
    g.tick(RIGHT)
    assert snap.board[3, 5] == 0
    assert snap.step_count == 1

def test_tick_rejects_non_direction_input(game_factory):
    g = game_factory()
    before = g.board.copy()
    with pytest.raises(TypeError):
        g.tick("w")
    assert np.array_equal(g.board, before)
    assert g.direction is None and g.step_count == 0
