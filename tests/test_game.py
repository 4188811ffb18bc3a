import random
from unittest.mock import MagicMock

from gridsnake.board import BoardGeometry, fit_board_size
from gridsnake.config import STILL, UP, DOWN, LEFT, RIGHT
from gridsnake.game import GameState, StepEvent, new_game_state, spawn_food, step_game, is_opposite


def make_state(snake, direction, food, tile_count=20, score=0, high_score=0):
    return GameState(
        geometry=BoardGeometry(tile_count * 20),
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=score,
        high_score=high_score,
    )


# ---------- Board geometry ----------
def test_tile_count_floors_surface_size():
    assert BoardGeometry(400).tile_count == 20
    assert BoardGeometry(419).tile_count == 20
    assert BoardGeometry(500).tile_count == 25


def test_cell_to_rect_leaves_two_pixel_gap():
    assert BoardGeometry(400).cell_to_rect((3, 5)) == (60, 100, 18, 18)


def test_center_and_bounds():
    geometry = BoardGeometry(400)
    assert geometry.center() == (10, 10)
    assert geometry.in_bounds((0, 19))
    assert not geometry.in_bounds((20, 0))
    assert not geometry.in_bounds((-1, 3))


def test_fit_board_size_is_capped_and_shrinks_with_window():
    assert fit_board_size(2000, 2000) == 500
    assert fit_board_size(300, 2000) == 260
    assert fit_board_size(10, 10) == 20


# ---------- Food placement ----------
def test_spawn_food_avoids_snake():
    rng = random.Random(3)
    snake = [(x, 0) for x in range(5)]
    for _ in range(200):
        fx, fy = spawn_food(snake, 5, rng)
        assert (fx, fy) not in snake
        assert 0 <= fx < 5 and 0 <= fy < 5


def test_spawn_food_falls_back_to_first_free_cell():
    rng = MagicMock()
    rng.randrange.return_value = 0  # always rolls the occupied (0, 0)
    snake = [(0, 0), (1, 0), (0, 1)]
    assert spawn_food(snake, 2, rng, max_attempts=5) == (1, 1)
    assert rng.randrange.call_count == 10


def test_spawn_food_on_full_board_returns_none():
    snake = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert spawn_food(snake, 2, random.Random(0), max_attempts=3) is None


def test_new_game_state_starts_still_at_center():
    state = new_game_state(BoardGeometry(400), random.Random(1), high_score=50)
    assert state.snake == [(10, 10)]
    assert state.direction == STILL and state.pending == STILL
    assert state.score == 0 and state.high_score == 50
    assert state.food not in state.snake


def test_is_opposite():
    assert is_opposite(LEFT, RIGHT)
    assert is_opposite(UP, DOWN)
    assert not is_opposite(UP, RIGHT)
    assert not is_opposite(LEFT, STILL)


# ---------- Motion & collision ----------
def test_step_moves_head_and_keeps_length():
    state = make_state([(5, 5), (4, 5), (3, 5)], RIGHT, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.NONE
    assert state.snake == [(6, 5), (5, 5), (4, 5)]


def test_still_direction_is_a_no_op():
    state = make_state([(5, 5)], STILL, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.NONE
    assert state.snake == [(5, 5)]


def test_pending_direction_is_committed_on_step():
    state = make_state([(5, 5)], RIGHT, food=(15, 15))
    state.pending = DOWN
    step_game(state, random.Random(0))
    assert state.direction == DOWN
    assert state.snake == [(5, 6)]


def test_wall_collision():
    state = make_state([(0, 7)], LEFT, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.COLLIDED
    assert state.snake == [(0, 7)]


def test_wall_collision_on_far_edge():
    state = make_state([(19, 3)], RIGHT, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.COLLIDED


def test_self_collision():
    state = make_state([(5, 5), (5, 6), (5, 7)], DOWN, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.COLLIDED


def test_moving_into_vacating_tail_collides():
    state = make_state([(1, 1), (2, 1), (2, 2), (1, 2)], DOWN, food=(15, 15))
    assert step_game(state, random.Random(0)) is StepEvent.COLLIDED


def test_eating_grows_scores_and_respawns_food():
    state = make_state([(5, 5), (4, 5)], RIGHT, food=(6, 5), high_score=100)
    assert step_game(state, random.Random(0)) is StepEvent.ATE
    assert state.snake == [(6, 5), (5, 5), (4, 5)]
    assert state.score == 10
    assert state.food is not None and state.food not in state.snake
    assert state.high_score == 100


def test_eating_past_high_score_raises_it():
    state = make_state([(5, 5)], UP, food=(5, 4), score=20, high_score=25)
    step_game(state, random.Random(0))
    assert state.score == 30
    assert state.high_score == 30


def test_length_changes_by_at_most_one_per_tick():
    rng = random.Random(11)
    state = make_state([(10, 10)], RIGHT, food=(11, 11))
    turns = [RIGHT, DOWN, LEFT, DOWN, RIGHT, RIGHT, UP]
    for direction in turns:
        before = len(state.snake)
        head = state.snake[0]
        state.pending = direction
        event = step_game(state, rng)
        if event is StepEvent.COLLIDED:
            break
        assert len(state.snake) - before in (0, 1)
        assert state.snake[0] == (head[0] + direction[0], head[1] + direction[1])
        assert len(set(state.snake)) == len(state.snake)
