# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional
import random

import numpy as np  # type: ignore

from .board import BoardGeometry, Cell
from .config import FOOD_REWARD, STILL, CFG

Direction = Tuple[int, int]


class StepEvent(Enum):
    NONE = "none"
    ATE = "ate"
    COLLIDED = "collided"


# ---------- Helpers ----------
def _first_free_cell(snake: List[Cell], tile_count: int) -> Optional[Cell]:
    """Row-major scan of an occupancy grid; None when every cell is taken."""
    occupied = np.zeros((tile_count, tile_count), dtype=bool)
    for x, y in snake:
        if 0 <= x < tile_count and 0 <= y < tile_count:
            occupied[y, x] = True
    free = np.argwhere(~occupied)
    if free.size == 0:
        return None
    y, x = free[0]
    return (int(x), int(y))

def spawn_food(
    snake: List[Cell],
    tile_count: int,
    rng: random.Random,
    max_attempts: int = CFG.food_max_attempts,
) -> Optional[Cell]:
    """
    Uniform random free cell. Rejection-samples up to `max_attempts` times,
    then falls back to the first free cell so a crowded board can't stall.
    """
    taken = set(snake)
    for _ in range(max_attempts):
        cell = (rng.randrange(tile_count), rng.randrange(tile_count))
        if cell not in taken:
            return cell
    return _first_free_cell(snake, tile_count)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a != STILL and a[0] == -b[0] and a[1] == -b[1]

# ---------- State ----------
@dataclass
class GameState:
    geometry: BoardGeometry
    snake: List[Cell]              # head at index 0
    direction: Direction           # committed on the last tick
    pending: Direction             # applied on the next tick
    food: Optional[Cell]
    score: int
    high_score: int

def new_game_state(geometry: BoardGeometry, rng: random.Random, high_score: int = 0) -> GameState:
    snake = [geometry.center()]
    return GameState(
        geometry=geometry,
        snake=snake,
        direction=STILL,
        pending=STILL,
        food=spawn_food(snake, geometry.tile_count, rng),
        score=0,
        high_score=high_score,
    )

# ---------- Update ----------
def step_game(state: GameState, rng: random.Random) -> StepEvent:
    """
    Advance the snake one cell along the pending direction.
    A standing snake does nothing; leaving the board or entering any
    current body cell (the tail included) is a collision.
    """
    state.direction = state.pending
    dx, dy = state.direction
    if (dx, dy) == STILL:
        return StepEvent.NONE

    hx, hy = state.snake[0]
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not state.geometry.in_bounds(new_head):
        return StepEvent.COLLIDED

    # Self collision
    if new_head in state.snake:
        return StepEvent.COLLIDED

    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += FOOD_REWARD
        state.food = spawn_food(state.snake, state.geometry.tile_count, rng)
        if state.score > state.high_score:
            state.high_score = state.score
        return StepEvent.ATE

    state.snake.pop()
    return StepEvent.NONE
