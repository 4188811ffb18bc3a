# session.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Optional, Protocol
import logging
import random

from .board import BoardGeometry
from .config import CFG, DIRECTIONS
from .game import GameState, StepEvent, new_game_state, step_game, is_opposite

logger = logging.getLogger(__name__)


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Ticker(Protocol):
    active: bool
    def start(self, interval_ms: int) -> None: ...
    def cancel(self) -> None: ...


class Display(Protocol):
    def set_score(self, n: int) -> None: ...
    def set_high_score(self, n: int) -> None: ...
    def set_final_score(self, n: int) -> None: ...
    def show_game_over(self) -> None: ...
    def hide_game_over(self) -> None: ...


class ScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...


class GameSession:
    """
    One game instance: owns the state, the run state and the single tick
    timer, and turns ticks, direction requests, restarts and resizes into
    state-machine transitions.

        NOT_STARTED --direction--> RUNNING --collision--> GAME_OVER
        GAME_OVER --direction / restart--> RUNNING (fresh round)
    """

    def __init__(
        self,
        geometry: BoardGeometry,
        display: Display,
        store: ScoreStore,
        ticker: Ticker,
        rng: Optional[random.Random] = None,
        tick_ms: int = CFG.tick_ms,
        render: Optional[Callable[[GameState], None]] = None,
    ):
        self.display = display
        self.store = store
        self.ticker = ticker
        self.rng = rng or random.Random(CFG.seed)
        self.tick_ms = tick_ms
        self.render = render
        self.run_state = RunState.NOT_STARTED
        self.pending_geometry: Optional[BoardGeometry] = None

        high_score = store.load()
        self.state = new_game_state(geometry, self.rng, high_score)
        display.set_score(0)
        display.set_high_score(high_score)
        display.hide_game_over()
        self._draw()

    @property
    def geometry(self) -> BoardGeometry:
        return self.state.geometry

    # ---------- Transitions ----------
    def restart(self) -> None:
        """Start a fresh round: score 0, one-cell snake at the centre, standing still."""
        self.ticker.cancel()
        geometry = self.pending_geometry or self.state.geometry
        self.pending_geometry = None

        self.state = new_game_state(geometry, self.rng, self.state.high_score)
        self.display.set_score(0)
        self.display.hide_game_over()
        self.run_state = RunState.RUNNING
        self.ticker.start(self.tick_ms)
        logger.info("Round started on a %dx%d board", geometry.tile_count, geometry.tile_count)
        self._draw()

    def request_direction(self, dx: int, dy: int) -> None:
        """
        Steer the snake. Anything other than a unit direction is ignored, as
        is an immediate 180° turn. While no round is running, any direction
        starts one heading that way.
        """
        new = (dx, dy)
        if new not in DIRECTIONS:
            return

        if self.run_state is not RunState.RUNNING:
            self.restart()
            self.state.pending = new
            return

        if is_opposite(new, self.state.direction) or is_opposite(new, self.state.pending):
            return
        self.state.pending = new

    def tick(self) -> StepEvent:
        # a tick queued before the timer was cancelled
        if self.run_state is not RunState.RUNNING:
            return StepEvent.NONE

        previous_high = self.state.high_score
        event = step_game(self.state, self.rng)
        if event is StepEvent.ATE:
            self._on_food_eaten(previous_high)
        elif event is StepEvent.COLLIDED:
            self._game_over()
        self._draw()
        return event

    def resize(self, surface_size: int) -> None:
        """
        Adopt a new board size. Before the first round it applies at once;
        during or after a round it waits for the next round to start.
        """
        geometry = self.state.geometry.resized(surface_size)
        if geometry == self.state.geometry:
            self.pending_geometry = None
            return

        if self.run_state is RunState.NOT_STARTED:
            self.state = new_game_state(geometry, self.rng, self.state.high_score)
            self._draw()
        else:
            self.pending_geometry = geometry
        logger.debug("Board resized to %d px (%d tiles)", surface_size, geometry.tile_count)

    # ---------- Internals ----------
    def _on_food_eaten(self, previous_high: int) -> None:
        state = self.state
        self.display.set_score(state.score)
        if state.high_score > previous_high:
            self.display.set_high_score(state.high_score)
            self.store.save(state.high_score)
            logger.debug("New high score: %d", state.high_score)
        if state.food is None:
            logger.info("Board is full; no more food to place")

    def _game_over(self) -> None:
        self.ticker.cancel()
        self.run_state = RunState.GAME_OVER
        self.display.set_final_score(self.state.score)
        self.display.show_game_over()
        logger.info("Game over with score %d (high score %d)", self.state.score, self.state.high_score)

    def _draw(self) -> None:
        if self.render is not None:
            self.render(self.state)
