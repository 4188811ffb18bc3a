"""Grid snake game: tick-driven state machine with a pygame front end."""

from .game import GameState, StepEvent, new_game_state, spawn_food, step_game
from .session import GameSession, RunState

__all__ = ["GameState", "StepEvent", "new_game_state", "spawn_food", "step_game", "GameSession", "RunState"]
