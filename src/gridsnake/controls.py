# controls.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, SWIPE_MIN_DISTANCE
from .game import Direction
from .session import GameSession, RunState

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

RESTART = "restart"


# ---------- Swipe gestures ----------
@dataclass
class SwipeDetector:
    """
    Turns a press/release pair into a direction. The axis with the larger
    travel wins (vertical on a tie) and the travel must exceed `min_distance`.
    """
    min_distance: int = SWIPE_MIN_DISTANCE
    start: Optional[Tuple[float, float]] = None

    def begin(self, x: float, y: float) -> None:
        self.start = (x, y)

    def end(self, x: float, y: float) -> Optional[Direction]:
        if self.start is None:
            return None
        sx, sy = self.start
        self.start = None
        delta_x, delta_y = x - sx, y - sy

        if abs(delta_x) > abs(delta_y):
            if abs(delta_x) > self.min_distance:
                return RIGHT if delta_x > 0 else LEFT
        elif abs(delta_y) > self.min_distance:
            return DOWN if delta_y > 0 else UP
        return None


# ---------- On-screen buttons ----------
@dataclass
class ControlPad:
    """
    Four direction buttons in a cross below the board, plus a restart
    button that lives on the game-over overlay and only answers there.
    """
    buttons: Dict[object, pygame.Rect] = field(default_factory=dict)

    @classmethod
    def below(cls, window_w: int, top: int, board_rect: pygame.Rect, size: int = 44, gap: int = 6) -> "ControlPad":
        cx = window_w // 2
        step = size + gap
        left_x = cx - size // 2
        restart = pygame.Rect(0, 0, 2 * size, size)
        restart.center = (board_rect.centerx, board_rect.centery + 72)
        buttons = {
            UP: pygame.Rect(left_x, top, size, size),
            LEFT: pygame.Rect(left_x - step, top + step, size, size),
            RIGHT: pygame.Rect(left_x + step, top + step, size, size),
            DOWN: pygame.Rect(left_x, top + 2 * step, size, size),
            RESTART: restart,
        }
        return cls(buttons)

    def hit(self, pos: Tuple[int, int], game_over: bool = False) -> Optional[object]:
        for key, rect in self.buttons.items():
            if key == RESTART and not game_over:
                continue
            if rect.collidepoint(pos):
                return key
        return None


# ---------- Event routing ----------
@dataclass
class InputRouter:
    """Feeds pygame input events to a session. `board_rect` bounds where swipes may begin."""
    session: GameSession
    pad: ControlPad
    board_rect: pygame.Rect
    swipe: SwipeDetector = field(default_factory=SwipeDetector)

    def press(self, target: object) -> None:
        if target == RESTART:
            self.session.restart()
        elif target is not None:
            self.session.request_direction(*target)

    def handle(self, event: pygame.event.Event, window_size: Tuple[int, int]) -> None:
        if event.type == pygame.KEYDOWN:
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                self.session.request_direction(*direction)

        # touches also arrive as synthetic mouse events; take them from the finger events
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
            self._pointer_down(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and not getattr(event, "touch", False):
            self._pointer_up(event.pos)

        elif event.type == pygame.FINGERDOWN:
            self._pointer_down(_finger_pos(event, window_size))
        elif event.type == pygame.FINGERUP:
            self._pointer_up(_finger_pos(event, window_size))

    def _pointer_down(self, pos: Tuple[int, int]) -> None:
        target = self.pad.hit(pos, game_over=self.session.run_state is RunState.GAME_OVER)
        if target is not None:
            self.press(target)
        elif self.board_rect.collidepoint(pos):
            self.swipe.begin(*pos)

    def _pointer_up(self, pos: Tuple[int, int]) -> None:
        direction = self.swipe.end(*pos)
        if direction is not None:
            self.session.request_direction(*direction)


def _finger_pos(event: pygame.event.Event, window_size: Tuple[int, int]) -> Tuple[int, int]:
    # finger coordinates are normalized to [0, 1]
    w, h = window_size
    return (int(event.x * w), int(event.y * h))
