# render.py
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame  # type: ignore

from .board import BoardGeometry, Cell, fit_board_size
from .config import (
    MARGIN, HUD_HEIGHT,
    BG, WINDOW_BG, BODY, HEAD, FOOD, TEXT, BUTTON, BUTTON_TXT, OVERLAY,
    UP, DOWN, LEFT, RIGHT,
)
from .controls import ControlPad, RESTART
from .game import GameState
from .scoreboard import ScoreBoard

BUTTON_LABELS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">", RESTART: "Restart"}


# ---------- Layout ----------
@dataclass
class Layout:
    """Where the HUD, the board and the control pad sit inside the window."""
    window_size: Tuple[int, int]
    board_rect: pygame.Rect
    pad: ControlPad

    @classmethod
    def for_window(cls, window_w: int, window_h: int, board_size: Optional[int] = None) -> "Layout":
        """`board_size` pins the board; by default it is the largest that fits the window."""
        size = board_size or fit_board_size(window_w, window_h)
        board_rect = pygame.Rect(max((window_w - size) // 2, 0), MARGIN + HUD_HEIGHT, size, size)
        pad = ControlPad.below(window_w, board_rect.bottom + MARGIN, board_rect)
        return cls((window_w, window_h), board_rect, pad)


# ---------- Board ----------
def draw_cell(surface: pygame.Surface, geometry: BoardGeometry, cell: Cell, color) -> None:
    pygame.draw.rect(surface, color, pygame.Rect(geometry.cell_to_rect(cell)))

def draw_board(surface: pygame.Surface, state: GameState) -> None:
    """Paint one frame of the board: background, body, head on top, then food."""
    surface.fill(BG)
    geometry = state.geometry
    for cell in state.snake:
        draw_cell(surface, geometry, cell, BODY)
    draw_cell(surface, geometry, state.snake[0], HEAD)
    if state.food is not None:
        draw_cell(surface, geometry, state.food, FOOD)


# ---------- Chrome ----------
def draw_hud(screen: pygame.Surface, font: pygame.font.Font, board: ScoreBoard, layout: Layout) -> None:
    left = font.render(f"Score: {board.score}", True, TEXT)
    right = font.render(f"High Score: {board.high_score}", True, TEXT)
    y = MARGIN + (HUD_HEIGHT - left.get_height()) // 2
    screen.blit(left, (layout.board_rect.left, y))
    screen.blit(right, (layout.board_rect.right - right.get_width(), y))

def draw_button(screen: pygame.Surface, font: pygame.font.Font, key, rect: pygame.Rect) -> None:
    pygame.draw.rect(screen, BUTTON, rect, border_radius=8)
    label = font.render(BUTTON_LABELS[key], True, BUTTON_TXT)
    screen.blit(label, label.get_rect(center=rect.center))

def draw_controls(screen: pygame.Surface, font: pygame.font.Font, pad: ControlPad) -> None:
    for key, rect in pad.buttons.items():
        if key == RESTART:
            continue
        draw_button(screen, font, key, rect)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, board: ScoreBoard, layout: Layout) -> None:
    # Dim the board with a translucent overlay
    rect = layout.board_rect
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, rect.topleft)

    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Final Score: {board.final_score}", True, TEXT)
    sub   = font.render("Press an arrow key or Restart", True, TEXT)

    screen.blit(title, title.get_rect(center=(rect.centerx, rect.centery - 28)))
    screen.blit(sco, sco.get_rect(center=(rect.centerx, rect.centery)))
    screen.blit(sub, sub.get_rect(center=(rect.centerx, rect.centery + 28)))
    draw_button(screen, font, RESTART, layout.pad.buttons[RESTART])

def compose(
    screen: pygame.Surface,
    font: pygame.font.Font,
    board_surface: pygame.Surface,
    board: ScoreBoard,
    layout: Layout,
) -> None:
    """Assemble the window from the last rendered board frame and the current HUD."""
    screen.fill(WINDOW_BG)
    draw_hud(screen, font, board, layout)
    screen.blit(board_surface, layout.board_rect.topleft)
    draw_controls(screen, font, layout.pad)
    if board.game_over_visible:
        draw_game_over(screen, font, board, layout)
