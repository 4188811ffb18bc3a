# board.py
from dataclasses import dataclass
from typing import Tuple

from .config import CELL_SIZE, CELL_GAP, MAX_BOARD_SIZE, MARGIN, HUD_HEIGHT, CONTROLS_HEIGHT

Cell = Tuple[int, int]
PixelRect = Tuple[int, int, int, int]


@dataclass(frozen=True)
class BoardGeometry:
    """Square grid laid over a square drawing surface of `surface_size` pixels."""
    surface_size: int
    cell_size: int = CELL_SIZE

    @property
    def tile_count(self) -> int:
        return self.surface_size // self.cell_size

    def cell_to_rect(self, cell: Cell) -> PixelRect:
        """Pixel rect (x, y, w, h) of a cell, shrunk to leave a gap to its neighbours."""
        x, y = cell
        side = self.cell_size - CELL_GAP
        return (x * self.cell_size, y * self.cell_size, side, side)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        n = self.tile_count
        return 0 <= x < n and 0 <= y < n

    def center(self) -> Cell:
        n = self.tile_count
        return (n // 2, n // 2)

    def resized(self, surface_size: int) -> "BoardGeometry":
        return BoardGeometry(surface_size, self.cell_size)


def fit_board_size(window_w: int, window_h: int, cell_size: int = CELL_SIZE) -> int:
    """
    Side of the square board that fits a window of the given size.
    The HUD sits above the board and the control pad below it.
    """
    by_width = window_w - 2 * MARGIN
    by_height = window_h - HUD_HEIGHT - CONTROLS_HEIGHT - 2 * MARGIN
    size = min(by_width, by_height, MAX_BOARD_SIZE)
    return max(size, cell_size)
