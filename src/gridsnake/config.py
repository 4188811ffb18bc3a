from dataclasses import dataclass
import os

# ----- Board & layout -----
CELL_SIZE = 20
CELL_GAP = 2             # pixels left blank between neighbouring cells
MAX_BOARD_SIZE = 500
MARGIN = 20
HUD_HEIGHT = 40
CONTROLS_HEIGHT = 150
WIDTH = MAX_BOARD_SIZE + 2 * MARGIN
HEIGHT = MAX_BOARD_SIZE + HUD_HEIGHT + CONTROLS_HEIGHT + 2 * MARGIN

# ----- Colors -----
BG         = (26, 26, 26)
WINDOW_BG  = (12, 12, 16)
BODY       = (76, 175, 80)
HEAD       = (102, 187, 106)
FOOD       = (231, 76, 60)
TEXT       = (220, 220, 230)
BUTTON     = (52, 52, 60)
BUTTON_TXT = (235, 235, 240)
OVERLAY    = (0, 0, 0, 170)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
STILL = (0, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Rules -----
FOOD_REWARD = 10
SWIPE_MIN_DISTANCE = 30  # px a swipe must exceed along its dominant axis

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    tick_ms: int = 100
    food_max_attempts: int = 100
    high_score_file: str = os.path.join(
        os.path.expanduser("~"), ".gridsnake_highscore"
    )
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = 60

CFG = Config()
