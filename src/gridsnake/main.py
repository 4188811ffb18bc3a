# main.py
import argparse
import logging
import random

import pygame  # type: ignore

from .board import BoardGeometry, fit_board_size
from .config import CFG, Config
from .controls import InputRouter
from .game import GameState
from .render import Layout, draw_board, compose
from .scoreboard import ScoreBoard
from .session import GameSession
from .storage import HighScoreStore
from .ticker import PygameTicker, TICK_EVENT

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake. Arrow keys, buttons or swipes to steer.")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="milliseconds per move")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument("--high-score-file", type=str, default=CFG.high_score_file)
    parser.add_argument("--width", type=int, default=CFG.width, help="initial window width")
    parser.add_argument("--height", type=int, default=CFG.height, help="initial window height")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


class GameApp:
    """
    Window-side glue around a GameSession: owns the layout and the board
    surface and routes each pygame event to the session.

    The board surface always matches the geometry the session is playing
    on. A window resize mid-round only moves the chrome; the board keeps
    its size until the session adopts the new geometry at the next round.
    """

    def __init__(self, cfg: Config, store, ticker):
        self.window_size = (cfg.width, cfg.height)
        self.scoreboard = ScoreBoard()
        self.layout = Layout.for_window(cfg.width, cfg.height)
        self.board_surface = pygame.Surface(self.layout.board_rect.size)
        self.router = None

        self.session = GameSession(
            geometry=BoardGeometry(self.layout.board_rect.width),
            display=self.scoreboard,
            store=store,
            ticker=ticker,
            rng=random.Random(cfg.seed),
            tick_ms=cfg.tick_ms,
            render=self.render,
        )
        self.router = InputRouter(self.session, self.layout.pad, self.layout.board_rect)

    def render(self, state: GameState) -> None:
        if self.board_surface.get_width() != state.geometry.surface_size:
            self._relayout(state.geometry.surface_size)
        draw_board(self.board_surface, state)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event. Returns False once the player has asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        if event.type == TICK_EVENT:
            self.session.tick()
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.WINDOWSIZECHANGED:
            self.resize(event.x, event.y)
        else:
            self.router.handle(event, self.window_size)
        return True

    def resize(self, window_w: int, window_h: int) -> None:
        if (window_w, window_h) == self.window_size:
            return
        self.window_size = (window_w, window_h)
        self.session.resize(fit_board_size(window_w, window_h))
        self._relayout(self.session.geometry.surface_size)
        draw_board(self.board_surface, self.session.state)

    def _relayout(self, board_size: int) -> None:
        self.layout = Layout.for_window(*self.window_size, board_size=board_size)
        if self.board_surface.get_size() != self.layout.board_rect.size:
            self.board_surface = pygame.Surface(self.layout.board_rect.size)
        if self.router is not None:
            self.router.pad, self.router.board_rect = self.layout.pad, self.layout.board_rect


def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 26)
    screen = pygame.display.set_mode((cfg.width, cfg.height), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    app = GameApp(cfg, HighScoreStore(cfg.high_score_file), PygameTicker())
    logger.info("Waiting for the first direction to start")

    running = True
    while running:
        for event in pygame.event.get():
            if not app.handle_event(event):
                running = False
                break

        compose(screen, font, app.board_surface, app.scoreboard, app.layout)
        pygame.display.flip()
        clock.tick(cfg.fps)  # redraw rate only; moves are paced by the tick timer

    app.session.ticker.cancel()
    pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    cfg = Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        high_score_file=args.high_score_file,
        width=args.width,
        height=args.height,
    )
    run(cfg)


if __name__ == "__main__":
    main()
