# scoreboard.py
from dataclasses import dataclass


@dataclass
class ScoreBoard:
    """Values the HUD and the game-over overlay show; written by the session, read by render."""
    score: int = 0
    high_score: int = 0
    final_score: int = 0
    game_over_visible: bool = False

    def set_score(self, n: int) -> None:
        self.score = n

    def set_high_score(self, n: int) -> None:
        self.high_score = n

    def set_final_score(self, n: int) -> None:
        self.final_score = n

    def show_game_over(self) -> None:
        self.game_over_visible = True

    def hide_game_over(self) -> None:
        self.game_over_visible = False
