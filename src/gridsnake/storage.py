# storage.py
import logging
import os

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Single integer high score kept in a plain text file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        """Stored high score, or 0 when the file is missing or unreadable."""
        try:
            with open(self.path, "r") as f:
                value = int(f.read().strip())
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0
        return max(value, 0)

    def save(self, value: int) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                f.write(str(value))
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
