"""Players and the persisted high score."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

HIGHSCORE_FILE = "highscore.txt"
PROGRESS_FILE = "playerProgress.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _format_score(score: float) -> str:
    return f"{score:g}"


@dataclass
class Player:
    """A named player with a running score."""

    name: str
    score: float = 0.0

    def add_score(self, points: int) -> None:
        self.score += points


class Highscore:
    """Tracks the best score and saves it and the player's progress to files."""

    def __init__(
        self,
        player: Player,
        highscore_path: str | Path = HIGHSCORE_FILE,
        progress_path: str | Path = PROGRESS_FILE,
    ) -> None:
        self.player = Player(player.name, player.score)
        self.highscore_path = Path(highscore_path)
        self.progress_path = Path(progress_path)
        self.highest_score = 0

    @property
    def score(self) -> float:
        return self.player.score

    def update_score(self, player: Player) -> bool:
        """Record the player's score if it beats the best; report whether it did."""
        if player.score > self.highest_score:
            self.highest_score = int(player.score)
            return True
        return False

    def save_high_score(self) -> None:
        self.highscore_path.write_text(str(self.highest_score))

    def save_progress(self) -> None:
        self.progress_path.write_text(
            f"{self.player.name} {_format_score(self.player.score)}\n"
        )

    def load_high_score(self) -> int:
        """Read the best score from its file; keep the current one if there is none."""
        try:
            text = self.highscore_path.read_text()
        except FileNotFoundError:
            return self.highest_score
        match = _LEADING_INT.match(text)
        self.highest_score = int(match.group(1)) if match else 0
        return self.highest_score

    def load_score(self, path: str | Path) -> Player:
        """Replace the stored player with the name and score read from a file."""
        tokens = Path(path).read_text().split()
        if len(tokens) < 2:
            raise ValueError(f"{path}: expected a name and a score")
        name, raw_score = tokens[0], tokens[1]
        try:
            score = float(raw_score)
        except ValueError as exc:
            raise ValueError(f"{path}: invalid score {raw_score!r}") from exc
        self.player = Player(name, score)
        return self.player

    def save_score(self, path: str | Path) -> None:
        Path(path).write_text(f"{self.player.name} {_format_score(self.player.score)}\n")