"""JSON-file persistence for best score, last score and difficulty."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .config import CFG, Difficulty

logger = logging.getLogger(__name__)


@dataclass
class SavedScores:
    best_score: int = 0
    last_score: int = 0
    difficulty: Difficulty = CFG.default_difficulty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "best_score": self.best_score,
            "last_score": self.last_score,
            "difficulty": self.difficulty.value,
        }


def _as_score(raw: Any) -> int:
    try:
        return max(0, int(raw))
    except (TypeError, ValueError):
        return 0


class ScoreStore:
    """Reads and writes a SavedScores record as a small JSON object."""

    def __init__(self, path: Path | str = CFG.scores_path) -> None:
        self.path = Path(path)

    def load(self) -> SavedScores:
        if not self.path.exists():
            return SavedScores()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read scores from %s: %s", self.path, exc)
            return SavedScores()
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed scores file %s", self.path)
            return SavedScores()

        try:
            difficulty = Difficulty.parse(raw.get("difficulty", CFG.default_difficulty))
        except ValueError:
            difficulty = CFG.default_difficulty
        return SavedScores(
            best_score=_as_score(raw.get("best_score", 0)),
            last_score=_as_score(raw.get("last_score", 0)),
            difficulty=difficulty,
        )

    def save(self, scores: SavedScores) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(scores.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save scores to %s: %s", self.path, exc)
