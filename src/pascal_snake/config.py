from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# ----- Window & grid -----
GRID_SIZE = 20
CELL_SIZE = 20
HUD_HEIGHT = 48
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE + HUD_HEIGHT

# ----- Colors -----
BG         = (10, 10, 10)
GRID_LINE  = (26, 26, 26)
HEAD       = (233, 69, 96)
BODY       = (199, 62, 84)
TARGET     = (0, 255, 136)
DECOY      = (140, 140, 160)
TEXT       = (220, 220, 230)
FLASH      = (233, 69, 96, 128)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}

# ----- Letters -----
PATTERN = "pascal_"
RESET_LETTER = "P"
ALPHABET = "abcdefghijklmnopqrstuvwxyz_"

# ----- Scoring -----
LETTER_POINTS = 100
SMALL_BONUS = 500
LARGE_BONUS = 1000
SMALL_BONUS_TEXT = "Pascal!"
LARGE_BONUS_TEXT = "Snaaaaaaaake!"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    tick_ms: int = 150
    decoy_count: int = 4
    spawn_attempts: int = 100
    bonus_display_ms: int = 1500
    default_difficulty: Difficulty = Difficulty.EASY
    scores_path: Path = field(
        default_factory=lambda: Path.home() / ".pascal_snake" / "scores.json"
    )

CFG = Config()
