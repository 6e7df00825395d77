"""Snake that collects letters spelling "pascal_"."""

from pascal_snake.config import PATTERN, Difficulty
from pascal_snake.game import GameState, Segment, new_game_state, set_direction, step_game
from pascal_snake.pattern import BonusEvent, count_pascals, evaluate_bonus
from pascal_snake.spawns import LetterSpawn, regenerate_spawns
from pascal_snake.session import GameSession

__all__ = [
    "PATTERN", "Difficulty",
    "GameState", "Segment", "new_game_state", "set_direction", "step_game",
    "BonusEvent", "count_pascals", "evaluate_bonus",
    "LetterSpawn", "regenerate_spawns",
    "GameSession",
]
