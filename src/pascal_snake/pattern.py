# pattern.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional
import logging

from .config import (
    PATTERN,
    SMALL_BONUS, LARGE_BONUS,
    SMALL_BONUS_TEXT, LARGE_BONUS_TEXT,
)

if TYPE_CHECKING:
    from .game import GameState, Segment

logger = logging.getLogger(__name__)

# "pascal" opens the word, every further repetition is "_pascal"
HEAD_WORD = PATTERN.rstrip("_")
REPEAT_WORD = "_" + HEAD_WORD


@dataclass(frozen=True)
class BonusEvent:
    kind: str        # "small" | "large"
    text: str
    points: int
    count: int       # repeat count after this bonus


def snake_word(segments: Iterable["Segment"]) -> str:
    """Letters carried by the snake, head first."""
    return "".join(seg.letter for seg in segments)


def count_pascals(text: str) -> int:
    """
    Count complete pattern repetitions at the start of `text` (case-insensitive).
    "Pascal" counts 1, each directly following "_pascal" adds 1.
    """
    text = text.lower()
    if not text.startswith(HEAD_WORD):
        return 0

    count = 1
    pos = len(HEAD_WORD)
    while text.startswith(REPEAT_WORD, pos):
        count += 1
        pos += len(REPEAT_WORD)
    return count


def evaluate_bonus(state: "GameState") -> Optional[BonusEvent]:
    """
    Recount repetitions on the snake and award a bonus when the count grew.
    Mutates state.score and state.repeat_count; returns the event or None.
    """
    new_count = count_pascals(snake_word(state.snake))
    if new_count <= state.repeat_count:
        return None

    if new_count == 1:
        event = BonusEvent("small", SMALL_BONUS_TEXT, SMALL_BONUS, new_count)
    else:
        event = BonusEvent("large", LARGE_BONUS_TEXT, LARGE_BONUS, new_count)

    state.score += event.points
    state.repeat_count = new_count
    logger.info("%s bonus +%d (repeat count %d)", event.kind, event.points, new_count)
    return event
