# spawns.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Set, Tuple
import logging

from .config import GRID_SIZE, PATTERN, RESET_LETTER, ALPHABET, Difficulty, CFG

if TYPE_CHECKING:
    import numpy as np  # type: ignore
    from .game import GameState

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass(frozen=True)
class LetterSpawn:
    cell: Cell
    letter: str
    is_target: bool


def target_letter(cursor: int) -> str:
    """Letter the snake needs next; an uppercase P restarts the word."""
    cursor %= len(PATTERN)
    if cursor == 0:
        return RESET_LETTER
    return PATTERN[cursor]


def decoy_pool(target: str, difficulty: Difficulty) -> List[str]:
    """
    Characters a decoy may carry. Hard mode only uses pattern letters so
    decoys look like the real thing; the target is never in the pool.
    """
    source = PATTERN if difficulty == Difficulty.HARD else ALPHABET
    pool = sorted(set(source))
    return [c for c in pool if c != target.lower()]


def find_free_cell(rng: "np.random.Generator", occupied: Set[Cell],
                   attempts: int = CFG.spawn_attempts) -> Optional[Cell]:
    """Draw random cells until one is free; None once attempts run out."""
    for _ in range(attempts):
        cell = (int(rng.integers(0, GRID_SIZE)), int(rng.integers(0, GRID_SIZE)))
        if cell not in occupied:
            return cell
    return None


def regenerate_spawns(state: "GameState", rng: "np.random.Generator") -> List[LetterSpawn]:
    """Replace the spawn set with one target and CFG.decoy_count decoys."""
    target = target_letter(state.cursor)
    pool = decoy_pool(target, state.difficulty)

    occupied: Set[Cell] = {seg.cell for seg in state.snake}
    spawns: List[LetterSpawn] = []

    letters = [(target, True)]
    for _ in range(CFG.decoy_count):
        letters.append((str(rng.choice(pool)), False))

    for letter, is_target in letters:
        cell = find_free_cell(rng, occupied)
        if cell is None:
            logger.debug("No free cell for %r after %d attempts", letter, CFG.spawn_attempts)
            continue
        occupied.add(cell)
        spawns.append(LetterSpawn(cell, letter, is_target))

    state.spawns = spawns
    return spawns
