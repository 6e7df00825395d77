# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging

from .config import (
    GRID_SIZE, PATTERN, RESET_LETTER, LETTER_POINTS,
    RIGHT, Difficulty,
)
from .pattern import BonusEvent, evaluate_bonus
from .spawns import LetterSpawn, regenerate_spawns

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


# ---------- State ----------
@dataclass
class Segment:
    cell: Cell
    letter: str

@dataclass
class GameState:
    snake: List[Segment]              # head at index 0
    direction: Tuple[int, int]
    pending: Tuple[int, int]
    difficulty: Difficulty
    cursor: int = 1                   # index into PATTERN of the next letter
    repeat_count: int = 0
    score: int = 0
    spawns: List[LetterSpawn] = field(default_factory=list)
    # results of the latest tick
    collected: Optional[LetterSpawn] = None
    bonus: Optional[BonusEvent] = None

    @property
    def head(self) -> Cell:
        return self.snake[0].cell

    def spawn_at(self, cell: Cell) -> Optional[LetterSpawn]:
        for spawn in self.spawns:
            if spawn.cell == cell:
                return spawn
        return None

def new_game_state(difficulty: Difficulty, rng) -> GameState:
    state = GameState(
        snake=[Segment((GRID_SIZE // 2, GRID_SIZE // 2), RESET_LETTER)],
        direction=RIGHT,
        pending=RIGHT,
        difficulty=Difficulty.parse(difficulty),
    )
    regenerate_spawns(state, rng)
    return state


# ---------- Input / Update ----------
def set_direction(state: GameState, direction: Tuple[int, int]) -> bool:
    """Queue a direction for the next tick; 180° turns against the committed direction are dropped."""
    if is_opposite(direction, state.direction):
        return False
    state.pending = direction
    return True

def collect(state: GameState, spawn: LetterSpawn) -> None:
    """Score a letter and move the pattern cursor (forward on target, back to 0 on decoy)."""
    state.score += LETTER_POINTS
    if spawn.is_target:
        state.cursor = (state.cursor + 1) % len(PATTERN)
    else:
        logger.debug("Decoy %r collected, cursor reset", spawn.letter)
        state.cursor = 0

def step_game(state: GameState, rng) -> bool:
    """
    Advance the game by one tick.
    Returns True if alive, False if game over (state is left as it was before the move).
    """
    if not state.snake:
        raise ValueError("step_game needs a snake with at least one segment")

    state.collected = None
    state.bonus = None

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.head
    dx, dy = state.direction
    nx, ny = hx + dx, hy + dy

    # Wall collision
    if not in_bounds(nx, ny):
        logger.info("Hit wall at %s, score %d", (nx, ny), state.score)
        return False

    new_head = (nx, ny)

    # Self collision; the tail is skipped because it vacates this tick.
    # It is skipped even when the snake grows and the tail stays put.
    if any(seg.cell == new_head for seg in state.snake[:-1]):
        logger.info("Hit self at %s, score %d", new_head, state.score)
        return False

    spawn = state.spawn_at(new_head)
    if spawn is not None:
        collect(state, spawn)

    # Move: letters ride with their segments, cells shift one forward
    old_tail = state.snake[-1].cell
    cells = [new_head] + [seg.cell for seg in state.snake[:-1]]
    for seg, cell in zip(state.snake, cells):
        seg.cell = cell

    if spawn is not None:
        # Grow at the cell the tail just left
        state.snake.append(Segment(old_tail, spawn.letter))
        state.collected = spawn
        if spawn.is_target:
            state.bonus = evaluate_bonus(state)
        regenerate_spawns(state, rng)

    return True
