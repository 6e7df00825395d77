"""Game session: start/stop, score bookkeeping and the tick driver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

import numpy as np  # type: ignore

from .config import CFG, DIRECTIONS, Difficulty
from .game import GameState, new_game_state, set_direction, step_game
from .pattern import BonusEvent
from .scheduler import FixedRateScheduler
from .storage import SavedScores, ScoreStore

logger = logging.getLogger(__name__)


@dataclass
class BonusNotice:
    event: BonusEvent
    expires_at: int   # clock ms


class GameSession:
    """
    Owns everything that outlives a single game (scores, difficulty, store)
    and the GameState of the current or most recent game.
    """

    def __init__(
        self,
        store: ScoreStore,
        clock: Callable[[], int],
        rng: Optional[np.random.Generator] = None,
        interval_ms: int = CFG.tick_ms,
    ) -> None:
        self.store = store
        self.clock = clock
        self.rng = rng if rng is not None else np.random.default_rng(CFG.seed)
        self.scheduler = FixedRateScheduler(clock, interval_ms)

        saved = store.load()
        self.best_score = saved.best_score
        self.last_score = saved.last_score
        self.difficulty = saved.difficulty

        self.state: Optional[GameState] = None
        self.game_over = False
        self.bonus_notice: Optional[BonusNotice] = None

    @property
    def running(self) -> bool:
        return self.scheduler.running

    @property
    def score(self) -> int:
        return self.state.score if self.state is not None else 0

    # ----- lifecycle -----
    def start(self) -> GameState:
        self.state = new_game_state(self.difficulty, self.rng)
        self.game_over = False
        self.bonus_notice = None
        self.scheduler.start()
        logger.info("Game started (difficulty=%s)", self.difficulty.value)
        return self.state

    def stop(self) -> None:
        if not self.running:
            return
        self.scheduler.stop()

        score = self.score
        if score > 0:
            self.last_score = score
            if score > self.best_score:
                self.best_score = score
                logger.info("New best score: %d", score)
            self._persist()
        logger.info("Game stopped with score %d", score)

    def toggle(self) -> None:
        if self.running:
            self.stop()
        else:
            self.start()

    # ----- input -----
    def set_direction(self, direction: Union[str, Tuple[int, int]]) -> bool:
        if not self.running or self.state is None:
            return False
        if isinstance(direction, str):
            vec = DIRECTIONS.get(direction.lower())
        else:
            vec = tuple(direction) if tuple(direction) in DIRECTIONS.values() else None
        if vec is None:
            return False
        return set_direction(self.state, vec)

    def set_difficulty(self, difficulty: Union[str, Difficulty]) -> bool:
        if self.running:
            return False
        self.difficulty = Difficulty.parse(difficulty)
        self._persist()
        return True

    # ----- ticking -----
    def update(self) -> bool:
        """Run one tick if one is due. Returns True when a tick ran."""
        if self.state is None or not self.scheduler.due():
            return False

        alive = step_game(self.state, self.rng)
        if not alive:
            self.game_over = True
            self.stop()
        elif self.state.bonus is not None:
            self.bonus_notice = BonusNotice(
                self.state.bonus, self.clock() + CFG.bonus_display_ms
            )
        return True

    def active_bonus(self) -> Optional[BonusEvent]:
        if self.bonus_notice is None:
            return None
        if self.clock() >= self.bonus_notice.expires_at:
            self.bonus_notice = None
            return None
        return self.bonus_notice.event

    def _persist(self) -> None:
        self.store.save(SavedScores(self.best_score, self.last_score, self.difficulty))
