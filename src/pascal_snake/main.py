# main.py
import argparse
import logging

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Difficulty
from .render import draw_game, draw_game_over
from .session import GameSession
from .storage import ScoreStore

KEY_DIRECTIONS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}
KEY_DIFFICULTY = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}


def handle_input(session: GameSession) -> bool:
    """Route events to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_SPACE:
            session.toggle()
        elif event.key in KEY_DIRECTIONS:
            session.set_direction(KEY_DIRECTIONS[event.key])
        elif event.key in KEY_DIFFICULTY:
            session.set_difficulty(KEY_DIFFICULTY[event.key])
    return True


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake that spells pascal_")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for letter placement (default: random)")
    parser.add_argument("--difficulty", type=str, default=None,
                        choices=[d.value for d in Difficulty],
                        help="override the saved difficulty")
    parser.add_argument("--scores", type=str, default=str(CFG.scores_path),
                        help="JSON file holding best/last score and difficulty")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont("Courier New", 16, bold=True)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Pascal Snake")
    clock = pygame.time.Clock()

    session = GameSession(
        ScoreStore(args.scores),
        clock=pygame.time.get_ticks,
        rng=np.random.default_rng(args.seed),
        interval_ms=args.tick_ms,
    )
    if args.difficulty is not None:
        session.set_difficulty(args.difficulty)

    running = True
    while running:
        # 1) input
        running = handle_input(session)
        if not running:
            break

        # 2) update
        session.update()

        # 3) render
        draw_game(screen, font, session)
        if session.game_over:
            draw_game_over(screen, font, session.score)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the session scheduler

    session.stop()
    print(f"[GAME] best={session.best_score} last={session.last_score}")
    pygame.quit()

if __name__ == "__main__":
    main()
