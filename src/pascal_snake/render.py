# render.py
from typing import Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, GRID_SIZE, CELL_SIZE, HUD_HEIGHT,
    BG, GRID_LINE, HEAD, BODY, TARGET, DECOY, TEXT, FLASH,
    Difficulty,
)
from .session import GameSession


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        gx * CELL_SIZE + inset,
        HUD_HEIGHT + gy * CELL_SIZE + inset,
        CELL_SIZE - 2 * inset,
        CELL_SIZE - 2 * inset,
    )

def draw_letter(screen: pygame.Surface, font: pygame.font.Font,
                gx: int, gy: int, letter: str, color: Tuple[int, int, int]) -> None:
    glyph = font.render(letter, True, color)
    screen.blit(glyph, glyph.get_rect(center=cell_rect(gx, gy).center))

def draw_grid(screen: pygame.Surface) -> None:
    for i in range(GRID_SIZE + 1):
        x = i * CELL_SIZE
        y = HUD_HEIGHT + i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (x, HUD_HEIGHT), (x, HEIGHT))
        pygame.draw.line(screen, GRID_LINE, (0, y), (WIDTH, y))


# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    screen.fill(BG)
    draw_grid(screen)

    state = session.state
    if state is not None:
        # letters; only easy mode gives the target away by color
        for spawn in state.spawns:
            color = TARGET
            if state.difficulty == Difficulty.EASY and not spawn.is_target:
                color = DECOY
            draw_letter(screen, font, spawn.cell[0], spawn.cell[1], spawn.letter, color)

        # snake
        for i, seg in enumerate(state.snake):
            x, y = seg.cell
            pygame.draw.rect(screen, HEAD if i == 0 else BODY, cell_rect(x, y, inset=1))
            draw_letter(screen, font, x, y, seg.letter, (255, 255, 255))

    # scores
    hud = (f"Score: {session.score}   Best: {session.best_score}   "
           f"Last: {session.last_score}   [{session.difficulty.value}]")
    screen.blit(font.render(hud, True, TEXT), (8, 6))
    hint = "Space: stop" if session.running else "Space: start   1/2/3: difficulty"
    screen.blit(font.render(hint, True, TEXT), (8, 26))

    bonus = session.active_bonus()
    if bonus is not None:
        txt = font.render(f"{bonus.text} +{bonus.points}", True, TARGET)
        screen.blit(txt, txt.get_rect(center=(WIDTH // 2, HUD_HEIGHT + (HEIGHT - HUD_HEIGHT) // 2)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Red flash over the last frame
    overlay = pygame.Surface((WIDTH, HEIGHT - HUD_HEIGHT), pygame.SRCALPHA)
    overlay.fill(FLASH)  # RGBA
    screen.blit(overlay, (0, HUD_HEIGHT))

    cy = HUD_HEIGHT + (HEIGHT - HUD_HEIGHT) // 2
    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Score: {score}", True, (220, 220, 230))
    screen.blit(title, title.get_rect(center=(WIDTH // 2, cy - 16)))
    screen.blit(sco, sco.get_rect(center=(WIDTH // 2, cy + 16)))
