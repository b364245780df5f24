# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    HUD_HEIGHT,
    BG, GRID, LINE, SNAKE, HEAD, FOOD, TEXT, DIM,
    UP, DOWN, LEFT, RIGHT,
)
from .game import GameState

# ---------- Input mapping ----------
KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)

INSTRUCTIONS = "Arrow keys or WASD to steer. Eat the red square, avoid walls and yourself."


def key_to_direction(key: int) -> Optional[Tuple[int, int]]:
    return KEY_DIRECTIONS.get(key)


# ---------- Drawing ----------
class Renderer:
    """Draws a GameState onto a pygame surface. Holds fonts and layout only."""

    def __init__(self, screen: pygame.Surface, grid_size: int, cell_size: int):
        self.screen = screen
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.board = pygame.Rect(0, HUD_HEIGHT, grid_size * cell_size, grid_size * cell_size)
        self.font = pygame.font.SysFont(None, 30)
        self.small = pygame.font.SysFont(None, 20)
        self.title = pygame.font.SysFont(None, 48)
        self.restart_button = pygame.Rect(0, 0, 130, 40)
        self.restart_button.center = (self.board.centerx, self.board.centery + 56)

    def draw_cell(self, gx: int, gy: int, color) -> None:
        rect = pygame.Rect(
            self.board.x + gx * self.cell_size,
            self.board.y + gy * self.cell_size,
            self.cell_size,
            self.cell_size,
        )
        pygame.draw.rect(self.screen, color, rect)

    def draw(self, state: GameState) -> None:
        self.screen.fill(BG)
        pygame.draw.rect(self.screen, GRID, self.board)
        for i in range(self.grid_size + 1):
            offset = i * self.cell_size
            pygame.draw.line(self.screen, LINE,
                             (self.board.x + offset, self.board.top),
                             (self.board.x + offset, self.board.bottom))
            pygame.draw.line(self.screen, LINE,
                             (self.board.left, self.board.y + offset),
                             (self.board.right, self.board.y + offset))

        self.draw_cell(state.food[0], state.food[1], FOOD)
        for idx, (x, y) in enumerate(state.snake):
            self.draw_cell(x, y, HEAD if idx == 0 else SNAKE)

        score = self.font.render(f"Score: {state.score}", True, TEXT)
        self.screen.blit(score, score.get_rect(center=(self.board.centerx, HUD_HEIGHT // 2)))
        hint = self.small.render(INSTRUCTIONS, True, TEXT)
        footer_y = self.board.bottom + (self.screen.get_height() - self.board.bottom) // 2
        self.screen.blit(hint, hint.get_rect(center=(self.board.centerx, footer_y)))

        if state.game_over:
            self.draw_game_over(state.score)

    def draw_game_over(self, score: int) -> None:
        overlay = pygame.Surface(self.board.size, pygame.SRCALPHA)
        overlay.fill(DIM)
        self.screen.blit(overlay, self.board.topleft)

        title = self.title.render("Game Over", True, FOOD)
        sco = self.font.render(f"Final Score: {score}", True, SNAKE)
        self.screen.blit(title, title.get_rect(center=(self.board.centerx, self.board.centery - 24)))
        self.screen.blit(sco, sco.get_rect(center=(self.board.centerx, self.board.centery + 12)))

        pygame.draw.rect(self.screen, SNAKE, self.restart_button, border_radius=8)
        label = self.font.render("Restart", True, BG)
        self.screen.blit(label, label.get_rect(center=self.restart_button.center))

    def hits_restart(self, pos: Tuple[int, int]) -> bool:
        return self.restart_button.collidepoint(pos)
