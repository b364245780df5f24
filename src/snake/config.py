from dataclasses import dataclass
from typing import Optional

# ----- Grid & window -----
GRID_SIZE = 16          # N x N cells
CELL_SIZE = 24          # px per cell
HUD_HEIGHT = 48         # score strip above the board
FOOTER_HEIGHT = 40      # instructions strip below the board

# ----- Colors (light theme) -----
BG    = (255, 255, 255)
GRID  = (248, 249, 250)
LINE  = (233, 236, 239)
SNAKE = (76, 175, 80)
HEAD  = (56, 142, 60)
FOOD  = (244, 67, 54)
TEXT  = (40, 44, 52)
DIM   = (255, 255, 255, 136)   # RGBA overlay

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables -----
@dataclass
class Config:
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    tick_ms: int = 110          # one engine tick per period
    fps: int = 60               # render rate; movement is paced separately
    seed: Optional[int] = None  # None -> nondeterministic food
    sound: bool = True

    def validate(self) -> "Config":
        """Raise ValueError on settings the game cannot run with."""
        if self.grid_size < 4:
            raise ValueError(f"grid_size must be >= 4, got {self.grid_size}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        return self

    @property
    def window_size(self):
        board = self.grid_size * self.cell_size
        return board, HUD_HEIGHT + board + FOOTER_HEIGHT


CFG = Config()
