# game.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging
import random

from .config import GRID_SIZE, DIRECTIONS, RIGHT, Config

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class InvalidDirection(ValueError):
    """Raised when a direction is not one of the four unit vectors."""


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class Transition(Enum):
    MOVED = "moved"
    ATE = "ate"
    CRASHED = "crashed"
    NOOP = "noop"


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def as_direction(value) -> Direction:
    """Coerce value to one of DIRECTIONS or raise InvalidDirection."""
    try:
        dx, dy = value
    except (TypeError, ValueError):
        raise InvalidDirection(f"not a direction: {value!r}") from None
    if not (is_int(dx) and is_int(dy)) or (dx, dy) not in DIRECTIONS:
        raise InvalidDirection(f"not a unit direction: {value!r}")
    return DIRECTIONS[DIRECTIONS.index((dx, dy))]

def is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def as_cell(value) -> Cell:
    """Coerce value to an (x, y) tuple of ints or raise ValueError."""
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(f"not a cell: {value!r}") from None
    if not (is_int(x) and is_int(y)):
        raise ValueError(f"cell coordinates must be ints: {value!r}")
    return (x, y)

def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size

def place_food(occupied: Iterable[Cell], grid_size: int, rng) -> Cell:
    """
    Pick a free cell uniformly by rejection sampling.

    Never returns when `occupied` covers the whole grid; reaching that
    requires the snake to fill the board.
    """
    taken = set(occupied)
    while True:
        cell = (rng.randrange(grid_size), rng.randrange(grid_size))
        if cell not in taken:
            return cell

def default_snake(grid_size: int) -> Tuple[Cell, ...]:
    """Three cells on the middle row, head on the right."""
    mid = grid_size // 2
    return ((mid, mid), (mid - 1, mid), (mid - 2, mid))


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]        # head at index 0
    direction: Direction
    pending_direction: Optional[Direction]
    food: Cell
    score: int = 0
    phase: Phase = Phase.RUNNING
    death_reason: Optional[str] = None   # "wall" | "self" once crashed

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


def check_snake(snake: Tuple[Cell, ...], grid_size: int) -> None:
    if not snake:
        raise ValueError("snake must have at least one cell")
    for cell in snake:
        if not in_bounds(cell, grid_size):
            raise ValueError(f"snake cell {cell} outside {grid_size}x{grid_size} grid")
    if len(set(snake)) != len(snake):
        raise ValueError("snake cells must be unique")
    for (ax, ay), (bx, by) in zip(snake, snake[1:]):
        if abs(ax - bx) + abs(ay - by) != 1:
            raise ValueError(f"snake cells {(ax, ay)} and {(bx, by)} are not adjacent")


# ---------- Engine ----------
class SnakeEngine:
    """
    Owns the single GameState and every transition on it.

    Time only moves when tick() is called; the caller supplies the pacing.
    The random source only needs randrange(), so a seeded random.Random
    makes food placement reproducible.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        start_snake: Optional[Iterable[Cell]] = None,
        start_direction: Direction = RIGHT,
        rng: Optional[random.Random] = None,
    ):
        if start_snake is None:
            if grid_size < 4:
                raise ValueError(f"grid_size must be >= 4, got {grid_size}")
            start_snake = default_snake(grid_size)
        self._grid_size = grid_size
        self._start_snake = tuple(as_cell(c) for c in start_snake)
        self._start_direction = as_direction(start_direction)
        check_snake(self._start_snake, grid_size)
        self._rng = rng if rng is not None else random.Random()
        self._state = self._fresh_state()

    @classmethod
    def from_config(cls, cfg: Config, rng: Optional[random.Random] = None) -> "SnakeEngine":
        cfg.validate()
        if rng is None:
            rng = random.Random(cfg.seed)
        return cls(grid_size=cfg.grid_size, rng=rng)

    @property
    def grid_size(self) -> int:
        return self._grid_size

    def _fresh_state(self) -> GameState:
        return GameState(
            snake=self._start_snake,
            direction=self._start_direction,
            pending_direction=None,
            food=place_food(self._start_snake, self._grid_size, self._rng),
        )

    # ---------- Entry points ----------
    def get_state(self) -> GameState:
        return self._state

    def set_direction(self, requested) -> None:
        """Queue a turn for the next tick; reversals and post-crash input are dropped."""
        direction = as_direction(requested)
        state = self._state
        if state.game_over or is_opposite(direction, state.direction):
            return
        self._state = replace(state, pending_direction=direction)

    def tick(self) -> Transition:
        state = self._state
        if state.game_over:
            return Transition.NOOP

        direction = state.pending_direction or state.direction
        hx, hy = state.head
        new_head = (hx + direction[0], hy + direction[1])

        if not in_bounds(new_head, self._grid_size):
            reason = "wall"
        # The tail still counts as occupied even though it would move away.
        elif new_head in state.snake:
            reason = "self"
        else:
            reason = None

        if reason is not None:
            self._state = replace(
                state,
                direction=direction,
                pending_direction=None,
                phase=Phase.GAME_OVER,
                death_reason=reason,
            )
            logger.info(
                "Game over (%s) with score %d, length %d.",
                reason, state.score, len(state.snake),
            )
            return Transition.CRASHED

        if new_head == state.food:
            snake = (new_head,) + state.snake
            self._state = replace(
                state,
                snake=snake,
                direction=direction,
                pending_direction=None,
                food=place_food(snake, self._grid_size, self._rng),
                score=state.score + 1,
            )
            logger.debug("Ate food at %s, score %d.", new_head, state.score + 1)
            return Transition.ATE

        self._state = replace(
            state,
            snake=(new_head,) + state.snake[:-1],
            direction=direction,
            pending_direction=None,
        )
        return Transition.MOVED

    def restart(self) -> None:
        self._state = self._fresh_state()
        logger.info("Game restarted.")

    def load_state(self, state: GameState) -> None:
        """Replace the current state after checking its invariants."""
        pending = state.pending_direction
        state = replace(
            state,
            snake=tuple(as_cell(c) for c in state.snake),
            food=as_cell(state.food),
            direction=as_direction(state.direction),
            pending_direction=None if pending is None else as_direction(pending),
        )
        check_snake(state.snake, self._grid_size)
        if not in_bounds(state.food, self._grid_size):
            raise ValueError(f"food {state.food} outside the grid")
        if state.food in state.snake:
            raise ValueError(f"food {state.food} is on the snake")
        if state.score < 0:
            raise ValueError(f"score must be >= 0, got {state.score}")
        self._state = state
