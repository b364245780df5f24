# src/snake/env.py
from __future__ import annotations
from dataclasses import dataclass
import random

import numpy as np  # type: ignore

from .config import GRID_SIZE, UP, DOWN, LEFT, RIGHT
from .game import GameState, SnakeEngine, Transition

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# Grid codes in the observation
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def encode_grid(state: GameState, grid_size: int) -> np.ndarray:
    """
    Encode the board as an int8 array of shape (N, N), indexed [y, x]:
      0 empty, 1 body, 2 head, 3 food
    """
    grid = np.zeros((grid_size, grid_size), dtype=np.int8)
    fx, fy = state.food
    grid[fy, fx] = FOOD
    if len(state.snake) > 1:
        xs, ys = zip(*state.snake[1:])
        grid[list(ys), list(xs)] = BODY
    hx, hy = state.head
    grid[hy, hx] = HEAD
    return grid

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper that drives a SnakeEngine one tick per step(),
    with no window and no clock.
    """
    grid_size: int = GRID_SIZE
    seed_value: int = 0

    def __post_init__(self):
        # Deterministic RNG for reproducibility
        self.rng = random.Random(self.seed_value)
        self.engine = SnakeEngine(grid_size=self.grid_size, rng=self.rng)
        self.steps = 0
        self.done = False

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
        self.engine.restart()
        self.steps = 0
        self.done = False
        return encode_grid(self.engine.get_state(), self.grid_size)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, transition, done, info)
        """
        if self.done:
            raise RuntimeError("Episode is over; call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action!r}")

        # the engine drops 180° reversals, same as keyboard input
        self.engine.set_direction(ACTIONS[action])

        transition = self.engine.tick()
        self.steps += 1
        state = self.engine.get_state()
        self.done = transition is Transition.CRASHED

        info = {"score": state.score, "length": len(state.snake), "steps": self.steps}
        if self.done:
            info["reason"] = state.death_reason
        return encode_grid(state, self.grid_size), transition, self.done, info

    @property
    def state(self) -> GameState:
        return self.engine.get_state()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (self.grid_size, self.grid_size)
