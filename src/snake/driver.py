# driver.py
from dataclasses import dataclass, field


@dataclass
class TickDriver:
    """
    Fixed-period pacing for the engine.

    The frame loop runs at render speed and asks how many engine ticks are
    due since the last call. A long stall (window drag, debugger) only
    catches up `max_catch_up` ticks instead of teleporting the snake.
    """
    period_ms: int
    max_catch_up: int = 3
    last_tick: int = field(default=0)

    def __post_init__(self):
        if self.period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {self.period_ms}")
        if self.max_catch_up < 1:
            raise ValueError(f"max_catch_up must be >= 1, got {self.max_catch_up}")

    def reset(self, now_ms: int) -> None:
        self.last_tick = now_ms

    def due(self, now_ms: int) -> int:
        elapsed = now_ms - self.last_tick
        if elapsed < self.period_ms:
            return 0  # not time to move yet
        n = elapsed // self.period_ms
        if n > self.max_catch_up:
            # drop the backlog, keep the phase
            self.last_tick = now_ms - elapsed % self.period_ms
            return self.max_catch_up
        self.last_tick += n * self.period_ms
        return n
