# main.py
import argparse
import logging

import pygame  # type: ignore

from .audio import CuePlayer
from .config import Config, GRID_SIZE, CELL_SIZE
from .driver import TickDriver
from .game import SnakeEngine, Transition
from .render import Renderer, key_to_direction, RESTART_KEYS

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake", description="Classic snake on a square grid.")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE, help="cells per side")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per cell")
    parser.add_argument("--tick-ms", type=int, default=110, help="ms between snake moves")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument("--mute", action="store_true", help="disable sound cues")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        grid_size=args.grid_size,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        sound=not args.mute,
    ).validate()


def run(cfg: Config) -> None:
    engine = SnakeEngine.from_config(cfg)

    pygame.init()
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()
    renderer = Renderer(screen, cfg.grid_size, cfg.cell_size)
    cues = CuePlayer(enabled=cfg.sound)

    driver = TickDriver(cfg.tick_ms)
    driver.reset(pygame.time.get_ticks())
    logger.info("Started %dx%d game, tick %d ms.", cfg.grid_size, cfg.grid_size, cfg.tick_ms)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r or (
                    event.key in RESTART_KEYS and engine.get_state().game_over
                ):
                    engine.restart()
                    driver.reset(pygame.time.get_ticks())
                else:
                    direction = key_to_direction(event.key)
                    if direction is not None:
                        engine.set_direction(direction)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if engine.get_state().game_over and renderer.hits_restart(event.pos):
                    engine.restart()
                    driver.reset(pygame.time.get_ticks())

        # 2) update; the driver stops once the game is over
        if not engine.get_state().game_over:
            for _ in range(driver.due(pygame.time.get_ticks())):
                result = engine.tick()
                cues.play(result)
                if result is Transition.CRASHED:
                    break

        # 3) render
        renderer.draw(engine.get_state())
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(config_from_args(args))


if __name__ == "__main__":
    main()
