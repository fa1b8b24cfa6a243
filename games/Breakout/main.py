#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python main.py
    python main.py --start-level 3
    python main.py --tick-ms 10 --log-level DEBUG

Controls:
    LEFT/RIGHT arrows move the paddle, R restarts, ESC quits.
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from bricklane.games import BaseGame
from bricklane.games.input import InputManager
from bricklane.games.input.sources import KeyboardInputSource
from bricklane.logging import configure_logging, get_logger
from games.Breakout.config import SCREEN_HEIGHT, SCREEN_WIDTH, TICK_MS
from games.Breakout.game_mode import BreakoutMode

log = get_logger('breakout_main')

# Cap on catch-up ticks per frame so a stalled window does not spiral
MAX_TICKS_PER_FRAME = 25


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(description="Breakout - Standalone")
    for arg in BreakoutMode.get_arguments():
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)
    parser.add_argument('--tick-ms', type=int, default=TICK_MS,
                        help='Milliseconds per simulation tick')
    return parser


def step_game(
    game: BaseGame,
    input_manager: InputManager,
    accumulator: float,
    tick_seconds: float,
) -> float:
    """Run every whole tick that fits in the accumulated time.

    Input is sampled once per tick, before the tick runs.

    Args:
        game: Game to advance
        input_manager: Source of held keys
        accumulator: Seconds of wall time not yet simulated
        tick_seconds: Length of one tick

    Returns:
        Seconds left over, less than one tick (or dropped after the
        per-frame cap)
    """
    ticks = 0
    while accumulator >= tick_seconds:
        if ticks == MAX_TICKS_PER_FRAME:
            log.warning("Dropping %.3fs of backlog", accumulator)
            return 0.0
        input_manager.update(tick_seconds)
        game.handle_input(input_manager.get_keys())
        game.update(tick_seconds)
        accumulator -= tick_seconds
        ticks += 1
    return accumulator


def main(argv=None):
    """Run Breakout standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()

    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Breakout")

    game = BreakoutMode(start_level=args.start_level, skin=args.skin)
    input_manager = InputManager(KeyboardInputSource())

    clock = pygame.time.Clock()
    tick_seconds = args.tick_ms / 1000.0
    accumulator = 0.0
    running = True

    log.info("Breakout: arrows move, R restarts, ESC quits")

    while running:
        accumulator += clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()

        accumulator = step_game(game, input_manager, accumulator, tick_seconds)

        # Render after the frame's ticks have fully completed
        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
