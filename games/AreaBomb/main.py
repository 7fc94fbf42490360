#!/usr/bin/env python3
"""AreaBomb - Standalone entry point.

Dodge growing area bombs with the arrow keys.

Usage:
    python -m games.AreaBomb.main
    python -m games.AreaBomb.main --pacing frantic --seed 7
    python -m games.AreaBomb.main --resolution 1920x1080 --damage 25
"""

import argparse
import os
import sys
from typing import List, Optional

import pygame

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from arena.errors import ConfigurationError
from arena.input import InputManager
from arena.input.sources import KeyboardInputSource
from arena.logging import (
    close_all_sinks,
    create_sink_for_environment,
    get_logger,
    register_sink,
)
from games.AreaBomb import config, game_info
from games.AreaBomb.game_mode import AreaBombMode
from models import Resolution

log = get_logger('area_bomb')


def build_parser() -> argparse.ArgumentParser:
    """Launcher options plus the game's own ARGUMENTS."""
    parser = argparse.ArgumentParser(
        description=f"{game_info.NAME} - {game_info.DESCRIPTION}",
    )
    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default=f"{config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}",
        help='Window resolution as WIDTHxHEIGHT'
    )
    parser.add_argument(
        '--frames',
        type=int,
        default=None,
        help='Stop after this many frames (default: run until quit)'
    )

    for arg_def in game_info.ARGUMENTS:
        kwargs = {k: v for k, v in arg_def.items() if k != 'name'}
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def parse_resolution(value: str) -> Resolution:
    """Parse WIDTHxHEIGHT into a Resolution."""
    try:
        width, height = value.lower().split('x')
        return Resolution(width=int(width), height=int(height))
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid resolution {value!r}, expected WIDTHxHEIGHT (e.g., 1280x720)"
        ) from e


def settings_from_args(args: argparse.Namespace):
    """Translate parsed arguments into a validated AreaBombConfig."""
    return config.build_config(
        pacing=args.pacing,
        radius_min=args.radius_min,
        radius_max=args.radius_max,
        duration_min=args.duration_min,
        duration_max=args.duration_max,
        spawn_interval_seconds=args.spawn_interval,
        damage_per_hazard=args.damage,
        actor_speed=args.speed,
        actor_max_health=args.max_health,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        resolution = parse_resolution(args.resolution)
        settings = settings_from_args(args)
    except ConfigurationError as e:
        log.error("%s", e)
        return 1

    register_sink('hazards', create_sink_for_environment('hazards'))

    pygame.init()
    screen = pygame.display.set_mode((resolution.width, resolution.height))
    pygame.display.set_caption(game_info.NAME)

    input_manager = InputManager(KeyboardInputSource())
    game = AreaBombMode(settings=settings, resolution=resolution)
    clock = pygame.time.Clock()
    log.info("Started %s at %s", game_info.NAME, resolution)

    frames = 0
    running = True
    try:
        while running:
            dt = clock.tick(config.FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        game.toggle_pause()
                    elif event.key == pygame.K_r:
                        game.restart()

            input_manager.update(dt)
            game.update(dt, input_manager.get_state())
            game.render(screen)
            pygame.display.flip()

            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        log.info("Final health %.1f after %.1fs", game.simulation.actor.health.current,
                 game.simulation.elapsed)
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
