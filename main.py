import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import RESTART_KEYS, command_for_key, enable_key_repeat
from tetris_layout import compute_dims
from tetris_render import PygamePresenter, RenderAssets
from tetris_rng import UniformRandom
from tetris_scheduler import PygameScheduler, TICK_EVENT

log = logging.getLogger(__name__)


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Shaded Tetris""")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="Seed for the piece randomizer")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"],
                        help="Pixel size of a board cell")
    parser.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = get_args(argv)
    CONFIG.update(SEED=args.seed, CELL_SIZE=args.cell_size, LOG_LEVEL=args.log_level)
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])
    enable_key_repeat()

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    scheduler = PygameScheduler()
    presenter = PygamePresenter(screen, RenderAssets(dims, font), big_font)
    game = Game(scheduler, presenter, UniformRandom(CONFIG["SEED"]))
    game.start()

    clock = pygame.time.Clock()
    while True:
        # one event at a time: a tick and a key press never overlap
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                log.info("quit")
                scheduler.stop()
                pygame.quit()
                sys.exit()
            if scheduler.handle(e):
                continue
            if e.type == pygame.KEYDOWN:
                if e.key in RESTART_KEYS:
                    game.start()
                else:
                    game.handle_command(command_for_key(e.key))
        clock.tick(60)


if __name__ == '__main__':
    main()
