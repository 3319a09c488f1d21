"""Key bindings and keyboard auto-repeat"""
from typing import Optional
import pygame
from tetris_config import CONFIG
from tetris_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT, pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT, pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW, pygame.K_w: Command.ROTATE_CW,
    pygame.K_DOWN: Command.SOFT_DROP, pygame.K_s: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
}

RESTART_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_KP_ENTER)


def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)


def enable_key_repeat():
    # held keys repeat after DAS_MS, then every ARR_MS
    pygame.key.set_repeat(CONFIG["DAS_MS"], max(1, CONFIG["ARR_MS"]))
