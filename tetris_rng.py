"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_piece import PIECES, PieceKind


class UniformRandom:
    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_piece(self) -> PieceKind:
        return self._random.choice(self.PIECES)
