"""Game session: board, falling piece, counters and every transition on them.

Every position or rotation change goes through ``collides`` first. Nothing here
raises for gameplay input: a blocked move is just rejected and the method
returns a falsy value. Once ``game_over`` is set the session is read-only.
"""
import logging
from typing import List, Optional, Tuple

from tetris_board import Board, SCORE_TABLE, collide, drop_distance, merge, new_board, sweep
from tetris_config import CONFIG
from tetris_piece import ActivePiece, PieceKind
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)

# horizontal offsets tried in order when rotating
KICKS = (0, -1, 1, -2, 2)


class GameSession:
    def __init__(self, randomizer=None):
        self.rng = randomizer if randomizer is not None else UniformRandom(CONFIG["SEED"])
        self.board: Board = new_board()
        self.score = 0
        self.lines = 0
        self.drop_interval = CONFIG["INITIAL_DROP_MS"]
        self.game_over = False
        self.piece: Optional[ActivePiece] = None
        self.spawn()

    # ---------- collision ----------
    def collides(self, dx: int, dy: int, rotation: Optional[int] = None) -> bool:
        return collide(self.board, self.piece, dx, dy, rotation)

    # ---------- player / gravity transitions ----------
    def move(self, direction: int) -> bool:
        if self.game_over or direction not in (-1, 1):
            return False
        if self.collides(direction, 0):
            return False
        self.piece.x += direction
        return True

    def rotate(self) -> bool:
        if self.game_over:
            return False
        nxt = self.piece.next_rotation()
        for offset in KICKS:
            if not self.collides(offset, 0, nxt):
                self.piece.rotation = nxt
                self.piece.x += offset
                return True
        return False

    def step(self) -> bool:
        """Fall one row, or lock if the row below is blocked. Returns True if the piece fell."""
        if self.game_over:
            return False
        if not self.collides(0, 1):
            self.piece.y += 1
            return True
        self.lock()
        return False

    def hard_drop(self) -> int:
        if self.game_over:
            return 0
        dy = drop_distance(self.board, self.piece)
        self.piece.y += dy
        self.lock()
        return dy

    # ---------- consequences ----------
    def lock(self) -> None:
        log.debug("locking %s at (%d, %d) rotation %d",
                  self.piece.kind.name, self.piece.x, self.piece.y, self.piece.rotation)
        merge(self.board, self.piece)
        self.clear_lines()
        self.spawn()

    def clear_lines(self) -> int:
        n = sweep(self.board)
        if not n:
            return 0
        self.score += SCORE_TABLE[n]
        self.lines += n
        log.debug("cleared %d row(s), score %d, lines %d", n, self.score, self.lines)
        if self.lines % CONFIG["LINES_PER_SPEEDUP"] == 0 and self.drop_interval > CONFIG["MIN_DROP_MS"]:
            self.drop_interval -= CONFIG["DROP_STEP_MS"]
            log.info("%d lines: drop interval now %d ms", self.lines, self.drop_interval)
        return n

    def spawn(self, kind: Optional[PieceKind] = None) -> ActivePiece:
        if kind is None:
            kind = self.rng.next_piece()
        self.piece = ActivePiece.spawn(kind)
        if self.collides(0, 0):
            self.game_over = True
            log.info("game over: score %d, lines %d", self.score, self.lines)
        return self.piece

    # ---------- queries ----------
    def piece_cells(self) -> List[Tuple[int, int]]:
        return self.piece.cells()

    def ghost_cells(self) -> List[Tuple[int, int]]:
        return self.piece.cells(0, drop_distance(self.board, self.piece))
