"""Board helpers: collide, merge, sweep, drop distance"""
from typing import List, Optional, Sequence

from tetris_piece import ActivePiece, COLS, ROWS

Board = List[List[Optional[str]]]

# points for 0..4 rows cleared by one lock
SCORE_TABLE = (0, 40, 100, 300, 1200)


def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]


def collide(board: Board, piece: ActivePiece, dx: int = 0, dy: int = 0,
            rotation: Optional[int] = None) -> bool:
    """Return True if the piece, shifted and rotated as given, leaves the board or overlaps a locked cell.

    Cells above the board (y < 0) are only checked against the side walls.
    """
    for bx, by in piece.cells(dx, dy, rotation):
        if bx < 0 or bx >= COLS or by >= ROWS:
            return True
        if by >= 0 and board[by][bx]:
            return True
    return False


def merge(board: Board, piece: ActivePiece) -> None:
    for bx, by in piece.cells():
        if by >= 0:
            board[by][bx] = piece.color


def row_full(row: Sequence[Optional[str]]) -> bool:
    return all(cell for cell in row)


def sweep(board: Board) -> int:
    """Remove full rows, bottom to top, and return how many went.

    After a removal the rows above shift down into the same index, so that
    index is tested again before moving up.
    """
    cleared = 0
    y = ROWS - 1
    while y >= 0:
        if row_full(board[y]):
            del board[y]
            board.insert(0, [None] * COLS)
            cleared += 1
            continue
        y -= 1
    return cleared


def drop_distance(board: Board, piece: ActivePiece) -> int:
    """Rows the piece can fall before the next row down would collide."""
    dy = 0
    while not collide(board, piece, 0, dy + 1):
        dy += 1
    return dy
