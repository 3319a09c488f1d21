"""Piece catalog and the falling piece"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]


def _shape(*rows: str) -> Shape:
    return tuple(tuple(1 if ch == "#" else 0 for ch in row) for row in rows)


@dataclass(frozen=True)
class PieceKind:
    name: str
    color: str
    rotations: Tuple[Shape, ...]

    def __len__(self) -> int:
        return len(self.rotations)

    def shape(self, rotation: int = 0) -> Shape:
        return self.rotations[rotation]

    def width(self, rotation: int = 0) -> int:
        return len(self.rotations[rotation][0])


PIECES: Tuple[PieceKind, ...] = (
    PieceKind("I", "#00b4d8", (
        _shape("....", "####", "....", "...."),
        _shape("..#.", "..#.", "..#.", "..#."),
    )),
    PieceKind("J", "#457b9d", (
        _shape("#..", "###", "..."),
        _shape(".##", ".#.", ".#."),
        _shape("...", "###", "..#"),
        _shape(".#.", ".#.", "##."),
    )),
    PieceKind("L", "#f4a261", (
        _shape("..#", "###", "..."),
        _shape(".#.", ".#.", ".##"),
        _shape("...", "###", "#.."),
        _shape("##.", ".#.", ".#."),
    )),
    PieceKind("O", "#e9c46a", (
        _shape("##", "##"),
    )),
    PieceKind("S", "#2a9d8f", (
        _shape(".##", "##.", "..."),
        _shape(".#.", ".##", "..#"),
    )),
    PieceKind("T", "#a29bfe", (
        _shape(".#.", "###", "..."),
        _shape(".#.", ".##", ".#."),
        _shape("...", "###", ".#."),
        _shape(".#.", "##.", ".#."),
    )),
    PieceKind("Z", "#e63946", (
        _shape("##.", ".##", "..."),
        _shape("..#", ".##", ".#."),
    )),
)

KINDS: Dict[str, PieceKind] = {k.name: k for k in PIECES}


@dataclass
class ActivePiece:
    kind: PieceKind
    rotation: int
    x: int
    y: int

    @staticmethod
    def spawn(kind: PieceKind) -> "ActivePiece":
        # one row above the board so the piece slides in
        return ActivePiece(kind, 0, (COLS - kind.width(0)) // 2, -1)

    @property
    def color(self) -> str:
        return self.kind.color

    def next_rotation(self) -> int:
        return (self.rotation + 1) % len(self.kind)

    def cells(self, dx: int = 0, dy: int = 0, rotation: Optional[int] = None) -> List[Tuple[int, int]]:
        """Absolute (x, y) board coordinates of the occupied cells."""
        shape = self.kind.shape(self.rotation if rotation is None else rotation)
        return [(self.x + dx + c, self.y + dy + r)
                for r, row in enumerate(shape)
                for c, v in enumerate(row) if v]
