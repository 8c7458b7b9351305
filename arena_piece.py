"""Piece catalog, active piece model, in-place rotation"""
from dataclasses import dataclass, field
from typing import Dict, List

Matrix = List[List[int]]

PIECES = "TJLOSZI"

# Cell id per letter; 0 is always empty
PIECE_IDS: Dict[str, int] = {"T": 1, "O": 2, "L": 3, "J": 4, "I": 5, "S": 6, "Z": 7}

SHAPES: Dict[str, Matrix] = {
    "T": [[0,0,0],
          [1,1,1],
          [0,1,0]],
    "O": [[2,2],
          [2,2]],
    "L": [[0,3,0],
          [0,3,0],
          [0,3,3]],
    "J": [[0,4,0],
          [0,4,0],
          [4,4,0]],
    "I": [[0,5,0,0],
          [0,5,0,0],
          [0,5,0,0],
          [0,5,0,0]],
    "S": [[0,6,6],
          [6,6,0],
          [0,0,0]],
    "Z": [[7,7,0],
          [0,7,7],
          [0,0,0]],
}


class UnknownPieceType(ValueError):
    """Raised for a letter outside PIECES. Always a caller bug."""
    def __init__(self, t):
        super().__init__(f"Unknown piece type: {t!r}")
        self.t = t


def create_piece(t: str) -> Matrix:
    if not isinstance(t, str) or t not in SHAPES:
        raise UnknownPieceType(t)
    return [r[:] for r in SHAPES[t]]


@dataclass
class Player:
    shape: Matrix = field(default_factory=list)
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return len(self.shape[0]) if self.shape else 0

    def cells(self):
        """Board coordinates and ids of every occupied cell."""
        return [(self.x + x, self.y + y, v)
                for y, row in enumerate(self.shape)
                for x, v in enumerate(row) if v]


def rotate(m: Matrix, d: int) -> None:
    """Rotate a square matrix in place; d>0 clockwise, d<0 counter-clockwise."""
    for y in range(len(m)):
        for x in range(y):
            m[x][y], m[y][x] = m[y][x], m[x][y]
    if d > 0:
        for row in m:
            row.reverse()
    else:
        m.reverse()
