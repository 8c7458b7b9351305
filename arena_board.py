"""Board helpers: create, collide, merge, full-row detection and removal"""
from typing import Iterable, List
from arena_piece import Matrix, Player

Board = Matrix


def create_matrix(w: int, h: int) -> Board:
    return [[0] * w for _ in range(h)]


def clear(board: Board):
    for row in board:
        for x in range(len(row)):
            row[x] = 0


def collide(board: Board, player: Player) -> bool:
    """True if any piece cell is off the board or on a locked cell."""
    h = len(board)
    for y, row in enumerate(player.shape):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = player.x + x, player.y + y
            if by < 0 or by >= h: return True
            if bx < 0 or bx >= len(board[by]): return True
            if board[by][bx]: return True
    return False


def merge(board: Board, player: Player):
    for y, row in enumerate(player.shape):
        for x, v in enumerate(row):
            if v:
                board[player.y + y][player.x + x] = v


def detect_full_rows(board: Board) -> List[int]:
    # row 0 is never considered
    full = []
    y = len(board) - 1
    while y > 0:
        if all(board[y]):
            full.append(y)
        y -= 1
    return sorted(full)


def remove_rows(board: Board, rows: Iterable[int]):
    w = len(board[0])
    for y in sorted(rows):
        del board[y]
        board.insert(0, [0] * w)


def score_for_rows(count: int) -> int:
    """10 for the first row, doubling for each further row cleared together."""
    score, mult = 0, 1
    for _ in range(count):
        score += mult * 10
        mult *= 2
    return score
