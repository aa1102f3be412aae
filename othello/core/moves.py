"""Legal move generation and the capture (flip) rule."""

from typing import List, NamedTuple, Optional

from othello.core.board import Board, Cell, in_bounds


class Move(NamedTuple):
    row: int
    col: int


NO_MOVE = Move(-1, -1)

# Scan order is observable through search tie-breaking: N, S, W, E, NE, NW, SE, SW.
DIRECTIONS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)


def legal_moves(board: Board, side: Cell) -> List[Move]:
    """Return the destinations ``side`` may play, in discovery order.

    Own discs are scanned row-major and each one walks the eight directions
    over a run of opponent discs; an empty cell right after a non-empty run
    is a destination. A destination reached from several discs is kept once,
    at its first discovery.
    """
    enemy = side.opponent
    found = {}
    for r, c in board.positions_of(side):
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            crossed = False
            while in_bounds(nr, nc) and board[nr, nc] == enemy:
                nr += dr
                nc += dc
                crossed = True
            if crossed and in_bounds(nr, nc) and board[nr, nc] == Cell.EMPTY:
                found.setdefault(Move(nr, nc), None)
    return list(found)


def has_moves(board: Board, side: Cell) -> bool:
    return bool(legal_moves(board, side))


def captures(board: Board, move: Move, side: Cell) -> List[Move]:
    """Opponent discs flipped if ``side`` plays ``move``; empty when illegal."""
    row, col = move
    if not in_bounds(row, col) or board[row, col] != Cell.EMPTY:
        return []
    enemy = side.opponent
    flipped = []
    for dr, dc in DIRECTIONS:
        run = []
        nr, nc = row + dr, col + dc
        while in_bounds(nr, nc) and board[nr, nc] == enemy:
            run.append(Move(nr, nc))
            nr += dr
            nc += dc
        # Only a run anchored on an own disc is bracketed.
        if run and in_bounds(nr, nc) and board[nr, nc] == side:
            flipped.extend(run)
    return flipped


def apply_move(board: Board, move: Move, side: Cell) -> bool:
    """Play ``move`` for ``side`` in place.

    Returns False and leaves the board untouched if the move brackets
    nothing.
    """
    flipped = captures(board, move, side)
    if not flipped:
        return False
    for pos in flipped:
        board[pos] = side
    board[move] = side
    return True


def is_game_over(board: Board) -> bool:
    return not has_moves(board, Cell.BLACK) and not has_moves(board, Cell.WHITE)


def winner(board: Board) -> Optional[Cell]:
    """Side with more discs, or None on a draw."""
    white = board.count_of(Cell.WHITE)
    black = board.count_of(Cell.BLACK)
    if white == black:
        return None
    return Cell.WHITE if white > black else Cell.BLACK
