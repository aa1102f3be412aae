"""Weighted position heuristic: parity, corners, corner closeness, mobility, frontier and square weights."""

from typing import Dict, Optional

from othello.config import CONFIG, EVALUATOR_KINDS
from othello.core.board import Board, Cell, SIZE
from othello.core.moves import legal_moves
from othello.core.simple_evaluator import SimpleEvaluator

LAST = SIZE - 1
CORNERS = ((0, 0), (0, LAST), (LAST, 0), (LAST, LAST))

# The three squares touching each corner, in CORNERS order.
CORNER_NEIGHBOURS = (
    ((0, 1), (1, 0), (1, 1)),
    ((0, LAST - 1), (1, LAST), (1, LAST - 1)),
    ((LAST, 1), (LAST - 1, 0), (LAST - 1, 1)),
    ((LAST, LAST - 1), (LAST - 1, LAST), (LAST - 1, LAST - 1)),
)

NEIGHBOURHOOD = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def _normalized(mine: float, theirs: float) -> float:
    """100 * (mine - theirs) / (mine + theirs), 0 when level."""
    if mine == theirs:
        return 0.0
    return 100.0 * (mine - theirs) / (mine + theirs)


def _ownership(cell: Cell, me: Cell) -> int:
    if cell == me:
        return 1
    if cell == me.opponent:
        return -1
    return 0


class Evaluator:
    """Weighted multi-term heuristic.

    Every term is read from ``perspective``; positive means that side is
    better off. Terms are antisymmetric, so swapping the perspective
    negates the score.
    """

    def __init__(self):
        self.cfg = CONFIG.eval

    def evaluate(self, board: Board, perspective: Cell) -> float:
        return self.breakdown(board, perspective)["total"]

    def breakdown(self, board: Board, perspective: Cell) -> Dict[str, float]:
        cfg = self.cfg
        terms = {
            "parity": self.coin_parity(board, perspective),
            "corners": self.corner_occupancy(board, perspective),
            "closeness": self.corner_closeness(board, perspective),
            "mobility": self.mobility(board, perspective),
            "frontier": self.frontier(board, perspective),
            "position": self.positional(board, perspective),
        }
        terms["total"] = (cfg.parity_weight * terms["parity"]
                          + cfg.corner_weight * terms["corners"]
                          + cfg.closeness_weight * terms["closeness"]
                          + cfg.mobility_weight * terms["mobility"]
                          + cfg.frontier_weight * terms["frontier"]
                          + cfg.position_weight * terms["position"])
        return terms

    def coin_parity(self, board: Board, perspective: Cell) -> float:
        return _normalized(board.count_of(perspective), board.count_of(perspective.opponent))

    def frontier(self, board: Board, perspective: Cell) -> float:
        """Discs touching an empty square; having more of them is a liability."""
        counts = {Cell.WHITE: 0, Cell.BLACK: 0}
        for r in range(SIZE):
            for c in range(SIZE):
                cell = board[r, c]
                if cell == Cell.EMPTY:
                    continue
                for dr, dc in NEIGHBOURHOOD:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < SIZE and 0 <= nc < SIZE and board[nr, nc] == Cell.EMPTY:
                        counts[cell] += 1
                        break
        return _normalized(counts[perspective.opponent], counts[perspective])

    def positional(self, board: Board, perspective: Cell) -> float:
        weights = self.cfg.position_weights
        score = 0
        for r in range(SIZE):
            for c in range(SIZE):
                score += weights[r][c] * _ownership(board[r, c], perspective)
        return float(score)

    def corner_occupancy(self, board: Board, perspective: Cell) -> float:
        net = sum(_ownership(board[pos], perspective) for pos in CORNERS)
        return self.cfg.corner_value * net

    def corner_closeness(self, board: Board, perspective: Cell) -> float:
        """Penalize discs next to a corner that is still open."""
        net = 0
        for corner, neighbours in zip(CORNERS, CORNER_NEIGHBOURS):
            if board[corner] != Cell.EMPTY:
                continue
            net += sum(_ownership(board[pos], perspective) for pos in neighbours)
        return self.cfg.closeness_value * net

    def mobility(self, board: Board, perspective: Cell) -> float:
        mine = len(legal_moves(board, perspective))
        theirs = len(legal_moves(board, perspective.opponent))
        return _normalized(mine, theirs)


def build_evaluator(kind: Optional[str] = None):
    """Evaluator named by ``kind``, defaulting to ``CONFIG.eval.kind``."""
    kind = kind or CONFIG.eval.kind
    if kind == "weighted":
        return Evaluator()
    if kind == "simple":
        return SimpleEvaluator()
    raise ValueError(f"Unknown evaluator kind {kind!r}, expected one of {EVALUATOR_KINDS}")
