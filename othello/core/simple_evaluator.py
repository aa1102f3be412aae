"""Own-side-only evaluator: disc count, mobility and square weights."""

from othello.config import CONFIG
from othello.core.board import Board, Cell
from othello.core.moves import legal_moves


class SimpleEvaluator:
    def __init__(self):
        self.cfg = CONFIG.eval

    def evaluate(self, board: Board, perspective: Cell) -> float:
        """Return a score that only looks at ``perspective``'s own discs."""
        discs = board.count_of(perspective)
        mobility = len(legal_moves(board, perspective))

        weights = self.cfg.position_weights
        position = sum(weights[r][c] for r, c in board.positions_of(perspective))

        return 10.0 * discs + 100.0 * mobility + 100.0 * position
