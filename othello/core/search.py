import logging
import time
from typing import NamedTuple, Optional, Tuple

from othello.config import CONFIG, PRUNING_MODES
from othello.core.board import Board, Cell
from othello.core.evaluator import build_evaluator
from othello.core.moves import Move, NO_MOVE, apply_move, legal_moves
from othello.core.utils import format_info

logger = logging.getLogger(__name__)

INF = 10000000.0


class SearchResult(NamedTuple):
    move: Move
    score: float
    nodes: int


class SearchEngine:
    """Depth-limited minimax over private board copies.

    Leaves are always scored from the root side's perspective: the root
    maximizes, the plies where the opponent moves minimize.
    """

    def __init__(self, evaluator=None, depth: Optional[int] = None, pruning: Optional[str] = None):
        self.evaluator = evaluator or build_evaluator()
        self.max_depth = CONFIG.search.depth if depth is None else depth
        self.pruning = pruning or CONFIG.search.pruning
        if self.pruning not in PRUNING_MODES:
            raise ValueError(f"Unknown pruning mode {self.pruning!r}, expected one of {PRUNING_MODES}")
        self.nodes = 0

    def search_best_move(self, board: Board, side: Cell, depth: Optional[int] = None) -> SearchResult:
        """Pick a move for ``side``; NO_MOVE when it has none or depth is 0."""
        depth = self.max_depth if depth is None else depth
        self.nodes = 0
        start_time = time.time()

        if self.pruning == "alphabeta":
            score, move = self._alphabeta(board, depth, -INF, INF, True, side, side)
        else:
            # The root's bound is its own static evaluation.
            bound = self.evaluator.evaluate(board, side)
            score, move = self._single_bound(board, depth, True, bound, side, side)

        if CONFIG.search.log_info:
            elapsed = time.time() - start_time
            logger.info(format_info(depth, score, self.nodes, elapsed, move))
        return SearchResult(move, score, self.nodes)

    def _single_bound(self, board: Board, depth: int, maximizing: bool, bound: float,
                      to_move: Cell, root: Cell) -> Tuple[float, Move]:
        """Fail-soft search carrying only the parent's running best as a bound.

        A node stops expanding siblings once its own best reaches the bound.
        """
        self.nodes += 1
        moves = legal_moves(board, to_move)
        if depth <= 0 or not moves:
            return self.evaluator.evaluate(board, root), NO_MOVE

        best_value = -INF if maximizing else INF
        best_move = NO_MOVE
        for move in moves:
            child = board.copy()
            apply_move(child, move, to_move)
            value, _ = self._single_bound(child, depth - 1, not maximizing, best_value,
                                          to_move.opponent, root)
            if (value > best_value) if maximizing else (value < best_value):
                best_value = value
                best_move = move
                if (best_value >= bound) if maximizing else (best_value <= bound):
                    break
        return best_value, best_move

    def _alphabeta(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool,
                   to_move: Cell, root: Cell) -> Tuple[float, Move]:
        self.nodes += 1
        moves = legal_moves(board, to_move)
        if depth <= 0 or not moves:
            return self.evaluator.evaluate(board, root), NO_MOVE

        best_value = -INF if maximizing else INF
        best_move = NO_MOVE
        for move in moves:
            child = board.copy()
            apply_move(child, move, to_move)
            value, _ = self._alphabeta(child, depth - 1, alpha, beta, not maximizing,
                                       to_move.opponent, root)
            if maximizing:
                if value > best_value:
                    best_value, best_move = value, move
                alpha = max(alpha, best_value)
            else:
                if value < best_value:
                    best_value, best_move = value, move
                beta = min(beta, best_value)
            if alpha >= beta:
                break
        return best_value, best_move
