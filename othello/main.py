import logging
from datetime import timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from othello.clock import PlayerClocks
from othello.config import CONFIG
from othello.core.board import Board, Cell, side_from_flag
from othello.core.moves import Move, apply_move, is_game_over, legal_moves
from othello.core.search import SearchEngine

logger = logging.getLogger(__name__)


class OthelloEngine:
    """Session facade: one game board, a search engine and the player clocks.

    Coordinates follow the host contract: ``column`` is the first index of
    the grid returned by ``get_board`` and ``line`` the second, the same
    order ``get_next_move`` returns.
    """

    def __init__(self, depth: Optional[int] = None, evaluator=None, name: Optional[str] = None):
        self.name = name or CONFIG.ui.engine_name
        self.board = Board.initial()
        self.search = SearchEngine(evaluator, depth=depth)
        self.clocks = PlayerClocks(first=Cell.BLACK)
        self._moves_cache: Dict[Cell, Tuple[Move, ...]] = {}

    def get_name(self) -> str:
        return self.name

    def reset(self):
        self.board = Board.initial()
        self.clocks.reset(first=Cell.BLACK)
        self._moves_cache.clear()

    def load_board(self, grid: Sequence[Sequence[int]], strict: Optional[bool] = None):
        """Replace the session board with a host grid."""
        strict = CONFIG.board.strict_codes if strict is None else strict
        self.board = Board.from_external(grid, strict=strict)
        self._moves_cache.clear()

    def legal_moves(self, is_white: bool) -> Tuple[Move, ...]:
        side = side_from_flag(is_white)
        if side not in self._moves_cache:
            self._moves_cache[side] = tuple(legal_moves(self.board, side))
        return self._moves_cache[side]

    def is_playable(self, column: int, line: int, is_white: bool) -> bool:
        return Move(column, line) in legal_moves(self.board, side_from_flag(is_white))

    def play_move(self, column: int, line: int, is_white: bool) -> bool:
        side = side_from_flag(is_white)
        move = Move(column, line)
        if move not in legal_moves(self.board, side):
            logger.debug("Rejected move %s for %s", move, side.name)
            return False
        apply_move(self.board, move, side)
        self._moves_cache = {side.opponent: tuple(legal_moves(self.board, side.opponent))}
        self.clocks.switch_to(side.opponent)
        return True

    def get_next_move(self, game: Sequence[Sequence[int]], level: int, is_white_turn: bool) -> Move:
        """Load ``game`` and search it ``level`` plies deep; (-1, -1) when there is no move."""
        self.load_board(game)
        result = self.search.search_best_move(self.board, side_from_flag(is_white_turn), depth=level)
        return result.move

    def get_board(self) -> List[List[int]]:
        return self.board.to_external()

    def get_score(self, is_white: bool) -> int:
        return self.board.count_of(side_from_flag(is_white))

    def get_white_score(self) -> int:
        return self.get_score(True)

    def get_black_score(self) -> int:
        return self.get_score(False)

    def is_game_over(self) -> bool:
        return is_game_over(self.board)

    def elapsed_white(self) -> timedelta:
        return self.clocks.white.elapsed

    def elapsed_black(self) -> timedelta:
        return self.clocks.black.elapsed
