"""Core engine components: board, move generation, evaluators and search."""

from .board import Board, Cell
from .moves import Move, NO_MOVE, apply_move, legal_moves
from .evaluator import Evaluator, build_evaluator
from .simple_evaluator import SimpleEvaluator
from .search import SearchEngine, SearchResult
