"""Othello/Reversi engine with a heuristic evaluator and depth-limited search."""

from .main import OthelloEngine
from .playable import Playable
