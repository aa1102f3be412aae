import logging

from othello.core.board import SIZE
from othello.core.moves import Move, NO_MOVE

FILES = "abcdefgh"[:SIZE]


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def square_name(move: Move) -> str:
    """'d3' style name: file letter from the column, rank digit from the row."""
    if move == NO_MOVE:
        return "pass"
    return f"{FILES[move.col]}{move.row + 1}"


def parse_square(text: str) -> Move:
    text = text.strip().lower()
    if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
        raise ValueError(f"Invalid square {text!r}, expected something like 'd3'")
    row = int(text[1]) - 1
    if not 0 <= row < SIZE:
        raise ValueError(f"Invalid square {text!r}, rank out of range")
    return Move(row, FILES.index(text[0]))


def format_info(depth, score, nodes, elapsed, move) -> str:
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    return (f"info depth {depth} score {score:.3f} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} move {square_name(move)}")
