import argparse

from othello.config import CONFIG
from othello.core.board import Cell, flag_from_side
from othello.core.moves import NO_MOVE, winner
from othello.core.utils import parse_square, setup_logging, square_name
from othello.main import OthelloEngine


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Othello in the terminal.")
    parser.add_argument("--black", choices=("human", "engine"), default="human")
    parser.add_argument("--white", choices=("human", "engine"), default="engine")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth)
    parser.add_argument("--log-level", default=CONFIG.log_level)
    return parser.parse_args(argv)


def ask_move(game: OthelloEngine, side: Cell):
    is_white = flag_from_side(side)
    while True:
        text = input(f"{side.name.lower()} move (e.g. d3): ")
        try:
            move = parse_square(text)
        except ValueError as e:
            print(e)
            continue
        if game.play_move(move.row, move.col, is_white):
            return move
        print("Illegal move, try again.")


def play(black: str, white: str, depth: int) -> OthelloEngine:
    game = OthelloEngine(depth=depth)
    players = {Cell.BLACK: black, Cell.WHITE: white}
    side = Cell.BLACK
    passes = 0

    while passes < 2:
        print(game.board)
        print("----------------------------")
        is_white = flag_from_side(side)

        if not game.legal_moves(is_white):
            print(f"{side.name.lower()} has no move and passes.")
            passes += 1
            side = side.opponent
            continue
        passes = 0

        if players[side] == "human":
            ask_move(game, side)
        else:
            move = game.get_next_move(game.get_board(), depth, is_white)
            if move == NO_MOVE:
                # depth 0 searches never pick a move; fall back to the first legal one
                move = game.legal_moves(is_white)[0]
            game.play_move(move.row, move.col, is_white)
            print(f"Engine plays: {square_name(move)}")
        side = side.opponent

    print(game.board)
    print("Game Over")
    print(f"Black {game.get_black_score()} - White {game.get_white_score()}")
    result = winner(game.board)
    print("Draw" if result is None else f"Winner: {result.name.lower()}")
    return game


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    play(args.black, args.white, args.depth)


if __name__ == "__main__":
    main()
