"""
Integration test suite for the Othello engine.

Tests components working together end-to-end:
- Full game simulations through the host call contract (engine vs engine)
- Pass handling when one side is blocked
- FastAPI REST API integration
- Terminal driver
"""

import pytest

from othello.core.board import Board, Cell
from othello.core.moves import Move, NO_MOVE, apply_move, is_game_over
from othello.core.search import SearchEngine
from othello.core.simple_evaluator import SimpleEvaluator
from othello.main import OthelloEngine


def play_out(black: OthelloEngine, white: OthelloEngine, depth: int, max_plies: int = 130):
    """Drive a game between two facades the way a match host would.

    Each engine keeps its own board in sync through play_move.
    """
    players = {False: black, True: white}
    is_white = False
    passes = 0
    plies = 0
    while passes < 2 and plies < max_plies:
        mover = players[is_white]
        if not mover.legal_moves(is_white):
            passes += 1
            is_white = not is_white
            continue
        passes = 0
        move = mover.get_next_move(mover.get_board(), depth, is_white)
        assert move != NO_MOVE
        assert move in mover.legal_moves(is_white), f"Illegal move {move} at ply {plies}"
        for engine in (black, white):
            assert engine.play_move(move[0], move[1], is_white)
        plies += 1
        is_white = not is_white
    return plies


# ════════════════════════════════════════════════════════════════════════════
#  ENGINE VS ENGINE — FULL GAME SIMULATIONS
# ════════════════════════════════════════════════════════════════════════════


class TestFullGame:
    """Tests that the engine can play complete games without crashing."""

    def test_engine_vs_engine_completes(self):
        """Two engines play a full game, which must end with both sides blocked."""
        black, white = OthelloEngine(depth=2), OthelloEngine(depth=2)
        plies = play_out(black, white, depth=2)

        assert plies > 10
        assert black.is_game_over()
        assert black.get_board() == white.get_board()
        board = Board.from_external(black.get_board())
        total = board.count_of(Cell.WHITE) + board.count_of(Cell.BLACK) + board.empties()
        assert total == 64
        assert black.get_black_score() + black.get_white_score() == 4 + plies

    def test_alphabeta_vs_single_bound(self):
        black = OthelloEngine(depth=2)
        white = OthelloEngine(depth=2)
        white.search = SearchEngine(depth=2, pruning="alphabeta")
        play_out(black, white, depth=2)
        assert white.is_game_over()

    def test_simple_evaluator_game(self):
        black = OthelloEngine(depth=1, evaluator=SimpleEvaluator())
        white = OthelloEngine(depth=1)
        play_out(black, white, depth=1)
        assert black.is_game_over()

    def test_games_are_reproducible(self):
        first = OthelloEngine(depth=1), OthelloEngine(depth=1)
        second = OthelloEngine(depth=1), OthelloEngine(depth=1)
        play_out(*first, depth=1)
        play_out(*second, depth=1)
        assert first[0].get_board() == second[0].get_board()

    def test_clock_toggles_every_move(self):
        black, white = OthelloEngine(depth=1), OthelloEngine(depth=1)
        for _ in range(6):
            for is_white in (False, True):
                move = black.get_next_move(black.get_board(), 1, is_white)
                black.play_move(move[0], move[1], is_white)
                running = black.clocks.running_side()
                assert running == (Cell.BLACK if is_white else Cell.WHITE)
                assert black.clocks.white.running != black.clocks.black.running


# ════════════════════════════════════════════════════════════════════════════
#  PASS HANDLING
# ════════════════════════════════════════════════════════════════════════════


class TestPasses:
    def blocked_white_grid(self):
        # White's only disc is bracketed against the edge, so white cannot move
        # while black still can.
        board = Board()
        board[0, 0] = Cell.BLACK
        board[0, 1] = Cell.WHITE
        return board.to_external()

    def test_blocked_side_gets_sentinel(self):
        engine = OthelloEngine(depth=3)
        assert engine.get_next_move(self.blocked_white_grid(), 3, True) == (-1, -1)
        assert engine.legal_moves(True) == ()
        assert engine.legal_moves(False) == (Move(0, 2),)

    def test_core_does_not_advance_turn(self):
        engine = OthelloEngine(depth=3)
        engine.load_board(self.blocked_white_grid())
        before = engine.get_board()
        assert engine.get_next_move(before, 3, True) == (-1, -1)
        assert engine.get_board() == before
        # host passes the turn: black may move
        assert engine.play_move(0, 2, False)
        assert engine.is_game_over()

    def test_search_inside_tree_treats_pass_as_leaf(self):
        board = Board()
        board[0, 0] = Cell.BLACK
        board[0, 1] = Cell.WHITE
        result = SearchEngine(depth=4).search_best_move(board, Cell.BLACK)
        assert result.move == Move(0, 2)
        after = board.copy()
        apply_move(after, result.move, Cell.BLACK)
        assert is_game_over(after)


# ════════════════════════════════════════════════════════════════════════════
#  REST API INTEGRATION
# ════════════════════════════════════════════════════════════════════════════


class TestAPIIntegration:
    """Tests FastAPI REST API endpoints."""

    @pytest.fixture(autouse=True)
    def setup_client(self):
        from fastapi.testclient import TestClient
        from interface.api import app, engine

        self.client = TestClient(app)
        # Reset state before each test
        engine.reset()

    def test_get_name(self):
        response = self.client.get("/name")
        assert response.status_code == 200
        assert response.json()["name"] == "OthelloEngine"

    def test_get_board_initial(self):
        """GET /board returns the start position."""
        response = self.client.get("/board")
        assert response.status_code == 200
        data = response.json()
        assert data["board"] == Board.initial().to_external()
        assert data["white_score"] == 2
        assert data["black_score"] == 2
        assert data["legal_moves"]["black"] == [[5, 4], [3, 2], [2, 3], [4, 5]]
        assert data["legal_moves"]["white"] == [[5, 3], [3, 5], [2, 4], [4, 2]]
        assert data["is_game_over"] is False

    def test_post_move_valid(self):
        response = self.client.post("/move", json={"column": 2, "line": 3, "is_white": False})
        assert response.status_code == 200
        data = response.json()
        assert data["move"] == [2, 3]
        assert data["board"][3][3] == 1
        assert data["black_score"] == 4
        assert data["white_score"] == 1

    def test_post_move_illegal(self):
        response = self.client.post("/move", json={"column": 0, "line": 0, "is_white": False})
        assert response.status_code == 400
        assert self.client.get("/board").json()["board"] == Board.initial().to_external()

    def test_post_move_invalid_payload(self):
        response = self.client.post("/move", json={"column": "x"})
        assert response.status_code == 422

    def test_playable(self):
        r = self.client.get("/playable", params={"column": 2, "line": 3, "is_white": False})
        assert r.status_code == 200
        assert r.json()["playable"] is True
        r = self.client.get("/playable", params={"column": 2, "line": 3, "is_white": True})
        assert r.json()["playable"] is False

    def test_set_position_valid(self):
        grid = Board.initial().to_external()
        grid[2][3] = 1
        grid[3][3] = 1
        response = self.client.post("/position", json={"board": grid})
        assert response.status_code == 200
        assert response.json()["board"] == grid

    def test_set_position_bad_code(self):
        grid = Board.initial().to_external()
        grid[0][0] = 5
        response = self.client.post("/position", json={"board": grid})
        assert response.status_code == 400

    def test_set_position_bad_shape(self):
        response = self.client.post("/position", json={"board": [[-1] * 8] * 3})
        assert response.status_code == 400

    def test_search_returns_move(self):
        response = self.client.post("/search", json={"depth": 1, "is_white": False})
        assert response.status_code == 200
        data = response.json()
        assert data["move"] == [5, 4]
        assert data["nodes"] > 0

    def test_search_depth_zero(self):
        response = self.client.post("/search", json={"depth": 0})
        assert response.status_code == 200
        data = response.json()
        assert data["move"] is None
        assert data["score"] == 0

    def test_search_negative_depth(self):
        response = self.client.post("/search", json={"depth": -1})
        assert response.status_code == 400

    def test_search_leaves_board(self):
        before = self.client.get("/board").json()["board"]
        self.client.post("/search", json={"depth": 2, "is_white": False})
        assert self.client.get("/board").json()["board"] == before

    def test_search_does_not_touch_shared_engine(self):
        from interface.api import engine

        before = engine.search.nodes
        response = self.client.post("/search", json={"depth": 2, "is_white": False})
        assert response.json()["nodes"] > 0
        assert engine.search.nodes == before

    def test_search_node_count_per_request(self):
        first = self.client.post("/search", json={"depth": 1}).json()
        deeper = self.client.post("/search", json={"depth": 2}).json()
        again = self.client.post("/search", json={"depth": 1}).json()
        assert first["nodes"] == again["nodes"] == 5
        assert deeper["nodes"] > first["nodes"]

    def test_main_runs_uvicorn_with_config(self, monkeypatch):
        import uvicorn
        from interface import api
        from othello.config import CONFIG

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
        api.main()
        assert calls == [(api.app, {"host": CONFIG.ui.api_host, "port": CONFIG.ui.api_port,
                                    "log_level": CONFIG.log_level.lower()})]

    def test_search_blocked_side(self):
        board = Board()
        board[0, 0] = Cell.BLACK
        board[0, 1] = Cell.WHITE
        self.client.post("/position", json={"board": board.to_external()})
        response = self.client.post("/search", json={"depth": 2, "is_white": True})
        assert response.json()["move"] is None

    def test_evaluate_breakdown(self):
        response = self.client.get("/evaluate", params={"is_white": False})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 0
        assert set(data) == {"parity", "corners", "closeness", "mobility", "frontier", "position", "total"}

    def test_clock(self):
        self.client.post("/move", json={"column": 2, "line": 3, "is_white": False})
        data = self.client.get("/clock").json()
        assert data["black"] >= 0
        assert data["white"] >= 0

    def test_reset_board(self):
        self.client.post("/move", json={"column": 2, "line": 3, "is_white": False})
        response = self.client.post("/reset")
        assert response.status_code == 200
        assert response.json()["board"] == Board.initial().to_external()

    def test_full_api_game_flow(self):
        """Let the engine pick moves for both sides for a few plies."""
        is_white = False
        for _ in range(6):
            r = self.client.post("/search", json={"depth": 2, "is_white": is_white})
            move = r.json()["move"]
            assert move is not None
            r = self.client.post("/move", json={"column": move[0], "line": move[1], "is_white": is_white})
            assert r.status_code == 200
            is_white = not is_white
        data = self.client.get("/board").json()
        assert data["white_score"] + data["black_score"] == 10


# ════════════════════════════════════════════════════════════════════════════
#  TERMINAL DRIVER
# ════════════════════════════════════════════════════════════════════════════


class TestCLI:
    def test_engine_vs_engine(self, capsys):
        from interface.cli import play

        game = play("engine", "engine", depth=1)
        out = capsys.readouterr().out
        assert "Game Over" in out
        assert "Engine plays:" in out
        assert game.is_game_over()

    def test_depth_zero_falls_back_to_first_move(self, capsys):
        from interface.cli import play

        game = play("engine", "engine", depth=0)
        assert game.is_game_over()

    def test_human_move_prompt(self, monkeypatch, capsys):
        from interface.cli import ask_move

        answers = iter(["zz", "a1", "d3"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        game = OthelloEngine(depth=1)
        move = ask_move(game, Cell.BLACK)
        out = capsys.readouterr().out
        assert move == Move(2, 3)
        assert "Invalid square" in out
        assert "Illegal move" in out
        assert game.get_black_score() == 4

    def test_main_parses_args(self, capsys):
        from interface.cli import main, parse_args

        args = parse_args(["--black", "engine", "--white", "engine", "--depth", "1"])
        assert args.black == "engine" and args.depth == 1
        main(["--black", "engine", "--white", "engine", "--depth", "1", "--log-level", "WARNING"])
        assert "Game Over" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
