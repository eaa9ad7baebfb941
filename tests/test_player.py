import logging

import numpy as np
import pytest

from ai.base_ai import BaseAI
from ai.greedy_ai import GreedyAI
from ai.heuristics import coin_parity
from ai.minimax_ai import MinimaxAI, WorstCaseAI
from ai.movegen import possible_moves
from ai.player import Player
from engine.board import Board, Move
from engine.pieces import Side


class RecordingAI(BaseAI):
    """Delegates to greedy search and records what it was shown."""

    def __init__(self):
        self.calls = []
        self._inner = GreedyAI()

    def choose_move(self, board, side, candidates=None):
        self.calls.append((board.grid.copy(), side, list(candidates)))
        return self._inner.choose_move(board, side, candidates)


class TestPlayer:
    def test_defaults_to_worst_case_search(self):
        player = Player(Side.BLACK)
        assert isinstance(player.strategy, WorstCaseAI)
        assert player.op_side is Side.WHITE
        assert player.testing_minimax is False

    def test_first_move_is_applied_and_returned(self):
        player = Player(Side.BLACK)
        move = player.compute_move(None, -1)
        assert move == Move(2, 3)
        assert player.board.count(Side.BLACK) == 4
        assert player.board.count(Side.WHITE) == 1

    def test_opponent_move_applied_before_search(self):
        strategy = RecordingAI()
        player = Player(Side.WHITE, strategy=strategy)
        move = player.compute_move(Move(2, 3), None)

        shown_grid, side, candidates = strategy.calls[0]
        expected = Board()
        expected.do_move(Move(2, 3), Side.BLACK)
        assert side is Side.WHITE
        assert np.array_equal(shown_grid, expected.grid)
        assert candidates == possible_moves(Side.WHITE, expected)
        assert move in candidates
        assert player.board.count(Side.WHITE) == 3

    def test_returned_move_is_legal_for_agent(self):
        referee = Board()
        player = Player(Side.BLACK)
        move = player.compute_move(None)
        assert referee.check_move(move, Side.BLACK)

    def test_pass_leaves_board_untouched(self, one_empty_cell):
        before = one_empty_cell.grid.copy()
        strategy = RecordingAI()
        player = Player(Side.WHITE, strategy=strategy, board=one_empty_cell)
        assert player.compute_move(None, 1000) is None
        assert strategy.calls == []
        assert np.array_equal(before, player.board.grid)

    def test_pass_after_opponent_move_keeps_only_that_move(self):
        rows = ["BBBBBBBB"] * 7 + ["BBBBBW.."]
        player = Player(Side.WHITE, board=Board.from_rows(rows))
        assert player.compute_move(Move(6, 7), None) is None
        assert player.board.count(Side.WHITE) == 0
        assert player.board.get_cell((6, 7)) is Side.BLACK

    def test_near_full_board_terminates(self, one_empty_cell):
        black = Player(Side.BLACK, board=one_empty_cell)
        assert possible_moves(Side.BLACK, one_empty_cell) == [Move(7, 7)]
        assert black.compute_move(None) == Move(7, 7)
        assert black.board.is_done()

    def test_testing_minimax_uses_material_search(self, midgame_positions):
        board = midgame_positions[6]
        expected = MinimaxAI(depth=2, evaluate_fn=coin_parity).choose_move(board, Side.BLACK)
        player = Player(Side.BLACK, strategy=RecordingAI(), board=board.copy())
        player.testing_minimax = True
        assert player.compute_move(None) == expected
        assert player.strategy.calls == []

    def test_exceeded_budget_is_logged(self, caplog):
        player = Player(Side.BLACK)
        with caplog.at_level(logging.WARNING, logger="ai.player"):
            player.compute_move(None, 0)
        assert any("exceeded its time budget" in r.getMessage() for r in caplog.records)

    def test_broken_strategy_is_reported(self):
        class NoMoveAI(BaseAI):
            def choose_move(self, board, side, candidates=None):
                return None

        player = Player(Side.BLACK, strategy=NoMoveAI())
        with pytest.raises(RuntimeError):
            player.compute_move(None)
