from typing import List

import pytest

from ai.greedy_ai import GreedyAI
from ai.heuristics import coin_parity
from engine.board import Board
from engine.pieces import Side

EMPTY_ROW = "........"


@pytest.fixture
def opening() -> Board:
    return Board()


@pytest.fixture
def stranded_white() -> Board:
    """Black can capture either white disc; afterwards white is left without a reply."""
    rows = ["BW......"] + [EMPTY_ROW] * 6 + ["BW......"]
    return Board.from_rows(rows)


@pytest.fixture
def one_empty_cell() -> Board:
    """Full board except (7, 7); only black can fill it, by flipping (6, 7)."""
    rows = ["BBBBBBBB"] * 7 + ["BBBBBBW."]
    return Board.from_rows(rows)


@pytest.fixture
def midgame_positions() -> List[Board]:
    """Positions reached by a greedy self-play game, sampled every ply."""
    board = Board()
    greedy = GreedyAI(evaluate_fn=coin_parity)
    positions = [board.copy()]
    side = Side.BLACK
    for _ in range(20):
        if board.is_done():
            break
        move = greedy.choose_move(board, side)
        board.do_move(move, side)
        positions.append(board.copy())
        side = side.opponent()
    return positions
