"""Static position evaluation."""

from __future__ import annotations

from typing import Callable

from engine.board import Board
from engine.pieces import Side

CORNER_WEIGHT = 5

Evaluation = Callable[[Board, Side, Side], int]


def coin_parity(board: Board, for_side: Side, against_side: Side) -> int:
    """Disc count difference, the pure material score."""
    return board.count(for_side) - board.count(against_side)


def corner_term(board: Board, for_side: Side, against_side: Side) -> int:
    own = board.count_corners(for_side)
    other = board.count_corners(against_side)
    if own + other == 0:
        return 0
    return CORNER_WEIGHT * (own - other)


def evaluate(board: Board, for_side: Side, against_side: Side) -> int:
    """Score board for for_side. Antisymmetric: swapping the sides negates it."""
    return coin_parity(board, for_side, against_side) + corner_term(board, for_side, against_side)
