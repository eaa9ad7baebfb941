"""Legal move enumeration."""

from __future__ import annotations

from typing import List

from engine.board import Board, Move
from engine.pieces import Side


def possible_moves(side: Side, board: Board) -> List[Move]:
    """
    Return every legal placement for side, x outer and y inner.

    Search strategies break score ties by this order, so it must stay fixed.
    """
    moves: List[Move] = []
    for x, y in board.iter_positions():
        move = Move(x, y)
        if board.check_move(move, side):
            moves.append(move)
    return moves
