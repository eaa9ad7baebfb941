"""One-ply greedy AI."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ai.base_ai import BaseAI
from ai.heuristics import Evaluation, evaluate
from ai.movegen import possible_moves
from engine.board import Board, Move
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)


class GreedyAI(BaseAI):
    """Pick the move whose resulting position scores best right away."""

    def __init__(self, evaluate_fn: Evaluation = evaluate) -> None:
        self.evaluate_fn = evaluate_fn

    def choose_move(
        self,
        board: Board,
        side: Side,
        candidates: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        if candidates is None:
            candidates = possible_moves(side, board)

        opponent = side.opponent()
        best_move: Optional[Move] = None
        best_score = 0
        for move in candidates:
            trial = board.copy()
            trial.do_move(move, side)
            score = self.evaluate_fn(trial, side, opponent)
            if best_move is None or score > best_score:
                best_move = move
                best_score = score

        if best_move is not None:
            LOGGER.debug("Greedy selected %s with score %d", best_move, best_score)
        return best_move
