"""Depth-limited minimax search for Othello."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ai.base_ai import BaseAI
from ai.heuristics import Evaluation, evaluate
from ai.movegen import possible_moves
from engine.board import Board, Move
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)

WORST_CASE_DEPTH = 2


@dataclass(frozen=True)
class SearchResult:
    """Score of a node and the move achieving it at that node (None at leaves and passes)."""

    score: int
    move: Optional[Move]


def _improves(score: int, incumbent: int, maximizing: bool) -> bool:
    # Strict comparison keeps the earliest enumerated move on ties.
    return score > incumbent if maximizing else score < incumbent


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    my_side: Side,
    op_side: Side,
    evaluate_fn: Evaluation = evaluate,
) -> SearchResult:
    """
    Plain minimax from my_side's perspective.

    Every child is searched on its own copy of board, so board is never mutated.
    A side with no legal move at a non-terminal node passes: the pass uses up one
    ply and the other side moves next.
    """
    if depth <= 0 or board.is_done():
        return SearchResult(evaluate_fn(board, my_side, op_side), None)

    mover = my_side if maximizing else op_side
    candidates = possible_moves(mover, board)
    if not candidates:
        passed = minimax(board.copy(), depth - 1, not maximizing, my_side, op_side, evaluate_fn)
        return SearchResult(passed.score, None)

    best: Optional[SearchResult] = None
    for move in candidates:
        child = board.copy()
        child.do_move(move, mover)
        score = minimax(child, depth - 1, not maximizing, my_side, op_side, evaluate_fn).score
        if best is None or _improves(score, best.score, maximizing):
            best = SearchResult(score, move)
    return best


class MinimaxAI(BaseAI):
    """Fixed-depth minimax over a heuristic evaluation."""

    def __init__(
        self,
        depth: int = 3,
        evaluate_fn: Evaluation = evaluate,
        debug_top_k: int = 3,
    ) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}.")
        self.depth = depth
        self.evaluate_fn = evaluate_fn
        self.debug_top_k = max(1, debug_top_k)

    def choose_move(
        self,
        board: Board,
        side: Side,
        candidates: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        """Choose the root move with the best minimax value, earliest first on ties."""
        if candidates is None:
            candidates = possible_moves(side, board)
        if not candidates:
            return None

        opponent = side.opponent()
        best_move: Optional[Move] = None
        best_score = 0
        diagnostics: List[Tuple[Move, int]] = []

        for move in candidates:
            child = board.copy()
            child.do_move(move, side)
            score = minimax(child, self.depth - 1, False, side, opponent, self.evaluate_fn).score
            diagnostics.append((move, score))
            if best_move is None or _improves(score, best_score, True):
                best_move = move
                best_score = score

        self._log_diagnostics(diagnostics, best_move)
        LOGGER.debug("Minimax depth=%d selected %s with score %d", self.depth, best_move, best_score)
        return best_move

    def _log_diagnostics(self, diagnostics: List[Tuple[Move, int]], chosen: Optional[Move]) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=True)
        for idx, (move, value) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d move=%s eval=%d chosen=%s", idx, move, value, move == chosen)


class WorstCaseAI(MinimaxAI):
    """
    Two-ply worst-case search.

    Each candidate is scored by the opponent's most damaging reply. When the
    opponent has no reply the position right after the candidate is evaluated.
    """

    def __init__(self, evaluate_fn: Evaluation = evaluate, debug_top_k: int = 3) -> None:
        super().__init__(depth=WORST_CASE_DEPTH, evaluate_fn=evaluate_fn, debug_top_k=debug_top_k)
