"""Turn-by-turn Othello agent that tracks its own copy of the game."""

from __future__ import annotations

import logging
import time
from typing import Optional

from ai.base_ai import BaseAI
from ai.heuristics import coin_parity
from ai.minimax_ai import MinimaxAI, WorstCaseAI
from ai.movegen import possible_moves
from engine.board import Board, Move
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)


class Player:
    """
    Agent bound to one side for a whole game.

    The player owns its board: the opponent's moves are replayed onto it and
    every move it returns has already been applied to it. Search strategies
    only ever see this board read-only.
    """

    def __init__(
        self,
        side: Side,
        strategy: Optional[BaseAI] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.side = side
        self.op_side = side.opponent()
        self.strategy = strategy or WorstCaseAI()
        self._board = board if board is not None else Board()
        # Set when the agent is run against fixed minimax test positions.
        self.testing_minimax = False
        self._testing_strategy = MinimaxAI(depth=2, evaluate_fn=coin_parity)

    @property
    def board(self) -> Board:
        return self._board

    def compute_move(self, opponents_move: Optional[Move], ms_left: Optional[int] = None) -> Optional[Move]:
        """
        Compute the reply to opponents_move (None on the first turn or after a pass).

        ms_left is the remaining game time in milliseconds; None or a negative
        value means unlimited. Returns None when this side must pass.
        """
        started = time.perf_counter()
        self._board.do_move(opponents_move, self.op_side)

        candidates = possible_moves(self.side, self._board)
        if not candidates:
            LOGGER.info("%s has no legal move and passes.", self.side.value)
            return None

        strategy = self._testing_strategy if self.testing_minimax else self.strategy
        move = strategy.choose_move(self._board, self.side, candidates)
        if move is None:
            raise RuntimeError(f"{type(strategy).__name__} returned no move despite legal candidates.")
        self._board.do_move(move, self.side)

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        LOGGER.debug(
            "%s played %s out of %d candidates in %.1f ms (budget=%s)",
            self.side.value,
            move,
            len(candidates),
            elapsed_ms,
            "unlimited" if ms_left is None or ms_left < 0 else ms_left,
        )
        if ms_left is not None and ms_left >= 0 and elapsed_ms > ms_left:
            LOGGER.warning("%s exceeded its time budget: %.1f ms > %d ms", self.side.value, elapsed_ms, ms_left)
        return move
