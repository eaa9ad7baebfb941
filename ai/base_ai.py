"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from engine.board import Board, Move
from engine.pieces import Side


class BaseAI(ABC):
    """Abstract move-selection strategy contract."""

    @abstractmethod
    def choose_move(
        self,
        board: Board,
        side: Side,
        candidates: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        """
        Choose a legal move for side without mutating board.

        candidates, when given, are the already enumerated legal moves for side.
        Returns None when side has no legal move.
        """
        raise NotImplementedError
