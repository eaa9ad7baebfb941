"""Othello board state, move legality, and disc flipping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from engine.pieces import CODE_SYMBOL, EMPTY, SIDE_CODE, SYMBOL_CODE, Side
from engine.rules import BOARD_SIZE, CORNERS, DIRECTIONS, Position, in_bounds, ray


@dataclass(frozen=True)
class Move:
    """A disc placement at column x, row y."""

    x: int
    y: int

    @property
    def pos(self) -> Position:
        return (self.x, self.y)


class Board:
    """8x8 Othello board backed by a numpy grid indexed [x, y]."""

    size: int = BOARD_SIZE

    def __init__(self) -> None:
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)
        mid = self.size // 2
        self.grid[mid - 1, mid - 1] = SIDE_CODE[Side.WHITE]
        self.grid[mid, mid] = SIDE_CODE[Side.WHITE]
        self.grid[mid - 1, mid] = SIDE_CODE[Side.BLACK]
        self.grid[mid, mid - 1] = SIDE_CODE[Side.BLACK]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows.

        Each of the 8 rows is one y coordinate; characters are x = 0..7 using
        "B" for black, "W" for white and "." for empty.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells.")
        board = cls.__new__(cls)
        board.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                if symbol not in SYMBOL_CODE:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({x}, {y}).")
                board.grid[x, y] = SYMBOL_CODE[symbol]
        return board

    def copy(self) -> "Board":
        """Return an independent deep copy."""
        cloned = Board.__new__(Board)
        cloned.grid = self.grid.copy()
        return cloned

    def iter_positions(self) -> Iterable[Position]:
        """Yield all board positions, x outer and y inner."""
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y)

    def get_cell(self, pos: Position) -> Optional[Side]:
        """Return the side occupying a position, or None when empty."""
        code = int(self.grid[pos])
        if code == EMPTY:
            return None
        return Side.BLACK if code == SIDE_CODE[Side.BLACK] else Side.WHITE

    def check_move(self, move: Optional[Move], side: Side) -> bool:
        """Return whether side may play move. A pass (None) is legal only without placements."""
        if move is None:
            return not self.has_moves(side)
        pos = move.pos
        if not in_bounds(pos) or self.grid[pos] != EMPTY:
            return False
        return any(self._bracketed_run(pos, direction, side) for direction in DIRECTIONS)

    def has_moves(self, side: Side) -> bool:
        for x, y in self.iter_positions():
            if self.check_move(Move(x, y), side):
                return True
        return False

    def do_move(self, move: Optional[Move], side: Side) -> None:
        """Place a disc for side and flip every bracketed run. None is a pass."""
        if move is None:
            return
        pos = move.pos
        if not in_bounds(pos) or self.grid[pos] != EMPTY:
            raise ValueError(f"Illegal move {move} for {side.value}: cell unavailable.")

        flips: List[Position] = []
        for direction in DIRECTIONS:
            flips.extend(self._bracketed_run(pos, direction, side))
        if not flips:
            raise ValueError(f"Illegal move {move} for {side.value}: nothing to flip.")

        code = SIDE_CODE[side]
        self.grid[pos] = code
        for cell in flips:
            self.grid[cell] = code

    def _bracketed_run(self, start: Position, direction: Position, side: Side) -> List[Position]:
        """Opposing discs between start and the nearest own disc in one direction."""
        own = SIDE_CODE[side]
        run: List[Position] = []
        for cell in ray(start, direction):
            value = self.grid[cell]
            if value == -own:
                run.append(cell)
                continue
            if value == own:
                return run
            return []
        return []

    def count(self, side: Side) -> int:
        """Number of discs side has on the board."""
        return int(np.count_nonzero(self.grid == SIDE_CODE[side]))

    def count_corners(self, side: Side) -> int:
        """Number of the four corner cells side occupies."""
        code = SIDE_CODE[side]
        return sum(1 for corner in CORNERS if self.grid[corner] == code)

    def is_done(self) -> bool:
        """True when neither side has a legal placement."""
        return not self.has_moves(Side.BLACK) and not self.has_moves(Side.WHITE)

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = ["   " + " ".join(str(x) for x in range(self.size))]
        for y in range(self.size):
            row_cells = [CODE_SYMBOL[int(self.grid[x, y])] for x in range(self.size)]
            lines.append(f"{y:>2d} " + " ".join(row_cells))
        return "\n".join(lines)
