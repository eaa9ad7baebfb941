"""Geometry helpers for the 8x8 Othello board."""

from __future__ import annotations

from typing import Iterator, Tuple

BOARD_SIZE = 8

Position = Tuple[int, int]

DIRECTIONS: Tuple[Position, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

CORNERS: Tuple[Position, ...] = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)


def in_bounds(pos: Position) -> bool:
    """Return whether a position is inside the board."""
    x, y = pos
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def ray(start: Position, direction: Position) -> Iterator[Position]:
    """Yield positions walking from start (exclusive) in one direction until the edge."""
    dx, dy = direction
    x, y = start[0] + dx, start[1] + dy
    while in_bounds((x, y)):
        yield (x, y)
        x += dx
        y += dy
