"""Side definitions and disc encodings for Othello."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Side(str, Enum):
    """Player side. Black moves first."""

    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK


EMPTY = 0

SIDE_CODE: Dict[Side, int] = {
    Side.BLACK: 1,
    Side.WHITE: -1,
}

SIDE_SYMBOL: Dict[Side, str] = {
    Side.BLACK: "B",
    Side.WHITE: "W",
}

EMPTY_SYMBOL = "."

SYMBOL_CODE: Dict[str, int] = {
    EMPTY_SYMBOL: EMPTY,
    SIDE_SYMBOL[Side.BLACK]: SIDE_CODE[Side.BLACK],
    SIDE_SYMBOL[Side.WHITE]: SIDE_CODE[Side.WHITE],
}

CODE_SYMBOL: Dict[int, str] = {code: symbol for symbol, code in SYMBOL_CODE.items()}
