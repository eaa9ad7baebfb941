"""Agent-vs-agent Othello matches refereed on an independent board."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ai.agent_config import STRATEGIES, AgentConfig, build_ai
from ai.player import Player
from engine.board import Board, Move
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)

MAX_PLIES = 128


@dataclass
class MatchStats:
    """Summary of one finished match."""

    winner: Optional[Side]
    black_discs: int
    white_discs: int
    plies: int


def run_match(black: Player, white: Player, max_plies: int = MAX_PLIES) -> MatchStats:
    """
    Play black against white until neither can move.

    Each agent is told only the other's last move, as in a real referee loop.
    """
    players = {Side.BLACK: black, Side.WHITE: white}
    referee = Board()
    turn = Side.BLACK
    last_move: Optional[Move] = None
    plies = 0

    while not referee.is_done() and plies < max_plies:
        move = players[turn].compute_move(last_move, None)
        if not referee.check_move(move, turn):
            raise RuntimeError(f"{turn.value} returned illegal move {move}.")
        referee.do_move(move, turn)
        LOGGER.debug("Ply %d: %s -> %s", plies, turn.value, move)
        last_move = move
        turn = turn.opponent()
        plies += 1

    black_discs = referee.count(Side.BLACK)
    white_discs = referee.count(Side.WHITE)
    winner: Optional[Side] = None
    if black_discs > white_discs:
        winner = Side.BLACK
    elif white_discs > black_discs:
        winner = Side.WHITE
    return MatchStats(winner=winner, black_discs=black_discs, white_discs=white_discs, plies=plies)


def summarize(results: List[MatchStats]) -> Dict[str, int]:
    return {
        "black_wins": sum(1 for r in results if r.winner is Side.BLACK),
        "white_wins": sum(1 for r in results if r.winner is Side.WHITE),
        "draws": sum(1 for r in results if r.winner is None),
    }


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Othello agent-vs-agent matches.")
    parser.add_argument("--black-strategy", type=str, default="worst_case", choices=STRATEGIES)
    parser.add_argument("--white-strategy", type=str, default="greedy", choices=STRATEGIES)
    parser.add_argument("--depth", type=int, default=3, help="Depth for the minimax strategy")
    parser.add_argument("--games", type=int, default=1, help="Number of matches to play")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    results: List[MatchStats] = []
    for game_index in range(args.games):
        black = Player(Side.BLACK, build_ai(AgentConfig({"strategy": args.black_strategy, "depth": args.depth})))
        white = Player(Side.WHITE, build_ai(AgentConfig({"strategy": args.white_strategy, "depth": args.depth})))
        stats = run_match(black, white)
        results.append(stats)
        LOGGER.info(
            "Game %d | winner=%s black=%d white=%d plies=%d",
            game_index + 1,
            stats.winner.value if stats.winner else "draw",
            stats.black_discs,
            stats.white_discs,
            stats.plies,
        )

    summary = summarize(results)
    LOGGER.info(
        "%s (black) vs %s (white) | B:%d W:%d D:%d",
        args.black_strategy,
        args.white_strategy,
        summary["black_wins"],
        summary["white_wins"],
        summary["draws"],
    )


if __name__ == "__main__":
    main()
