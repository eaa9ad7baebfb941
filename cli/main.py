"""CLI entrypoint for playing Othello against the agent."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Tuple

from ai.agent_config import STRATEGIES, AgentConfig, build_ai
from ai.movegen import possible_moves
from ai.player import Player
from engine.board import Board, Move
from engine.pieces import Side

HELP_TEXT = "Commands: <x> <y> | pass | help | quit"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Othello in terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to agent config JSON")
    parser.add_argument("--strategy", type=str, default=None, choices=STRATEGIES, help="Agent search strategy")
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth")
    parser.add_argument(
        "--human-side",
        type=str,
        default="black",
        choices=["black", "white"],
        help="Which side the human controls",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def load_agent_config(args: argparse.Namespace) -> AgentConfig:
    config = AgentConfig.from_json(args.config) if args.config else AgentConfig({})
    if args.strategy is not None:
        config.strategy = args.strategy
    if args.depth is not None:
        config.depth = args.depth
    return config


def parse_user_move(command: str) -> Tuple[bool, Optional[Move]]:
    """
    Parse a human command.

    Returns (ok, move): "pass" gives (True, None), "x y" gives (True, Move),
    anything else gives (False, None).
    """
    parts = command.strip().lower().split()
    if parts == ["pass"]:
        return True, None
    if len(parts) != 2:
        return False, None
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        return False, None
    return True, Move(x, y)


def run_cli() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("othello.cli")

    human_side = Side.BLACK if args.human_side == "black" else Side.WHITE
    agent = Player(human_side.opponent(), build_ai(load_agent_config(args)))
    board = Board()
    turn = Side.BLACK
    last_move: Optional[Move] = None

    logger.info("Starting Othello game. Human=%s AI=%s", human_side.value, agent.side.value)
    print(HELP_TEXT)

    while not board.is_done():
        print()
        print(board.render_ascii())
        print(f"Turn: {turn.value} | black={board.count(Side.BLACK)} white={board.count(Side.WHITE)}")

        if turn is human_side:
            user_input = input("Your move> ").strip()
            if user_input.lower() in {"quit", "exit"}:
                print("Exiting game.")
                return
            if user_input.lower() == "help":
                print(HELP_TEXT)
                print("Legal: " + ", ".join(f"{m.x} {m.y}" for m in possible_moves(human_side, board)))
                continue

            ok, move = parse_user_move(user_input)
            if not ok:
                print("Invalid command format.")
                continue
            if not board.check_move(move, human_side):
                print("Illegal move for current state.")
                continue
        else:
            move = agent.compute_move(last_move, None)
            print(f"AI move: {'pass' if move is None else f'{move.x} {move.y}'}")

        board.do_move(move, turn)
        last_move = move
        turn = turn.opponent()

    print()
    print(board.render_ascii())
    black, white = board.count(Side.BLACK), board.count(Side.WHITE)
    if black == white:
        print(f"Game ended in draw ({black}-{white}).")
    else:
        winner = Side.BLACK if black > white else Side.WHITE
        print(f"Winner: {winner.value} ({black}-{white})")


if __name__ == "__main__":
    run_cli()
