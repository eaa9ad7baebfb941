"""Agent configuration and strategy factory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from ai.base_ai import BaseAI
from ai.greedy_ai import GreedyAI
from ai.heuristics import Evaluation, coin_parity, evaluate
from ai.minimax_ai import MinimaxAI, WorstCaseAI

STRATEGIES = ("greedy", "worst_case", "minimax")

EVALUATIONS: Dict[str, Evaluation] = {
    "heuristic": evaluate,
    "material": coin_parity,
}


class AgentConfig:
    """Container for agent settings loaded from a payload or config file."""

    def __init__(self, payload: Dict[str, object]) -> None:
        self.strategy = str(payload.get("strategy", "worst_case"))
        self.depth = int(payload.get("depth", 2))
        self.evaluation = str(payload.get("evaluation", "heuristic"))
        self.debug_top_k = int(payload.get("debug_top_k", 3))

    @classmethod
    def from_json(cls, path: str | Path) -> "AgentConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)


def build_ai(config: AgentConfig) -> BaseAI:
    """Instantiate the strategy named by config."""
    if config.evaluation not in EVALUATIONS:
        raise ValueError(f"Unsupported evaluation: {config.evaluation}")
    evaluate_fn = EVALUATIONS[config.evaluation]

    if config.strategy == "greedy":
        return GreedyAI(evaluate_fn=evaluate_fn)
    if config.strategy == "worst_case":
        return WorstCaseAI(evaluate_fn=evaluate_fn, debug_top_k=config.debug_top_k)
    if config.strategy == "minimax":
        return MinimaxAI(depth=config.depth, evaluate_fn=evaluate_fn, debug_top_k=config.debug_top_k)
    raise ValueError(f"Unsupported strategy: {config.strategy}")
