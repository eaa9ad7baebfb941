import argparse
import json

from cli.main import load_agent_config, parse_user_move
from engine.board import Move


class TestParseUserMove:
    def test_coordinates(self):
        assert parse_user_move("2 3") == (True, Move(2, 3))
        assert parse_user_move("  5   4 ") == (True, Move(5, 4))

    def test_pass(self):
        assert parse_user_move("pass") == (True, None)
        assert parse_user_move("PASS") == (True, None)

    def test_garbage(self):
        assert parse_user_move("") == (False, None)
        assert parse_user_move("a b") == (False, None)
        assert parse_user_move("1 2 3") == (False, None)


class TestLoadAgentConfig:
    def test_flags_override_config_file(self, tmp_path):
        path = tmp_path / "agent.json"
        path.write_text(json.dumps({"strategy": "greedy", "depth": 5}), encoding="utf-8")
        args = argparse.Namespace(config=str(path), strategy="minimax", depth=None)
        config = load_agent_config(args)
        assert config.strategy == "minimax"
        assert config.depth == 5

    def test_without_config_file(self):
        args = argparse.Namespace(config=None, strategy=None, depth=3)
        config = load_agent_config(args)
        assert config.strategy == "worst_case"
        assert config.depth == 3
