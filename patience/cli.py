"""
Patience CLI - Command-line interface for the engine.

Usage:
    patience deal [--seed N]             Print the opening table as JSON
    patience replay <actions_file>       Apply a JSON list of actions
    patience hints [--seed N]            List legal actions for the deal
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .config import PATIENCE_LOG_LEVEL, PATIENCE_SEED
from .engine_core import InvalidMove, legal_actions, new_game, react
from .schemas import TableSnapshot, action_to_dict, parse_actions


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Patience - Klondike rule engine",
        prog="patience",
    )
    parser.add_argument("--log-level", default=PATIENCE_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    deal_parser = subparsers.add_parser("deal", help="Deal a game and print the table")
    deal_parser.add_argument("--seed", type=int, default=PATIENCE_SEED, help="Shuffle seed")

    replay_parser = subparsers.add_parser("replay", help="Apply a list of actions to a deal")
    replay_parser.add_argument("actions_file", help="Path to a JSON list of actions")
    replay_parser.add_argument("--seed", type=int, default=PATIENCE_SEED, help="Shuffle seed")

    hints_parser = subparsers.add_parser("hints", help="List legal actions for a deal")
    hints_parser.add_argument("--seed", type=int, default=PATIENCE_SEED, help="Shuffle seed")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "deal":
        cmd_deal(args)
    elif args.command == "replay":
        cmd_replay(args)
    elif args.command == "hints":
        cmd_hints(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deal(args):
    """Deal and print the opening table."""
    game = new_game(seed=args.seed)
    print(TableSnapshot.from_game(game).model_dump_json(indent=2))


def cmd_replay(args):
    """Apply actions in order, stopping at the first invalid one."""
    try:
        with open(args.actions_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {args.actions_file}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid actions file: {e}")
        sys.exit(1)

    try:
        actions = parse_actions(data)
    except ValidationError as e:
        print(f"Error: Invalid actions file: {e}")
        sys.exit(1)

    game = new_game(seed=args.seed)
    for index, action in enumerate(actions):
        try:
            game = react(game, action)
        except InvalidMove as e:
            print(f"Action {index} rejected: {e}")
            sys.exit(1)

    print(TableSnapshot.from_game(game).model_dump_json(indent=2))


def cmd_hints(args):
    """Print every legal action for a fresh deal."""
    game = new_game(seed=args.seed)
    print(json.dumps([action_to_dict(a) for a in legal_actions(game)], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
