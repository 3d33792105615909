"""
Command line entry point for generating queens boards.

Usage:
    python -m queens.main --size 8 --seed 42
    python -m queens.main config.yaml --solution --output boards/42.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .environment import Game, GameConfig
from .utils import get_logger
from .utils.grid_visualizer import render_board


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a queens puzzle board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  size: 8
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        help="Board size, 5 to 16 (overrides the config file)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Board seed (default: current time in milliseconds)"
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="Mark the solution cells in the printed board"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the board as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log generation details"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        get_logger("queens", logging.DEBUG)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {
            key: value
            for key, value in (("size", args.size), ("seed", args.seed))
            if value is not None
        }
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    game = Game.create(config=config)

    print(render_board(game.board, show_markers=args.solution))
    print()
    print(f"Size: {game.size}")
    print(f"Seed: {game.seed}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(game.get_result().model_dump_json(indent=2))
        print(f"Board saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
