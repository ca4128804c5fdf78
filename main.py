#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py [--rows R] [--cols C] [--mines M] [--seed S] [--verbose]

Missing sizes are asked for interactively.
"""
import argparse
import logging
import random
import sys

from src.minefield.console import play, setup_config
from src.minefield.field import Field, FieldConfig


def build_config(args: argparse.Namespace) -> FieldConfig:
    """Use the command-line sizes, or ask for them if any is missing."""
    if None in (args.rows, args.cols, args.mines):
        return setup_config()
    return FieldConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)


def main() -> None:
    """Parse arguments and play one game."""
    parser = argparse.ArgumentParser(
        description="Minefield - Play Minesweeper in the terminal"
    )
    parser.add_argument("--rows", type=int, help="Number of rows")
    parser.add_argument("--cols", type=int, help="Number of columns")
    parser.add_argument("--mines", type=int, help="Number of mines")
    parser.add_argument("--seed", type=int, help="Random seed for mine placement")
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    random.seed(args.seed)

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    field = Field.from_config(config)
    won = play(field)
    sys.exit(0 if won else 1)


if __name__ == "__main__":
    main()
