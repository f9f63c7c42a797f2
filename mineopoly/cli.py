#!/usr/bin/env python3
"""
Minimal CLI for inspecting Mineopoly boards and paths.

Generates a board from a seed and prints it, or prints the canonical
action path between two tiles.
"""

import argparse
import logging
import sys
from typing import List, Optional

from mineopoly.exceptions import MineopolyError
from mineopoly.generator import generate_board
from mineopoly.navigation import path_to
from mineopoly.schemas import BoardSummary, PathResponse
from mineopoly.settings import get_settings
from mineopoly.snapshot import serialize_board
from mineopoly.tiles import Coordinate


def parse_point(value: str) -> Coordinate:
    """Parse an 'x,y' argument."""
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got '{value}'") from None
    return Coordinate(x, y)


def print_board(summary: BoardSummary) -> None:
    """Print the board rows with a short legend."""
    print(f"Board {summary.board_size}x{summary.board_size} (seed={summary.seed})")
    print(f"Red start: {tuple(summary.red_start_location)}  Blue start: {tuple(summary.blue_start_location)}")
    print()
    for row in summary.rows:
        print(" ".join(row))
    print()
    print("Deposits: " + ", ".join(f"{name}={count}" for name, count in summary.resource_counts.items()))


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="mineopoly", description="Inspect Mineopoly boards")
    subparsers = parser.add_subparsers(dest="command", required=True)

    board_parser = subparsers.add_parser("board", help="Generate and print a board")
    board_parser.add_argument("--seed", type=int, default=settings.seed, help="Board seed")
    board_parser.add_argument("--size", type=int, default=settings.board_size, help="Board size")
    board_parser.add_argument("--json", action="store_true", help="Print the JSON summary")

    path_parser = subparsers.add_parser("path", help="Print the path between two tiles")
    path_parser.add_argument("start", type=parse_point, help="Start tile as x,y")
    path_parser.add_argument("destination", type=parse_point, help="Destination tile as x,y")
    path_parser.add_argument("--json", action="store_true", help="Print the JSON response")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser().parse_args(argv)

    try:
        if args.command == "board":
            board = generate_board(args.seed, args.size)
            summary = BoardSummary.model_validate(serialize_board(board))
            if args.json:
                print(summary.model_dump_json(indent=2))
            else:
                print_board(summary)
        else:
            actions = path_to(args.start, args.destination)
            response = PathResponse(
                start=args.start,
                destination=args.destination,
                actions=[action.value for action in actions],
                length=len(actions),
            )
            if args.json:
                print(response.model_dump_json(indent=2))
            else:
                print(" ".join(response.actions) if response.actions else "(already there)")
    except MineopolyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
