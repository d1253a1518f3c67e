"""
Command-line entry point for the character guessing game.

Usage:
    akinator [dataset]               Play a game
    akinator [dataset] --stats       Print question statistics as JSON
    akinator [dataset] --show-tree   Print the top of the question tree
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from akinator.dataset import DATA_PATH, DatasetReadError, NoDataError, load_characters
from akinator.engine import Leaf, Node, build_tree, count_leaves
from akinator.game import play
from akinator.stats import compute_stats


def setup_logging(verbosity: int = 0) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def format_tree(tree: Node, max_depth: Optional[int] = 3) -> str:
    """Render the tree as indented yes/no branches, cut off below ``max_depth``."""
    lines: list[str] = []
    stack = [(tree, 0, "")]

    while stack:
        node, depth, label = stack.pop()
        indent = "    " * depth
        if isinstance(node, Leaf):
            lines.append(f"{indent}{label}{node.character.name}")
        elif max_depth is not None and depth >= max_depth:
            lines.append(f"{indent}{label}... ({count_leaves(node)} characters)")
        else:
            lines.append(f"{indent}{label}{node.question}")
            stack.append((node.no, depth + 1, "no:  "))
            stack.append((node.yes, depth + 1, "yes: "))

    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="akinator",
        description="Think of a character and answer yes or no until it is guessed.",
    )
    parser.add_argument(
        "dataset",
        nargs="?",
        default=DATA_PATH,
        help="CSV file of characters (default: bundled sample dataset)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print question statistics for the dataset instead of playing",
    )
    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the question tree instead of playing",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=3,
        help="Levels of the tree shown by --show-tree (default: 3)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        characters = load_characters(args.dataset)
    except DatasetReadError as exc:
        print(f"CSV error: {exc}", file=sys.stderr)
        return 1
    except NoDataError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    tree = build_tree(characters)
    logging.info("Built question tree over %d characters.", len(characters))

    if args.stats:
        print(compute_stats(tree).model_dump_json(indent=2))
        return 0

    if args.show_tree:
        print(format_tree(tree, max_depth=args.max_depth))
        return 0

    print("Think of a character from the dataset.")
    print("Answer with yes or no.\n")
    play(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
