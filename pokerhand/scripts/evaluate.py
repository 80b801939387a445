#!/usr/bin/env python
"""Evaluate five-card poker hands from the command line.

Each positional argument is one hand of whitespace-separated cards. The
script prints the category and description of every hand, its strength
row, and marks the winning hand(s).

Usage:
    python -m pokerhand.scripts.evaluate "As Ks 10s Js Qs" "2c 2d 5h 7s 9c"
    python -m pokerhand.scripts.evaluate --sort "8h 4c 2s 10d Jd" "Kd Ks 2h 2s Kh"
    python -m pokerhand.scripts.evaluate --help
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from pokerhand.rules import (
    Hand,
    HandNotEvaluatedError,
    encode_hands,
    strength_order,
    winner_indices,
)

EXIT_OK = 0
EXIT_INVALID_HAND = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


@dataclass
class EvaluateConfig:
    """Options for one evaluation run."""

    hands: List[str] = field(default_factory=list)
    sort: bool = False
    log_level: str = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> EvaluateConfig:
    parser = argparse.ArgumentParser(
        description="Evaluate and compare five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m pokerhand.scripts.evaluate "As Ks 10s Js Qs"
  python -m pokerhand.scripts.evaluate "As Ad 10s Js 10d" "9h Qs Qh 6c 6s"
  python -m pokerhand.scripts.evaluate --sort "6h 8d 2c Ks Qs" "Kd Ac 8s 9h Ah"
        """,
    )
    parser.add_argument(
        "hands",
        nargs="+",
        help='Hands to evaluate, each a quoted list of five cards such as "As Kd 10h 9c 2s"',
    )
    parser.add_argument(
        "--sort", action="store_true", help="List hands from strongest to weakest"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    return EvaluateConfig(hands=args.hands, sort=args.sort, log_level=args.log_level)


def load_hands(texts: List[str]) -> List[Hand]:
    """Parse every hand string into an evaluated hand.

    Raises:
        ValueError: If a card string is invalid
        HandNotEvaluatedError: If a hand does not hold exactly five cards
    """
    hands = []
    for text in texts:
        hand = Hand.from_string(text)
        if not hand.is_evaluated:
            raise HandNotEvaluatedError(f"{text!r} has {hand.size} cards, expected 5")
        logger.debug("Evaluated %r as %s", text, hand.describe())
        hands.append(hand)
    return hands


def build_table(hands: List[Hand], sort: bool = False) -> Table:
    """Render hands as a rich table with winners marked."""
    encoded = encode_hands(hands)
    winners = set(int(i) for i in winner_indices(hands))

    if sort:
        order = [int(i) for i in strength_order(hands, strongest_first=True)]
    else:
        order = list(range(len(hands)))

    table = Table(title="Hand evaluation", box=box.SIMPLE_HEAVY)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Cards")
    table.add_column("Category", style="bold")
    table.add_column("Description")
    table.add_column("Strength", style="dim")
    table.add_column("Winner", justify="center")

    for idx in order:
        hand = hands[idx]
        cards_str = " ".join(str(c) for c in hand.cards)
        strength = " ".join(str(int(v)) for v in encoded[idx])
        mark = "[bold green]*[/bold green]" if idx in winners else ""
        table.add_row(
            str(idx + 1), cards_str, hand.category.display_name, hand.describe(), strength, mark
        )
    return table


def run(config: EvaluateConfig, console: Optional[Console] = None) -> int:
    console = console or Console()
    err_console = Console(stderr=True)

    try:
        hands = load_hands(config.hands)
    except (ValueError, HandNotEvaluatedError) as e:
        logger.error("Rejected input: %s", e)
        err_console.print(f"[red]Error:[/red] {e}")
        return EXIT_INVALID_HAND

    console.print(build_table(hands, sort=config.sort))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the evaluation script."""
    config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
