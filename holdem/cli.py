"""
Command line entry point: play Texas Hold'em against AI opponents in the
terminal, or watch AI-only tables with --watch.
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from holdem.config import DIFFICULTIES, load_config
from holdem.game import Game
from holdem.runner import run_game
from holdem.version import version_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Texas Hold'em against AI opponents")
    parser.add_argument("--players", type=int, help="Number of seats at the table (default 3)")
    parser.add_argument("--chips", type=int, help="Starting chips per player (default 1000)")
    parser.add_argument("--small-blind", type=int, help="Small blind amount (default 10)")
    parser.add_argument("--big-blind", type=int, help="Big blind amount (default 20)")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, help="AI difficulty")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible game")
    parser.add_argument("--hands", type=int, help="Stop after this many hands")
    parser.add_argument("--watch", action="store_true", help="Seat only AI players and watch")
    parser.add_argument("--pace", type=float, default=0.5, help="Seconds between engine steps")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=version_string())
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        config = load_config(
            num_players=args.players,
            starting_chips=args.chips,
            small_blind=args.small_blind,
            big_blind=args.big_blind,
            ai_difficulty=args.difficulty,
            seed=args.seed,
            human_seats=() if args.watch else None,
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 2

    game = Game.from_config(config)
    viewer = config.human_seats[0] if config.human_seats else None
    logging.info("Starting %s with %d players", version_string(), config.num_players)

    try:
        asyncio.run(run_game(game, pace=args.pace, viewer=viewer, max_hands=args.hands))
    except KeyboardInterrupt:
        print("\n👋 Leaving the table...")
    except RuntimeError as e:
        print(f"❌ Error: {e}")
        return 1
    return 0
