"""Command line entrypoint: play a game of forward-only checkers in the terminal."""

import argparse
import logging
from typing import Optional

from src.api.models import NewGameRequest
from src.core.config import LOG_LEVELS, Settings
from src.core.shared_types import Opponent, Side
from src.services.checkers_service import CheckersService
from src.ui.console import Console


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Forward-only checkers: captures are compulsory, no kings, no backward moves.",
    )
    parser.add_argument(
        "--opponent",
        choices=[opponent.value for opponent in Opponent],
        default=settings.opponent.value,
        help="play against the computer or another human (default: %(default)s)",
    )
    parser.add_argument(
        "--computer-side",
        choices=[side.value for side in Side],
        default=settings.computer_side.value,
        help="side played by the computer; forward moves first (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="seed for the computer's random move choice",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="(default: %(default)s)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    settings = Settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service = CheckersService()
    service.new_game(
        NewGameRequest(
            opponent=Opponent(args.opponent),
            computer_side=Side(args.computer_side),
            seed=args.seed,
        )
    )
    print("\nWelcome to Checkers:\n====================")
    Console(service).play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
