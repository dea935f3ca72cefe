"""
Runtime settings.

Values are read from the environment (a `.env` file in the working directory is picked up as well).
The command line flags in src/main.py override whatever is set here.
"""

import os
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional, TypeVar

from dotenv import load_dotenv

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Opponent, Side

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

E = TypeVar("E", bound=StrEnum)


def _choice(enum_type: type[E], value: str | E, name: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise InvalidRequestError(
            f"Unknown {name} {value!r}. Pick one from {choices}"
        ) from None


def _optional_int(value: Optional[str | int]) -> Optional[int]:
    if value is None or isinstance(value, int):
        return value
    if value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidRequestError(f"Seed must be an integer, got {value!r}") from None


@dataclass
class Settings:
    opponent: Opponent = field(
        default_factory=lambda: os.getenv("CHECKERS_OPPONENT", "computer")
    )
    # the original game let the computer open the game (it plays the forward side)
    computer_side: Side = field(
        default_factory=lambda: os.getenv("CHECKERS_COMPUTER_SIDE", "forward")
    )
    seed: Optional[int] = field(default_factory=lambda: os.getenv("CHECKERS_SEED"))
    log_level: str = field(
        default_factory=lambda: os.getenv("CHECKERS_LOG_LEVEL", "WARNING").upper()
    )

    def __post_init__(self):
        # environment values arrive as plain strings
        self.opponent = _choice(Opponent, self.opponent, "opponent")
        self.computer_side = _choice(Side, self.computer_side, "computer side")
        self.seed = _optional_int(self.seed)
        if self.log_level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level {self.log_level!r}. Pick one from {', '.join(LOG_LEVELS)}"
            )
