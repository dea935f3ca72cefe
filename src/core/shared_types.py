"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    AWAITING_MOVE = "awaiting move"
    AWAITING_CONTINUATION = "awaiting continuation"
    GAME_OVER = "game over"


# --- NOTE Side mirrors src/checkers/pieces.Direction. The domain works with Direction (which carries the movement rules),
# --- the boundary layers only need the names.
class Side(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Opponent(StrEnum):
    HUMAN = "human"
    COMPUTER = "computer"


class Outcome(StrEnum):
    TURN_ENDED = "turn ended"
    MUST_CONTINUE = "must continue"
