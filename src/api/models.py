"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.checkers.moves import MOVE_NOTATION
from src.core.exceptions import InvalidRequestError, MalformedMoveError
from src.core.shared_types import Opponent, Outcome, Side, Status


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    opponent: Opponent = Opponent.COMPUTER
    computer_side: Side = Side.FORWARD
    seed: Optional[int] = None

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(f"Seed must be a non-negative integer, got {value}.")
        return value


class MoveRequest(BaseModel):
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        """Exactly the a3-b4 shape. Nothing around it."""
        if not MOVE_NOTATION.fullmatch(value):
            raise MalformedMoveError(
                f"Cannot interpret {value!r} as a move. Expected something like 'a3-b4'."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: list[str]  # row 8 first, see Board.to_rows()
    side_to_move: Side
    status: Status
    pinned_square: Optional[str]
    winner: Optional[Side]
    pieces: dict[Side, int]
    move_history: list[str]
    last_move: Optional[str] = None
    outcome: Optional[Outcome] = None


class LegalMovesResponse(BaseModel):
    side: Side
    legal_moves: list[str]
