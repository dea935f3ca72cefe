"""Unit tests for /src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import GameResponse, MoveRequest, NewGameRequest
from src.core.exceptions import InvalidRequestError, MalformedMoveError
from src.core.shared_types import Opponent, Side, Status


# -- Validation - NewGameRequest --
def test_new_game_defaults() -> None:
    request = NewGameRequest()
    assert request.opponent == Opponent.COMPUTER
    assert request.computer_side == Side.FORWARD
    assert request.seed is None


def test_new_game_from_strings() -> None:
    request = NewGameRequest(opponent="human", computer_side="backward", seed=3)
    assert request.opponent == Opponent.HUMAN
    assert request.computer_side == Side.BACKWARD
    assert request.seed == 3


def test_new_game_negative_seed() -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(seed=-1)


def test_new_game_unknown_opponent() -> None:
    with pytest.raises(ValidationError):
        _ = NewGameRequest(opponent="robot")


# -- Validation - MoveRequest --
@pytest.mark.parametrize("move", ["a3-b4", "h8-g7"])
def test_valid_moves(move: str) -> None:
    request = MoveRequest(move=move)
    assert request.move == move


@pytest.mark.parametrize(
    "move", ["a3b4", "i3-b4", "a9-b4", "a3-b4-c5", "", " a3-b4\n", "a3-b4 "]
)
def test_malformed_moves(move: str) -> None:
    with pytest.raises(MalformedMoveError):
        _ = MoveRequest(move=move)


# -- GameResponse --
def test_game_response_serializes_enums() -> None:
    response = GameResponse(
        board=["________"] * 8,
        side_to_move=Side.FORWARD,
        status=Status.GAME_OVER,
        pinned_square=None,
        winner=Side.BACKWARD,
        pieces={Side.FORWARD: 1, Side.BACKWARD: 2},
        move_history=["a3-b4"],
    )
    dumped = response.model_dump(mode="json")
    assert dumped["side_to_move"] == "forward"
    assert dumped["status"] == "game over"
    assert dumped["winner"] == "backward"
    assert dumped["pieces"] == {"forward": 1, "backward": 2}
    assert dumped["outcome"] is None
