"""Orchestration between the outer layers (console / request models) and the rule engine, for a single game session."""

import logging
import random
from typing import Optional

from src.api.models import (
    GameResponse,
    LegalMovesResponse,
    MoveRequest,
    NewGameRequest,
)
from src.checkers.computer_player import ComputerPlayer, random_candidate
from src.checkers.game import ChainOutcome, Game, MoveResult, Status
from src.checkers.moves import Move, parse_move
from src.checkers.pieces import Direction
from src.core.exceptions import GameError
from src.core.shared_types import Opponent, Outcome
from src.core.shared_types import Status as StatusName

logger = logging.getLogger(__name__)

STATUS_NAMES: dict[Status, StatusName] = {
    Status.AWAITING_MOVE: StatusName.AWAITING_MOVE,
    Status.AWAITING_CONTINUATION: StatusName.AWAITING_CONTINUATION,
    Status.GAME_OVER: StatusName.GAME_OVER,
}

OUTCOME_NAMES: dict[ChainOutcome, Outcome] = {
    ChainOutcome.TURN_ENDED: Outcome.TURN_ENDED,
    ChainOutcome.MUST_CONTINUE: Outcome.MUST_CONTINUE,
}


class CheckersService:
    """Holds the one game being played in this process, plus the computer opponent (if any)."""

    def __init__(
        self, game: Optional[Game] = None, computer: Optional[ComputerPlayer] = None
    ) -> None:
        self.game = game if game is not None else Game.new_game()
        self.computer = computer

    # -- SESSION LOGIC ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Throw away the current game and start over from the standard layout."""
        self.game = Game.new_game()
        if request.opponent == Opponent.COMPUTER:
            rng = random.Random(request.seed)
            self.computer = ComputerPlayer(
                Direction.from_side(request.computer_side),
                select=random_candidate(rng),
            )
        else:
            self.computer = None

        logger.info(
            "new game against %s%s",
            request.opponent,
            f" (computer plays {request.computer_side})" if self.computer else "",
        )
        return self._create_game_response()

    def get_game_state(self) -> GameResponse:
        return self._create_game_response()

    def legal_moves(self) -> LegalMovesResponse:
        return LegalMovesResponse(
            side=self.game.side_to_move.to_side(),
            legal_moves=[move.to_notation() for move in self.game.legal_moves()],
        )

    def is_computer_turn(self) -> bool:
        return (
            self.computer is not None
            and self.game.is_game_over() is None
            and self.computer.direction == self.game.side_to_move
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Play a move in notation. Any `MoveError` is passed on untouched so the caller can ask again."""
        move = parse_move(request.move)
        result = self.game.validate_and_apply(move)
        return self._create_game_response(move, result)

    def computer_move(self) -> GameResponse:
        """Let the computer play its next move (one capture of a chain at a time)."""
        computer = self.computer
        if computer is None:
            raise GameError("There is no computer opponent in this game.")
        if not self.is_computer_turn():
            raise GameError("It is not the computer's turn.")

        move = computer.choose_move(self.game.board, self.game.pinned_square)
        result = self.game.validate_and_apply(move)
        return self._create_game_response(move, result)

    # -- Internal helpers --
    def _create_game_response(
        self, move: Optional[Move] = None, result: Optional[MoveResult] = None
    ) -> GameResponse:
        game = self.game
        winner = game.is_game_over()
        pinned = game.pinned_square
        return GameResponse(
            board=game.board.to_rows(),
            side_to_move=game.side_to_move.to_side(),
            status=STATUS_NAMES[game.status],
            pinned_square=pinned.to_algebraic() if pinned else None,
            winner=winner.to_side() if winner else None,
            pieces={
                direction.to_side(): count
                for direction, count in game.board.count_pieces().items()
            },
            move_history=[m.to_notation() for m in game.moves],
            last_move=move.to_notation() if move else None,
            outcome=OUTCOME_NAMES[result.outcome] if result else None,
        )
