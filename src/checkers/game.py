"""
The Game class is the rule engine and the entrypoint into the domain layer for the service layer.
It owns the board and the turn state, and is the only thing that is allowed to mutate the board during play.

Rules of this variant:
* pieces only move forward (diagonally), there are no kings
* a capture, if available anywhere for the side to move, must be made
* a piece that captured must keep capturing while it can (it is "pinned" as the only piece allowed to move)
* a side that can neither move nor capture when its turn starts has lost
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    can_capture,
    captured_square,
    is_forward_jump,
    is_forward_step,
    legal_moves,
    side_has_any_capture,
    side_has_any_move,
)
from src.checkers.pieces import Direction
from src.checkers.square import Square
from src.core.exceptions import (
    CaptureRequiredError,
    DestinationOccupiedError,
    GameOverError,
    IllegalCaptureGeometryError,
    IllegalMoveError,
    MalformedMoveError,
    NoOpponentToCaptureError,
    NoPieceError,
    NotYourPieceError,
    WrongPieceError,
)

logger = logging.getLogger(__name__)


class Status(Enum):
    AWAITING_MOVE = auto()
    AWAITING_CONTINUATION = auto()
    GAME_OVER = auto()


class ChainOutcome(Enum):
    TURN_ENDED = auto()
    MUST_CONTINUE = auto()


@dataclass(frozen=True)
class MoveResult:
    """What happened after an accepted move. `continue_from` is only set when the same piece has to capture again."""

    outcome: ChainOutcome
    continue_from: Optional[Square] = None


@dataclass
class TurnState:
    side_to_move: Direction = Direction.FORWARD
    pinned_square: Optional[Square] = None
    winner: Optional[Direction] = None

    @property
    def status(self) -> Status:
        if self.winner is not None:
            return Status.GAME_OVER
        if self.pinned_square is not None:
            return Status.AWAITING_CONTINUATION
        return Status.AWAITING_MOVE


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: TurnState = field(default_factory=TurnState)
    moves: list[Move] = field(default_factory=list)

    def __post_init__(self):
        # a game may start from any position, so the side to move can already be stuck
        if self.turn.winner is None:
            self._update_game_status()

    @classmethod
    def new_game(
        cls,
        board: Optional[Board] = None,
        side_to_move: Direction = Direction.FORWARD,
    ) -> Self:
        """Start from the standard layout, or from any given position (the side to move may already be stuck)."""
        return cls(
            board=board if board is not None else Board.starting_position(),
            turn=TurnState(side_to_move=side_to_move),
        )

    @property
    def status(self) -> Status:
        return self.turn.status

    @property
    def side_to_move(self) -> Direction:
        return self.turn.side_to_move

    @property
    def pinned_square(self) -> Optional[Square]:
        return self.turn.pinned_square

    def is_game_over(self) -> Optional[Direction]:
        """The winner, or None while the game is still going."""
        return self.turn.winner

    def legal_moves(self) -> list[Move]:
        """Every move `validate_and_apply()` would accept right now."""
        if self.turn.winner is not None:
            return []
        return legal_moves(self.side_to_move, self.board, self.pinned_square)

    def validate_and_apply(self, move: Move) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. the move must stay on the board
        2. in a capture chain, only the pinned piece may move
        3. there must be a piece of your own on the start, and the target must be empty
        4. no capture available? --> a single diagonal step forward
        5. capture available? --> must be a forward jump over an opponent's piece. The jumped piece is removed.
           If the same piece can capture again, it gets pinned and the turn does not pass.

        Every check happens BEFORE the board gets touched. A rejected move leaves everything as it was.
        """
        if self.turn.winner is not None:
            raise GameOverError(
                f"Game is over. {self.turn.winner.name.lower()} side has won."
            )

        self._assert_on_board(move)
        self._assert_pinned_piece(move)
        self._assert_own_piece_to_empty_square(move)

        side = self.side_to_move
        if not side_has_any_capture(side, self.board):
            if not is_forward_step(move, side):
                raise IllegalMoveError(
                    f"{move.to_notation()} is not a single diagonal step forward."
                )
            self._update_board(move)
            return self._end_turn()

        self._assert_legal_capture(move)
        self._update_board(move)
        self.board.remove_piece(captured_square(move))

        if can_capture(move.to_square, self.board):
            self.turn.pinned_square = move.to_square
            logger.debug(
                "%s must continue capturing from %s",
                side.name.lower(),
                move.to_square.to_algebraic(),
            )
            return MoveResult(ChainOutcome.MUST_CONTINUE, continue_from=move.to_square)

        return self._end_turn()

    # -- VALIDATION HELPERS ---
    def _assert_on_board(self, move: Move) -> None:
        if not move.is_within_bounds():
            raise MalformedMoveError(
                f"Move {move.from_square} -> {move.to_square} leaves the board."
            )

    def _assert_pinned_piece(self, move: Move) -> None:
        """In the middle of a capture chain, only the piece that just captured can go."""
        pinned = self.pinned_square
        if pinned is not None and move.from_square != pinned:
            raise WrongPieceError(
                f"You must continue capturing with the piece on {pinned.to_algebraic()}."
            )

    def _assert_own_piece_to_empty_square(self, move: Move) -> None:
        if self.board.is_empty(move.from_square):
            raise NoPieceError(f"There is no piece on {move.from_square.to_algebraic()}.")
        if self.board.direction_at(move.from_square) != self.side_to_move:
            raise NotYourPieceError(
                f"The piece on {move.from_square.to_algebraic()} is not yours."
            )
        if not self.board.is_empty(move.to_square):
            raise DestinationOccupiedError(
                f"{move.to_square.to_algebraic()} is already occupied."
            )

    def _assert_legal_capture(self, move: Move) -> None:
        """
        A capture is available somewhere, so this move has to be one.
        ---

        * shaped like a capture in the wrong direction (or sideways by two) --> wrong geometry
        * shaped like a forward capture, but nothing (or your own piece) to jump over --> no opponent
        * anything else is just not a capture --> capture required
        """
        side = self.side_to_move
        if not is_forward_jump(move, side):
            if abs(move.row_delta) == abs(side.jump) or abs(move.col_delta) == abs(
                side.jump
            ):
                raise IllegalCaptureGeometryError(
                    f"{move.to_notation()} is not a forward diagonal jump over two squares."
                )
            raise CaptureRequiredError(
                f"A capture is available: {move.to_notation()} is not allowed."
            )

        jumped = captured_square(move)
        if not self.board.has_opponent_of(side, jumped):
            raise NoOpponentToCaptureError(
                f"There is no opponent's piece to capture on {jumped.to_algebraic()}."
            )

    # -- STATE UPDATES ---
    def _update_board(self, move: Move) -> None:
        self.board.move_piece(move)
        self.moves.append(move)
        logger.debug("%s played %s", self.side_to_move.name.lower(), move.to_notation())

    def _end_turn(self) -> MoveResult:
        self.turn.pinned_square = None
        self.turn.side_to_move = self.side_to_move.opponent()
        self._update_game_status()
        return MoveResult(ChainOutcome.TURN_ENDED)

    def _update_game_status(self) -> None:
        """Called when a turn starts: the side to move loses if it can neither capture nor move."""
        side = self.side_to_move
        if side_has_any_capture(side, self.board) or side_has_any_move(side, self.board):
            return
        self.turn.winner = side.opponent()
        logger.info(
            "%s side cannot move. %s side wins.",
            side.name.lower(),
            self.turn.winner.name.lower(),
        )
