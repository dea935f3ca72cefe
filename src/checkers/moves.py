"""
Geometry/Base movement and capturing rules

Key idea: every piece only ever looks at the two diagonals in front of it.
"In front" is relative to the piece's own Direction, so there is no such thing as a backward move.

Whether a move is acceptable in the current turn is decided later by Game
"""

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.checkers.pieces import Direction, Piece
from src.checkers.square import Square
from src.core.exceptions import MalformedMoveError


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...
    def has_opponent_of(self, direction: Direction, square: Square) -> bool: ...
    def locate_side(self, direction: Direction) -> list[Square]: ...


# column deltas of the two forward diagonals: left (towards the a-file) first
DIAGONALS: tuple[int, int] = (-1, 1)

MOVE_NOTATION = re.compile(r"[a-h][1-8]-[a-h][1-8]")


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Move notation
        ---
        ---
        Five characters: "<from col><from row>-<to col><to row>"

        examples:
        * "a3-b4": the piece on a3 (row 2, col 0) moves to b4 (row 3, col 1)
        * "c3-e5": a capture, jumping over d4

        Anything else (wrong length, letters outside a-h, digits outside 1-8, missing dash) is rejected before the board is even looked at.
        """
        if not MOVE_NOTATION.fullmatch(notation):
            raise MalformedMoveError(
                f"Cannot interpret {notation!r} as a move. Expected something like 'a3-b4'."
            )
        from_sq = Square.from_algebraic(notation[:2])
        to_sq = Square.from_algebraic(notation[3:])
        return cls(from_sq, to_sq)

    def to_notation(self) -> str:
        return f"{self.from_square.to_algebraic()}-{self.to_square.to_algebraic()}"

    @property
    def row_delta(self) -> int:
        return self.to_square.row - self.from_square.row

    @property
    def col_delta(self) -> int:
        return self.to_square.col - self.from_square.col

    def is_within_bounds(self) -> bool:
        return self.from_square.is_within_bounds() and self.to_square.is_within_bounds()


def parse_move(notation: str) -> Move:
    """The single entry point for turning user (or generator) text into a Move."""
    return Move.from_notation(notation)


# --- SHAPE OF A MOVE ---
def is_forward_step(move: Move, direction: Direction) -> bool:
    """One square diagonally forward"""
    return move.row_delta == direction.step and abs(move.col_delta) == abs(
        direction.step
    )


def is_forward_jump(move: Move, direction: Direction) -> bool:
    """Two squares diagonally forward"""
    return move.row_delta == direction.jump and abs(move.col_delta) == abs(
        direction.jump
    )


def captured_square(move: Move) -> Square:
    """The square jumped over: halfway between start and target."""
    return Square(
        (move.from_square.row + move.to_square.row) // 2,
        (move.from_square.col + move.to_square.col) // 2,
    )


# --- MOVEMENT RULES ---
def simple_moves(square: Square, board: Board) -> list[Move]:
    """Single diagonal steps forward onto an empty square"""
    piece = board.piece(square)
    if piece is None:
        return []

    step = piece.direction.step
    moves: list[Move] = []
    for d_col in DIAGONALS:
        target_square = square.offset(step, d_col)
        if target_square.is_within_bounds() and board.is_empty(target_square):
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def capture_moves(square: Square, board: Board) -> list[Move]:
    """
    Jumps over an adjacent opposing piece
    ---

    For both forward diagonals:
    * the landing square (two rows ahead) must be on the board and empty
    * the square in between must hold an opponent's piece
    """
    piece = board.piece(square)
    if piece is None:
        return []

    direction = piece.direction
    moves: list[Move] = []
    for d_col in DIAGONALS:
        jumped_square = square.offset(direction.step, d_col)
        target_square = square.offset(direction.jump, 2 * d_col)
        if not target_square.is_within_bounds():
            continue
        if board.is_empty(target_square) and board.has_opponent_of(
            direction, jumped_square
        ):
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def can_capture(square: Square, board: Board) -> bool:
    return bool(capture_moves(square, board))


def can_move(square: Square, board: Board) -> bool:
    return bool(simple_moves(square, board))


# --- WHOLE BOARD SCANS ---
def side_has_any_capture(direction: Direction, board: Board) -> bool:
    return any(can_capture(square, board) for square in board.locate_side(direction))


def side_has_any_move(direction: Direction, board: Board) -> bool:
    return any(can_move(square, board) for square in board.locate_side(direction))


def all_capture_moves(direction: Direction, board: Board) -> list[Move]:
    moves: list[Move] = []
    for square in board.locate_side(direction):
        moves.extend(capture_moves(square, board))
    return moves


def all_simple_moves(direction: Direction, board: Board) -> list[Move]:
    moves: list[Move] = []
    for square in board.locate_side(direction):
        moves.extend(simple_moves(square, board))
    return moves


def legal_moves(
    direction: Direction, board: Board, pinned_square: Optional[Square] = None
) -> list[Move]:
    """
    Every move the side could make right now
    ---

    1. In the middle of a capture chain? Only the jumps of the pinned piece.
    2. Any capture on the board? Then capturing is compulsory: all captures, nothing else.
    3. Otherwise all simple moves.
    """
    if pinned_square is not None:
        return capture_moves(pinned_square, board)
    if side_has_any_capture(direction, board):
        return all_capture_moves(direction, board)
    return all_simple_moves(direction, board)
