"""The Game board owns the pieces and performs the (atomic) mutations. It knows nothing about the rules beyond "pieces sit on squares"."""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.moves import Move
from src.checkers.pieces import EMPTY_GLYPH, Direction, Piece
from src.checkers.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import EmptyCellError, IllegalMutationError, OutOfBoundsError

Cell = Optional[Piece]

# (row, columns) of the starting pieces of each side
STARTING_LAYOUT: dict[Direction, list[tuple[int, tuple[int, ...]]]] = {
    Direction.FORWARD: [
        (0, (0, 2, 4, 6)),
        (1, (1, 3, 5, 7)),
        (2, (0, 2, 4, 6)),
    ],
    Direction.BACKWARD: [
        (5, (1, 3, 5, 7)),
        (6, (0, 2, 4, 6)),
        (7, (1, 3, 5, 7)),
    ],
}


def _assert_on_board(square: Square) -> None:
    if not square.is_within_bounds():
        raise OutOfBoundsError(
            f"Position ({square.row}, {square.col}) is not on the board"
        )


@dataclass
class Board:
    cells: list[Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls([None] * (BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]))

    @classmethod
    def starting_position(cls) -> Self:
        board = cls.empty()
        for direction, layout in STARTING_LAYOUT.items():
            for row, cols in layout:
                for col in cols:
                    board.place_piece(Piece(direction), Square(row, col))
        return board

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from a text layout.

        One string per row, read top to bottom: the first string is row 8 (index 7), the last one row 1 (index 0).
        Inside a string the first character is the a-file.
        ex.
        ________
        ________
        ________
        ________
        ___O____
        __X_____
        ________
        ________
        means: a forward piece on c3 with a backward piece diagonally ahead of it on d4.
        """
        if len(rows) != BOARD_DIMENSIONS[0] or any(
            len(row) != BOARD_DIMENSIONS[1] for row in rows
        ):
            raise ValueError(
                f"Board layout must be {BOARD_DIMENSIONS[0]} rows of {BOARD_DIMENSIONS[1]} characters."
            )

        board = cls.empty()
        for row_idx, text in enumerate(rows):
            row = BOARD_DIMENSIONS[0] - 1 - row_idx
            for col, character in enumerate(text):
                if character != EMPTY_GLYPH:
                    board.place_piece(Piece.from_glyph(character), Square(row, col))
        return board

    def to_rows(self) -> list[str]:
        """Inverse of `from_rows()`"""
        view = self.view()
        return [
            "".join(view.glyph_at(Square(row, col)) for col in range(BOARD_DIMENSIONS[1]))
            for row in range(BOARD_DIMENSIONS[0] - 1, -1, -1)
        ]

    # -- QUERIES ---
    def piece(self, square: Square) -> Cell:
        _assert_on_board(square)
        return self.cells[square.index]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def direction_at(self, square: Square) -> Direction:
        piece = self.piece(square)
        if piece is None:
            raise EmptyCellError(f"No piece on {square.to_algebraic()}")
        return piece.direction

    def has_opponent_of(self, direction: Direction, square: Square) -> bool:
        """True if the square is on the board and holds a piece moving the other way."""
        if not square.is_within_bounds():
            return False
        piece = self.piece(square)
        return piece is not None and piece.direction != direction

    def locate_side(self, direction: Direction) -> list[Square]:
        """Squares of all pieces of a side, row-major."""
        return [
            square
            for square in all_squares()
            if (piece := self.cells[square.index]) is not None
            and piece.direction == direction
        ]

    def piece_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def count_pieces(self) -> dict[Direction, int]:
        """Tally the pieces each side has left"""
        return {direction: len(self.locate_side(direction)) for direction in Direction}

    def view(self) -> "BoardView":
        return BoardView(self)

    # -- MUTATIONS ---
    def place_piece(self, piece: Piece, square: Square) -> None:
        """Only used to set up positions. Replaces whatever is standing there."""
        _assert_on_board(square)
        self.cells[square.index] = piece

    def move_piece(self, move: Move) -> None:
        """Relocate a piece. Refuses (and leaves the board untouched) if the source is empty or the target is taken."""
        _assert_on_board(move.from_square)
        _assert_on_board(move.to_square)

        piece_that_moved = self.cells[move.from_square.index]
        if piece_that_moved is None:
            raise IllegalMutationError(
                f"Cannot move from {move.from_square.to_algebraic()}: square is empty"
            )
        if self.cells[move.to_square.index] is not None:
            raise IllegalMutationError(
                f"Cannot move to {move.to_square.to_algebraic()}: square is occupied"
            )

        self.cells[move.from_square.index] = None
        self.cells[move.to_square.index] = piece_that_moved

    def remove_piece(self, square: Square) -> None:
        """Clear a square. Silently ignores empty squares and squares off the board."""
        if square.is_within_bounds():
            self.cells[square.index] = None


class BoardView:
    """Read-only window on a board for the display layer."""

    def __init__(self, board: Board) -> None:
        self._board = board

    def glyph_at(self, square: Square) -> str:
        piece = self._board.piece(square)
        return EMPTY_GLYPH if piece is None else piece.to_glyph()
