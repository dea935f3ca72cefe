"""Unit tests for /src/checkers/board.py"""

from copy import deepcopy
from typing import Callable

import pytest

from src.checkers.board import Board, BoardView
from src.checkers.moves import Move
from src.checkers.pieces import Direction, Piece
from src.checkers.square import Square
from src.core.exceptions import EmptyCellError, IllegalMutationError, OutOfBoundsError

BoardFactory = Callable[[dict[str, str]], Board]

STARTING_ROWS = [
    "_O_O_O_O",
    "O_O_O_O_",
    "_O_O_O_O",
    "________",
    "________",
    "X_X_X_X_",
    "_X_X_X_X",
    "X_X_X_X_",
]
OFF_BOARD = [Square(-1, 0), Square(0, -1), Square(8, 0), Square(0, 8)]


# -- CREATION LOGIC ---
def test_starting_position_piece_count(starting_board: Board) -> None:
    assert starting_board.piece_count() == 24
    assert starting_board.count_pieces() == {
        Direction.FORWARD: 12,
        Direction.BACKWARD: 12,
    }


def test_starting_position_rows(starting_board: Board) -> None:
    """Forward pieces only on rows 0-2, backward pieces only on rows 5-7"""
    assert {square.row for square in starting_board.locate_side(Direction.FORWARD)} == {0, 1, 2}
    assert {square.row for square in starting_board.locate_side(Direction.BACKWARD)} == {5, 6, 7}
    for row in (3, 4):
        for col in range(8):
            assert starting_board.is_empty(Square(row, col))


def test_starting_position_squares(starting_board: Board) -> None:
    assert [sq.to_algebraic() for sq in starting_board.locate_side(Direction.FORWARD)] == [
        "a1", "c1", "e1", "g1",
        "b2", "d2", "f2", "h2",
        "a3", "c3", "e3", "g3",
    ]  # fmt: skip
    assert [sq.to_algebraic() for sq in starting_board.locate_side(Direction.BACKWARD)] == [
        "b6", "d6", "f6", "h6",
        "a7", "c7", "e7", "g7",
        "b8", "d8", "f8", "h8",
    ]  # fmt: skip


def test_from_rows_matches_starting_position(starting_board: Board) -> None:
    assert Board.from_rows(STARTING_ROWS) == starting_board


def test_to_rows_roundtrip(starting_board: Board) -> None:
    assert starting_board.to_rows() == STARTING_ROWS


def test_from_rows_places_top_row_on_row_eight() -> None:
    rows = ["_" * 8] * 8
    rows = ["O_______"] + rows[1:]
    board = Board.from_rows(rows)
    assert board.direction_at(Square(7, 0)) == Direction.BACKWARD
    assert board.piece_count() == 1


@pytest.mark.parametrize(
    "rows",
    [
        ["________"] * 7,
        ["________"] * 7 + ["_______"],
    ],
)
def test_from_rows_rejects_wrong_dimensions(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        _ = Board.from_rows(rows)


# -- QUERIES ---
def test_direction_at(starting_board: Board) -> None:
    assert starting_board.direction_at(Square.from_algebraic("a1")) == Direction.FORWARD
    assert starting_board.direction_at(Square.from_algebraic("h8")) == Direction.BACKWARD


def test_direction_at_empty_square(starting_board: Board) -> None:
    with pytest.raises(EmptyCellError):
        _ = starting_board.direction_at(Square.from_algebraic("d4"))


@pytest.mark.parametrize("square", OFF_BOARD)
def test_queries_out_of_bounds(starting_board: Board, square: Square) -> None:
    with pytest.raises(OutOfBoundsError):
        _ = starting_board.is_empty(square)
    with pytest.raises(OutOfBoundsError):
        _ = starting_board.direction_at(square)
    with pytest.raises(OutOfBoundsError):
        _ = starting_board.view().glyph_at(square)


def test_has_opponent_of(board_with: BoardFactory) -> None:
    board = board_with({"c3": "X", "d4": "O", "b4": "X"})
    assert board.has_opponent_of(Direction.FORWARD, Square.from_algebraic("d4"))
    assert not board.has_opponent_of(Direction.FORWARD, Square.from_algebraic("b4"))
    assert not board.has_opponent_of(Direction.FORWARD, Square.from_algebraic("e5"))
    # off the board is never an opponent (and does not raise)
    assert not board.has_opponent_of(Direction.FORWARD, Square(8, 8))


# -- MUTATIONS ---
def test_move_piece(starting_board: Board) -> None:
    move = Move(Square.from_algebraic("a3"), Square.from_algebraic("b4"))
    starting_board.move_piece(move)
    assert starting_board.is_empty(move.from_square)
    assert starting_board.direction_at(move.to_square) == Direction.FORWARD
    assert starting_board.piece_count() == 24


def test_move_from_empty_square_leaves_board_untouched(starting_board: Board) -> None:
    before = deepcopy(starting_board)
    with pytest.raises(IllegalMutationError):
        starting_board.move_piece(Move(Square.from_algebraic("d4"), Square.from_algebraic("e5")))
    assert starting_board == before


def test_move_onto_occupied_square_leaves_board_untouched(starting_board: Board) -> None:
    before = deepcopy(starting_board)
    with pytest.raises(IllegalMutationError):
        starting_board.move_piece(Move(Square.from_algebraic("b2"), Square.from_algebraic("a3")))
    assert starting_board == before


def test_move_off_the_board(starting_board: Board) -> None:
    with pytest.raises(OutOfBoundsError):
        starting_board.move_piece(Move(Square.from_algebraic("a3"), Square(3, -1)))


def test_remove_piece(starting_board: Board) -> None:
    square = Square.from_algebraic("c3")
    starting_board.remove_piece(square)
    assert starting_board.is_empty(square)
    assert starting_board.piece_count() == 23


@pytest.mark.parametrize("square", [Square.from_algebraic("d4"), *OFF_BOARD])
def test_remove_piece_is_a_no_op_on_empty_or_off_board(
    starting_board: Board, square: Square
) -> None:
    before = deepcopy(starting_board)
    starting_board.remove_piece(square)
    assert starting_board == before


def test_place_piece_replaces() -> None:
    board = Board.empty()
    square = Square(4, 4)
    board.place_piece(Piece(Direction.FORWARD), square)
    board.place_piece(Piece(Direction.BACKWARD), square)
    assert board.direction_at(square) == Direction.BACKWARD
    assert board.piece_count() == 1


# -- VIEW ---
def test_view_glyphs(starting_board: Board) -> None:
    view = starting_board.view()
    assert isinstance(view, BoardView)
    assert view.glyph_at(Square.from_algebraic("a1")) == "X"
    assert view.glyph_at(Square.from_algebraic("b8")) == "O"
    assert view.glyph_at(Square.from_algebraic("d4")) == "_"


def test_view_follows_the_board(starting_board: Board) -> None:
    view = starting_board.view()
    starting_board.remove_piece(Square.from_algebraic("a1"))
    assert view.glyph_at(Square.from_algebraic("a1")) == "_"
