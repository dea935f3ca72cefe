"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Piece
from src.checkers.square import Square

BoardFactory = Callable[[dict[str, str]], Board]


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


@pytest.fixture
def board_with() -> BoardFactory:
    """Call the inner function with {square name: glyph}, ex. {"c3": "X", "d4": "O"}, to get an otherwise empty board."""

    def _create_board(pieces: dict[str, str]) -> Board:
        board = Board.empty()
        for square_name, glyph in pieces.items():
            board.place_piece(Piece.from_glyph(glyph), Square.from_algebraic(square_name))
        return board

    return _create_board
