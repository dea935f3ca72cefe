"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The variant is only ever played on 8x8, but keep the number in one place
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """Zero-indexed: row 0 is the forward side's home row, column 0 is the a-file."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). The letter is the column, the digit the row."""
        col = ord(sq[0]) - ord("a")
        row = ord(sq[1]) - ord("1")
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square shifted by the given deltas. May lie off the board."""
        return Square(self.row + d_row, self.col + d_col)

    @property
    def index(self) -> int:
        """Row-major position in a flat list of cells"""
        return self.row * BOARD_DIMENSIONS[1] + self.col


def all_squares() -> list[Square]:
    """Every square on the board, row by row starting from row 0."""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
