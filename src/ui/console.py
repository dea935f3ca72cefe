"""
Text console: draws the board and runs the "render -> prompt -> read -> apply" loop.
No rules live here. Everything goes through the service.
"""

import logging
from typing import Callable

from src.api.models import MoveRequest
from src.checkers.board import BoardView
from src.checkers.pieces import Direction
from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import MoveError
from src.core.shared_types import Outcome
from src.services.checkers_service import CheckersService

logger = logging.getLogger(__name__)

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


def render_board(view: BoardView) -> str:
    """
    Rows are drawn from row 8 (top) down to row 1, columns a-h from left to right:

    8 | _ | o | _ | o | _ | o | _ | o |
    ...
    1 | x | _ | x | _ | x | _ | x | _ |
        a   b   c   d   e   f   g   h
    """
    lines: list[str] = []
    for row in range(BOARD_DIMENSIONS[0] - 1, -1, -1):
        cells = " | ".join(
            view.glyph_at(Square(row, col)).lower()
            for col in range(BOARD_DIMENSIONS[1])
        )
        lines.append(f"{row + 1} | {cells} |")
    legend = "   ".join(chr(ord("a") + col) for col in range(BOARD_DIMENSIONS[1]))
    lines.append(f"    {legend}")
    return "\n".join(lines)


class Console:
    def __init__(
        self,
        service: CheckersService,
        read: ReadFn = input,
        write: WriteFn = print,
    ) -> None:
        self.service = service
        self.read = read
        self.write = write

    def play(self) -> None:
        """Keep playing until someone wins (or the input runs dry)."""
        while True:
            game = self.service.game
            self.write("\n" + render_board(game.board.view()))

            winner = game.is_game_over()
            if winner is not None:
                loser = winner.opponent()
                self.write(
                    f"\nPlayer {loser.glyph} -- You can't make a move. Game over. Player {winner.glyph} wins."
                )
                return

            if not self._play_turn(game.side_to_move):
                return

    def _play_turn(self, side: Direction) -> bool:
        """One accepted move (or one link of a capture chain). Returns False if there is no more input."""
        if self.service.is_computer_turn():
            response = self.service.computer_move()
            self.write(f"\nPlayer {side.glyph} -- computer plays {response.last_move}")
        else:
            try:
                text = self.read(f"\nPlayer {side.glyph} -- your turn. Enter your move: ")
            except EOFError:
                logger.info("input closed, stopping the game")
                return False

            try:
                response = self.service.make_move(MoveRequest(move=text.strip()))
            except MoveError as e:
                self.write(f"\nYour move was invalid: {e} Please enter a valid move.")
                return True

        if response.outcome == Outcome.MUST_CONTINUE:
            self.write(
                f"\nPlayer {side.glyph} -- it's still your turn. Continue capturing with the piece at {response.pinned_square}"
            )
        return True
