"""
Scripted opponent.

Enumerating the candidates reuses the movement rules of moves.py (captures take precedence, a pinned piece is the only candidate mover).
Which candidate gets played is up to an exchangeable selection strategy.
"""

import logging
import random
from typing import Callable, Optional

from src.checkers.board import Board
from src.checkers.moves import Move, legal_moves
from src.checkers.pieces import Direction
from src.checkers.square import Square
from src.core.exceptions import MoveGenerationError

logger = logging.getLogger(__name__)

SelectionStrategy = Callable[[list[Move]], Move]


def first_candidate(candidates: list[Move]) -> Move:
    """Deterministic: always the first move found (row by row, left diagonal before right)."""
    return candidates[0]


def random_candidate(rng: Optional[random.Random] = None) -> SelectionStrategy:
    """Uniformly random pick. Pass a seeded `random.Random` for reproducible games."""
    chooser = rng if rng is not None else random.Random()

    def _select(candidates: list[Move]) -> Move:
        return chooser.choice(candidates)

    return _select


class ComputerPlayer:
    """Plays one side of the board."""

    def __init__(
        self, direction: Direction, select: Optional[SelectionStrategy] = None
    ) -> None:
        self.direction = direction
        self.select = select if select is not None else random_candidate()

    def candidate_moves(
        self, board: Board, pinned_square: Optional[Square] = None
    ) -> list[Move]:
        return legal_moves(self.direction, board, pinned_square)

    def choose_move(self, board: Board, pinned_square: Optional[Square] = None) -> Move:
        """
        Pick the next move.
        ---

        Only called once the engine knows the side can still move, so running out of candidates here means the
        generator and the engine disagree about the rules.
        """
        candidates = self.candidate_moves(board, pinned_square)
        if not candidates:
            raise MoveGenerationError(
                f"No candidate moves for {self.direction.name.lower()} side"
                + (f" (pinned on {pinned_square.to_algebraic()})" if pinned_square else "")
            )
        move = self.select(candidates)
        logger.debug(
            "computer (%s) picked %s out of %d candidates",
            self.direction.name.lower(),
            move.to_notation(),
            len(candidates),
        )
        return move

    def get_move(self, board: Board, pinned_square: Optional[Square] = None) -> str:
        """Same as `choose_move()`, in move notation (what the console would have typed)."""
        return self.choose_move(board, pinned_square).to_notation()
