"""
Exceptions shared across layers.

`MoveError` and its subclasses are recoverable: the move gets rejected, nothing on the board changes, and the caller can simply try again.
Everything else signals a misuse of the domain objects (or a bug).
"""


class GameError(Exception):
    """Base class for everything raised by the checkers domain."""


# --- BOARD ---
class OutOfBoundsError(GameError):
    """A coordinate outside of the 8x8 board was used."""


class EmptyCellError(GameError):
    """Asked for the piece on a square that has none."""


class IllegalMutationError(GameError):
    """The board refused a mutation that would corrupt its state (moving from an empty square, onto an occupied one)."""


# --- MOVE VALIDATION ---
class MoveError(GameError):
    """A submitted move was rejected. The board is untouched."""


class MalformedMoveError(MoveError):
    """The move cannot be interpreted (bad notation / coordinates off the board)."""


class WrongPieceError(MoveError):
    """A capture chain is in progress and a different piece tried to move."""


class NoPieceError(MoveError):
    """There is no piece on the starting square."""


class NotYourPieceError(MoveError):
    """The piece on the starting square belongs to the opponent."""


class DestinationOccupiedError(MoveError):
    """The target square is not empty."""


class IllegalMoveError(MoveError):
    """Not a single forward diagonal step."""


class CaptureRequiredError(MoveError):
    """A capture is available somewhere, so a simple move is not allowed."""


class NoOpponentToCaptureError(MoveError):
    """The jump does not pass over an opposing piece."""


class IllegalCaptureGeometryError(MoveError):
    """A capture must be a forward diagonal jump of exactly two squares."""


# --- GAME FLOW ---
class GameOverError(GameError):
    """No more moves are accepted once the game has a winner."""


class InvalidRequestError(GameError):
    """Request data at the service boundary does not make sense."""


class MoveGenerationError(GameError):
    """
    Internal consistency fault: the move generator found no candidates while the engine says a move must exist.
    NOT a `MoveError`: this should never be shown to a player as a reason to retry.
    """
