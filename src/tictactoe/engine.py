"""Game state engine: board transitions and terminal-state detection."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

BOARD_CELLS = 9

# Scan order is significant: the first completed line decides the winner.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


# PUBLIC_INTERFACE
class Mark(str, Enum):
    """A player's symbol."""
    X = "X"
    O = "O"

    def other(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self is Mark.X else Mark.X


# PUBLIC_INTERFACE
class Cell(Enum):
    """Content of one board position."""
    EMPTY = None
    X = "X"
    O = "O"

    @classmethod
    def of(cls, mark: Mark) -> "Cell":
        return cls(mark.value)

    @property
    def mark(self) -> Optional[Mark]:
        """The mark occupying the cell, or None when empty."""
        if self is Cell.EMPTY:
            return None
        return Mark(self.value)


Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (Cell.EMPTY,) * BOARD_CELLS


# PUBLIC_INTERFACE
class InvalidIndex(ValueError):
    """Raised when a move targets something that is not a cell index 0..8."""

    def __init__(self, index):
        super().__init__(f"Cell index must be an integer in 0..{BOARD_CELLS - 1}, got {index!r}")
        self.index = index


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class InProgress:
    """The game continues; current_mark plays next."""
    current_mark: Mark
    is_terminal: ClassVar[bool] = False


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Won:
    """A line was completed by mark."""
    mark: Mark
    is_terminal: ClassVar[bool] = True


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Draw:
    """Every cell is filled and no line was completed."""
    is_terminal: ClassVar[bool] = True


GameStatus = Union[InProgress, Won, Draw]


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class GameSession:
    """
    Board plus the mark to play next. Moves return new sessions.

    X always moves first, so current_mark is fixed by how many cells are
    filled; a session that disagrees is rejected with ValueError.
    """
    board: Board = EMPTY_BOARD
    current_mark: Mark = Mark.X

    def __post_init__(self):
        if len(self.board) != BOARD_CELLS or not all(isinstance(cell, Cell) for cell in self.board):
            raise ValueError(f"Board must hold exactly {BOARD_CELLS} cells")
        if self.current_mark is not _mark_for_parity(self.board):
            raise ValueError(
                f"{Mark(self.current_mark).value} cannot be next with {self.filled} filled cells"
            )

    @property
    def status(self) -> GameStatus:
        return evaluate(self.board, self.current_mark)

    @property
    def filled(self) -> int:
        return sum(1 for cell in self.board if cell is not Cell.EMPTY)


# PUBLIC_INTERFACE
def new_session() -> GameSession:
    """Create the initial session: empty board, X to move."""
    return GameSession(board=EMPTY_BOARD, current_mark=Mark.X)


# PUBLIC_INTERFACE
def reset() -> GameSession:
    """Return the canonical initial session."""
    return new_session()


def _check_index(index) -> int:
    # bool is an int subclass but never a cell index
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndex(index)
    if not 0 <= index < BOARD_CELLS:
        raise InvalidIndex(index)
    return index


def _mark_for_parity(board: Board) -> Mark:
    filled = sum(1 for cell in board if cell is not Cell.EMPTY)
    return Mark.X if filled % 2 == 0 else Mark.O


# PUBLIC_INTERFACE
def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Return the first completed line in scan order, or None."""
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] is board[b] is board[c]:
            return line
    return None


# PUBLIC_INTERFACE
def evaluate(board: Board, current_mark: Optional[Mark] = None) -> GameStatus:
    """
    Derive the status of a board.

    Rows are checked before columns, columns before diagonals. When no line
    is complete a full board is a draw; otherwise the game is in progress
    with current_mark to play (derived from the filled-cell count if not
    given).
    """
    line = winning_line(board)
    if line is not None:
        return Won(board[line[0]].mark)
    if all(cell is not Cell.EMPTY for cell in board):
        return Draw()
    if current_mark is None:
        current_mark = _mark_for_parity(board)
    return InProgress(current_mark)


# PUBLIC_INTERFACE
def is_cell_playable(session: GameSession, index: int) -> bool:
    """True if a move at index would be accepted."""
    return _playable(session, _check_index(index))


def _playable(session: GameSession, index: int) -> bool:
    return session.board[index] is Cell.EMPTY and not session.status.is_terminal


# PUBLIC_INTERFACE
def apply_move(session: GameSession, index: int) -> GameSession:
    """
    Place the current mark at index and hand the turn to the other mark.

    Moves on an occupied cell or after the game ended are ignored and the
    same session is returned. Raises InvalidIndex for anything that is not
    a cell index.
    """
    index = _check_index(index)
    if not _playable(session, index):
        return session
    board = list(session.board)
    board[index] = Cell.of(session.current_mark)
    return GameSession(board=tuple(board), current_mark=session.current_mark.other())
