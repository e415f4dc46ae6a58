"""
Tic-Tac-Toe game implementation.

Simple 3x3 game - small enough that MCTS reaches perfect play
(always draw) with a few hundred iterations per move.

Rules:
- 3x3 board
- X moves first, players alternate placing their mark
- First to get 3 in a row (horizontal, vertical, diagonal) wins
- If board fills with no winner, it's a tie
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from .base import Game, GameResult, GameSpec, Player, register_game
from ..exceptions import CellOccupiedError, GameOverError, OutOfBoundsError


BOARD_SIZE = 3

Move = tuple[int, int]  # (row, col)

SYMBOLS = {0: ".", Player.FIRST.value: "X", Player.SECOND.value: "O"}

# Winning lines (indices into flattened board)
WINNING_LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
])


@dataclass(frozen=True, eq=False)
class TicTacToeState:
    """
    Immutable Tic-Tac-Toe position.

    Cells hold Player.FIRST.value (X), Player.SECOND.value (O) or 0.
    """
    board: np.ndarray  # shape (3, 3), dtype int8, read-only
    to_move: Player = Player.FIRST

    def __post_init__(self):
        if self.board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        board = self.board.astype(np.int8)  # always a private copy
        board.setflags(write=False)
        object.__setattr__(self, "board", board)

    def key(self) -> tuple[bytes, int]:
        return self.board.tobytes(), self.to_move.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        cells = "".join(SYMBOLS[int(v)] for v in self.board.flat)
        return f"TicTacToeState({cells!r}, to_move={self.to_move.name})"


@register_game("tictactoe")
class TicTacToeGame(Game[TicTacToeState, Move]):
    """
    Tic-Tac-Toe implementation.

    Moves are (row, col) pairs:
    (0,0) | (0,1) | (0,2)
    ---------------------
    (1,0) | (1,1) | (1,2)
    ---------------------
    (2,0) | (2,1) | (2,2)
    """

    _spec = GameSpec(
        name="tictactoe",
        board_shape=(BOARD_SIZE, BOARD_SIZE),
        num_moves=BOARD_SIZE * BOARD_SIZE,  # 9
    )

    @property
    def spec(self) -> GameSpec:
        return self._spec

    def initial_state(self) -> TicTacToeState:
        """Return empty board with X to move."""
        return TicTacToeState(
            board=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        )

    def current_mover(self, state: TicTacToeState) -> Player:
        return state.to_move

    def legal_moves(self, state: TicTacToeState) -> list[Move]:
        """Return empty cells in row-major order, none once the game is over."""
        if self.classify(state).is_terminal:
            return []
        empty = np.flatnonzero(state.board.reshape(-1) == 0)
        return [divmod(int(i), BOARD_SIZE) for i in empty]

    def apply(self, state: TicTacToeState, move: Move) -> TicTacToeState:
        """Mark the cell for the player on move and pass the turn."""
        if self.classify(state).is_terminal:
            raise GameOverError()

        row, col = move
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise OutOfBoundsError(row, col)
        if state.board[row, col] != 0:
            raise CellOccupiedError(row, col)

        new_board = state.board.copy()
        new_board[row, col] = state.to_move.value

        return TicTacToeState(board=new_board, to_move=state.to_move.opponent)

    def classify(self, state: TicTacToeState) -> GameResult:
        flat = state.board.reshape(-1)
        line_sums = flat[WINNING_LINES].sum(axis=1)

        for player in Player:
            if np.any(line_sums == BOARD_SIZE * player.value):
                return GameResult.won_by(player)

        if not np.any(flat == 0):
            return GameResult.TIE

        return GameResult.ONGOING

    def parse_move(self, text: str) -> Move:
        """
        Parse "row, col" input.

        Raises:
            ValueError: with a message suitable for showing to the user
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(
                "Number of comma separated non-negative numbers must be 2."
            )
        try:
            row, col = int(parts[0].strip()), int(parts[1].strip())
        except ValueError:
            raise ValueError(
                "Must enter valid non-negative numbers separated by a comma."
            ) from None
        if row < 0 or col < 0:
            raise ValueError(
                "Must enter valid non-negative numbers separated by a comma."
            )
        return row, col

    def render(self, state: TicTacToeState) -> str:
        """Render board as ASCII art."""
        lines = []
        for r in range(BOARD_SIZE):
            row_str = " | ".join(
                SYMBOLS[int(state.board[r, c])] for c in range(BOARD_SIZE)
            )
            lines.append(f" {row_str} ")
            if r < BOARD_SIZE - 1:
                lines.append("-----------")

        return "\n".join(lines)


def state_from_string(text: str) -> TicTacToeState:
    """
    Build a position from a 9-cell string such as "X.O|.X.|..O".

    Cells are X, O or '.', read row by row; whitespace and '|' are ignored.
    The side to move follows from the piece counts (X moves first).
    """
    cells = [ch for ch in text.upper() if ch not in " |\n\t"]
    if len(cells) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"Position must have 9 cells, got {len(cells)}")

    values = {".": 0, "X": Player.FIRST.value, "O": Player.SECOND.value}
    try:
        flat = [values[ch] for ch in cells]
    except KeyError as e:
        raise ValueError(f"Unknown cell symbol {e.args[0]!r}") from None

    num_x = flat.count(Player.FIRST.value)
    num_o = flat.count(Player.SECOND.value)
    if num_x == num_o:
        to_move = Player.FIRST
    elif num_x == num_o + 1:
        to_move = Player.SECOND
    else:
        raise ValueError(f"Impossible piece counts: {num_x} X, {num_o} O")

    board = np.array(flat, dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)
    return TicTacToeState(board=board, to_move=to_move)
