from enum import Enum

from .config import BOARD_SIZE, CELL_COUNT
from .errors import IllegalMove

EMPTY = ''
X = 'X'
O = 'O'

# rows top-to-bottom, cols left-to-right, then both diagonals
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Status(Enum):
    ONGOING = "ongoing"
    WON = "win"
    DRAW = "draw"


def opponent(player):
    return O if player == X else X


def to_index(row, col):
    """
    grid coords -> board index (row-major)
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IllegalMove((row, col), "outside the grid")
    return row * BOARD_SIZE + col


def to_row_col(index):
    if not 0 <= index < CELL_COUNT:
        raise IllegalMove(index, "outside the grid")
    return divmod(index, BOARD_SIZE)


def winner(board):
    """
    scan the 8 lines in fixed order, first full line wins
    returns: (player, line) or (None, None)
    """
    for line in LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return board[a], line
    return None, None


def is_full(board):
    return all(cell != EMPTY for cell in board)


def is_draw(board):
    """
    full board and nobody has a line
    """
    return is_full(board) and winner(board)[0] is None


def is_terminal(board):
    return winner(board)[0] is not None or is_full(board)


def legal_moves(board):
    return {i for i, cell in enumerate(board) if cell == EMPTY}


def status_of(board):
    if winner(board)[0] is not None:
        return Status.WON
    if is_full(board):
        return Status.DRAW
    return Status.ONGOING


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        self.reset_game()

    @property
    def status(self):
        return status_of(self.game_board)

    @property
    def game_over(self):
        return self.status is not Status.ONGOING

    @property
    def winner(self):
        return winner(self.game_board)[0]

    @property
    def winning_line(self):
        return winner(self.game_board)[1]

    def place(self, index):
        """
        place the active player's mark at index
        raises IllegalMove, returns 'win', 'draw' or 'continue'
        """
        if self.game_over:
            raise IllegalMove(index, "game is over")
        # bool is an int subclass, True must not mean cell 1
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            raise IllegalMove(index, "outside the grid")
        if self.game_board[index] != EMPTY:
            raise IllegalMove(index, "cell taken")

        self.game_board[index] = self.active_player
        self.active_player = opponent(self.active_player)
        return self._result()

    def _result(self):
        status = self.status
        if status is Status.WON:
            return "win"
        if status is Status.DRAW:
            return "draw"
        return "continue"

    def reset_game(self):
        """
        clear board, X opens
        """
        self.game_board = [EMPTY] * CELL_COUNT
        self.active_player = X
