"""
computer opponent: plain minimax over the full game tree

The 3x3 tree is small enough to search exhaustively, no pruning. Every
recursion step builds a new tuple, the caller's board is never touched.
"""
import logging
from functools import lru_cache

from .config import COMPUTER_SYMBOL
from .errors import InvalidSearchInvocation
from .game_logic import EMPTY, is_full, is_terminal, opponent, winner

log = logging.getLogger(__name__)

WIN_SCORE = 10


def _with_move(board, index, player):
    return board[:index] + (player,) + board[index + 1:]


@lru_cache(maxsize=None)
def score(board, depth, maximizing, computer):
    """
    minimax value of board for the computer
    faster wins score higher, slower losses score less badly
    """
    human = opponent(computer)
    won_by = winner(board)[0]
    if won_by == computer:
        return WIN_SCORE - depth
    if won_by == human:
        return depth - WIN_SCORE
    if is_full(board):
        return 0

    mover = computer if maximizing else human
    scores = [
        score(_with_move(board, i, mover), depth + 1, not maximizing, computer)
        for i, cell in enumerate(board) if cell == EMPTY
    ]
    return max(scores) if maximizing else min(scores)


def best_move(board, computer=COMPUTER_SYMBOL):
    """
    optimal index for computer to play on board
    ties go to the lowest index so the same board always gives the same move
    """
    board = tuple(board)
    if is_terminal(board):
        raise InvalidSearchInvocation(f"no move to search on finished board {board}")

    best_index, best_score = None, None
    for i, cell in enumerate(board):
        if cell != EMPTY:
            continue
        # opponent replies next, so the child is scored as a minimizing node
        value = score(_with_move(board, i, computer), 0, False, computer)
        if best_score is None or value > best_score:
            best_index, best_score = i, value
    return best_index


class MinimaxPlayer:
    """
    computer player bound to one symbol
    """
    def __init__(self, symbol=COMPUTER_SYMBOL):
        self.symbol = symbol

    def choose_move(self, board):
        move = best_move(board, self.symbol)
        log.debug("%s picks %d on %s", self.symbol, move, "".join(c or '.' for c in board))
        return move
