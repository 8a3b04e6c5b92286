class TicTacToeError(Exception):
    """
    base for all game errors
    """


class IllegalMove(TicTacToeError):
    """
    occupied cell, bad index, finished game, or wrong player's turn
    """
    def __init__(self, index, reason):
        super().__init__(f"illegal move at {index}: {reason}")
        self.index = index
        self.reason = reason


class PersistenceFailure(TicTacToeError):
    """
    score storage could not be read or written
    """


class InvalidSearchInvocation(TicTacToeError):
    """
    search engine asked to move on a finished board
    """
