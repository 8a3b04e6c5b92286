import os

# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

HUMAN_SYMBOL = 'X'       # human always opens in vs-computer mode
COMPUTER_SYMBOL = 'O'

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

ORGANIZATION_NAME = "tictactoe"
APPLICATION_NAME = "TicTacToe"
SCORE_KEY = "ttt-score-v2"   # single json tally stored under this key

# -----------------------------------------------------------------------------
# ENVIRONMENT OVERRIDES
# -----------------------------------------------------------------------------

DEFAULT_COMPUTER_DELAY_MS = 600   # brief "thinking" pause before the computer plays


def _read_delay(raw, default=DEFAULT_COMPUTER_DELAY_MS):
    '''parse a delay in ms, falling back on junk or negatives'''
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value >= 0 else default


def _read_flag(raw):
    return raw not in {None, "", "0", "false", "False", "no"}


COMPUTER_DELAY_MS = _read_delay(os.getenv("TICTACTOE_AI_DELAY_MS"))
SAFE_MODE = _read_flag(os.getenv("TICTACTOE_SAFE_MODE"))
