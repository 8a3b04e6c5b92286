import pytest

from tictactoe.ai_player import MinimaxPlayer, best_move, score
from tictactoe.errors import InvalidSearchInvocation
from tictactoe.game_logic import EMPTY, O, X, is_draw, is_terminal, opponent, winner


def board_from(text):
    return [EMPTY if ch == '.' else ch for ch in text]


def test_blocks_open_row():
    # X threatens 0-1-2, O has nothing better than blocking at 2
    assert best_move(board_from("XX..O...."), O) == 2


def test_takes_immediate_win_over_block():
    # O can finish 3-4-5 right now, which beats blocking X at 2
    assert best_move(board_from("XX.OO...."), O) == 5


def test_takes_win_as_x():
    assert best_move(board_from("XX.OO...."), X) == 2


def test_prefers_faster_win():
    # O wins now at 8 (2-5-8) or later elsewhere, the immediate one scores highest
    board = board_from("XXOX.O...")
    move = best_move(board, O)
    after = list(board)
    after[move] = O
    assert winner(after)[0] == O


def test_never_picks_occupied_cell_and_is_deterministic():
    board = board_from("X...O...X")
    first = best_move(board, O)
    assert board[first] == EMPTY
    assert all(best_move(board, O) == first for _ in range(5))


def test_does_not_touch_callers_board():
    board = board_from("X...O....")
    snapshot = list(board)
    best_move(board, O)
    assert board == snapshot


def test_empty_board_picks_lowest_index_among_ties():
    # every opening draws under perfect play, ties go to the lowest index
    assert best_move([EMPTY] * 9, X) == 0


def test_terminal_scores():
    assert score(tuple(board_from("OOO.XX.X.")), 0, True, O) == 10
    assert score(tuple(board_from("XXX.OO...")), 3, True, O) == -7
    assert score(tuple(board_from("XOXOXOOXO")), 4, True, O) == 0


@pytest.mark.parametrize("text", ["XXXOO....", "XOXOXOOXO"])
def test_finished_board_is_a_programming_error(text):
    with pytest.raises(InvalidSearchInvocation):
        best_move(board_from(text), O)


def test_self_play_always_draws():
    board = [EMPTY] * 9
    player = X
    while not is_terminal(board):
        move = MinimaxPlayer(player).choose_move(board)
        assert board[move] == EMPTY
        board[move] = player
        player = opponent(player)
    assert is_draw(board)


def test_computer_never_loses_against_any_opponent():
    """every human line of play against the computer as O ends in a draw or O win"""
    computer = MinimaxPlayer(O)

    def explore(board):
        if is_terminal(board):
            assert winner(board)[0] != X
            return
        for i, cell in enumerate(board):
            if cell != EMPTY:
                continue
            after = list(board)
            after[i] = X
            if not is_terminal(after):
                move = computer.choose_move(after)
                assert after[move] == EMPTY
                after[move] = O
            explore(after)

    explore([EMPTY] * 9)
