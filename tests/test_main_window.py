import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from tictactoe.controller import Mode
from tictactoe.scores import ScoreTally
from tictactoe.ui.main_window import TicTacToeWindow, status_text


@pytest.fixture
def window(controller):
    win = TicTacToeWindow(controller)
    win.resize(300, 420)
    win.show()
    QTest.qWaitForWindowExposed(win)
    yield win
    win.close()


def test_initial_frame(window):
    assert window.message_label.text() == "X's Turn"
    assert window.pvp_radio.isChecked()
    assert not window.reset_scores_button.isEnabled()
    assert window.x_score_label.text() == "X: 0"


def test_win_updates_labels_and_locks_mode(window, controller):
    for i in (0, 4, 1, 7, 2):
        controller.cell_clicked(i)
    assert window.message_label.text() == "Winner: X"
    assert window.x_score_label.text() == "X: 1"
    assert window.reset_scores_button.isEnabled()
    assert not window.mode_controls_group.isEnabled()
    assert not window.pvp_action.isEnabled()
    assert not window.ai_action.isEnabled()
    assert window.board_widget.winning_line == (0, 1, 2)
    controller.restart()
    assert window.ai_action.isEnabled() and window.mode_controls_group.isEnabled()


def test_buttons_forward_to_controller(window, controller):
    controller.scores = ScoreTally(draws=2)
    controller.cell_clicked(4)
    window.reset_scores_button.click()
    assert controller.scores.is_zero()
    window.restart_button.click()
    assert controller.snapshot().board[4] == ''


def test_radio_switches_mode(window, controller):
    window.ai_radio.setChecked(True)
    assert controller.mode is Mode.HUMAN_VS_COMPUTER
    assert window.ai_action.isChecked()
    controller.cell_clicked(0)
    assert window.message_label.text() == "Computer's Turn"
    controller.cancel_computer_move()


def test_board_click_maps_to_index(window, controller):
    board = window.board_widget
    ox, oy, side = board._geometry()
    cell = side / 3
    # centre of row 1, col 2
    pos = QPoint(int(ox + 2.5 * cell), int(oy + 1.5 * cell))
    assert board.index_at(pos.x(), pos.y()) == 5
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, pos)
    assert controller.snapshot().board[5] == 'X'


def test_index_outside_grid(window):
    assert window.board_widget.index_at(-5, -5) is None


def test_status_text_draw(controller):
    for i in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        controller.apply_move(i)
    assert status_text(controller.snapshot()) == "It's a draw!"
