from ..config import COMPUTER_SYMBOL
from ..controller import Mode
from ..game_logic import Status
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu,
    QRadioButton, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QActionGroup, QFont
from PySide6.QtCore import Qt, Slot


def status_text(snapshot):
    """
    one-line game status for the label under the board
    """
    if snapshot.status is Status.DRAW:
        return "It's a draw!"
    if snapshot.status is Status.WON:
        return f"Winner: {snapshot.winner}"
    if snapshot.mode is Mode.HUMAN_VS_COMPUTER and snapshot.active_player == COMPUTER_SYMBOL:
        return "Computer's Turn"
    return f"{snapshot.active_player}'s Turn"


class TicTacToeWindow(QMainWindow):
    """
    main window, renders controller snapshots and forwards user intents
    """
    def __init__(self, controller):
        """
        build widgets, wire signals, draw the first frame
        """
        super().__init__()
        self.controller = controller
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.controller.state_changed.connect(self.render)
        self.render(self.controller.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #eee; }
            QRadioButton { color: #eee; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_mode_controls()       # pvp / vs computer
        self.main_layout.addWidget(self.mode_controls_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.cell_clicked)

        self._create_scoreboard()          # X / O / draw counters
        self.main_layout.addWidget(self.scoreboard_widget)
        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.controller.restart_requested)
        self.pvp_action = QAction("Human vs Human", self, checkable=True)
        self.pvp_action.triggered.connect(lambda: self._select_mode(Mode.HUMAN_VS_HUMAN))
        self.ai_action = QAction("Human vs Computer", self, checkable=True)
        self.ai_action.triggered.connect(lambda: self._select_mode(Mode.HUMAN_VS_COMPUTER))
        mode_actions = QActionGroup(self)
        for act in (self.pvp_action, self.ai_action): mode_actions.addAction(act)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, None, self.pvp_action, self.ai_action, None, quit_action):
            if act: game_menu.addAction(act)
            else: game_menu.addSeparator()
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_mode_controls(self):
        '''mode selection group'''
        self.mode_controls_group = QGroupBox("Game Mode")
        layout = QHBoxLayout()
        self.pvp_radio = QRadioButton("Human vs Human")
        self.ai_radio = QRadioButton("Human vs Computer")
        self.pvp_radio.toggled.connect(
            lambda on: on and self._select_mode(Mode.HUMAN_VS_HUMAN))
        self.ai_radio.toggled.connect(
            lambda on: on and self._select_mode(Mode.HUMAN_VS_COMPUTER))
        layout.addWidget(self.pvp_radio)
        layout.addWidget(self.ai_radio)
        layout.addStretch()
        self.mode_controls_group.setLayout(layout)

    def _create_scoreboard(self):
        '''score labels'''
        self.scoreboard_widget = QWidget()
        hl = QHBoxLayout(self.scoreboard_widget)
        f = QFont(); f.setPointSize(12); f.setBold(True)
        self.x_score_label = QLabel(); self.x_score_label.setStyleSheet("color: #8acaff;")
        self.o_score_label = QLabel(); self.o_score_label.setStyleSheet("color: #ff8a8a;")
        self.draw_score_label = QLabel(); self.draw_score_label.setStyleSheet("color: #ccc;")
        for lbl in (self.x_score_label, self.o_score_label, self.draw_score_label):
            lbl.setFont(f); lbl.setAlignment(Qt.AlignCenter)
            hl.addWidget(lbl)

    def _create_bottom_controls(self):
        # status label + restart/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.controller.restart_requested)
        self.reset_scores_button = QPushButton("Reset Scores")
        self.reset_scores_button.clicked.connect(self.controller.reset_scores_requested)
        for w in (self.message_label, None, self.restart_button, self.reset_scores_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _select_mode(self, mode):
        # radios and menu both land here, skip re-selecting the current mode
        if mode is not self.controller.mode:
            self.controller.mode_changed(mode)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _sync_mode_widgets(self, mode):
        # reflect the controller's mode without re-triggering it
        ai = mode is Mode.HUMAN_VS_COMPUTER
        for w in (self.pvp_radio, self.ai_radio):
            w.blockSignals(True)
        self.ai_radio.setChecked(ai); self.pvp_radio.setChecked(not ai)
        for w in (self.pvp_radio, self.ai_radio):
            w.blockSignals(False)
        self.ai_action.setChecked(ai); self.pvp_action.setChecked(not ai)

    @Slot(object)
    def render(self, snapshot):
        """
        redraw everything from one controller snapshot
        """
        over = snapshot.status is not Status.ONGOING
        self.board_widget.show_snapshot(snapshot)
        self.board_widget.set_accept_clicks(not snapshot.computer_thinking)
        self._sync_mode_widgets(snapshot.mode)
        # mode can only change while a game is in progress
        self.mode_controls_group.setEnabled(not over)
        self.pvp_action.setEnabled(not over); self.ai_action.setEnabled(not over)

        scores = snapshot.scores
        self.x_score_label.setText(f"X: {scores.x_wins}")
        self.o_score_label.setText(f"O: {scores.o_wins}")
        self.draw_score_label.setText(f"Draw: {scores.draws}")
        self.reset_scores_button.setEnabled(not scores.is_zero())

        self._update_message(status_text(snapshot), is_success=over, is_turn=not over)

    def closeEvent(self, event):
        # drop any pending computer move on close
        self.controller.cancel_computer_move()
        event.accept()
