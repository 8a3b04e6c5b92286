import logging
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from . import config
from .ai_player import MinimaxPlayer
from .errors import IllegalMove
from .game_logic import GameLogic, Status
from .scores import ScoreTally

log = logging.getLogger(__name__)


class Mode(Enum):
    HUMAN_VS_HUMAN = "pvp"
    HUMAN_VS_COMPUTER = "ai"


@dataclass(frozen=True)
class Snapshot:
    """
    everything the window needs to draw one frame
    """
    board: tuple
    status: Status
    active_player: str
    winner: object
    winning_line: object
    scores: ScoreTally
    mode: Mode
    computer_thinking: bool


class GameController(QObject):
    """
    owns the game and the tally, sequences turns, runs the computer player
    """
    state_changed = Signal(object)   # emits a Snapshot after every transition

    def __init__(self, store=None, mode=Mode.HUMAN_VS_HUMAN,
                 computer_delay_ms=None, parent=None):
        super().__init__(parent)
        self.game_logic = GameLogic()
        self.computer = MinimaxPlayer(config.COMPUTER_SYMBOL)
        self.mode = Mode(mode)
        self.store = store
        self.scores = ScoreTally()
        if store is not None:
            loaded = store.load()
            if loaded is not None:
                self.scores = loaded

        # bumped on every restart, a scheduled computer move only lands
        # if the generation it was scheduled in is still current
        self._generation = 0
        self._pending_generation = None
        self._computer_timer = QTimer(self)
        self._computer_timer.setSingleShot(True)
        if computer_delay_ms is None:
            computer_delay_ms = config.COMPUTER_DELAY_MS
        self._computer_timer.setInterval(computer_delay_ms)
        self._computer_timer.timeout.connect(self._on_computer_timer)

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @property
    def computer_delay_ms(self):
        return self._computer_timer.interval()

    @property
    def computer_thinking(self):
        return self._computer_timer.isActive()

    def is_computer_turn(self):
        return (self.mode is Mode.HUMAN_VS_COMPUTER
                and not self.game_logic.game_over
                and self.game_logic.active_player == self.computer.symbol)

    def snapshot(self):
        gl = self.game_logic
        return Snapshot(
            board=tuple(gl.game_board),
            status=gl.status,
            active_player=gl.active_player,
            winner=gl.winner,
            winning_line=gl.winning_line,
            scores=self.scores.copy(),
            mode=self.mode,
            computer_thinking=self.computer_thinking,
        )

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------

    def apply_move(self, index):
        """
        play index for the human side to move
        illegal moves are ignored, returns True if the board changed
        """
        if self.is_computer_turn():
            log.debug("ignored move at %s: computer's turn", index)
            return False
        return self._place(index)

    def _place(self, index):
        try:
            result = self.game_logic.place(index)
        except IllegalMove as exc:
            log.debug("ignored %s", exc)
            return False

        if result != "continue":
            self._finish_game()
        self._schedule_computer_move()
        self._emit()
        return True

    def restart(self):
        """
        fresh board, X to move, scores untouched
        """
        self.cancel_computer_move()
        self._generation += 1
        self.game_logic.reset_game()
        log.debug("new game (%s)", self.mode.value)
        self._emit()

    def reset_scores(self):
        self.scores.reset()
        log.info("scores reset")
        self._save_scores()
        self._emit()

    def set_mode(self, mode):
        mode = Mode(mode)
        if mode is not self.mode:
            log.info("mode changed to %s", mode.value)
        self.mode = mode
        self.restart()

    def set_computer_delay(self, ms):
        self._computer_timer.setInterval(max(int(ms), 0))

    def cancel_computer_move(self):
        """
        stop the thinking timer, a pending move is dropped
        """
        self._computer_timer.stop()
        self._pending_generation = None

    def play_computer_move_now(self):
        """
        skip the thinking pause and let the computer move
        returns True if a move was made
        """
        self.cancel_computer_move()
        if not self.is_computer_turn():
            return False
        move = self.computer.choose_move(self.game_logic.game_board)
        # the only path that puts the computer's mark on the board
        return self._place(move)

    # ------------------------------------------------------------------
    # intents from the window
    # ------------------------------------------------------------------

    @Slot(int)
    def cell_clicked(self, index):
        self.apply_move(index)

    @Slot()
    def restart_requested(self):
        self.restart()

    @Slot()
    def reset_scores_requested(self):
        self.reset_scores()

    @Slot(object)
    def mode_changed(self, mode):
        self.set_mode(mode)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _finish_game(self):
        gl = self.game_logic
        self.scores.record(gl.status, gl.winner)
        if gl.status is Status.WON:
            log.info("player %s wins on line %s", gl.winner, gl.winning_line)
        else:
            log.info("game drawn")
        self._save_scores()

    def _save_scores(self):
        if self.store is not None:
            self.store.save(self.scores)

    def _schedule_computer_move(self):
        if not self.is_computer_turn():
            return
        self._pending_generation = self._generation
        self._computer_timer.start()

    @Slot()
    def _on_computer_timer(self):
        scheduled, self._pending_generation = self._pending_generation, None
        if scheduled != self._generation:
            log.debug("dropping computer move scheduled for an old game")
            return
        self.play_computer_move_now()

    def _emit(self):
        self.state_changed.emit(self.snapshot())
