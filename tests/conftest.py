import os

# no display needed for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from tictactoe.controller import GameController
from tictactoe.scores import ScoreStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "scores.ini"), QSettings.IniFormat)


@pytest.fixture
def store(settings):
    return ScoreStore(settings=settings, enabled=True)


@pytest.fixture
def controller(qapp, store):
    ctl = GameController(store=store, computer_delay_ms=0)
    yield ctl
    ctl.cancel_computer_move()
