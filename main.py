import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe import config
from tictactoe.controller import GameController, Mode
from tictactoe.scores import ScoreStore
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles (greyed-out mode picker after a game ends)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser():
    p = argparse.ArgumentParser(prog="tictactoe", description="Tic-Tac-Toe with an unbeatable computer")
    p.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.HUMAN_VS_HUMAN.value,
                   help="pvp: two humans, ai: you (X) against the computer (O)")
    p.add_argument("--delay-ms", type=int, default=config.COMPUTER_DELAY_MS,
                   help="pause before the computer moves")
    p.add_argument("--no-persist", action="store_true", help="Do not load or save scores")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    ns = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(name)s: %(message)s")

    app = QApplication(sys.argv if argv is None else [sys.argv[0], *argv])
    app.setOrganizationName(config.ORGANIZATION_NAME)
    app.setApplicationName(config.APPLICATION_NAME)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    store = ScoreStore(enabled=False if ns.no_persist else None)
    controller = GameController(store=store, mode=Mode(ns.mode), computer_delay_ms=max(ns.delay_ms, 0))
    window = TicTacToeWindow(controller)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
