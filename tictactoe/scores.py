import json
import logging
from dataclasses import dataclass

from PySide6.QtCore import QSettings

from . import config
from .errors import PersistenceFailure
from .game_logic import Status, X, O

log = logging.getLogger(__name__)

# storage field names, same shape as the tally the web version kept
X_FIELD, O_FIELD, DRAW_FIELD = "X", "O", "D"


@dataclass
class ScoreTally:
    """
    running win/draw counters for the session
    """
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, status, winner=None):
        """
        count one finished game, returns False for an unfinished one
        """
        if status is Status.DRAW:
            self.draws += 1
        elif status is Status.WON and winner == X:
            self.x_wins += 1
        elif status is Status.WON and winner == O:
            self.o_wins += 1
        else:
            return False
        return True

    def reset(self):
        self.x_wins = self.o_wins = self.draws = 0

    def is_zero(self):
        return self.x_wins == 0 and self.o_wins == 0 and self.draws == 0

    def copy(self):
        return ScoreTally(self.x_wins, self.o_wins, self.draws)

    def to_dict(self):
        return {X_FIELD: self.x_wins, O_FIELD: self.o_wins, DRAW_FIELD: self.draws}

    @classmethod
    def from_dict(cls, data):
        """
        build from stored data, junk counters become 0
        """
        if not isinstance(data, dict):
            raise PersistenceFailure(f"expected a mapping, got {type(data).__name__}")
        return cls(
            x_wins=_counter(data.get(X_FIELD)),
            o_wins=_counter(data.get(O_FIELD)),
            draws=_counter(data.get(DRAW_FIELD)),
        )


def _counter(value):
    if isinstance(value, bool):
        return 0
    try:
        value = int(value)
    except (TypeError, ValueError):
        return 0
    return max(value, 0)


class ScoreStore:
    """
    keeps the tally as one json string under a fixed QSettings key
    failures are logged and swallowed, the in-memory tally stays authoritative
    """
    def __init__(self, settings=None, enabled=None, key=config.SCORE_KEY):
        if settings is None:
            settings = QSettings(config.ORGANIZATION_NAME, config.APPLICATION_NAME)
        self.settings = settings
        self.enabled = (not config.SAFE_MODE) if enabled is None else enabled
        self.key = key

    def load(self):
        """
        stored tally, or None if missing / unreadable / disabled
        """
        if not self.enabled:
            log.debug("score persistence disabled, not loading")
            return None
        try:
            return self._read()
        except PersistenceFailure as exc:
            log.warning("could not load scores: %s", exc)
            return None

    def save(self, tally):
        """
        write tally, returns True on success
        """
        if not self.enabled:
            log.debug("score persistence disabled, not saving")
            return False
        try:
            self._write(tally)
        except PersistenceFailure as exc:
            log.warning("could not save scores (%s), latest results may not persist", exc)
            return False
        return True

    def _read(self):
        raw = self.settings.value(self.key)
        self._check_status()
        if raw is None or raw == "":
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise PersistenceFailure(f"bad score payload: {exc}") from exc
        return ScoreTally.from_dict(data)

    def _write(self, tally):
        self.settings.setValue(self.key, json.dumps(tally.to_dict()))
        self.settings.sync()
        self._check_status()

    def _check_status(self):
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise PersistenceFailure(f"settings backend reported {status}")
