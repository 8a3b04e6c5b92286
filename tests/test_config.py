import pytest

from tictactoe import config


@pytest.mark.parametrize("raw, expected", [
    ("250", 250),
    ("0", 0),
    ("-5", config.DEFAULT_COMPUTER_DELAY_MS),
    ("soon", config.DEFAULT_COMPUTER_DELAY_MS),
    (None, config.DEFAULT_COMPUTER_DELAY_MS),
])
def test_read_delay(raw, expected):
    assert config._read_delay(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("true", True), ("0", False), ("", False), (None, False),
])
def test_read_flag(raw, expected):
    assert config._read_flag(raw) is expected
