import main
from tictactoe import config


def test_parser_defaults():
    ns = main.build_parser().parse_args([])
    assert ns.mode == "pvp"
    assert ns.delay_ms == config.COMPUTER_DELAY_MS
    assert not ns.no_persist and not ns.verbose


def test_parser_flags():
    ns = main.build_parser().parse_args(["--mode", "ai", "--delay-ms", "0", "--no-persist", "-v"])
    assert (ns.mode, ns.delay_ms, ns.no_persist, ns.verbose) == ("ai", 0, True, True)
