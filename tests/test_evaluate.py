"""Tests for the command-line evaluator."""

import io
import logging

import pytest
from rich.console import Console

from pokerhand.scripts.evaluate import (
    EXIT_INVALID_HAND,
    EXIT_OK,
    EvaluateConfig,
    build_table,
    load_hands,
    main,
    parse_args,
    run,
)


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


class TestParseArgs:
    def test_defaults(self):
        config = parse_args(["As Ks 10s Js Qs"])
        assert config == EvaluateConfig(hands=["As Ks 10s Js Qs"], sort=False, log_level="WARNING")

    def test_options(self):
        config = parse_args(["--sort", "--log-level", "debug", "As Ks 10s Js Qs", "2c 2d 5h 7s 9c"])
        assert config.sort
        assert config.log_level == "DEBUG"
        assert config.hands == ["As Ks 10s Js Qs", "2c 2d 5h 7s 9c"]

    def test_requires_a_hand(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestLoadHands:
    def test_loads_evaluated_hands(self):
        hands = load_hands(["As Ks 10s Js Qs", "8h 4c 2s 10d Jd"])
        assert [h.describe() for h in hands] == ["royal flush (A high)", "high card (J)"]

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pokerhand.scripts.evaluate"):
            load_hands(["8s 5s 8d 5d 8h"])
        assert "full house (8s full of 5s)" in caplog.text


class TestRun:
    def test_prints_table_with_winner(self):
        console, buffer = make_console()
        config = EvaluateConfig(hands=["2c 2d 5h 7s 9c", "As Ks 10s Js Qs"])
        assert run(config, console=console) == EXIT_OK

        output = buffer.getvalue()
        assert "royal flush (A high)" in output
        assert "pair (2s)" in output
        assert "10 14 0 0 0 0 0 0" in output

    def test_sorted_output_strongest_first(self):
        console, buffer = make_console()
        config = EvaluateConfig(hands=["8h 4c 2s 10d Jd", "Kd Ks 2h 2s Kh"], sort=True)
        assert run(config, console=console) == EXIT_OK

        output = buffer.getvalue()
        assert output.index("full house") < output.index("high card (J)")

    def test_sorted_output_keeps_tied_hands_in_input_order(self):
        console, buffer = make_console()
        hands = ["2c 3d 4h 6s 8c", "As Jh 9d 6c 3d", "Kd Ks 2h 2s Kh", "Ac Jd 9h 6s 3c"]
        assert run(EvaluateConfig(hands=hands, sort=True), console=console) == EXIT_OK

        output = buffer.getvalue()
        positions = [output.index(h) for h in (hands[2], hands[1], hands[3], hands[0])]
        assert positions == sorted(positions)

    def test_table_rows(self):
        hands = load_hands(["8h 4c 2s 10d Jd", "Kd Ks 2h 2s Kh"])
        table = build_table(hands)
        assert table.row_count == 2

    def test_invalid_card(self, capsys):
        console, buffer = make_console()
        config = EvaluateConfig(hands=["As Ks 10s Js Xx"])
        assert run(config, console=console) == EXIT_INVALID_HAND
        assert buffer.getvalue() == ""
        assert "invalid card string" in capsys.readouterr().err

    def test_wrong_card_count(self, capsys):
        console, _ = make_console()
        config = EvaluateConfig(hands=["As Ks 10s"])
        assert run(config, console=console) == EXIT_INVALID_HAND
        assert "expected 5" in capsys.readouterr().err


class TestMain:
    def test_main_ok(self, capsys):
        assert main(["As Ad 10s Js 10d"]) == EXIT_OK
        assert "Hand evaluation" in capsys.readouterr().out

    def test_main_invalid(self):
        assert main(["As Ad 10s Js"]) == EXIT_INVALID_HAND
