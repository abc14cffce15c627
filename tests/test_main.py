"""Command line parsing for the entry script."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

import main  # noqa: E402
from inarow.game_logic import GameConfig  # noqa: E402


def test_defaults_are_three_by_three() -> None:
    config, level = main.parse_config([])
    assert config == GameConfig(3, 3, 3)
    assert level == "WARNING"


def test_custom_board() -> None:
    config, level = main.parse_config(
        ["--width", "15", "--height", "10", "--win-length", "5", "--log-level", "DEBUG"])
    assert config == GameConfig(15, 10, 5)
    assert level == "DEBUG"


def test_unwinnable_board_exits_with_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main.parse_config(["--win-length", "4"])
    assert exc.value.code == 2
    assert "win_length must be between 2 and 3" in capsys.readouterr().err
