"""
Unit tests for the terminal game loop.

Player input is fed from a list instead of stdin.
"""
from typing import Callable, List

import pytest
from minefield import Field, FieldConfig, Point
from minefield.console import play, scan_action, scan_int, scan_point, setup_config


def scripted(answers: List[str]) -> Callable[[str], str]:
    """Build an input function that replays answers in order."""
    replies = iter(answers)
    return lambda prompt: next(replies)


# ============================================================================
# Input Scanning Tests
# ============================================================================

class TestScanning:
    """Test prompting for numbers."""

    def test_scan_int_retries_until_in_range(self) -> None:
        """Non-numbers and out-of-range values are asked again."""
        value = scan_int("rows", 4, 15, scripted(["abc", "3", "20", " 7 "]))
        assert value == 7

    def test_scan_point_retries_bad_input(self) -> None:
        """Points need exactly two integers."""
        point = scan_point(scripted(["1", "a b", "1 2 3", "2 3"]))
        assert point == Point(2, 3)

    def test_scan_action_accepts_any_integer(self) -> None:
        """Unknown codes are left for the field to ignore."""
        assert scan_action(scripted(["x", "9"])) == 9

    def test_setup_config(self) -> None:
        """Rows, cols and mines are asked in order."""
        config = setup_config(scripted(["4", "5", "1", "2"]))
        assert config == FieldConfig(4, 5, 2)


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestPlay:
    """Test a full game in the terminal loop."""

    def test_win(
        self, corner_field: Field, capsys: pytest.CaptureFixture
    ) -> None:
        """Flooding every safe box wins the game."""
        assert play(corner_field, scripted(["4 5", "0"])) is True
        out = capsys.readouterr().out
        assert "You have 1 mines left" in out
        assert "Great! You Win!" in out
        assert "@" in out

    def test_loss(
        self, corner_field: Field, capsys: pytest.CaptureFixture
    ) -> None:
        """Uncovering the mine ends the game."""
        assert play(corner_field, scripted(["1 1", "0"])) is False
        assert "Game Over" in capsys.readouterr().out

    def test_invalid_moves_are_ignored(
        self, corner_field: Field, capsys: pytest.CaptureFixture
    ) -> None:
        """Walls and unknown actions keep the game going."""
        answers = ["0 0", "0", "2 2", "8", "1 1", "1", "4 5", "0"]
        assert play(corner_field, scripted(answers)) is True
        out = capsys.readouterr().out
        assert "You have 0 mines left" in out
