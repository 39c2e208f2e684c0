"""Tests for the confirmation gate."""

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from conftest import output
from desktop_setup.utils.prompts import ConfirmationGate, Decision, loose_answer, strict_answer


@pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "Yep", "ymaybe", "y ", " y", "\tyes\n"])
def test_loose_answer_accepts_y_prefix(answer: str) -> None:
    assert loose_answer(answer) is Decision.ACCEPT


@pytest.mark.parametrize("answer", ["", "   ", "n", "N", "no", " n", "maybe", "1", "ok"])
def test_loose_answer_declines_everything_else(answer: str) -> None:
    assert loose_answer(answer) is Decision.DECLINE


@pytest.mark.parametrize("answer,expected", [
    ("y", Decision.ACCEPT),
    ("YES", Decision.ACCEPT),
    (" yes ", Decision.ACCEPT),
    ("ymaybe", Decision.DECLINE),
    ("yeah", Decision.DECLINE),
    ("n", Decision.DECLINE),
    ("", Decision.DECLINE),
])
def test_strict_answer(answer: str, expected: Decision) -> None:
    assert strict_answer(answer) is expected


def test_confirm_reads_one_line(console: Console, mocker: MockerFixture) -> None:
    """Test that the gate prompts once and accepts a y answer.

    Args:
        console: In-memory rich console
        mocker: Pytest mocker fixture
    """
    mock_input = mocker.patch("builtins.input", return_value="y")

    assert ConfirmationGate(console).confirm("Do you want to continue?")

    mock_input.assert_called_once()
    assert "Do you want to continue? (y/n)" in output(console)


def test_invalid_answer_declines_without_retry(console: Console, mocker: MockerFixture) -> None:
    """Test that a non-matching answer is a decline, with no re-prompt."""
    mock_input = mocker.patch("builtins.input", side_effect=["whatever", "y"])

    assert ConfirmationGate(console).ask("Continue?") is Decision.DECLINE
    assert mock_input.call_count == 1


def test_end_of_input_declines(console: Console, mocker: MockerFixture) -> None:
    mocker.patch("builtins.input", side_effect=EOFError)

    assert not ConfirmationGate(console).confirm("Continue?")


def test_strict_parser_is_pluggable(console: Console, mocker: MockerFixture) -> None:
    mocker.patch("builtins.input", return_value="ymaybe")

    assert not ConfirmationGate(console, parser=strict_answer).confirm("Continue?")


def test_assume_yes_skips_input(console: Console, mocker: MockerFixture) -> None:
    mock_input = mocker.patch("builtins.input")

    assert ConfirmationGate(console, assume_yes=True).confirm("Continue?")
    mock_input.assert_not_called()
