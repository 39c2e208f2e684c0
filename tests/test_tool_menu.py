"""Tests for the interactive menu dispatcher."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from conftest import output
from desktop_setup.menu.tool_menu import ToolMenu


@pytest.fixture
def actions(mocker: MockerFixture) -> MagicMock:
    """Create mock flows.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Object exposing the six menu flows.
    """
    return mocker.MagicMock()


def test_invalid_choice_then_exit(console: Console, actions: MagicMock, mocker: MockerFixture) -> None:
    """Test that an unknown choice prints one error and exit returns 0."""
    mocker.patch("builtins.input", side_effect=["9", "7"])

    status = ToolMenu(actions, console).start()

    text = output(console)
    assert status == 0
    assert text.count("Invalid choice. Please try again.") == 1
    assert text.count("=== MAIN MENU ===") == 2
    assert "Exiting script. Goodbye!" in text


@pytest.mark.parametrize("choice,flow", [
    ("1", "install_packages"),
    ("2", "remove_packages"),
    ("3", "install_flatpaks"),
    ("4", "install_nvidia"),
    ("5", "install_brave"),
    ("6", "install_rpmfusion"),
])
def test_choice_dispatches_flow(choice: str, flow: str, console: Console, actions: MagicMock,
                                mocker: MockerFixture) -> None:
    """Test each numbered entry runs its flow and pauses before looping."""
    mock_input = mocker.patch("builtins.input", side_effect=[choice, "", "7"])

    assert ToolMenu(actions, console).start() == 0

    getattr(actions, flow).assert_called_once_with()
    assert mock_input.call_count == 3
    assert "Press Enter to continue..." in output(console)


@pytest.mark.parametrize("choice", ["", "0", "8", "abc", "1.5", "-1", "²", "①", "٣"])
def test_unrecognised_input_runs_nothing(choice: str, console: Console, actions: MagicMock,
                                         mocker: MockerFixture) -> None:
    mocker.patch("builtins.input", side_effect=[choice, "7"])

    ToolMenu(actions, console).start()

    assert actions.method_calls == []
    assert "Invalid choice." in output(console)


def test_end_of_input_exits(console: Console, actions: MagicMock, mocker: MockerFixture) -> None:
    mocker.patch("builtins.input", side_effect=EOFError)

    assert ToolMenu(actions, console).start() == 0


def test_menu_lists_every_entry(console: Console, actions: MagicMock, mocker: MockerFixture) -> None:
    mocker.patch("builtins.input", return_value="7")

    ToolMenu(actions, console).start()

    text = output(console)
    for line in [
        "1. Install system packages",
        "2. Remove system packages",
        "3. Install Flatpak packages",
        "4. Install NVIDIA graphics drivers",
        "5. Install Brave browser",
        "6. Install RPM Fusion repositories",
        "7. Exit",
    ]:
        assert line in text
