"""Tests for external command execution."""

from pytest_mock import MockerFixture

from desktop_setup.executor.command import COMMAND_NOT_FOUND, CommandRunner, format_argv


def test_privileged_command_is_prefixed_with_sudo(mocker: MockerFixture) -> None:
    """Test that privileged commands run through the elevation helper.

    Args:
        mocker: Pytest mocker fixture
    """
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")
    mock_run.return_value.returncode = 0

    result = CommandRunner(sudo="doas").run(["dnf", "install", "-y", "git"], privileged=True)

    mock_run.assert_called_once_with(["doas", "dnf", "install", "-y", "git"])
    assert result.ok
    assert result.argv == ("doas", "dnf", "install", "-y", "git")


def test_non_zero_exit_is_failure(mocker: MockerFixture) -> None:
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")
    mock_run.return_value.returncode = 3

    result = CommandRunner().run(["modinfo", "-F", "version", "nvidia"])

    assert not result.ok
    assert result.returncode == 3


def test_capture_returns_stdout(mocker: MockerFixture) -> None:
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")
    mock_run.return_value.returncode = 0
    mock_run.return_value.stdout = "41\n"

    result = CommandRunner().run(["rpm", "-E", "%fedora"], capture=True)

    assert result.stdout == "41\n"
    assert mock_run.call_args.kwargs["text"] is True


def test_missing_executable_is_a_failed_result(mocker: MockerFixture) -> None:
    mocker.patch("desktop_setup.executor.command.subprocess.run", side_effect=FileNotFoundError)

    result = CommandRunner().run(["kmodgenca", "-a"])

    assert result.returncode == COMMAND_NOT_FOUND
    assert not result.ok


def test_dry_run_skips_system_changes(mocker: MockerFixture) -> None:
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")

    result = CommandRunner(dry_run=True).run(["dnf", "remove", "-y", "totem"], privileged=True)

    mock_run.assert_not_called()
    assert result.ok


def test_dry_run_still_runs_read_only_queries(mocker: MockerFixture) -> None:
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")
    mock_run.return_value.returncode = 0
    mock_run.return_value.stdout = "41\n"

    result = CommandRunner(dry_run=True).run(["rpm", "-E", "%fedora"], capture=True, read_only=True)

    mock_run.assert_called_once()
    assert result.stdout == "41\n"


def test_pipeline_uses_pipefail(mocker: MockerFixture) -> None:
    mock_run = mocker.patch("desktop_setup.executor.command.subprocess.run")
    mock_run.return_value.returncode = 0

    CommandRunner().run_pipeline("curl -fsS https://example.org/x.sh | sh")

    mock_run.assert_called_once_with(["bash", "-o", "pipefail", "-c", "curl -fsS https://example.org/x.sh | sh"])


def test_format_argv_quotes_arguments() -> None:
    assert format_argv(["dnf", "install", "rpmfusion-*-appstream-data"]) == "dnf install 'rpmfusion-*-appstream-data'"
