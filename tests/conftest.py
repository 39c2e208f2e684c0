"""Shared fixtures for desktop-setup tests."""

import io
import logging
from collections.abc import Generator, Iterable

import pytest
from rich.console import Console

from desktop_setup.config.config import PackageLists
from desktop_setup.executor.command import CommandRunner
from desktop_setup.executor.package_manager import DnfPackageManager, FlatpakManager, SystemTools
from desktop_setup.menu.actions import SetupActions
from desktop_setup.models.batch_model import CommandResult
from desktop_setup.utils.logger import logger
from desktop_setup.utils.prompts import ConfirmationGate


class RecordingRunner(CommandRunner):
    """Command runner test double: records argv, never touches the system.

    Any command whose argv contains a token listed in ``failing`` exits 1.
    """

    def __init__(self, failing: Iterable[str] = (), stdout: str = "41\n"):
        super().__init__(sudo="sudo")
        self.failing = set(failing)
        self.stdout = stdout
        self.calls: list[list[str]] = []

    def run(self, argv, *, privileged=False, capture=False, read_only=False):
        argv_list = [self.sudo, *argv] if privileged else list(argv)
        self.calls.append(argv_list)
        rc = 1 if any(token in self.failing for token in argv_list) else 0
        return CommandResult(argv=tuple(argv_list), returncode=rc, stdout=self.stdout if capture else "")


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    """Drop file handlers added by setup_logger between tests."""
    yield
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def console() -> Console:
    """Rich console writing to memory, without colours."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


def output(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def packages() -> PackageLists:
    return PackageLists(install=("git", "curl"), remove=("totem", "yelp", "kmines"), flatpak=("org.example.App",))


def make_actions(console: Console, runner: RecordingRunner, packages: PackageLists,
                 assume_yes: bool = False) -> SetupActions:
    return SetupActions(
        console,
        ConfirmationGate(console, assume_yes=assume_yes),
        packages,
        DnfPackageManager(runner),
        FlatpakManager(runner),
        SystemTools(runner),
    )
