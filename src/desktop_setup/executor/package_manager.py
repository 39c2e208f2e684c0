"""
============================================================
File: package_manager.py
Author: Internal Systems Automation Team
Created: 2026-10-12
Last Updated: 2026-10-18

Description:
Interfacce verso i gestori esterni: dnf per i pacchetti di
sistema, flatpak per le applicazioni sandbox e gli strumenti
per moduli kernel e chiavi Secure Boot. Ogni metodo
costruisce la riga di comando e la delega al CommandRunner.
============================================================
"""

import shlex
from typing import Protocol, Sequence, runtime_checkable

from desktop_setup.config import settings
from desktop_setup.executor.command import CommandRunner
from desktop_setup.models.batch_model import CommandResult


@runtime_checkable
class PackageManager(Protocol):
    """Capacità minime richieste dai batch di pacchetti"""

    def install(self, *packages: str) -> CommandResult:
        ...

    def remove(self, *packages: str) -> CommandResult:
        ...


class DnfPackageManager:
    """Pacchetti di sistema tramite dnf (sempre con sudo)"""

    def __init__(self, runner: CommandRunner, command: str = settings.DNF_COMMAND):
        self.runner = runner
        self.command = command

    def _dnf(self, *args: str) -> CommandResult:
        return self.runner.run([self.command, *args], privileged=True)

    def install(self, *packages: str) -> CommandResult:
        return self._dnf("install", "-y", *packages)

    def remove(self, *packages: str) -> CommandResult:
        return self._dnf("remove", "-y", *packages)

    def autoremove(self) -> CommandResult:
        return self._dnf("autoremove", "-y")

    def update(self, *targets: str, options: Sequence[str] = ()) -> CommandResult:
        return self._dnf("update", "-y", *targets, *options)

    def swap(self, old: str, new: str, *, allow_erasing: bool = False) -> CommandResult:
        args = ["swap", "-y", old, new]
        if allow_erasing:
            args.append("--allowerasing")
        return self._dnf(*args)

    def set_option(self, option: str) -> CommandResult:
        return self._dnf("config-manager", "setopt", option)

    def release_version(self) -> CommandResult:
        """Versione di Fedora (`rpm -E %fedora`) in stdout"""
        return self.runner.run(["rpm", "-E", "%fedora"], capture=True, read_only=True)


class FlatpakManager:
    """Applicazioni sandbox tramite flatpak (senza sudo)"""

    def __init__(self, runner: CommandRunner, remote: str = settings.FLATHUB_REMOTE,
                 command: str = settings.FLATPAK_COMMAND):
        self.runner = runner
        self.remote = remote
        self.command = command

    def add_remote(self, name: str, url: str) -> CommandResult:
        return self.runner.run([self.command, "remote-add", "--if-not-exists", name, url])

    def install(self, *packages: str) -> CommandResult:
        return self.runner.run([self.command, "install", "-y", self.remote, *packages])

    def remove(self, *packages: str) -> CommandResult:
        return self.runner.run([self.command, "uninstall", "-y", *packages])


class SystemTools:
    """Comandi di sistema non legati al gestore pacchetti"""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def generate_signing_key(self) -> CommandResult:
        return self.runner.run(["kmodgenca", "-a"], privileged=True)

    def enroll_key(self, public_key: str) -> CommandResult:
        return self.runner.run(["mokutil", "--import", public_key], privileged=True)

    def module_version(self, module: str) -> CommandResult:
        return self.runner.run(["modinfo", "-F", "version", module], read_only=True)

    def fetch_and_execute(self, url: str) -> CommandResult:
        return self.runner.run_pipeline(f"curl -fsS {shlex.quote(url)} | sh")
