"""
============================================================
File: preconditions.py
Author: Internal Systems Automation Team
Created: 2026-10-13
Last Updated: 2026-10-18

Description:
Controlli eseguiti all'avvio, prima del menu: utente non
root, sudo disponibile, Flatpak installato (con proposta di
installazione). Un controllo fallito termina il processo.
============================================================
"""

import os
import shutil

from desktop_setup.executor.package_manager import DnfPackageManager, FlatpakManager
from desktop_setup.utils.logger import logger
from desktop_setup.utils.prompts import ConfirmationGate


class PreconditionError(RuntimeError):
    """Condizione di avvio non soddisfatta: il processo esce con status 1"""


def check_not_root():
    if os.geteuid() == 0:
        raise PreconditionError("This script should not be run as root.")


def check_sudo(sudo: str = "sudo"):
    if shutil.which(sudo) is None:
        raise PreconditionError(f"{sudo} is not installed. Please install {sudo} first.")


def ensure_flatpak(gate: ConfirmationGate, dnf: DnfPackageManager, flatpak: FlatpakManager,
                   remote_name: str, remote_url: str):
    """Verifica flatpak; se manca propone l'installazione e aggiunge il remote"""
    if shutil.which(flatpak.command) is not None:
        return

    logger.warning("Flatpak non installato")
    if not gate.confirm("Flatpak is not installed. Would you like to install it?"):
        raise PreconditionError("Flatpak is required for some operations. Exiting.")

    if not dnf.install("flatpak").ok:
        raise PreconditionError("Failed to install Flatpak.")

    if not flatpak.add_remote(remote_name, remote_url).ok:
        logger.warning(f"Impossibile aggiungere il remote {remote_name}")


def run_startup_checks(gate, dnf, flatpak, *, sudo="sudo", remote_name, remote_url):
    check_sudo(sudo)
    ensure_flatpak(gate, dnf, flatpak, remote_name, remote_url)
