"""
============================================================
File: command.py
Author: Internal Systems Automation Team
Created: 2026-10-12
Last Updated: 2026-10-18

Description:
Esecuzione dei comandi esterni con logging uniforme.
I comandi ereditano il terminale (password sudo, mokutil),
quindi l'output non viene catturato salvo richiesta
esplicita. Il successo è dato solo dall'exit status.
============================================================
"""

import shlex
import subprocess
from typing import Sequence

from desktop_setup.models.batch_model import CommandResult
from desktop_setup.utils.logger import logger

# Exit status convenzionale della shell per "command not found"
COMMAND_NOT_FOUND = 127


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


class CommandRunner:
    """Esegue comandi esterni, eventualmente con privilegi tramite sudo"""

    def __init__(self, sudo: str = "sudo", dry_run: bool = False):
        self.sudo = sudo
        self.dry_run = dry_run

    def run(self, argv: Sequence[str], *, privileged: bool = False, capture: bool = False,
            read_only: bool = False) -> CommandResult:
        """Esegue `argv` e restituisce un CommandResult.

        In dry-run i comandi vengono solo loggati, tranne quelli marcati
        `read_only` (interrogazioni che non modificano il sistema).
        """
        argv_list = list(argv)
        if privileged:
            argv_list = [self.sudo, *argv_list]
        logger.info(f"CMD {format_argv(argv_list)}")

        if self.dry_run and not read_only:
            logger.info("DRY-RUN: comando non eseguito")
            return CommandResult(argv=tuple(argv_list), returncode=0)

        try:
            if capture:
                p = subprocess.run(argv_list, stdout=subprocess.PIPE, text=True)
            else:
                p = subprocess.run(argv_list)
        except FileNotFoundError:
            logger.error(f"Comando non trovato: {argv_list[0]}")
            return CommandResult(argv=tuple(argv_list), returncode=COMMAND_NOT_FOUND)

        logger.info(f"RC {p.returncode} <- {argv_list[0]}")
        stdout = (p.stdout or "") if capture else ""
        if stdout:
            logger.debug(f"STDOUT {stdout.strip()}")
        return CommandResult(argv=tuple(argv_list), returncode=p.returncode, stdout=stdout)

    def run_pipeline(self, pipeline: str) -> CommandResult:
        """Esegue una pipeline shell; fallisce se fallisce un qualunque stadio"""
        return self.run(["bash", "-o", "pipefail", "-c", pipeline])
