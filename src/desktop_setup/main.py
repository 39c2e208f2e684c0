"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2026-10-12
Last Updated: 2026-10-18

Description:
Entry point principale del tool di provisioning. Carica la
configurazione, esegue i controlli di avvio e poi avvia il
menu interattivo, oppure un singolo flusso con --action.

Importare questo modulo non avvia il menu: il loop parte
solo quando il file è eseguito come processo principale.
============================================================
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from desktop_setup.config.config import ConfigManager
from desktop_setup.executor.command import CommandRunner
from desktop_setup.executor.package_manager import DnfPackageManager, FlatpakManager, SystemTools
from desktop_setup.executor.preconditions import PreconditionError, check_not_root, run_startup_checks
from desktop_setup.menu.actions import SetupActions
from desktop_setup.menu.tool_menu import ToolMenu
from desktop_setup.utils.logger import logger, setup_logger
from desktop_setup.utils.prompts import ConfirmationGate, loose_answer, strict_answer

ACTIONS = {
    "install": "install_packages",
    "remove": "remove_packages",
    "flatpak": "install_flatpaks",
    "nvidia": "install_nvidia",
    "brave": "install_brave",
    "rpmfusion": "install_rpmfusion",
}


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(prog="desktop-setup", description="Fedora desktop provisioning menu")
    p.add_argument("--config", default=None, help="Path to config.ini")
    p.add_argument("--action", choices=sorted(ACTIONS), default=None,
                   help="Run a single operation and exit instead of showing the menu")
    p.add_argument("--yes", action="store_true", help="Answer yes to every confirmation")
    p.add_argument("--dry-run", action="store_true", help="Log system-changing commands without running them")
    p.add_argument("--log-dir", default=None, help="Directory for desktop-setup.log")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    console = console or Console()

    # Prima di config e log: da root non si deve creare nulla su disco
    try:
        check_not_root()
    except PreconditionError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    config = ConfigManager(args.config)
    setup_logger(args.log_dir or config.logs_dir, debug=args.debug or config.debug)
    logger.info(f"Avvio: action={args.action} dry_run={args.dry_run} yes={args.yes}")

    runner = CommandRunner(sudo=config.sudo_command, dry_run=args.dry_run)
    remote_name, remote_url = config.flatpak_remote
    dnf = DnfPackageManager(runner)
    flatpak = FlatpakManager(runner, remote=remote_name)
    gate = ConfirmationGate(
        console,
        parser=strict_answer if config.strict_confirm else loose_answer,
        assume_yes=args.yes,
    )

    actions = SetupActions(
        console,
        gate,
        config.packages,
        dnf,
        flatpak,
        SystemTools(runner),
        flatpak_remote=(remote_name, remote_url),
    )

    try:
        run_startup_checks(gate, dnf, flatpak, sudo=config.sudo_command,
                           remote_name=remote_name, remote_url=remote_url)
        if args.action:
            getattr(actions, ACTIONS[args.action])()
            return 0
        return ToolMenu(actions, console).start()
    except PreconditionError as e:
        logger.error(f"Controllo di avvio fallito: {e}")
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrotto dall'operatore")
        console.print("\n[red]Interrupted.[/red]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
