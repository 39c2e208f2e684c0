"""
============================================================
File: tool_menu.py
Author: Internal Systems Automation Team
Created: 2026-10-13
Last Updated: 2026-10-18

Description:
Modulo responsabile della gestione del menu principale
dell'applicazione usando la libreria Rich. Mostra le
operazioni disponibili, legge la scelta e avvia il flusso
corrispondente.
============================================================
"""

from rich.console import Console

from desktop_setup.menu.actions import SetupActions
from desktop_setup.utils.logger import logger
from desktop_setup.utils.prompts import wait_for_enter

EXIT_CHOICE = "7"


class ToolMenu:
    def __init__(self, actions: SetupActions, console: Console):
        self.actions = actions
        self.console = console
        self.entries = [
            ("Install system packages", actions.install_packages),
            ("Remove system packages", actions.remove_packages),
            ("Install Flatpak packages", actions.install_flatpaks),
            ("Install NVIDIA graphics drivers", actions.install_nvidia),
            ("Install Brave browser", actions.install_brave),
            ("Install RPM Fusion repositories", actions.install_rpmfusion),
        ]

    def _show_menu(self):
        self.console.print("\n[bold blue]=== MAIN MENU ===[/bold blue]")
        for idx, (label, _) in enumerate(self.entries, start=1):
            self.console.print(f"{idx}. {label}", highlight=False)
        self.console.print(f"{EXIT_CHOICE}. Exit", highlight=False)

    def start(self) -> int:
        """Loop del menu; restituisce l'exit status del processo"""
        while True:
            self._show_menu()

            try:
                choice = self.console.input(f"Enter your choice (1-{EXIT_CHOICE}): ").strip()
            except EOFError:
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                logger.info("Uscita dal menu")
                self.console.print("[green]Exiting script. Goodbye![/green]")
                return 0

            if choice not in {str(i) for i in range(1, len(self.entries) + 1)}:
                logger.debug(f"Scelta non valida: {choice!r}")
                self.console.print("[red]Invalid choice. Please try again.[/red]")
                continue

            label, flow = self.entries[int(choice) - 1]
            logger.info(f"Scelta {choice}: {label}")
            flow()
            wait_for_enter(self.console)
