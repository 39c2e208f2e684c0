"""
============================================================
 File: prompts.py
 Author: Internal Systems Automation Team
 Created: 2026-10-13
 Last Updated: 2026-10-18

 Description:
     Conferme sì/no prima delle operazioni che modificano il
     sistema. La risposta viene tradotta in una Decision da
     una strategia di parsing intercambiabile. Nessun nuovo
     tentativo: una risposta non valida equivale a "no".
============================================================
"""

import re
from enum import Enum
from typing import Callable, Optional

from rich.console import Console

from desktop_setup.utils.logger import logger


class Decision(Enum):
    ACCEPT = "accept"
    DECLINE = "decline"


_YES_PREFIX = re.compile(r"^[Yy]")
_YES_EXACT = re.compile(r"^(y|yes)$", re.IGNORECASE)


def loose_answer(answer: str) -> Decision:
    """Accetta qualunque risposta che, senza spazi iniziali e finali, inizia con y/Y"""
    return Decision.ACCEPT if _YES_PREFIX.match(answer.strip()) else Decision.DECLINE


def strict_answer(answer: str) -> Decision:
    """Accetta solo "y" o "yes", senza distinzione di maiuscole"""
    return Decision.ACCEPT if _YES_EXACT.match(answer.strip()) else Decision.DECLINE


class ConfirmationGate:
    """Chiede conferma all'operatore prima di un flusso distruttivo"""

    def __init__(self, console: Console, parser: Callable[[str], Decision] = loose_answer,
                 assume_yes: bool = False):
        self.console = console
        self.parser = parser
        self.assume_yes = assume_yes

    def ask(self, prompt: str) -> Decision:
        self.console.print(f"[yellow]{prompt} (y/n)[/yellow]")
        if self.assume_yes:
            self.console.print("[dim]y (--yes)[/dim]")
            return Decision.ACCEPT

        try:
            answer = self.console.input()
        except EOFError:
            answer = ""

        decision = self.parser(answer)
        logger.info(f"Conferma '{prompt}': {answer!r} -> {decision.value}")
        return decision

    def confirm(self, prompt: str) -> bool:
        return self.ask(prompt) is Decision.ACCEPT


def wait_for_enter(console: Console, message: Optional[str] = "Press Enter to continue..."):
    try:
        console.input(message)
    except EOFError:
        pass
