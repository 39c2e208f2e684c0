"""
============================================================
File: display.py
Author: Internal Systems Automation Team
Created: 2026-10-13
Last Updated: 2026-10-18

Description:
Output a colori per l'operatore usando la libreria Rich:
intestazioni, avanzamento dei batch e riepiloghi finali.
============================================================
"""

from rich.console import Console
from rich.markup import escape

from desktop_setup.models.batch_model import BatchSummary, Outcome, Step

PAST_TENSE = {"install": "installed", "remove": "removed"}


def print_header(console: Console, title: str):
    console.print(f"\n[bold blue]=== {escape(title)} ===[/bold blue]")


def print_lines(console: Console, items):
    for item in items:
        console.print(escape(str(item)), highlight=False)


class PackageReporter:
    """Avanzamento di un batch di pacchetti omogeneo (install/remove)"""

    PROGRESS = {"install": "Installing", "remove": "Removing"}

    def __init__(self, console: Console, kind: str, label: str = ""):
        self.console = console
        self.kind = kind
        self.label = label

    def started(self, item):
        verb = self.PROGRESS.get(self.kind, self.kind.capitalize())
        self.console.print(f"[yellow]{verb} {self.label}{escape(item)}...[/yellow]")

    def finished(self, item, outcome: Outcome):
        if outcome is Outcome.SUCCEEDED:
            done = PAST_TENSE.get(self.kind, self.kind)
            self.console.print(f"[green]Successfully {done} {escape(item)}[/green]")
        else:
            self.console.print(f"[red]Failed to {self.kind} {self.label}{escape(item)}[/red]")


class StepReporter:
    """Avanzamento di un flusso multi-step: ogni passo ha i propri messaggi"""

    def __init__(self, console: Console):
        self.console = console

    def started(self, step: Step):
        self.console.print(f"[yellow]{escape(step.progress or step.name)}...[/yellow]")
        if step.notice:
            self.console.print(f"[yellow]{escape(step.notice)}[/yellow]")

    def finished(self, step: Step, outcome: Outcome):
        if outcome is Outcome.SUCCEEDED:
            self.console.print(f"[green]{escape(step.success or step.name + ' succeeded')}[/green]")
        else:
            self.console.print(f"[red]{escape(step.failure or step.name + ' failed')}[/red]")


def print_package_summary(console: Console, summary: BatchSummary):
    if summary.failed:
        console.print(f"\n[yellow]Failed to {summary.kind} the following packages:[/yellow]")
        print_lines(console, summary.failed)
    else:
        done = PAST_TENSE.get(summary.kind, summary.kind)
        console.print(f"\n[green]All packages were successfully {done}.[/green]")


def print_steps_summary(console: Console, summary: BatchSummary, context: str, completed: str):
    if summary.failed:
        console.print(f"\n[yellow]The following steps failed during {context}:[/yellow]")
        print_lines(console, summary.failed)
        console.print("[yellow]You may need to address these issues manually.[/yellow]")
    else:
        console.print(f"[green]{completed}[/green]")
