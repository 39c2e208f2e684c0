"""
============================================================
File: batch_runner.py
Author: Internal Systems Automation Team
Created: 2026-10-12
Last Updated: 2026-10-18

Description:
Esecuzione sequenziale di operazioni esterne indipendenti.
Ogni elemento viene tentato una sola volta; il fallimento
di un elemento non interrompe il batch. Al termine viene
prodotto un BatchSummary con gli elementi falliti.
============================================================
"""

from typing import Callable, Optional, Protocol, Sequence, TypeVar

from desktop_setup.models.batch_model import BatchSummary, CommandResult, Outcome, Step
from desktop_setup.utils.logger import logger

T = TypeVar("T")


class BatchReporter(Protocol):
    """Riceve le notifiche di avanzamento del batch (output a console)"""

    def started(self, item) -> None:
        ...

    def finished(self, item, outcome: Outcome) -> None:
        ...


def run_batch(
    kind: str,
    items: Sequence[T],
    action: Callable[[T], CommandResult],
    *,
    reporter: Optional[BatchReporter] = None,
    cleanup: Optional[Callable[[], CommandResult]] = None,
    identify: Callable[[T], str] = str,
) -> BatchSummary:
    """Invoca `action` una volta per elemento, nell'ordine dato.

    Le eccezioni sollevate da `action` non vengono intercettate: un
    fallimento normale è un CommandResult con returncode diverso da zero.
    `cleanup`, se presente, viene eseguito una volta alla fine
    indipendentemente dagli esiti.
    """
    failed = []
    logger.info(f"Batch '{kind}': {len(items)} elementi")

    for item in items:
        if reporter is not None:
            reporter.started(item)

        outcome = action(item).outcome
        if outcome is Outcome.FAILED:
            failed.append(identify(item))
            logger.warning(f"Batch '{kind}': {identify(item)} fallito")

        if reporter is not None:
            reporter.finished(item, outcome)

    cleanup_ok = None
    if cleanup is not None:
        cleanup_ok = cleanup().ok
        if not cleanup_ok:
            logger.warning(f"Batch '{kind}': cleanup fallito")

    logger.info(f"Batch '{kind}' completato: {len(failed)}/{len(items)} falliti")
    return BatchSummary(kind=kind, total=len(items), failed=tuple(failed), cleanup_ok=cleanup_ok)


def run_steps(kind: str, steps: Sequence[Step], *, reporter: Optional[BatchReporter] = None) -> BatchSummary:
    """Stesso runner, su passi eterogenei che portano con sé la propria azione"""
    return run_batch(kind, steps, lambda step: step.action(), reporter=reporter, identify=lambda step: step.name)
