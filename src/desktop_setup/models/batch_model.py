"""
============================================================
 File: batch_model.py
 Author: Internal Systems Automation Team
 Created: 2026-10-12
 Last Updated: 2026-10-18

 Description:
     Modelli dati per l'esecuzione batch: risultato di un
     comando esterno, esito di un elemento, passo nominato
     di un flusso e riepilogo finale di un batch.
============================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple


class Outcome(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class CommandResult:
    """Risultato di un comando esterno: conta solo l'exit status"""

    argv: Tuple[str, ...]
    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def outcome(self) -> Outcome:
        return Outcome.SUCCEEDED if self.ok else Outcome.FAILED


@dataclass(frozen=True)
class Step:
    """Passo nominato di un flusso multi-step (driver, repository)"""

    name: str
    action: Callable[[], CommandResult] = field(compare=False)
    progress: str = ""
    success: str = ""
    failure: str = ""
    notice: Optional[str] = None


@dataclass(frozen=True)
class BatchSummary:
    """Riepilogo di un batch: elementi falliti in ordine di input"""

    kind: str
    total: int
    failed: Tuple[str, ...] = ()
    cleanup_ok: Optional[bool] = None

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def succeeded_count(self) -> int:
        return self.total - len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed
