"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2026-10-12
 Last Updated: 2026-10-18

 Description:
     Logger dell'applicazione. Scrive su file il tracing dei
     comandi eseguiti; l'output per l'operatore passa invece
     dalla console Rich.
============================================================
"""

import logging
from pathlib import Path
from typing import Optional

from desktop_setup.config import settings

logger = logging.getLogger("desktop_setup")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup_logger(log_dir: Optional[Path] = None, debug: bool = False) -> Path:
    """Aggiunge il file handler e restituisce il percorso effettivo del log.

    Se la cartella richiesta non è scrivibile si usa la working directory.
    Chiamate ripetute non duplicano gli handler.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    log_dir = Path(log_dir or settings.LOGS_DIRECTORY).expanduser()
    log_path = log_dir / settings.LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        log_path = Path.cwd() / settings.LOG_FILE_NAME
        handler = logging.FileHandler(log_path, encoding="utf-8")

    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)

    logger.info("=" * 60)
    logger.info(f"Logging inizializzato: {log_path}")
    return log_path
