"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-10-12
Last Updated: 2026-10-18

Description:
Gestione della configurazione centralizzata dell'applicazione.
Legge da config.ini e fornisce accesso ai settings in tutta l'app.
Le liste di pacchetti vengono esposte come dati immutabili
(PackageLists) da passare ai flussi di installazione.
============================================================
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from desktop_setup.config import settings
from desktop_setup.utils.logger import logger


@dataclass(frozen=True)
class PackageLists:
    """Liste di pacchetti usate dai flussi batch"""

    install: Tuple[str, ...] = settings.INSTALL_PACKAGES
    remove: Tuple[str, ...] = settings.REMOVE_PACKAGES
    flatpak: Tuple[str, ...] = settings.FLATPAK_PACKAGES


class ConfigManager:
    """Gestore centralizzato della configurazione dell'applicazione"""

    def __init__(self, config_path: Optional[str] = None):
        self._config = configparser.ConfigParser()
        self._load_defaults()
        self._config_path = self._find_config_file(config_path)

        if self._config_path is not None:
            logger.info(f"Config trovato: {self._config_path}")
            self._config.read(self._config_path, encoding='utf-8')
        else:
            logger.info("config.ini non trovato, usando defaults")

    def _find_config_file(self, explicit_path=None):
        """Cerca il file config.ini in varie locazioni"""

        # 1. Percorso passato da riga di comando
        if explicit_path:
            config_file = Path(explicit_path).expanduser()
            if not config_file.exists():
                logger.warning(f"Config richiesto ma inesistente: {config_file}")
                return None
            return config_file

        candidates = [
            Path('config') / 'config.ini',
            Path('config.ini'),
            Path('~/.config').expanduser() / settings.APP_NAME / 'config.ini',
        ]
        for config_file in candidates:
            if config_file.exists():
                return config_file

        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config['PACKAGES'] = {
            'install': "\n".join(settings.INSTALL_PACKAGES),
            'remove': "\n".join(settings.REMOVE_PACKAGES),
            'flatpak': "\n".join(settings.FLATPAK_PACKAGES),
        }
        self._config['FLATPAK'] = {
            'remote_name': settings.FLATHUB_REMOTE,
            'remote_url': settings.FLATHUB_URL,
        }
        self._config['PATHS'] = {
            'logs_directory': settings.LOGS_DIRECTORY,
        }
        self._config['APP'] = {
            'debug': 'false',
            'strict_confirm': 'false',
        }
        self._config['COMMANDS'] = {
            'sudo': settings.SUDO_COMMAND,
        }

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_list(self, section, key, fallback=()) -> Tuple[str, ...]:
        """Ottiene una lista separata da spazi o da a capo"""
        value = self.get(section, key)
        if value is None:
            return tuple(fallback)
        return tuple(value.split())

    def get_path(self, section, key) -> Optional[Path]:
        """Ottiene un percorso, espandendo la home dell'utente"""
        path_str = self.get(section, key)
        if not path_str:
            logger.debug(f"get_path: '{section}.{key}' non trovato in config")
            return None
        return Path(path_str).expanduser()

    @property
    def packages(self) -> PackageLists:
        """Liste di pacchetti (install, remove, flatpak)"""
        return PackageLists(
            install=self.get_list('PACKAGES', 'install'),
            remove=self.get_list('PACKAGES', 'remove'),
            flatpak=self.get_list('PACKAGES', 'flatpak'),
        )

    @property
    def flatpak_remote(self) -> Tuple[str, str]:
        """Nome e URL del remote Flatpak"""
        name = self.get('FLATPAK', 'remote_name', settings.FLATHUB_REMOTE)
        url = self.get('FLATPAK', 'remote_url', settings.FLATHUB_URL)
        return name, url

    @property
    def logs_dir(self) -> Path:
        """Directory dei log"""
        path = self.get_path('PATHS', 'logs_directory')
        if path is None:
            path = Path(settings.LOGS_DIRECTORY).expanduser()
        return path

    @property
    def sudo_command(self):
        return self.get('COMMANDS', 'sudo', settings.SUDO_COMMAND)

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('APP', 'debug', False)

    @property
    def strict_confirm(self):
        """Conferme y/n con confronto esatto invece del prefisso"""
        return self.get_bool('APP', 'strict_confirm', False)

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path
