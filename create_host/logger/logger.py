# create_host/logger/logger.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Union

from create_host.core.settings import LogSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "create_host"


class Logger:
    """
    Attaches a rotating file handler (and optionally the console) to the
    create_host logger hierarchy. Library modules only ever call
    logging.getLogger(__name__), so nothing is emitted until an application
    builds one of these:

        Logger.from_settings(LogSettings.load())

    No filtering: each transport write is its own line, repeats included.
    """
    def __init__(
        self,
        log_file: str = "create_host.log",
        logger_name: str = ROOT_LOGGER,
        log_dir: str = "logs",
        level: Union[int, str] = logging.INFO,
        max_bytes: int = 5_000_000,
        backup_count: int = 5,
        console: bool = False,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level: {level}")

        os.makedirs(log_dir, exist_ok=True)
        self.path = os.path.join(log_dir, log_file)

        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Re-running setup (tests, notebooks) must not double every line
        if not self._logger.handlers:
            fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            handlers: list[logging.Handler] = [
                RotatingFileHandler(self.path, maxBytes=int(max_bytes), backupCount=int(backup_count))
            ]
            if console:
                handlers.append(logging.StreamHandler())
            for h in handlers:
                h.setLevel(level)
                h.setFormatter(fmt)
                self._logger.addHandler(h)

    @classmethod
    def from_settings(cls, settings: LogSettings, logger_name: str = ROOT_LOGGER) -> "Logger":
        return cls(
            log_file=settings.log_file,
            logger_name=logger_name,
            log_dir=settings.log_dir,
            level=settings.level,
            max_bytes=settings.max_bytes,
            backup_count=settings.backup_count,
            console=settings.console,
        )

    def get_logger(self) -> logging.Logger:
        return self._logger

    def close(self) -> None:
        """Detach and close the handlers this logger owns."""
        for h in list(self._logger.handlers):
            h.close()
            self._logger.removeHandler(h)
