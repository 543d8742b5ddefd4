"""
Logging setup for gedcom_reader.

Everything logs through ``get_logger``. The first call reads the ``logging``
section of ``config/gedcom_reader.yml`` and attaches, to the shared
``gedcom_reader`` logger:

* a master log file (``logs/gedcom_reader.log`` by default, rotating when
  ``rotate: true``),
* a stderr console handler that shows warnings, or everything in debug mode.

Each named logger additionally writes its own ``logs/<name>.log`` file, so a
decode session can be followed module by module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from gedcom_reader.config import get_config
from gedcom_reader.utils import project_root

BASE_LOGGER_NAME = "gedcom_reader"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LogSettings:
    directory: Path
    master_file: str = "gedcom_reader.log"
    level: int = logging.INFO
    console_level: int = logging.WARNING
    rotate: bool = False
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5

    @classmethod
    def from_config(cls, cfg: Any) -> "LogSettings":
        section: Dict[str, Any] = cfg.logging
        directory = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not directory.is_absolute():
            directory = project_root() / directory

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        if cfg.debug:
            level = logging.DEBUG

        return cls(
            directory=directory,
            master_file=section.get("file") or cls.master_file,
            level=level,
            console_level=logging.DEBUG if cfg.debug else logging.WARNING,
            rotate=bool(section.get("rotate", False)),
            max_bytes=int(section.get("max_bytes", cls.max_bytes)),
            backup_count=int(section.get("backup_count", cls.backup_count)),
        )


_settings: Optional[LogSettings] = None
_loggers: Dict[str, Logger] = {}


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    path = settings.directory / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def configure_logging(settings: Optional[LogSettings] = None) -> LogSettings:
    """
    Attach the master file and console handlers to the base logger.

    Runs once; later calls return the active settings unchanged until
    ``reset_logging`` is called.
    """
    global _settings
    if _settings is not None:
        return _settings

    settings = settings or LogSettings.from_config(get_config())
    settings.directory.mkdir(parents=True, exist_ok=True)

    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(_file_handler(settings, settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _settings = settings
    return settings


def reset_logging() -> None:
    """Close every handler this module attached (tests and config reloads)."""
    global _settings
    for logger in [logging.getLogger(BASE_LOGGER_NAME), *_loggers.values()]:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    _loggers.clear()
    _settings = None


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Return ``gedcom_reader.<name>`` with its own log file.

    ``get_logger(__name__)`` inside the package and ``get_logger("main")``
    both land under the base logger, so they share its handlers.
    """
    settings = configure_logging()

    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.setLevel(settings.level)
        logger.addHandler(_file_handler(settings, f"{name.replace('.', '_')}.log"))
        _loggers[name] = logger
    return logger


def enable_debug() -> None:
    """Switch every handler and logger set up here to DEBUG (``--debug``)."""
    settings = configure_logging()
    settings.level = settings.console_level = logging.DEBUG
    for logger in [logging.getLogger(BASE_LOGGER_NAME), *_loggers.values()]:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
