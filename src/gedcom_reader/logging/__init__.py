"""
Logging package for ``gedcom_reader``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import LogSettings, configure_logging, enable_debug, get_logger, reset_logging

__all__ = [
    "LogSettings",
    "configure_logging",
    "enable_debug",
    "get_logger",
    "reset_logging",
]
