"""
CLI command modules for gedcom_reader.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_reader.cli.commands.export import export_command
from gedcom_reader.cli.commands.records import records_command
from gedcom_reader.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "records_command",
    "stats_command",
]
