"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and CLI.
"""

from __future__ import annotations

from .json_exporter import (
    dumps_records,
    export_records_to_json,
    record_to_dict,
    records_to_dict,
)

__all__ = [
    "dumps_records",
    "export_records_to_json",
    "record_to_dict",
    "records_to_dict",
]
