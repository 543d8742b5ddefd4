"""
json_exporter.py
Structured JSON exporter for decoded records.

This exporter:
- Converts record dataclasses to dictionaries (NOT strings)
- Drops the source line trees (they duplicate the record contents)
- Is deterministic: the same records always produce the same JSON
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from gedcom_reader.logging import get_logger
from gedcom_reader.records.entities import Record

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively, ``tree`` fields skipped)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {
            f.name: _to_json_compatible(getattr(obj, f.name))
            for f in fields(obj)
            if f.name != "tree"
        }

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def record_to_dict(record: Record) -> Dict[str, Any]:
    data = _to_json_compatible(record)
    data["kind"] = record.kind
    return data


def records_to_dict(records: Iterable[Record]) -> Dict[str, Any]:
    """
    Convert decoded records into a JSON-safe dict with per-kind counts.
    """
    items: List[Dict[str, Any]] = [record_to_dict(r) for r in records]
    counts: Dict[str, int] = {}
    for item in items:
        counts[item["kind"]] = counts.get(item["kind"], 0) + 1

    return {"counts": counts, "records": items}


def dumps_records(records: Iterable[Record], *, pretty: bool = False) -> str:
    data = records_to_dict(records)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def export_records_to_json(records: Iterable[Record], output_path: str | Path, *, pretty: bool = True) -> Path:
    """
    Write decoded records to ``output_path`` as JSON, creating parent dirs.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = dumps_records(records, pretty=pretty)
    path.write_text(payload, encoding="utf-8")

    log.info("Exported records to %s", path)
    return path
