from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger
from pathlib import Path
from typing import Any, Dict, List, Optional

from gedcom_reader.options import DecodeOptions


@dataclass
class ParseContext:
    """
    State carried through one decode run.

    The pipeline fills ``records``, ``counts`` and ``errors``; callers only
    set the inputs.
    """

    config: Any
    logger: Logger
    input_path: Path
    output_path: Optional[Path] = None
    options: DecodeOptions = field(default_factory=DecodeOptions)
    debug: bool = False

    records: List[Any] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    def fail(self, exc: BaseException) -> None:
        self.errors.append(f"{type(exc).__name__}: {exc}")
