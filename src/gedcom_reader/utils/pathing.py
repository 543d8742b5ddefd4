# src/gedcom_reader/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <root>/src/gedcom_reader/utils/pathing.py -> parents[3] is <root>
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """Checkout root: the directory holding config/, mock_files/ and tests/."""
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    path = Path(relative)
    return path if path.is_absolute() else _PROJECT_ROOT / path


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path of a sample document under mock_files/."""
    return resolve_project_path(Path("mock_files") / filename)
