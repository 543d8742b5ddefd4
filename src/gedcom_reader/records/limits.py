"""
Length and cardinality limits from the GEDCOM 5.5.1 grammar.

Only the limits the builders enforce are listed. A tag missing from
``MAX_LENGTH`` falls back to ``DEFAULT_MAX_LENGTH``.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

# GEDCOM line values may not exceed 255 characters in total.
DEFAULT_MAX_LENGTH = 248

MAX_LENGTH: Dict[str, int] = {
    "ABBR": 60,
    "ADDR": 60,
    "AFN": 12,
    "ANCE": 4,
    "AUTH": 248,
    "CHAR": 8,
    "COPR": 90,
    "DATE": 35,
    "DESC": 4,
    "DEST": 20,
    "FAMF": 120,
    "FILE": 259,
    "FORM": 20,
    "GIVN": 120,
    "LANG": 15,
    "NCHI": 3,
    "NICK": 30,
    "NPFX": 30,
    "NSFX": 30,
    "ORDI": 3,
    "PHON": 25,
    "PLAC": 120,
    "RFN": 90,
    "RIN": 12,
    "SEX": 7,
    "SURN": 120,
    "TEMP": 5,
    "TIME": 12,
    "TYPE": 90,
    "VERS": 15,
}

# Per-record overrides: (record tag, child tag) -> max length
RECORD_MAX_LENGTH: Dict[Tuple[str, str], int] = {
    ("HEAD", "SOUR"): 20,
    ("HEAD", "FILE"): 90,
    ("HEAD", "NAME"): 90,
    ("INDI", "NAME"): 120,
    ("REPO", "NAME"): 90,
    ("SUBM", "NAME"): 60,
    ("OBJE", "TITL"): 248,
}

Cardinality = Tuple[int, Optional[int]]

# record tag -> child tag -> (min, max); max None means unbounded
CARDINALITY: Dict[str, Dict[str, Cardinality]] = {
    "HEAD": {
        "SOUR": (0, 1),
        "DEST": (0, 1),
        "DATE": (0, 1),
        "SUBM": (0, 1),
        "SUBN": (0, 1),
        "FILE": (0, 1),
        "COPR": (0, 1),
        "GEDC": (0, 1),
        "CHAR": (0, 1),
        "LANG": (0, 1),
        "PLAC": (0, 1),
        "NOTE": (0, 1),
    },
    "SUBM": {
        "NAME": (1, 1),
        "ADDR": (0, 1),
        "PHON": (0, 3),
        "LANG": (0, 3),
        "RFN": (0, 1),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "FAM": {
        "RESN": (0, 1),
        "HUSB": (0, 1),
        "WIFE": (0, 1),
        "NCHI": (0, 1),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "INDI": {
        "RESN": (0, 1),
        "SEX": (0, 1),
        "RFN": (0, 1),
        "AFN": (0, 1),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "OBJE": {
        "FILE": (1, None),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "NOTE": {
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "REPO": {
        "NAME": (1, 1),
        "ADDR": (0, 1),
        "PHON": (0, 3),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "SOUR": {
        "DATA": (0, 1),
        "AUTH": (0, 1),
        "TITL": (0, 1),
        "ABBR": (0, 1),
        "PUBL": (0, 1),
        "TEXT": (0, 1),
        "RIN": (0, 1),
        "CHAN": (0, 1),
    },
    "SUBN": {
        "SUBM": (0, 1),
        "FAMF": (0, 1),
        "TEMP": (0, 1),
        "ANCE": (0, 1),
        "DESC": (0, 1),
        "ORDI": (0, 1),
        "RIN": (0, 1),
    },
}

KNOWN_CHARSETS = frozenset({"ANSEL", "UTF-8", "UNICODE", "ASCII"})


def max_length(tag: str, record_tag: Optional[str] = None) -> int:
    if record_tag is not None:
        override = RECORD_MAX_LENGTH.get((record_tag, tag))
        if override is not None:
            return override
    return MAX_LENGTH.get(tag, DEFAULT_MAX_LENGTH)
