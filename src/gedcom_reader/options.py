# src/gedcom_reader/options.py

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class DecodeOptions:
    """
    Leniency switches for one decode session.

    Every switch defaults to False, which means maximal rejection of
    non-conformant input. The decoder consults ``allow_unknown_tags`` and
    ``allow_missing_required``; the remaining switches are read by the
    record builders.

    Attributes:
        allow_unknown_tags: surface unknown top-level tags as
            UnknownExtensionRecord instead of raising UnknownTagError.
        allow_wrong_length: accept values longer than their tag's maximum.
        allow_missing_required: tolerate a missing HEAD, TRLR
            or required child line.
        allow_more_than_allowed: accept children repeated beyond their limit.
        ignore_invalid_value: drop values with bad syntax instead of raising.
        allow_unknown_charset: accept an unrecognised HEAD.CHAR declaration.
        allow_terminators_in_value: keep CR/LF characters embedded in values.
    """

    allow_unknown_tags: bool = False
    allow_wrong_length: bool = False
    allow_missing_required: bool = False
    allow_more_than_allowed: bool = False
    ignore_invalid_value: bool = False
    allow_unknown_charset: bool = False
    allow_terminators_in_value: bool = False

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def strict(cls) -> "DecodeOptions":
        return cls()

    @classmethod
    def lenient(cls) -> "DecodeOptions":
        return cls(**{name: True for name in cls.names()})

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "DecodeOptions":
        """Build options from a ``{name: bool}`` mapping; unknown names are rejected."""
        data = dict(data or {})
        unknown = sorted(set(data) - set(cls.names()))
        if unknown:
            raise ValueError(f"Unknown decoder option(s): {', '.join(unknown)}")
        return cls(**{k: bool(v) for k, v in data.items()})

    @classmethod
    def from_config(cls, cfg: Any) -> "DecodeOptions":
        """Read the ``decoder.options`` section of a loaded GRConfig."""
        decoder_cfg = getattr(cfg, "decoder", {}) or {}
        return cls.from_mapping(decoder_cfg.get("options"))

    def with_changes(self, **changes: bool) -> "DecodeOptions":
        """Return a copy with some switches changed; the original is untouched."""
        return replace(self, **changes)

    def enabled(self) -> list[str]:
        return [name for name in self.names() if getattr(self, name)]
