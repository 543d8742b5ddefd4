# tests/test_options.py

from __future__ import annotations

import pytest

from gedcom_reader.config import GRConfig
from gedcom_reader.options import DecodeOptions


def test_defaults_are_strict() -> None:
    options = DecodeOptions()
    assert options == DecodeOptions.strict()
    assert options.enabled() == []


def test_lenient_turns_everything_on() -> None:
    options = DecodeOptions.lenient()
    assert options.enabled() == list(DecodeOptions.names())
    assert len(DecodeOptions.names()) == 7


def test_options_are_immutable() -> None:
    options = DecodeOptions()
    with pytest.raises(AttributeError):
        options.allow_unknown_tags = True  # type: ignore[misc]

    changed = options.with_changes(allow_unknown_tags=True)
    assert changed.allow_unknown_tags
    assert not options.allow_unknown_tags


def test_from_mapping() -> None:
    options = DecodeOptions.from_mapping({"allow_wrong_length": True, "ignore_invalid_value": 1})
    assert options.enabled() == ["allow_wrong_length", "ignore_invalid_value"]
    assert DecodeOptions.from_mapping(None) == DecodeOptions()


def test_from_mapping_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="allow_everything"):
        DecodeOptions.from_mapping({"allow_everything": True})


def test_from_config() -> None:
    cfg = GRConfig({"decoder": {"options": {"allow_unknown_charset": True}}})
    assert DecodeOptions.from_config(cfg).enabled() == ["allow_unknown_charset"]
    assert DecodeOptions.from_config(GRConfig({})) == DecodeOptions()
