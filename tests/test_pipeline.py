# tests/test_pipeline.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gedcom_reader.core.exceptions import ParseExecutionError
from gedcom_reader.main import DEFAULT_OUTPUT, build_arg_parser, run
from gedcom_reader.utils import mock_file_path


def test_run_writes_json(tmp_path) -> None:
    out = tmp_path / "out" / "records.json"
    records = run(str(mock_file_path("minimal.ged")), str(out), debug_flag=False)

    assert len(records) == 12
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["counts"]["FAM"] == 1


def test_run_wraps_decode_errors(tmp_path) -> None:
    with pytest.raises(ParseExecutionError):
        run(str(mock_file_path("bad_level.ged")), str(tmp_path / "x.json"), debug_flag=False)


def test_run_wraps_missing_file(tmp_path) -> None:
    with pytest.raises(ParseExecutionError):
        run(str(tmp_path / "missing.ged"), str(tmp_path / "x.json"), debug_flag=False)


def test_arg_parser() -> None:
    args = build_arg_parser().parse_args(["-i", "a.ged", "--lenient"])
    assert args.input == Path("a.ged")
    assert args.output == DEFAULT_OUTPUT
    assert args.output.is_absolute()
    assert args.lenient
    assert not args.debug


def test_debug_flag_raises_log_level(tmp_path, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr("gedcom_reader.core.pipeline.enable_debug", lambda: calls.append(True))

    run(str(mock_file_path("minimal.ged")), None, debug_flag=False)
    assert calls == []

    run(str(mock_file_path("minimal.ged")), None, debug_flag=True)
    assert calls == [True]
