from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import pytest

from winareas.__main__ import main, parse_area
from winareas.api.area import Area


def test_parse_area_reads_four_integers() -> None:
    assert parse_area(" 1, -2,3 ,4") == Area(1, -2, 3, 4)


@pytest.mark.parametrize("text", ["1,2,3", "1,2,3,4,5", "a,0,1,1", "1.5,0,1,1"])
def test_parse_area_rejects_malformed_text(text: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_area(text)


def test_main_prints_horizontal_strips(
    restore_root_logging: logging.Logger,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.delenv("WINAREAS_DEBUG_UNION_TRACE", raising=False)
    restore_root_logging.handlers.clear()
    assert main(["0,0,5,10", "5,3,5,10"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "overlap: <none>",
        "strips: [x=0 y=0 w=5 h=3] [x=0 y=3 w=10 h=7] [x=5 y=10 w=5 h=3]",
    ]
    assert restore_root_logging.handlers


def test_main_auto_falls_back_to_vertical_slicing(
    restore_root_logging: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    restore_root_logging.handlers[:] = [logging.NullHandler()]
    assert main(["0,0,10,5", "3,5,4,10"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == (
        "strips: [x=0 y=0 w=3 h=5] [x=3 y=0 w=4 h=15] [x=7 y=0 w=3 h=5]"
    )


def test_main_reports_unmergeable_areas(
    restore_root_logging: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    restore_root_logging.handlers[:] = [logging.NullHandler()]
    assert main(["0,0,5,5", "20,20,5,5", "--slicing", "vertical"]) == 1
    assert capsys.readouterr().out.splitlines() == ["overlap: <none>", "strips: <none>"]


def test_main_writes_union_trace_to_log_file(
    restore_root_logging: logging.Logger,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("WINAREAS_DEBUG_UNION_TRACE", "1")
    restore_root_logging.handlers.clear()
    log_file = tmp_path / "trace.jsonl"
    assert main(["0,0,5,10", "5,0,5,10", "--slicing", "horizontal", "--log-file", str(log_file)]) == 0
    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    merged = [record for record in records if record["msg"] == "area_union_merged"]
    assert merged[0]["fields"]["self"] == {"x": 0, "y": 0, "width": 5, "height": 10}
    assert merged[0]["fields"]["strips"] == 1
