from __future__ import annotations

from pathlib import Path

import pytest

import main
from minute_events.common.logger import PipelineLogger
from tests.factory_builders import TESTFILES


def test_parse_args_count_defaults_from_settings() -> None:
    args = main.parse_args(["count", "--file", "x.log"])

    assert args.command == "count"
    assert args.file == "x.log"
    assert args.suffix == "NOK"


def test_parse_args_poll_repeatable_servers() -> None:
    args = main.parse_args(["poll", "--server", "a:1", "--server", "b:2", "--interval", "5"])

    assert args.servers == ["a:1", "b:2"]
    assert args.interval == 5.0


def test_run_count_prints_buckets(capsys: pytest.CaptureFixture[str]) -> None:
    code = main.run_count(str(TESTFILES / "events.log"), "NOK")

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "[2018-04-11 03:13] 1",
        "[2018-04-11 03:14] 0",
        "[2018-04-11 03:15] 2",
        "[2018-04-11 04:15] 1",
        "[2018-04-11 04:16] 0",
        "[2018-04-11 04:27] 1",
    ]


def test_run_count_malformed_file_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    code = main.run_count(str(TESTFILES / "broken.log"), "NOK")

    assert code == 1
    assert capsys.readouterr().out == ""


def test_run_count_missing_file_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main.run_count(str(tmp_path / "missing.log"), "NOK")

    assert code == 1
    assert capsys.readouterr().out == ""


def test_run_count_counts_line_with_undecodable_bytes(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "events.log"
    path.write_bytes(b"[2018-04-11 03:13:25] caf\xe9 status NOK\n")

    code = main.run_count(str(path), "NOK")

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["[2018-04-11 03:13] 1"]


def test_run_count_bare_carriage_return_does_not_split_record(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "events.log"
    path.write_bytes(b"[2018-04-11 03:13:25] msg\rcontinued text here ok NOK\n")

    code = main.run_count(str(path), "NOK")

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["[2018-04-11 03:13] 1"]


def test_run_count_missing_file_logs_error_once(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    logged: list[str] = []
    monkeypatch.setattr(
        PipelineLogger, "error", lambda self, msg, **kwargs: logged.append(msg)
    )

    code = main.run_count(str(tmp_path / "missing.log"), "NOK")

    assert code == 1
    assert len(logged) == 1
    assert logged[0].startswith("Failed to open file path(")
