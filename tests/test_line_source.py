from __future__ import annotations

from pathlib import Path

import pytest

from minute_events.common.exceptions.errors import SourceUnavailableError
from minute_events.common.logger import PipelineLogger
from minute_events.core.types import ErrorCode
from minute_events.infra.source.line_source import open_line_source


def test_open_line_source_strips_line_terminators(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    path.write_bytes(b"[2018-04-11 03:13:25] NOK\r\n\n[2018-04-11 03:13:26] OK")

    with open_line_source(str(path)) as lines:
        assert list(lines) == [
            "[2018-04-11 03:13:25] NOK",
            "",
            "[2018-04-11 03:13:26] OK",
        ]


def test_open_line_source_is_lazy(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    path.write_text("a\nb\nc\n", encoding="utf-8")

    with open_line_source(str(path)) as lines:
        assert next(lines) == "a"
        assert next(lines) == "b"


def test_open_line_source_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nope.log"

    with pytest.raises(SourceUnavailableError) as exc_info:
        with open_line_source(str(missing)):
            pass  # pragma: no cover

    assert exc_info.value.code == ErrorCode.SOURCE_UNAVAILABLE
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_open_line_source_keeps_bare_carriage_return_inside_record(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    path.write_bytes(b"[2018-04-11 03:13:25] msg\rcontinued text here ok NOK\n")

    with open_line_source(str(path)) as lines:
        assert list(lines) == ["[2018-04-11 03:13:25] msg\rcontinued text here ok NOK"]


def test_open_line_source_tolerates_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    path.write_bytes(b"[2018-04-11 03:13:25] caf\xe9 status NOK\n")

    with open_line_source(str(path)) as lines:
        (line,) = list(lines)

    assert line.startswith("[2018-04-11 03:13:25] caf")
    assert line.endswith(" status NOK")


def test_open_line_source_leaves_error_logging_to_caller(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    logged: list[str] = []
    monkeypatch.setattr(
        PipelineLogger, "error", lambda self, msg, **kwargs: logged.append(msg)
    )

    with pytest.raises(SourceUnavailableError):
        with open_line_source(str(tmp_path / "nope.log")):
            pass  # pragma: no cover

    assert logged == []
