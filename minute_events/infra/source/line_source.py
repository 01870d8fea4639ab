from __future__ import annotations

from contextlib import contextmanager
from typing import IO, Iterator

from minute_events.common.exceptions.errors import SourceUnavailableError


def iter_lines(handle: IO[str]) -> Iterator[str]:
    """줄 끝의 개행 문자(\\n, \\r\\n)를 제거하며 한 줄씩 반환."""
    for line in handle:
        yield line.rstrip("\r\n")


@contextmanager
def open_line_source(path: str, encoding: str = "utf-8") -> Iterator[Iterator[str]]:
    """입력 파일을 열어 forward-only line iterator를 제공

    - 레코드 구분은 ``\\n``만 사용 (레코드 내부의 단독 ``\\r``은 본문으로 유지)
    - 디코딩할 수 없는 바이트는 surrogateescape로 보존되어 접미사 비교에 영향 없음
    - 파일을 열 수 없으면 ``SourceUnavailableError``, 로깅은 호출자 책임
    """
    try:
        handle = open(
            path, "r", encoding=encoding, errors="surrogateescape", newline="\n"
        )
    except OSError as e:
        raise SourceUnavailableError(path, e) from e

    with handle:
        yield iter_lines(handle)
