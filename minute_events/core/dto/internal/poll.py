from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from minute_events.core.types import ErrorCode


@dataclass(slots=True, frozen=True, kw_only=True)
class PollOutcomeDomain:
    """한 틱에서 서버 하나에 대한 폴링 결과.

    count 와 error 중 하나만 채워집니다.
    """

    ticked_at: datetime
    server: str
    count: int | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self, layout: str) -> str:
        """`<틱 시각> <서버> <count|error>` 한 줄로 변환."""
        value = self.count if self.ok else self.error
        return f"{self.ticked_at.strftime(layout)} {self.server} {value}"
