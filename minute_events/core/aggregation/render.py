from __future__ import annotations

from typing import Iterable

from minute_events.core.dto.internal.aggregation import BucketDomain

DEFAULT_OUTPUT_LAYOUT = "[%Y-%m-%d %H:%M]"


def render_buckets(
    buckets: Iterable[BucketDomain], layout: str = DEFAULT_OUTPUT_LAYOUT
) -> list[str]:
    """버킷마다 `<분> <count>` 한 줄씩 (초는 출력 레이아웃에서 생략)."""
    return [f"{bucket.minute.strftime(layout)} {bucket.count}" for bucket in buckets]
