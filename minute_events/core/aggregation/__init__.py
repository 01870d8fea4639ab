"""분 단위 이벤트 집계.

공개 API:
- aggregate: 줄 스트림 → 인접 구간별 버킷 집계
- classify: 한 줄 분류 (타임스탬프 내림 + 접미사 매칭)
- render_buckets: 버킷 → 출력 줄
"""

from minute_events.core.aggregation.aggregator import aggregate
from minute_events.core.aggregation.classifier import (
    MINUTE,
    classify,
    layout_width,
    parse_time_to,
    truncate_time,
)
from minute_events.core.aggregation.render import render_buckets

__all__ = [
    "MINUTE",
    "aggregate",
    "classify",
    "layout_width",
    "parse_time_to",
    "render_buckets",
    "truncate_time",
]
