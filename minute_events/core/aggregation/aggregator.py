"""분 단위 이벤트 집계기.

입력 줄을 한 번만 앞으로 읽으면서, 잘린 타임스탬프가 직전 버킷과 달라질 때마다
버킷을 닫고 새로 엽니다. 인접한 구간(run) 기준 집계이므로, 시간 순서가 뒤섞인
입력에서는 같은 분이 서로 떨어진 두 버킷으로 나올 수 있습니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from minute_events.common.exceptions.errors import MalformedTimestampError
from minute_events.common.logger import PipelineLogger
from minute_events.core.aggregation.classifier import MINUTE, classify
from minute_events.core.dto.internal.aggregation import (
    AggregationFailureDomain,
    AggregationResultDomain,
    BucketDomain,
)

logger = PipelineLogger.get_logger("aggregator", "aggregation")


def aggregate(
    source: Iterable[str],
    layout: str,
    suffix: str,
    unit: timedelta = MINUTE,
) -> AggregationResultDomain:
    """줄 스트림을 (분, 매칭 수) 버킷 시퀀스로 집계.

    Args:
        source: 앞으로만 읽는 줄 이터러블 (줄바꿈 제거된 상태)
        layout: 줄 앞 타임스탬프의 strptime 포맷
        suffix: 카운트 대상 줄의 접미사
        unit: 버킷 단위 (기본 1분)

    Returns:
        성공 시 발견 순서대로의 버킷 목록,
        첫 번째 타임스탬프 파싱 실패 시 버킷 없이 에러만 담은 결과
    """
    buckets: list[BucketDomain] = []

    # 현재 열린 버킷 (아직 없으면 None)
    open_minute: datetime | None = None
    open_count = 0

    skipped = 0
    for record in source:
        try:
            classified = classify(record, layout, suffix, unit)
        except MalformedTimestampError as e:
            logger.warning(
                "타임스탬프 파싱 실패로 집계를 중단합니다",
                extra={
                    "text": e.text,
                    "layout": e.layout,
                    "error_domain": str(e.domain),
                    "closed_buckets": len(buckets),
                },
            )
            return AggregationResultDomain.failure(
                AggregationFailureDomain(
                    code=e.code,
                    message=str(e),
                    text=e.text,
                    layout=e.layout,
                )
            )

        if classified is None:
            skipped += 1
            continue

        if open_minute is None or classified.minute != open_minute:
            if open_minute is not None:
                buckets.append(BucketDomain(minute=open_minute, count=open_count))
            open_minute = classified.minute
            open_count = 0

        if classified.is_match:
            open_count += 1

    # 마지막 버킷은 스트림 종료로 닫힘
    if open_minute is not None:
        buckets.append(BucketDomain(minute=open_minute, count=open_count))

    logger.debug(
        "집계 완료",
        extra={"buckets": len(buckets), "skipped": skipped},
    )
    return AggregationResultDomain.success(buckets)
