from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from minute_events.core.types import ErrorCode


@dataclass(slots=True, frozen=True, kw_only=True)
class ClassifiedRecordDomain:
    """분류기 결과 (잘린 타임스탬프 + 접미사 매칭 여부)."""

    minute: datetime
    is_match: bool


@dataclass(slots=True, frozen=True, kw_only=True)
class BucketDomain:
    """분 단위 집계 버킷 (닫힌 뒤에는 불변)."""

    minute: datetime
    count: int  # 버킷이 열려 있는 동안 매칭된 줄 수


@dataclass(slots=True, frozen=True, kw_only=True)
class AggregationFailureDomain:
    """집계 중단 사유 (첫 번째 치명적 오류)."""

    code: ErrorCode
    message: str
    text: str  # 파싱에 실패한 원문 조각
    layout: str  # 기대한 레이아웃


@dataclass(slots=True, frozen=True, kw_only=True)
class AggregationResultDomain:
    """집계 결과 - buckets 또는 error 중 하나만 채워짐 (all or nothing)."""

    buckets: tuple[BucketDomain, ...] | None = None
    error: AggregationFailureDomain | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, buckets: list[BucketDomain]) -> AggregationResultDomain:
        return cls(buckets=tuple(buckets))

    @classmethod
    def failure(cls, error: AggregationFailureDomain) -> AggregationResultDomain:
        return cls(error=error)
