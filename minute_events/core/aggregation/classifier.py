"""로그 한 줄 분류기.

줄 앞의 고정 폭 타임스탬프를 파싱해 단위(기본 1분)로 내림하고,
줄 전체가 설정된 접미사로 끝나는지 판정합니다. 부수효과 없는 순수 함수만 둡니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from functools import lru_cache

from minute_events.common.exceptions.errors import MalformedTimestampError
from minute_events.core.dto.internal.aggregation import ClassifiedRecordDomain

MINUTE = timedelta(minutes=1)

# 레이아웃 폭 계산용 기준 시각 (모든 필드가 두 자리 이상)
_REFERENCE_TIME = datetime(2006, 1, 2, 15, 4, 5)


@lru_cache(maxsize=32)
def layout_width(layout: str) -> int:
    """레이아웃으로 렌더링한 타임스탬프의 글자 수.

    `[%Y-%m-%d %H:%M:%S]` → 21. 고정 폭 레이아웃만 지원합니다.
    """
    return len(_REFERENCE_TIME.strftime(layout))


def truncate_time(t: datetime, unit: timedelta = MINUTE) -> datetime:
    """t 를 unit 의 배수로 내림 (반올림하지 않음).

    기준점은 datetime.min 이므로 분/시 단위는 벽시계 경계와 일치합니다.
    """
    if unit <= timedelta(0):
        return t
    return t - (t.replace(tzinfo=None) - datetime.min) % unit


def parse_time_to(text: str, layout: str, unit: timedelta = MINUTE) -> datetime:
    """문자열을 레이아웃으로 파싱한 뒤 unit 단위로 내림.

    Raises:
        MalformedTimestampError: 레이아웃과 맞지 않는 경우
    """
    try:
        t = datetime.strptime(text, layout)
    except ValueError as e:
        raise MalformedTimestampError(text, layout, e) from e
    return truncate_time(t, unit)


def classify(
    record: str,
    layout: str,
    suffix: str,
    unit: timedelta = MINUTE,
) -> ClassifiedRecordDomain | None:
    """한 줄을 분류.

    Returns:
        레이아웃 폭보다 짧은 줄(빈 줄, 잘린 줄)이면 None,
        그 외에는 잘린 타임스탬프와 매칭 여부

    Raises:
        MalformedTimestampError: 타임스탬프 구간이 파싱되지 않는 경우
    """
    width = layout_width(layout)
    if len(record) < width:
        return None

    minute = parse_time_to(record[:width], layout, unit)
    return ClassifiedRecordDomain(minute=minute, is_match=record.endswith(suffix))
