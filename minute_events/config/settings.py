"""통합 Settings 모듈 - 환경변수 기반

이 모듈의 역할:
    1. 코드에 합리적인 기본값 제공
    2. 환경변수로 오버라이드 (우선순위 높음)
    3. 타입 안전성 보장 (Pydantic 자동 검증)

설정 우선순위:
    1. 환경변수 (최우선) - export EVENTS_FILE_PATH=...
    2. .env 파일 - config/.env
    3. 코드 기본값 (settings.py 내부)

사용 예시:
    # 기본값 사용
    python main.py count

    # 환경변수 오버라이드
    export EVENTS_FILE_PATH=/var/log/app/events.log
    export EVENTS_EVENT_SUFFIX=FAIL
    python main.py count
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 설정 파일 경로
config_dir = Path(__file__).parent.parent.parent / "config"


def env_settings(prefix: str) -> SettingsConfigDict:
    """환경변수 + .env 통합 설정

    Args:
        prefix: 환경변수 접두사 (예: EVENTS_, POLLER_)

    Returns:
        Pydantic 설정 딕셔너리
    """
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=config_dir / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AggregationSettings(BaseSettings):
    """분 단위 이벤트 집계 설정

    환경변수 오버라이드:
        EVENTS_FILE_PATH: 입력 로그 파일 경로
        EVENTS_EVENT_SUFFIX: 카운트 대상 줄의 접미사 (기본: NOK)
        EVENTS_PARSE_LAYOUT: 줄 앞 타임스탬프의 strptime 포맷
        EVENTS_OUTPUT_LAYOUT: 출력 시 분 표기 포맷 (초 생략)
        EVENTS_TRUNCATE_SECONDS: 버킷 단위 (기본: 60초 = 1분)
    """

    file_path: str = "events.log"
    event_suffix: str = "NOK"
    parse_layout: str = "[%Y-%m-%d %H:%M:%S]"
    output_layout: str = "[%Y-%m-%d %H:%M]"
    truncate_seconds: int = 60

    model_config = env_settings("EVENTS_")

    @field_validator("truncate_seconds", mode="after")
    @classmethod
    def positive_unit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("truncate_seconds must be positive")
        return v


class PollerSettings(BaseSettings):
    """카운트 엔드포인트 폴러 설정

    환경변수 오버라이드:
        POLLER_SERVERS: 폴링 대상 서버 목록 (JSON 배열)
        POLLER_INTERVAL_SEC: 폴링 주기 (기본: 60초)
        POLLER_HTTP_PREFIX: URL 스킴 접두사 (기본: http://)
        POLLER_METRIC_PATH: 카운트 API 경로 (기본: /api/count)
        POLLER_OUTPUT_LAYOUT: 틱 시각 출력 포맷
        POLLER_TIMEOUT_SEC: 요청 타임아웃 (기본: 10초)
    """

    servers: list[str] = ["maria.ru", "rose.ru", "sina.ru"]
    interval_sec: float = 60.0
    http_prefix: str = "http://"
    metric_path: str = "/api/count"
    output_layout: str = "%Y-%m-%d %H:%M:00"
    timeout_sec: float = 10.0

    model_config = env_settings("POLLER_")


class LoggingSettings(BaseSettings):
    """로깅 설정

    환경변수 오버라이드:
        LOG_LEVEL: 로그 레벨 (기본: INFO)
        LOG_TO_FILE: 파일 로깅 여부 (기본: false)
        LOG_DIR: 로그 디렉토리 (기본: logs)
    """

    level: str = "INFO"
    to_file: bool = False
    dir: str = "logs"

    model_config = env_settings("LOG_")


# ========================================
# 설정 인스턴스 (싱글톤)
# ========================================

aggregation_settings = AggregationSettings()
poller_settings = PollerSettings()
logging_settings = LoggingSettings()
