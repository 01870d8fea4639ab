"""에러 분류 타입 정의 모듈.

광범위한 Exception 사용을 지양하고, 의도한 예외만 명시적으로 처리하기 위해 사용합니다.
"""

from __future__ import annotations

import asyncio
from enum import StrEnum
from typing import Final

import aiohttp


class ErrorDomain(StrEnum):
    """에러 도메인 분류"""

    INPUT = "input"
    SOURCE = "source"
    HTTP = "http"
    PAYLOAD = "payload"
    UNKNOWN = "unknown"


class ErrorCode(StrEnum):
    """에러 코드 분류"""

    MALFORMED_TIMESTAMP = "malformed_timestamp"
    SOURCE_UNAVAILABLE = "source_unavailable"
    REQUEST_FAILED = "request_failed"
    UNEXPECTED_STATUS = "unexpected_status"
    UNEXPECTED_CONTENT_TYPE = "unexpected_content_type"
    DECODE_FAILED = "decode_failed"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN_ERROR = "unknown_error"


# 요청 단계 전송 예외 (RequestFailedError로 감싸는 대상)
# - aiohttp.ClientError: 연결 실패, DNS 실패, 잘못된 URL 등
# - asyncio.TimeoutError: ClientTimeout 초과
TRANSPORT_EXCEPTIONS: Final[tuple[type[BaseException], ...]] = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
)
