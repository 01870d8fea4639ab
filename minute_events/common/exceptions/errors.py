"""도메인 예외 계층

모든 예외는 MinuteEventsError를 루트로 하고, ErrorDomain / ErrorCode 를 클래스 속성으로 가집니다.
"""

from __future__ import annotations

from minute_events.core.types import ErrorCode, ErrorDomain


class MinuteEventsError(Exception):
    """패키지 공통 기본 예외"""

    domain: ErrorDomain = ErrorDomain.UNKNOWN
    code: ErrorCode = ErrorCode.UNKNOWN_ERROR


class MalformedTimestampError(MinuteEventsError):
    """줄 앞의 타임스탬프가 레이아웃과 맞지 않을 때 발생하는 예외"""

    domain = ErrorDomain.INPUT
    code = ErrorCode.MALFORMED_TIMESTAMP

    def __init__(self, text: str, layout: str, cause: Exception) -> None:
        self.text = text
        self.layout = layout
        self.cause = cause
        super().__init__(
            f"failed to parse time string({text}), layout({layout}), error: {cause}"
        )


class SourceUnavailableError(MinuteEventsError):
    """입력 소스(파일)를 열 수 없을 때 발생하는 예외"""

    domain = ErrorDomain.SOURCE
    code = ErrorCode.SOURCE_UNAVAILABLE

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open file path({path}): {cause}")


# ========================================
# 카운트 API 요청 예외
# ========================================


class CountRequestError(MinuteEventsError):
    """카운트 엔드포인트 요청 관련 기본 예외"""

    domain = ErrorDomain.HTTP


class RequestFailedError(CountRequestError):
    code = ErrorCode.REQUEST_FAILED


class UnexpectedStatusError(CountRequestError):
    code = ErrorCode.UNEXPECTED_STATUS


class UnexpectedContentTypeError(CountRequestError):
    code = ErrorCode.UNEXPECTED_CONTENT_TYPE


class DecodeFailedError(CountRequestError):
    domain = ErrorDomain.PAYLOAD
    code = ErrorCode.DECODE_FAILED


class EmptyResponseError(CountRequestError):
    domain = ErrorDomain.PAYLOAD
    code = ErrorCode.EMPTY_RESPONSE
