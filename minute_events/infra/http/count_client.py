"""카운트 엔드포인트 HTTP 클라이언트

`GET <server>/api/count` 를 호출하고 응답을 검증해 정수 카운트를 돌려줍니다.
검증 순서: 전송 → 상태 코드 → Content-Type → JSON 디코딩 → count 존재 여부
"""

from __future__ import annotations

import aiohttp
import orjson
from pydantic import ValidationError

from minute_events.common.exceptions.errors import (
    DecodeFailedError,
    EmptyResponseError,
    RequestFailedError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from minute_events.common.logger import PipelineLogger
from minute_events.core.dto.io.count import CountResponseDTO
from minute_events.core.types import TRANSPORT_EXCEPTIONS

logger = PipelineLogger.get_logger("count_client", "infra")

JSON_CONTENT_TYPE = "application/json"


class CountClient:
    """
    카운트 API 클라이언트

    하나의 aiohttp 세션을 재사용합니다. `async with` 로 사용하거나 close() 를 직접 호출하세요.
    """

    def __init__(self, timeout_sec: float = 10.0) -> None:
        self.timeout_sec = max(0.1, timeout_sec)
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """HTTP 세션을 생성하거나 재사용합니다."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(limit=100, limit_per_host=10)
            timeout = aiohttp.ClientTimeout(total=self.timeout_sec)
            self._session = aiohttp.ClientSession(connector=connector, timeout=timeout)
        return self._session

    async def close(self) -> None:
        """HTTP 세션을 종료합니다."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def get_count(self, url: str) -> int:
        """
        카운트 조회

        Args:
            url: 전체 요청 URL (http://host/api/count)

        Returns:
            응답 바디의 count 값

        Raises:
            RequestFailedError: 전송 실패 (DNS, 연결, 타임아웃, 잘못된 URL)
            UnexpectedStatusError: 200 이 아닌 응답
            UnexpectedContentTypeError: Content-Type 이 application/json 이 아님
            DecodeFailedError: 바디가 JSON 이 아니거나 스키마 불일치
            EmptyResponseError: 바디가 null 이거나 count 필드가 없음
        """
        session = await self._ensure_session()

        try:
            async with session.get(url) as response:
                status = response.status
                content_type = response.headers.get("Content-Type", "")
                body = await response.read()
        except TRANSPORT_EXCEPTIONS as e:
            # asyncio.TimeoutError 는 메시지가 비어 있으므로 타입명으로 대체
            raise RequestFailedError(f"request failed: {str(e) or type(e).__name__}") from e

        if status != 200:
            raise UnexpectedStatusError(
                f"response status code is not 200: Status Code: {status}"
            )

        if content_type != JSON_CONTENT_TYPE:
            raise UnexpectedContentTypeError(
                f"content-type header is not {JSON_CONTENT_TYPE}: Content-Type: {content_type}"
            )

        try:
            decoded = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise DecodeFailedError(f"decode json failed: {e}") from e

        # JSON null 본문은 빈 응답으로 취급
        if decoded is None:
            raise EmptyResponseError("response data is empty")

        try:
            payload = CountResponseDTO.model_validate(decoded)
        except ValidationError as e:
            raise DecodeFailedError(f"decode json failed: {e}") from e

        if payload.count is None:
            raise EmptyResponseError("response data is empty")

        logger.debug("카운트 조회 성공", url=url, count=payload.count)
        return payload.count
