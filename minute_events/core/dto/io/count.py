"""카운트 API 응답 DTO"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# 응답 바디는 외부 서버가 만들므로 알 수 없는 필드는 무시
RESPONSE_CONFIG = ConfigDict(
    extra="ignore",
    frozen=True,
    strict=True,
)


class CountResponseDTO(BaseModel):
    """`GET /api/count` 응답 바디.

    count 가 없거나 null 이면 None 으로 남고, 클라이언트에서 빈 응답으로 처리합니다.
    """

    count: int | None = Field(None, description="집계된 이벤트 수")

    model_config = RESPONSE_CONFIG
