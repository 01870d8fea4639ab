"""카운트 엔드포인트 폴러

고정된 서버 목록을 주기적으로 조회해 서버마다 한 줄씩 출력합니다.
한 서버의 실패는 해당 줄에만 기록되고 다른 서버나 다음 틱에는 영향을 주지 않습니다.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable

from minute_events.common.exceptions.errors import CountRequestError
from minute_events.common.logger import PipelineLogger
from minute_events.core.dto.internal.poll import PollOutcomeDomain
from minute_events.infra.http.count_client import CountClient

logger = PipelineLogger.get_logger("poller", "app")

LineEmitter = Callable[[str], None]


class CountPoller:
    """타이머 기반 fan-out 폴러

    책임:
    - 틱마다 모든 서버에 동시에 요청
    - 서버별 결과/에러를 PollOutcomeDomain 으로 수집 (서버 목록 순서 유지)
    - 렌더링된 줄을 emit 콜백으로 전달
    """

    def __init__(
        self,
        servers: list[str],
        client: CountClient,
        interval_sec: float = 60.0,
        http_prefix: str = "http://",
        metric_path: str = "/api/count",
        output_layout: str = "%Y-%m-%d %H:%M:00",
    ) -> None:
        self.servers = list(servers)
        self.client = client
        self.interval_sec = max(0.01, interval_sec)
        self.http_prefix = http_prefix
        self.metric_path = metric_path
        self.output_layout = output_layout

    def build_url(self, server: str) -> str:
        return f"{self.http_prefix}{server}{self.metric_path}"

    async def _poll_server(self, server: str, ticked_at: datetime) -> PollOutcomeDomain:
        try:
            count = await self.client.get_count(self.build_url(server))
        except CountRequestError as e:
            await logger.awarning(
                "카운트 조회 실패",
                server=server,
                error_domain=str(e.domain),
                error_code=str(e.code),
                error=str(e),
            )
            return PollOutcomeDomain(
                ticked_at=ticked_at, server=server, error=str(e), error_code=e.code
            )
        return PollOutcomeDomain(ticked_at=ticked_at, server=server, count=count)

    async def poll_once(self, ticked_at: datetime | None = None) -> list[PollOutcomeDomain]:
        """한 틱 분량의 폴링 (서버별 동시 요청)."""
        ticked_at = ticked_at or datetime.now()
        return list(
            await asyncio.gather(
                *(self._poll_server(server, ticked_at) for server in self.servers)
            )
        )

    async def run(self, emit: LineEmitter, stop_event: asyncio.Event) -> None:
        """stop_event 가 설정될 때까지 주기적으로 폴링.

        첫 폴링은 한 주기를 기다린 뒤 시작합니다.
        다음 틱 시각은 이전 틱 기준으로 계산합니다.
        """
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval_sec

        await logger.ainfo(
            f"폴러 시작: {len(self.servers)}개 서버, 주기 {self.interval_sec}초",
            servers=self.servers,
        )

        while not stop_event.is_set():
            delay = max(0.0, next_tick - loop.time())
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=delay)
                break
            except asyncio.TimeoutError:
                pass

            outcomes = await self.poll_once(datetime.now())
            for outcome in outcomes:
                emit(outcome.render(self.output_layout))

            # 폴링이 주기보다 길어지면 놓친 틱은 건너뜀
            next_tick += self.interval_sec
            while next_tick <= loop.time():
                next_tick += self.interval_sec

        await logger.ainfo("폴러 종료")
