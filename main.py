"""애플리케이션 진입점

- count: 로그 파일을 분 단위로 집계해 `[YYYY-MM-DD hh:mm] N` 형식으로 출력
- poll: 서버 목록의 /api/count 를 주기적으로 조회해 출력

Usage:
    python main.py count                          # EVENTS_* 설정 사용
    python main.py count --file events.log --suffix NOK
    python main.py poll --server localhost:2020 --interval 5
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import signal
import sys
from datetime import timedelta
from typing import Sequence

from minute_events.application.poller import CountPoller
from minute_events.common.exceptions.errors import SourceUnavailableError
from minute_events.common.logger import PipelineLogger
from minute_events.config.settings import aggregation_settings, poller_settings
from minute_events.core.aggregation import aggregate, render_buckets
from minute_events.infra.http.count_client import CountClient
from minute_events.infra.source.line_source import open_line_source

logger = PipelineLogger.get_logger("main", "app")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minute-level event counter and count poller")
    subparsers = parser.add_subparsers(dest="command", required=True)

    count = subparsers.add_parser("count", help="count matching events per minute")
    count.add_argument(
        "--file",
        default=aggregation_settings.file_path,
        help=f"input log file (default: {aggregation_settings.file_path})",
    )
    count.add_argument(
        "--suffix",
        default=aggregation_settings.event_suffix,
        help=f"suffix of counted lines (default: {aggregation_settings.event_suffix})",
    )

    poll = subparsers.add_parser("poll", help="poll /api/count of each server periodically")
    poll.add_argument(
        "--server",
        action="append",
        dest="servers",
        help="server host[:port], repeatable (default: POLLER_SERVERS)",
    )
    poll.add_argument(
        "--interval",
        type=float,
        default=poller_settings.interval_sec,
        help=f"poll interval in seconds (default: {poller_settings.interval_sec})",
    )
    return parser.parse_args(argv)


def run_count(file_path: str, suffix: str) -> int:
    """집계 결과를 stdout 으로 출력. 실패 시 아무것도 출력하지 않고 1 반환."""
    try:
        with open_line_source(file_path) as lines:
            result = aggregate(
                lines,
                aggregation_settings.parse_layout,
                suffix,
                timedelta(seconds=aggregation_settings.truncate_seconds),
            )
    except SourceUnavailableError as e:
        logger.error(f"Failed to open file path({file_path}): {e.cause}")
        return 1

    if not result.ok:
        logger.error(f"Get events in minute failed: {result.error.message}")
        return 1

    for line in render_buckets(result.buckets, aggregation_settings.output_layout):
        print(line)
    return 0


async def run_poll(servers: list[str], interval_sec: float) -> int:
    """SIGINT/SIGTERM 을 받을 때까지 폴링."""
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop_event.set)

    async with CountClient(timeout_sec=poller_settings.timeout_sec) as client:
        poller = CountPoller(
            servers=servers,
            client=client,
            interval_sec=interval_sec,
            http_prefix=poller_settings.http_prefix,
            metric_path=poller_settings.metric_path,
            output_layout=poller_settings.output_layout,
        )
        await poller.run(lambda line: print(line, flush=True), stop_event)

    logger.info("종료 시그널 수신, 폴러를 정리했습니다")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.command == "count":
            return run_count(args.file, args.suffix)
        return asyncio.run(run_poll(args.servers or poller_settings.servers, args.interval))
    finally:
        logger.close()


if __name__ == "__main__":
    sys.exit(main())
