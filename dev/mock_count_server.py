"""로컬 폴러 테스트용 목 카운트 서버

Usage:
    python dev/mock_count_server.py --port 2020
    python main.py poll --server localhost:2020 --interval 5
"""

from __future__ import annotations

import argparse
from typing import Sequence

import orjson
from aiohttp import web

from minute_events.common.logger import PipelineLogger

logger = PipelineLogger.get_logger("mock_count_server", "dev")

MOCK_COUNT = 42


async def handle_count(_: web.Request) -> web.Response:
    # json_response 는 charset 을 덧붙이므로 헤더를 직접 지정
    return web.Response(
        body=orjson.dumps({"count": MOCK_COUNT}),
        headers={"Content-Type": "application/json"},
    )


def build_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/api/count", handle_count)
    return app


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a fixed /api/count response")
    parser.add_argument("--port", type=int, default=2020, help="listen port (default: 2020)")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logger.info(f"listen and serve on: :{args.port}")
    web.run_app(build_app(), port=args.port, print=None)
