from __future__ import annotations

import asyncio
import logging
import queue
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from typing import Any

from minute_events.config.settings import logging_settings


class PipelineLogger:
    """
    컴포넌트 단위 로깅 래퍼
    QueueHandler 기반으로 호출부는 즉시 반환하고, 실제 출력은 리스너 스레드가 담당
    """

    @classmethod
    def get_logger(cls, name: str, component: str | None = None, **kwargs) -> PipelineLogger:
        """
        로거 인스턴스를 반환하는 팩토리 메서드.
        표준 logging.getLogger가 이름 단위 싱글톤이므로 별도 레지스트리는 두지 않습니다.
        """
        return cls(name, component, **kwargs)

    def __init__(
        self,
        name: str,
        component: str | None = None,
        level: int | str | None = None,
        log_to_file: bool | None = None,
        log_to_console: bool = True,
        log_dir: str | None = None,
        rotation: str = "midnight",
    ):
        """
        Args:
            name: 로거 이름
            component: 컴포넌트 이름 (aggregation, infra, app ...)
            level: 로깅 레벨 (None이면 LOG_LEVEL)
            log_to_file: 파일 로깅 여부 (None이면 LOG_TO_FILE)
            log_to_console: 콘솔(stderr) 로깅 여부
            log_dir: 로그 디렉토리 (None이면 LOG_DIR)
            rotation: 로그 로테이션 주기
        """
        self.name = name
        self.component = component
        self.level = level or logging_settings.level.upper()
        self.log_to_file = logging_settings.to_file if log_to_file is None else log_to_file
        self.log_to_console = log_to_console
        self.log_dir = log_dir or logging_settings.dir
        self.rotation = rotation

        # 무제한 버퍼 (queue.Full 방지)
        self.log_queue: queue.Queue = queue.Queue()

        self._setup_logger()

    def _setup_logger(self) -> None:
        self.logger_name = f"{self.name}.{self.component}" if self.component else self.name
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(self.level)
        self.logger.propagate = False

        # 같은 이름으로 재생성될 때 핸들러 중복 방지
        if self.logger.hasHandlers():
            self.logger.handlers.clear()

        self.formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(component)s] %(message)s"
        )

        handlers: list[logging.Handler] = []

        # stdout은 집계 결과 출력용이므로 로그는 stderr로
        if self.log_to_console:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(self.formatter)
            handlers.append(console)

        if self.log_to_file:
            log_filename = self._get_log_filename()
            Path(log_filename).parent.mkdir(parents=True, exist_ok=True)

            file_handler = TimedRotatingFileHandler(
                filename=log_filename,
                when=self.rotation,
                backupCount=7,
            )
            file_handler.setFormatter(self.formatter)
            handlers.append(file_handler)

        self.queue_handler = QueueHandler(self.log_queue)
        self.logger.addHandler(self.queue_handler)

        self.listener = QueueListener(self.log_queue, *handlers, respect_handler_level=True)
        self.listener.start()

    def _get_log_filename(self) -> str:
        today = datetime.now().strftime("%Y-%m-%d")
        component_part = f"{self.component}/" if self.component else ""
        return f"{self.log_dir}/{component_part}{self.name}_{today}.log"

    def _process_message(self, level: int, msg: str, extra: dict[str, Any] | None = None) -> None:
        """
        메시지 처리 및 로깅

        - exc_info / stack_info 는 logger.log() 파라미터로 분리
        - extra={"..."} 로 넘긴 dict 는 풀어서 병합
        - 나머지 키워드는 그대로 LogRecord 속성으로 병합
        """
        log_extra: dict[str, Any] = {"component": self.component or "main"}

        exc_info_param = None
        stack_info_param = False

        if extra:
            exc_info_param = extra.pop("exc_info", None)
            stack_info_param = bool(extra.pop("stack_info", False))

            nested_extra = extra.pop("extra", None)
            if isinstance(nested_extra, dict):
                log_extra.update(nested_extra)

            log_extra.update(extra)

        self.logger.log(
            level, msg, exc_info=exc_info_param, stack_info=stack_info_param, extra=log_extra
        )

    async def alog(self, level: int, msg: str, **kwargs) -> None:
        """
        비동기 컨텍스트용 로깅
        - 실행 중인 이벤트 루프가 있으면 스레드 풀로 위임
        - 루프가 없으면 동기 처리
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._process_message(level, msg, kwargs)
            return
        await loop.run_in_executor(None, self._process_message, level, msg, kwargs)

    def debug(self, msg: str, **kwargs) -> None:
        self._process_message(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs) -> None:
        self._process_message(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._process_message(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs) -> None:
        self._process_message(logging.ERROR, msg, kwargs)

    async def ainfo(self, msg: str, **kwargs) -> None:
        await self.alog(logging.INFO, msg, **kwargs)

    async def awarning(self, msg: str, **kwargs) -> None:
        await self.alog(logging.WARNING, msg, **kwargs)

    def close(self) -> None:
        """
        리스너 정지 (큐에 남은 레코드는 모두 flush 됨)
        """
        self.listener.stop()
