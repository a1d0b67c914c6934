"""
목적: 로거 인터페이스와 기본 구현체를 제공한다.
설명: 8개 표준 레벨 메서드를 가진 로거 계약과 무동작/인메모리 구현체를 포함한다.
디자인 패턴: 전략 패턴, 저장소 패턴, 널 객체 패턴
참조: src/telegram_log/shared/logging/models.py
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from telegram_log.shared.logging.models import LogLevel, LogRecord

LogContext = Mapping[str, Any]


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """로그 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장된 로그를 반환한다."""

    @abstractmethod
    def clear(self) -> None:
        """저장된 로그를 비운다."""


class InMemoryLogRepository(LogRepository):
    """인메모리 로그 저장소 구현체."""

    def __init__(self) -> None:
        self._records: List[LogRecord] = []

    def add(self, record: LogRecord) -> None:
        self._records.append(record)

    def list(self) -> List[LogRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


class Logger(ABC):
    """로거 인터페이스.

    구현체는 `log`만 구현하면 되고, 레벨별 메서드는 모두 `log`로 위임된다.
    """

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
    ) -> None:
        """로그를 기록한다."""

    def emergency(self, message: str, context: Optional[LogContext] = None) -> None:
        """EMERGENCY 레벨 로그를 기록한다."""

        self.log(LogLevel.EMERGENCY, message, context)

    def alert(self, message: str, context: Optional[LogContext] = None) -> None:
        """ALERT 레벨 로그를 기록한다."""

        self.log(LogLevel.ALERT, message, context)

    def critical(self, message: str, context: Optional[LogContext] = None) -> None:
        """CRITICAL 레벨 로그를 기록한다."""

        self.log(LogLevel.CRITICAL, message, context)

    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """ERROR 레벨 로그를 기록한다."""

        self.log(LogLevel.ERROR, message, context)

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """WARNING 레벨 로그를 기록한다."""

        self.log(LogLevel.WARNING, message, context)

    def notice(self, message: str, context: Optional[LogContext] = None) -> None:
        """NOTICE 레벨 로그를 기록한다."""

        self.log(LogLevel.NOTICE, message, context)

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """INFO 레벨 로그를 기록한다."""

        self.log(LogLevel.INFO, message, context)

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """DEBUG 레벨 로그를 기록한다."""

        self.log(LogLevel.DEBUG, message, context)


class NullLogger(Logger):
    """모든 입력을 버리는 로거 구현체."""

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
    ) -> None:
        return None


class InMemoryLogger(Logger):
    """인메모리 로거 구현체."""

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        emit_stdout: Optional[bool] = None,
    ) -> None:
        self._name = name
        self._repository = repository or InMemoryLogRepository()
        self._emit_stdout = read_emit_stdout_env() if emit_stdout is None else emit_stdout

    @property
    def name(self) -> str:
        """로거 이름을 반환한다."""

        return self._name

    @property
    def repository(self) -> LogRepository:
        """저장소를 반환한다."""

        return self._repository

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
    ) -> None:
        record = LogRecord(
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc),
            logger_name=self._name,
            context=dict(context or {}),
        )
        self._repository.add(record)
        if self._emit_stdout:
            self._write_stdout(record)

    def _write_stdout(self, record: LogRecord) -> None:
        payload: dict[str, object] = {
            "timestamp": record.timestamp.astimezone(timezone.utc).isoformat(),
            "level": record.level.value,
            "logger": record.logger_name,
            "message": record.message,
        }
        if record.context:
            payload["context"] = record.context
        print(json.dumps(payload, ensure_ascii=False, default=str), flush=True)


def read_emit_stdout_env() -> bool:
    """`LOG_STDOUT` 환경 변수로 stdout 출력 여부를 판단한다."""

    raw = os.getenv("LOG_STDOUT")
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def create_default_logger(name: str) -> InMemoryLogger:
    """기본 인메모리 로거를 생성한다."""

    return InMemoryLogger(name=name)
