"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로거 구현, 구조화 이벤트 기록기와 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/shared/logging/logger.py, src/telegram_log/shared/logging/events.py, src/telegram_log/shared/logging/models.py
"""

from telegram_log.shared.logging.events import EventRecorder, EventRepository, InMemoryEventRepository
from telegram_log.shared.logging.logger import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    Logger,
    LogRepository,
    NullLogger,
    create_default_logger,
    read_emit_stdout_env,
)
from telegram_log.shared.logging.models import EventRecord, EventType, LogLevel, LogRecord
from telegram_log.shared.logging.stdlib_logger import StdlibLogger

__all__ = [
    "EventRecord",
    "EventRecorder",
    "EventRepository",
    "EventType",
    "InMemoryEventRepository",
    "InMemoryLogger",
    "InMemoryLogRepository",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "NullLogger",
    "StdlibLogger",
    "create_default_logger",
    "read_emit_stdout_env",
]
