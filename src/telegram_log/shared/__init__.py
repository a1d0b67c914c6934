"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 예외/로깅/설정 공통 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/shared/exceptions, src/telegram_log/shared/logging, src/telegram_log/shared/config
"""

from __future__ import annotations

from telegram_log.shared.config import ConfigLoader, TelegramLogSettings, load_settings
from telegram_log.shared.exceptions import BaseAppException, ConfigurationError, ExceptionDetail
from telegram_log.shared.logging import (
    EventRecord,
    EventRecorder,
    EventType,
    InMemoryLogger,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    NullLogger,
    StdlibLogger,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "ConfigurationError",
    "ExceptionDetail",
    "ConfigLoader",
    "TelegramLogSettings",
    "load_settings",
    "EventRecord",
    "EventRecorder",
    "EventType",
    "InMemoryLogger",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "NullLogger",
    "StdlibLogger",
    "create_default_logger",
]
