"""
목적: telegram_log 패키지 공개 API를 제공한다.
설명: 봇 프레임워크가 사용하는 로그 라우터, 디버그 버퍼, 로거 구현을 한 곳에서 노출한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/core/routing, src/telegram_log/shared
"""

from telegram_log.core.routing import (
    DebugBuffer,
    DispatchResult,
    DispatchStatus,
    LogOperation,
    LogRouter,
    configure,
    get_debug_buffer,
    get_log_router,
    initialize,
    redact_bot_token,
    reset_defaults,
)
from telegram_log.shared import (
    ConfigurationError,
    EventRecorder,
    EventType,
    InMemoryLogger,
    LogLevel,
    Logger,
    NullLogger,
    StdlibLogger,
    TelegramLogSettings,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DebugBuffer",
    "DispatchResult",
    "DispatchStatus",
    "EventRecorder",
    "EventType",
    "InMemoryLogger",
    "LogLevel",
    "LogOperation",
    "LogRouter",
    "Logger",
    "NullLogger",
    "StdlibLogger",
    "TelegramLogSettings",
    "configure",
    "get_debug_buffer",
    "get_log_router",
    "initialize",
    "load_settings",
    "redact_bot_token",
    "reset_defaults",
]
