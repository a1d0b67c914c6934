"""
목적: 로그 라우팅 모듈 공개 API를 제공한다.
설명: 라우터, 디버그 버퍼, 기본 인스턴스 접근 함수와 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/core/routing/router.py, src/telegram_log/core/routing/debug_buffer.py, src/telegram_log/core/routing/defaults.py
"""

from telegram_log.core.routing.debug_buffer import DebugBuffer, redact_bot_token, render_template
from telegram_log.core.routing.defaults import (
    configure,
    get_debug_buffer,
    get_log_router,
    get_settings,
    initialize,
    reset_defaults,
)
from telegram_log.core.routing.interpolation import interpolate, is_stringable
from telegram_log.core.routing.models import (
    EVENT_TYPE_BY_OPERATION,
    LOG_LEVEL_BY_OPERATION,
    DispatchResult,
    DispatchStatus,
    LogOperation,
)
from telegram_log.core.routing.router import LogRouter

__all__ = [
    "EVENT_TYPE_BY_OPERATION",
    "LOG_LEVEL_BY_OPERATION",
    "DebugBuffer",
    "DispatchResult",
    "DispatchStatus",
    "LogOperation",
    "LogRouter",
    "configure",
    "get_debug_buffer",
    "get_log_router",
    "get_settings",
    "initialize",
    "interpolate",
    "is_stringable",
    "redact_bot_token",
    "render_template",
    "reset_defaults",
]
