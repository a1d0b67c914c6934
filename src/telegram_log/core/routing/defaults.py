"""
목적: 프로세스 전역 기본 라우터/디버그 버퍼를 제공한다.
설명: 라우터를 주입받을 수 없는 프레임워크 호출 지점을 위해 잠금으로 보호된 기본 인스턴스를 지연 생성한다.
디자인 패턴: 지연 초기화 싱글턴
참조: src/telegram_log/core/routing/router.py, src/telegram_log/core/routing/debug_buffer.py,
    src/telegram_log/shared/config/settings.py
"""

from __future__ import annotations

import threading
from typing import Optional

from telegram_log.core.routing.debug_buffer import DebugBuffer
from telegram_log.core.routing.router import LogRouter
from telegram_log.shared.config import TelegramLogSettings, load_settings
from telegram_log.shared.exceptions import ConfigurationError
from telegram_log.shared.logging import Logger, create_default_logger

_LOCK = threading.RLock()
_settings: Optional[TelegramLogSettings] = None
_router: Optional[LogRouter] = None
_debug_buffer: Optional[DebugBuffer] = None


def configure(settings: TelegramLogSettings) -> None:
    """기본 인스턴스가 사용할 설정을 지정하고 기존 인스턴스를 버린다."""

    global _settings
    with _LOCK:
        reset_defaults()
        _settings = settings


def get_settings() -> TelegramLogSettings:
    """기본 설정을 반환한다. 지정되지 않았으면 환경 변수에서 로드한다.

    환경 변수 값이 잘못되었으면 오류를 기록하고 기본 설정을 사용한다.
    """

    global _settings
    with _LOCK:
        if _settings is None:
            try:
                _settings = load_settings()
            except ConfigurationError as exc:
                create_default_logger("TelegramLogDefaults").error(
                    f"로깅 설정을 불러오지 못해 기본값을 사용합니다: {exc.message}",
                    {"detail": exc.detail.model_dump()},
                )
                _settings = TelegramLogSettings()
        return _settings


def get_log_router() -> LogRouter:
    """기본 라우터를 반환한다."""

    global _router
    with _LOCK:
        if _router is None:
            _router = LogRouter(settings=get_settings())
        return _router


def get_debug_buffer() -> DebugBuffer:
    """기본 라우터에 연결된 기본 디버그 버퍼를 반환한다."""

    global _debug_buffer
    with _LOCK:
        if _debug_buffer is None:
            _debug_buffer = DebugBuffer(router=get_log_router())
        return _debug_buffer


def initialize(
    general_logger: Optional[Logger] = None,
    update_logger: Optional[Logger] = None,
) -> LogRouter:
    """기본 라우터의 로거를 (재)설정한다."""

    with _LOCK:
        return get_log_router().initialize(general_logger, update_logger)


def reset_defaults() -> None:
    """기본 라우터와 디버그 버퍼를 버린다. 활성 디버그 스트림은 기록 없이 닫는다."""

    global _router, _debug_buffer, _settings
    with _LOCK:
        if _debug_buffer is not None:
            _debug_buffer.discard()
        _router = None
        _debug_buffer = None
        _settings = None
