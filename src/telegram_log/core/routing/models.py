"""
목적: 로그 라우팅 모델을 정의한다.
설명: 지원 연산 열거형, 연산별 이벤트 심각도 사상표, 라우팅 결과 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO), 상수 객체
참조: src/telegram_log/core/routing/router.py, src/telegram_log/core/routing/debug_buffer.py
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from telegram_log.shared.logging import EventType, LogLevel


class LogOperation(str, Enum):
    """라우터가 지원하는 로그 연산 열거형."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"
    UPDATE = "update"


EVENT_TYPE_BY_OPERATION: dict[LogOperation, EventType] = {
    LogOperation.EMERGENCY: EventType.ERROR,
    LogOperation.ALERT: EventType.ERROR,
    LogOperation.CRITICAL: EventType.ERROR,
    LogOperation.ERROR: EventType.ERROR,
    LogOperation.WARNING: EventType.WARNING,
    LogOperation.NOTICE: EventType.INFO,
    LogOperation.INFO: EventType.INFO,
    LogOperation.DEBUG: EventType.VERBOSE,
    LogOperation.UPDATE: EventType.UNKNOWN,
}

# update는 업데이트 로거에 INFO로 전달된다.
LOG_LEVEL_BY_OPERATION: dict[LogOperation, LogLevel] = {
    LogOperation.EMERGENCY: LogLevel.EMERGENCY,
    LogOperation.ALERT: LogLevel.ALERT,
    LogOperation.CRITICAL: LogLevel.CRITICAL,
    LogOperation.ERROR: LogLevel.ERROR,
    LogOperation.WARNING: LogLevel.WARNING,
    LogOperation.NOTICE: LogLevel.NOTICE,
    LogOperation.INFO: LogLevel.INFO,
    LogOperation.DEBUG: LogLevel.DEBUG,
    LogOperation.UPDATE: LogLevel.INFO,
}


class DispatchStatus(str, Enum):
    """라우팅 결과 상태 열거형.

    Attributes:
        DELIVERED: 주입된 로거에 전달됨.
        NO_LOGGER: 대상 로거가 무동작 로거라 전달을 생략함.
        UNSUPPORTED: 지원하지 않는 연산 이름이라 이벤트 기록만 수행함.
        FAILED: 주입된 로거 호출이 예외로 실패함.
        INACTIVE: 활성 디버그 스트림이 없어 아무것도 하지 않음.
        DISCARDED: 디버그 스트림을 기록 없이 닫음.
    """

    DELIVERED = "delivered"
    NO_LOGGER = "no_logger"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"
    INACTIVE = "inactive"
    DISCARDED = "discarded"


class DispatchResult(BaseModel):
    """라우팅 결과 모델이다.

    Args:
        status: 결과 상태.
        operation: 호출된 연산 이름.
        event_type: 이벤트 기록기에 전달된 심각도.
        message: 보간이 끝난 최종 메시지.
        error: 로거 호출 실패 시 예외 표현.
    """

    status: DispatchStatus
    operation: Optional[str] = None
    event_type: Optional[EventType] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        """로거에 실제로 전달되었는지 반환한다."""

        return self.status == DispatchStatus.DELIVERED
