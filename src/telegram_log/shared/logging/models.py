"""
목적: 로깅에 필요한 공통 모델을 정의한다.
설명: 로그 레벨, 구조화 이벤트 타입, 로그/이벤트 레코드 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/telegram_log/shared/logging/logger.py, src/telegram_log/shared/logging/events.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """로거 인터페이스가 지원하는 8개 표준 로그 레벨 열거형."""

    EMERGENCY = "EMERGENCY"
    ALERT = "ALERT"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    NOTICE = "NOTICE"
    INFO = "INFO"
    DEBUG = "DEBUG"


class EventType(str, Enum):
    """구조화 이벤트 기록기의 심각도 열거형."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    VERBOSE = "VERBOSE"
    UNKNOWN = "UNKNOWN"


def _utc_now() -> datetime:
    """UTC 기준의 timezone-aware 시간을 반환한다."""

    return datetime.now(timezone.utc)


class LogRecord(BaseModel):
    """로그 레코드 모델이다.

    Args:
        level: 로그 레벨.
        message: 보간이 끝난 로그 메시지.
        timestamp: 기록 시각.
        logger_name: 로거 이름.
        context: 호출 시 전달된 컨텍스트 매핑.
        metadata: 추가 메타데이터.
    """

    level: LogLevel
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    logger_name: str
    context: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EventRecord(BaseModel):
    """구조화 이벤트 레코드 모델이다.

    Args:
        event_type: 이벤트 심각도.
        message: 이벤트 메시지.
        category: 기록기 카테고리 라벨.
        timestamp: 기록 시각.
    """

    event_type: EventType
    message: str
    category: str
    timestamp: datetime = Field(default_factory=_utc_now)
