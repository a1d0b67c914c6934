"""
목적: 일반/업데이트 로거와 구조화 이벤트 기록기로 로그를 분배하는 라우터를 제공한다.
설명: 연산 이름을 이벤트 심각도로 사상하고, 메시지를 보간한 뒤 기록기와 대상 로거에 전달한다.
디자인 패턴: 퍼사드, 널 객체 패턴
참조: src/telegram_log/core/routing/models.py, src/telegram_log/core/routing/interpolation.py,
    src/telegram_log/shared/logging/events.py
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Mapping, Optional, Union

from telegram_log.core.routing.interpolation import interpolate
from telegram_log.core.routing.models import (
    EVENT_TYPE_BY_OPERATION,
    LOG_LEVEL_BY_OPERATION,
    DispatchResult,
    DispatchStatus,
    LogOperation,
)
from telegram_log.shared.config import TelegramLogSettings
from telegram_log.shared.logging import (
    EventRecorder,
    EventType,
    Logger,
    NullLogger,
    create_default_logger,
)

RecorderFactory = Callable[[str], EventRecorder]


class LogRouter:
    """로그 라우터 구현체이다.

    `initialize` 전에도 호출할 수 있으며, 이때 두 로거는 무동작으로 취급되고
    이벤트 기록기는 첫 사용 시 생성된다.

    Args:
        settings: 라우터 설정. 기록기 카테고리와 stdout 출력 여부를 사용한다.
        recorder_factory: 카테고리를 받아 이벤트 기록기를 만드는 팩토리.
        logger: 라우터 자체 진단용 로거.
    """

    def __init__(
        self,
        settings: Optional[TelegramLogSettings] = None,
        recorder_factory: Optional[RecorderFactory] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._settings = settings or TelegramLogSettings()
        self._recorder_factory = recorder_factory or self._default_recorder
        self._logger = logger or create_default_logger("LogRouter")
        self._lock = threading.RLock()
        self._general_logger: Logger = NullLogger()
        self._update_logger: Logger = NullLogger()
        self._event_recorder: Optional[EventRecorder] = None

    @property
    def settings(self) -> TelegramLogSettings:
        """라우터 설정을 반환한다."""

        return self._settings

    @property
    def general_logger(self) -> Logger:
        """일반 로거를 반환한다."""

        return self._general_logger

    @property
    def update_logger(self) -> Logger:
        """업데이트 로거를 반환한다."""

        return self._update_logger

    @property
    def event_recorder(self) -> EventRecorder:
        """이벤트 기록기를 반환한다. 없으면 생성한다."""

        with self._lock:
            if self._event_recorder is None:
                self._event_recorder = self._recorder_factory(self._settings.event_category)
            return self._event_recorder

    def initialize(
        self,
        general_logger: Optional[Logger] = None,
        update_logger: Optional[Logger] = None,
    ) -> "LogRouter":
        """라우팅 대상을 교체하고 이벤트 기록기를 새로 만든다.

        Args:
            general_logger: 일반 로거. 없으면 무동작 로거.
            update_logger: 업데이트 로거. 없으면 무동작 로거.
        """

        with self._lock:
            self._event_recorder = self._recorder_factory(self._settings.event_category)
            self._general_logger = general_logger if general_logger is not None else NullLogger()
            self._update_logger = update_logger if update_logger is not None else NullLogger()
        return self

    def log(
        self,
        operation: Union[LogOperation, str],
        message: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> DispatchResult:
        """연산 이름에 맞춰 메시지를 기록기와 대상 로거에 전달한다.

        지원하지 않는 연산 이름은 UNKNOWN으로 기록만 하고 로거에는 전달하지 않는다.
        이 메서드는 호출자에게 예외를 전파하지 않는다.
        """

        resolved = self._resolve(operation)
        name = resolved.value if resolved is not None else str(operation)
        event_type = EVENT_TYPE_BY_OPERATION[resolved] if resolved is not None else EventType.UNKNOWN
        if context:
            try:
                message = interpolate(message, context)
            except Exception as exc:  # noqa: BLE001 - 보간 실패 시 원본 메시지를 유지
                self._logger.warning(f"메시지 보간에 실패했습니다: operation={name}, error={exc!r}")

        try:
            self.event_recorder.record(event_type, message)
        except Exception as exc:  # noqa: BLE001 - 기록기 실패가 로거 전달을 막지 않도록 흡수
            self._logger.error(f"이벤트 기록에 실패했습니다: operation={name}, error={exc!r}")

        if resolved is None:
            self._logger.warning(f"지원하지 않는 로그 연산입니다: {name}")
            return DispatchResult(
                status=DispatchStatus.UNSUPPORTED,
                operation=name,
                event_type=event_type,
                message=message,
            )

        target = self._update_logger if resolved is LogOperation.UPDATE else self._general_logger
        if isinstance(target, NullLogger):
            return DispatchResult(
                status=DispatchStatus.NO_LOGGER,
                operation=name,
                event_type=event_type,
                message=message,
            )

        level = LOG_LEVEL_BY_OPERATION[resolved]
        try:
            getattr(target, level.value.lower())(message, dict(context or {}))
        except Exception as exc:  # noqa: BLE001 - 로깅 실패가 호출자를 중단시키지 않도록 흡수
            self._logger.error(f"로거 호출에 실패했습니다: operation={name}, error={exc!r}")
            return DispatchResult(
                status=DispatchStatus.FAILED,
                operation=name,
                event_type=event_type,
                message=message,
                error=repr(exc),
            )
        return DispatchResult(
            status=DispatchStatus.DELIVERED,
            operation=name,
            event_type=event_type,
            message=message,
        )

    def emergency(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.EMERGENCY, message, context)

    def alert(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.ALERT, message, context)

    def critical(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.CRITICAL, message, context)

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.ERROR, message, context)

    def warning(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.WARNING, message, context)

    def notice(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.NOTICE, message, context)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.INFO, message, context)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        return self.log(LogOperation.DEBUG, message, context)

    def update(self, message: str, context: Optional[Mapping[str, Any]] = None) -> DispatchResult:
        """업데이트 로거에 INFO로 기록한다."""

        return self.log(LogOperation.UPDATE, message, context)

    def _resolve(self, operation: Union[LogOperation, str]) -> Optional[LogOperation]:
        if isinstance(operation, LogOperation):
            return operation
        try:
            return LogOperation(operation)
        except ValueError:
            return None

    def _default_recorder(self, category: str) -> EventRecorder:
        return EventRecorder(category=category, emit_stdout=self._settings.emit_stdout)
