"""
목적: 표준 라이브러리 `logging.Logger` 어댑터를 제공한다.
설명: 8개 표준 레벨을 `logging` 레벨로 사상해 기존 핸들러 구성을 그대로 사용한다.
디자인 패턴: 어댑터 패턴
참조: src/telegram_log/shared/logging/logger.py
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from telegram_log.shared.logging.logger import LogContext, Logger
from telegram_log.shared.logging.models import LogLevel

_LEVEL_MAP = {
    LogLevel.EMERGENCY: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class StdlibLogger(Logger):
    """`logging.Logger`로 위임하는 로거 구현체.

    Args:
        target: 위임 대상 로거 또는 로거 이름.
    """

    def __init__(self, target: Union[logging.Logger, str]) -> None:
        self._target = logging.getLogger(target) if isinstance(target, str) else target

    @property
    def target(self) -> logging.Logger:
        """위임 대상 로거를 반환한다."""

        return self._target

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
    ) -> None:
        # 메시지는 이미 보간된 상태이므로 %-포맷 인자를 넘기지 않는다.
        self._target.log(
            _LEVEL_MAP[level],
            message,
            extra={"log_level": level.value, "log_context": dict(context or {})},
        )
