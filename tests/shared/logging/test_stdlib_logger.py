"""
목적: 표준 라이브러리 로거 어댑터의 레벨 사상을 검증한다.
설명: 8개 표준 레벨이 `logging` 레벨로 변환되고 컨텍스트가 extra로 전달되는지 확인한다.
디자인 패턴: 어댑터 패턴
참조: src/telegram_log/shared/logging/stdlib_logger.py
"""

from __future__ import annotations

import logging

from telegram_log.shared.logging import StdlibLogger


def test_stdlib_logger_maps_levels(caplog) -> None:
    """NOTICE는 INFO로, EMERGENCY/ALERT는 CRITICAL로 사상되어야 한다."""

    caplog.set_level(logging.DEBUG, logger="telegram_log.test")
    logger = StdlibLogger("telegram_log.test")

    logger.notice("알림")
    logger.emergency("비상")
    logger.alert("경보")
    logger.debug("디버그")

    levels = [record.levelno for record in caplog.records]

    assert levels == [logging.INFO, logging.CRITICAL, logging.CRITICAL, logging.DEBUG]
    assert caplog.records[0].log_level == "NOTICE"


def test_stdlib_logger_passes_context_and_keeps_percent_literal(caplog) -> None:
    """컨텍스트는 extra로 전달되고 메시지의 `%`는 포맷되지 않아야 한다."""

    target = logging.getLogger("telegram_log.context")
    caplog.set_level(logging.INFO, logger="telegram_log.context")

    StdlibLogger(target).info("100% 완료", {"chat_id": 42})

    record = caplog.records[0]

    assert record.getMessage() == "100% 완료"
    assert record.log_context == {"chat_id": 42}
