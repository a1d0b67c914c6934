"""
목적: pytest 공통 로깅 훅과 격리 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 환경 변수와 기본 라우터 상태를 테스트마다 초기화한다.
디자인 패턴: 테스트 훅
참조: pyproject.toml, src/telegram_log/core/routing/defaults.py
"""

from __future__ import annotations

import logging
import os

import pytest

from telegram_log.core.routing import reset_defaults
from telegram_log.shared.const import SharedConst


_LOGGER = logging.getLogger("tests")


@pytest.fixture(autouse=True)
def isolated_environment():
    """패키지 환경 변수를 비우고 테스트 종료 후 원래 환경과 기본 인스턴스를 복원한다."""

    snapshot = dict(os.environ)
    for key in list(os.environ):
        if key.startswith(SharedConst.ENV_PREFIX) or key == "LOG_STDOUT":
            del os.environ[key]
    reset_defaults()
    yield
    reset_defaults()
    os.environ.clear()
    os.environ.update(snapshot)


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
