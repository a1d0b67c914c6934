"""
목적: 코어 모듈 공개 API를 제공한다.
설명: 로그 라우터와 디버그 버퍼 컴포넌트를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/core/routing
"""

from telegram_log.core.routing import DebugBuffer, DispatchResult, DispatchStatus, LogOperation, LogRouter

__all__ = ["DebugBuffer", "DispatchResult", "DispatchStatus", "LogOperation", "LogRouter"]
