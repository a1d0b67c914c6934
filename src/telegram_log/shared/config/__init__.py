"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 로깅 퍼사드 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/telegram_log/shared/config/loader.py, src/telegram_log/shared/config/settings.py
"""

from telegram_log.shared.config.loader import ConfigLoader
from telegram_log.shared.config.settings import TelegramLogSettings, load_settings

__all__ = ["ConfigLoader", "TelegramLogSettings", "load_settings"]
