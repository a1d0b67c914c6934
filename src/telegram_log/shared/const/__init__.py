"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로딩과 디버그 스트림 마스킹에서 사용하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/telegram_log/shared/config/loader.py, src/telegram_log/core/routing/debug_buffer.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일/스트림 인코딩.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        ENV_PREFIX: 패키지 설정 환경 변수 prefix.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    ENV_PREFIX = "TELEGRAM_LOG__"


class TelegramLogConst:
    """로그 라우팅 상수 집합이다.

    Attributes:
        DEFAULT_EVENT_CATEGORY: 구조화 이벤트 기록기의 기본 카테고리.
        DEFAULT_DEBUG_TEMPLATE: 디버그 스트림 기본 메시지 템플릿.
        BOT_TOKEN_PATTERN: URL 경로에 포함된 봇 토큰 패턴.
        BOT_TOKEN_REPLACEMENT: 봇 토큰 치환 문자열.
    """

    DEFAULT_EVENT_CATEGORY = "tdlib"
    DEFAULT_DEBUG_TEMPLATE = "%s"
    BOT_TOKEN_PATTERN = r"/bot(\d+):[\w\-]+/"
    BOT_TOKEN_REPLACEMENT = "/botBOT_TOKEN_REMOVED/"


__all__ = ["SharedConst", "TelegramLogConst"]
