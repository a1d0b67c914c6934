"""
목적: 공통 예외 베이스 클래스를 제공한다.
설명: 메시지를 외부에서 주입받고, Pydantic 기반 상세 모델과 함께 보관한다.
디자인 패턴: 도메인 예외 객체
참조: src/telegram_log/shared/exceptions/models.py
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from telegram_log.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """패키지 공통 예외 클래스이다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 예외 상세 정보 모델.
        original: 원본 예외 객체.
    """

    def __init__(
        self,
        message: str,
        detail: ExceptionDetail,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail
        self._original = original

    @property
    def message(self) -> str:
        """주입된 메시지를 반환한다."""

        return self._message

    @property
    def detail(self) -> ExceptionDetail:
        """예외 상세 모델을 반환한다."""

        return self._detail

    @property
    def original(self) -> Optional[Exception]:
        """원본 예외를 반환한다."""

        return self._original

    def to_dict(self) -> dict:
        """예외 정보를 사전으로 변환한다."""

        return {
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }


class ConfigurationError(BaseAppException):
    """설정 로딩/검증 실패 예외이다."""

    CODE = "CONFIG-001"

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        """Pydantic 검증 오류를 설정 예외로 변환한다."""

        fields = [".".join(str(part) for part in item["loc"]) for item in error.errors()]
        detail = ExceptionDetail(
            code=cls.CODE,
            cause="설정 값 검증에 실패했습니다.",
            hint="TELEGRAM_LOG__ 환경 변수 또는 설정 파일 값을 확인하세요.",
            metadata={"fields": fields},
        )
        return cls(message="유효하지 않은 로깅 설정입니다.", detail=detail, original=error)
