"""
목적: 로그 라우터/디버그 버퍼 설정 모델과 로딩 함수를 제공한다.
설명: `.env` 로드 후 JSON 파일, `TELEGRAM_LOG__*` 환경 변수, 오버라이드를 병합해 검증한다.
디자인 패턴: 데이터 전송 객체(DTO), 빌더 패턴
참조: src/telegram_log/shared/config/loader.py, src/telegram_log/shared/exceptions/base.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from telegram_log.shared.config.loader import ConfigLoader
from telegram_log.shared.const import TelegramLogConst
from telegram_log.shared.exceptions import ConfigurationError, ExceptionDetail
from telegram_log.shared.logging import Logger, create_default_logger


class TelegramLogSettings(BaseModel):
    """로깅 퍼사드 설정 모델이다.

    Args:
        event_category: 구조화 이벤트 기록기 카테고리.
        remove_bot_token: 디버그 스트림 플러시 시 봇 토큰 마스킹 여부.
        always_log_request_and_response: 성공한 요청/응답도 디버그 로그로 남길지 여부.
        emit_stdout: 기록기 stdout 출력 여부. None이면 `LOG_STDOUT`을 따른다.
    """

    model_config = ConfigDict(extra="ignore")

    event_category: str = Field(default=TelegramLogConst.DEFAULT_EVENT_CATEGORY, min_length=1)
    remove_bot_token: bool = True
    always_log_request_and_response: bool = False
    emit_stdout: Optional[bool] = None

    @field_validator("event_category")
    @classmethod
    def _strip_category(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("event_category는 공백일 수 없습니다.")
        return stripped


def load_settings(
    env_file: Optional[Union[str, Path]] = None,
    json_path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> TelegramLogSettings:
    """설정 소스를 병합해 `TelegramLogSettings`를 생성한다.

    Args:
        env_file: 로드할 `.env` 경로. 없으면 `.env` 로드를 건너뛴다.
        json_path: 선택적 JSON 설정 파일 경로.
        overrides: 마지막에 적용할 설정 값.
        logger: 주입 가능한 로거.

    Raises:
        ConfigurationError: 병합된 값이 검증을 통과하지 못한 경우.
    """

    logger = logger or create_default_logger("TelegramLogSettings")
    if env_file is not None:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
        else:
            logger.warning(f".env 파일이 없어 건너뜁니다: {env_path}")

    loader = ConfigLoader(logger=logger)
    if json_path:
        try:
            loader.add_json_file(json_path)
        except ValueError as exc:
            raise ConfigurationError(
                message="설정 파일을 읽을 수 없습니다.",
                detail=_json_error_detail(json_path, exc),
                original=exc,
            ) from exc
    loader.add_env()
    try:
        return TelegramLogSettings.model_validate(loader.build(overrides))
    except ValidationError as exc:
        raise ConfigurationError.from_validation_error(exc) from exc


def _json_error_detail(path: str, error: Exception) -> ExceptionDetail:
    return ExceptionDetail(
        code=ConfigurationError.CODE,
        cause=str(error),
        hint="JSON 설정 파일은 최상위 객체여야 합니다.",
        metadata={"path": path},
    )
