"""
목적: 로깅 설정 사전을 조립한다.
설명: JSON 설정 파일과 `TELEGRAM_LOG__` 환경 변수를 차례로 겹쳐 쓰고, 마지막에 overrides를 적용한다.
디자인 패턴: 빌더 패턴
참조: src/telegram_log/shared/config/settings.py, src/telegram_log/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from telegram_log.shared.const import SharedConst
from telegram_log.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 소스를 순서대로 쌓아 하나의 사전으로 합친다.

    뒤에 추가한 소스가 우선하며, 양쪽이 모두 사전인 키는 재귀적으로 합쳐진다.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._layers: list[Dict[str, Any]] = []

    def add_json_file(self, path: str) -> "ConfigLoader":
        """JSON 객체 파일을 한 계층으로 추가한다. 파일이 없으면 경고만 남긴다."""

        if not os.path.exists(path):
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=SharedConst.DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._layers.append(payload)
        return self

    def add_env(self, prefix: str = SharedConst.ENV_PREFIX) -> "ConfigLoader":
        """prefix가 붙은 환경 변수를 `__` 기준으로 나눠 소문자 중첩 키로 추가한다."""

        layer: Dict[str, Any] = {}
        for name, raw in os.environ.items():
            if not name.startswith(prefix):
                continue
            keys = [key.lower() for key in name[len(prefix) :].split(SharedConst.ENV_NESTED_DELIMITER) if key]
            if keys:
                _set_path(layer, keys, _coerce_env_value(raw))
        if layer:
            self._layers.append(layer)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """쌓인 계층과 overrides를 합친 사전을 반환한다."""

        result: Dict[str, Any] = {}
        for layer in [*self._layers, dict(overrides or {})]:
            result = _deep_merge(result, layer)
        return result


def _set_path(target: Dict[str, Any], keys: list[str], value: Any) -> None:
    for key in keys[:-1]:
        child = target.get(key)
        if not isinstance(child, dict):
            child = target[key] = {}
        target = child
    target[keys[-1]] = value


def _deep_merge(base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in incoming.items():
        current = result.get(key)
        result[key] = _deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return result


def _coerce_env_value(raw: str) -> Any:
    # true/false/null 외의 값은 pydantic 검증에 맡긴다.
    token = raw.strip().lower()
    if token in ("true", "false"):
        return token == "true"
    if token in ("null", "none"):
        return None
    return raw
