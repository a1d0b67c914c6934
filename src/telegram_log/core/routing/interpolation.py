"""
목적: 로그 메시지 플레이스홀더 보간을 제공한다.
설명: `{key}` 형태의 자리표시자를 컨텍스트 값으로 한 번에 치환한다.
디자인 패턴: 순수 함수
참조: src/telegram_log/core/routing/router.py
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Set
from typing import Any

from telegram_log.shared.const import SharedConst

_SCALAR_TYPES = (str, int, float, bool)


def is_stringable(value: Any) -> bool:
    """값을 안전하게 문자열로 바꿀 수 있는지 판단한다.

    스칼라와 자체 `__str__`을 정의한 객체만 허용하고, 컬렉션은 거부한다.
    """

    if value is None or isinstance(value, _SCALAR_TYPES + (bytes,)):
        return True
    if isinstance(value, (Mapping, Set, list, tuple)):
        return False
    return type(value).__str__ is not object.__str__


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, bytes):
        return value.decode(SharedConst.DEFAULT_ENCODING, errors="replace")
    return str(value)


def interpolate(message: str, context: Mapping[str, Any]) -> str:
    """컨텍스트 값으로 메시지의 `{key}` 자리표시자를 치환한다.

    치환은 단일 패스로 수행되며 치환된 텍스트는 다시 검사하지 않는다.
    키가 겹치면 더 긴 자리표시자가 우선한다.
    """

    replacements = {
        f"{{{key}}}": to_text(value)
        for key, value in context.items()
        if is_stringable(value)
    }
    if not replacements:
        return message
    placeholders = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(placeholder) for placeholder in placeholders))
    return pattern.sub(lambda match: replacements[match.group(0)], message)
