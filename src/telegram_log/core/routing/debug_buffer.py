"""
목적: 요청/응답 추적용 임시 디버그 스트림을 제공한다.
설명: 인메모리 바이트 스트림에 원문을 모은 뒤, 봇 토큰을 마스킹해 하나의 DEBUG 로그로 플러시한다.
디자인 패턴: 어댑터 패턴, 컨텍스트 매니저
참조: src/telegram_log/core/routing/router.py, src/telegram_log/shared/const/__init__.py
"""

from __future__ import annotations

import io
import re
import threading
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Union

from telegram_log.core.routing.models import DispatchResult, DispatchStatus, LogOperation
from telegram_log.core.routing.router import LogRouter
from telegram_log.shared.const import SharedConst, TelegramLogConst
from telegram_log.shared.logging import Logger, create_default_logger

_BOT_TOKEN_RE = re.compile(TelegramLogConst.BOT_TOKEN_PATTERN, re.ASCII)
_TEMPLATE_TOKEN_RE = re.compile(r"%%|%s")


def redact_bot_token(text: str) -> str:
    """URL 경로의 `/bot<숫자>:<토큰>/`을 마스킹 문자열로 치환한다."""

    return _BOT_TOKEN_RE.sub(TelegramLogConst.BOT_TOKEN_REPLACEMENT, text)


def render_template(template: str, contents: str) -> str:
    """템플릿의 첫 `%s` 위치에 내용을 넣는다.

    `%%`는 리터럴 `%`로 바뀌고, 두 번째 이후의 `%s`와 자리표시자가 없는 템플릿은 그대로 남는다.
    """

    substituted = False

    def _replace(match: re.Match[str]) -> str:
        nonlocal substituted
        if match.group(0) == "%%":
            return "%"
        if substituted:
            return match.group(0)
        substituted = True
        return contents

    return _TEMPLATE_TOKEN_RE.sub(_replace, template)


class DebugBuffer:
    """임시 디버그 스트림 구현체.

    한 인스턴스에는 동시에 하나의 활성 스트림만 존재한다.

    Args:
        router: 플러시한 내용을 DEBUG로 전달할 라우터.
        remove_bot_token: 플러시 시 봇 토큰 마스킹 여부. None이면 라우터 설정을 따른다.
        always_log_request_and_response: 성공한 요청도 기록할지 여부. None이면 라우터 설정을 따른다.
        logger: 버퍼 자체 진단용 로거.
    """

    def __init__(
        self,
        router: LogRouter,
        remove_bot_token: Optional[bool] = None,
        always_log_request_and_response: Optional[bool] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        settings = router.settings
        self._router = router
        self.remove_bot_token = (
            settings.remove_bot_token if remove_bot_token is None else remove_bot_token
        )
        self.always_log_request_and_response = (
            settings.always_log_request_and_response
            if always_log_request_and_response is None
            else always_log_request_and_response
        )
        self._logger = logger or create_default_logger("DebugBuffer")
        self._lock = threading.RLock()
        self._handle: Optional[io.BytesIO] = None

    @property
    def router(self) -> LogRouter:
        """연결된 라우터를 반환한다."""

        return self._router

    @property
    def is_active(self) -> bool:
        """활성 스트림이 있는지 반환한다."""

        with self._lock:
            return self._handle is not None and not self._handle.closed

    def acquire(self) -> Optional[BinaryIO]:
        """활성 스트림 핸들을 반환한다. 없으면 새 빈 스트림을 연다.

        Returns:
            쓰기/탐색 가능한 바이트 스트림. 생성에 실패하면 None.
        """

        with self._lock:
            if self._handle is not None and not self._handle.closed:
                return self._handle
            try:
                self._handle = io.BytesIO()
            except MemoryError:
                self._handle = None
                self._logger.error("디버그 스트림을 생성할 수 없습니다.")
                return None
            return self._handle

    def write(self, data: Union[str, bytes]) -> int:
        """활성 스트림에 데이터를 추가하고 기록한 바이트 수를 반환한다."""

        payload = data.encode(SharedConst.DEFAULT_ENCODING) if isinstance(data, str) else data
        with self._lock:
            handle = self.acquire()
            if handle is None:
                return 0
            handle.seek(0, io.SEEK_END)
            return handle.write(payload)

    def finalize(self, template: str = TelegramLogConst.DEFAULT_DEBUG_TEMPLATE) -> DispatchResult:
        """스트림 내용을 DEBUG 로그로 플러시하고 스트림을 닫는다.

        Args:
            template: 내용이 들어갈 `%s` 자리표시자를 가진 메시지 템플릿.

        Returns:
            라우팅 결과. 활성 스트림이 없으면 INACTIVE.
        """

        with self._lock:
            handle = self._detach()
            if handle is None:
                return DispatchResult(status=DispatchStatus.INACTIVE, operation=LogOperation.DEBUG.value)
            try:
                handle.seek(0)
                contents = handle.read().decode(SharedConst.DEFAULT_ENCODING, errors="replace")
                if self.remove_bot_token:
                    contents = redact_bot_token(contents)
                return self._router.debug(render_template(template, contents))
            finally:
                handle.close()

    def discard(self) -> DispatchResult:
        """기록하지 않고 스트림을 닫는다."""

        with self._lock:
            handle = self._detach()
            if handle is None:
                return DispatchResult(status=DispatchStatus.INACTIVE, operation=LogOperation.DEBUG.value)
            handle.close()
            return DispatchResult(status=DispatchStatus.DISCARDED, operation=LogOperation.DEBUG.value)

    def complete(
        self,
        success: bool,
        template: str = TelegramLogConst.DEFAULT_DEBUG_TEMPLATE,
    ) -> DispatchResult:
        """요청 결과에 따라 플러시 또는 폐기한다.

        실패한 요청이거나 `always_log_request_and_response`가 켜져 있으면 플러시한다.
        """

        if not success or self.always_log_request_and_response:
            return self.finalize(template)
        return self.discard()

    @contextmanager
    def capture(self, template: str = TelegramLogConst.DEFAULT_DEBUG_TEMPLATE) -> Iterator[Optional[BinaryIO]]:
        """블록 동안 스트림 핸들을 제공하고, 블록이 끝나면 예외 여부와 무관하게 플러시한다."""

        handle = self.acquire()
        try:
            yield handle
        finally:
            self.finalize(template)

    def _detach(self) -> Optional[io.BytesIO]:
        handle, self._handle = self._handle, None
        if handle is None or handle.closed:
            return None
        return handle
