"""
목적: 임시 디버그 스트림의 획득/플러시/폐기 동작을 검증한다.
설명: 핸들 재사용, 템플릿 적용, 봇 토큰 마스킹, 비활성 플러시, 예외 시 정리 동작을 확인한다.
디자인 패턴: 상태 기반 단위 테스트
참조: src/telegram_log/core/routing/debug_buffer.py
"""

from __future__ import annotations

import pytest

from telegram_log.core.routing import debug_buffer as debug_buffer_module
from telegram_log.core.routing import (
    DebugBuffer,
    DispatchStatus,
    LogRouter,
    redact_bot_token,
    render_template,
)
from telegram_log.shared.config import TelegramLogSettings
from telegram_log.shared.logging import EventType, InMemoryLogger, LogLevel

_TOKEN_URL = "POST https://api.telegram.org/bot123456789:AAHabcDEF-123/sendMessage"


def _build(**kwargs) -> tuple[DebugBuffer, LogRouter, InMemoryLogger]:
    general = InMemoryLogger(name="general", emit_stdout=False)
    router = LogRouter(settings=TelegramLogSettings(emit_stdout=False)).initialize(general)
    return DebugBuffer(router=router, **kwargs), router, general


def test_acquire_returns_same_handle_until_finalized() -> None:
    """활성 스트림이 있으면 같은 핸들을 반환해야 한다."""

    buffer, _, _ = _build()

    first = buffer.acquire()
    second = buffer.acquire()

    assert first is not None
    assert first is second
    assert buffer.is_active


def test_finalize_emits_debug_entry_and_resets_buffer() -> None:
    """플러시하면 템플릿이 적용된 DEBUG 로그가 남고 다음 획득은 새 스트림이어야 한다."""

    buffer, router, general = _build()
    handle = buffer.acquire()
    handle.write(b"hello")

    result = buffer.finalize("[%s]")

    records = general.repository.list()
    assert result.status == DispatchStatus.DELIVERED
    assert [(record.level, record.message) for record in records] == [(LogLevel.DEBUG, "[hello]")]
    assert router.event_recorder.repository.list()[0].event_type == EventType.VERBOSE
    assert handle.closed
    assert not buffer.is_active

    fresh = buffer.acquire()
    assert fresh is not handle
    assert fresh.getvalue() == b""


def test_finalize_redacts_bot_token_by_default() -> None:
    """기본 설정에서는 URL의 봇 토큰이 마스킹되어야 한다."""

    buffer, _, general = _build()
    buffer.write(_TOKEN_URL)

    buffer.finalize()

    message = general.repository.list()[0].message
    assert message == "POST https://api.telegram.org/botBOT_TOKEN_REMOVED/sendMessage"


def test_finalize_keeps_token_when_redaction_disabled() -> None:
    """마스킹이 꺼져 있으면 원문이 그대로 남아야 한다."""

    buffer, _, general = _build(remove_bot_token=False)
    buffer.write(_TOKEN_URL)

    buffer.finalize()

    assert general.repository.list()[0].message == _TOKEN_URL


def test_redaction_flag_follows_settings() -> None:
    """명시하지 않으면 라우터 설정의 마스킹 여부를 따라야 한다."""

    router = LogRouter(settings=TelegramLogSettings(remove_bot_token=False, emit_stdout=False))

    assert DebugBuffer(router=router).remove_bot_token is False


def test_finalize_without_active_buffer_is_noop() -> None:
    """활성 스트림이 없으면 아무것도 기록하지 않아야 한다."""

    buffer, router, general = _build()

    result = buffer.finalize("[%s]")

    assert result.status == DispatchStatus.INACTIVE
    assert general.repository.list() == []
    assert router.event_recorder.repository.list() == []


def test_finalize_empty_buffer_still_logs_template() -> None:
    """빈 스트림도 템플릿을 적용해 한 번 기록하고 정리되어야 한다."""

    buffer, _, general = _build()
    buffer.acquire()

    buffer.finalize("Request data: %s")

    assert general.repository.list()[0].message == "Request data: "
    assert not buffer.is_active


def test_write_appends_text_and_bytes() -> None:
    """write는 문자열과 바이트를 이어서 기록해야 한다."""

    buffer, _, general = _build()

    assert buffer.write("요청 ") == len("요청 ".encode("utf-8"))
    buffer.write(b"body")
    buffer.finalize()

    assert general.repository.list()[0].message == "요청 body"


def test_complete_discards_successful_exchange() -> None:
    """성공한 요청은 기록 없이 폐기되어야 한다."""

    buffer, _, general = _build()
    buffer.write("ok")

    result = buffer.complete(success=True)

    assert result.status == DispatchStatus.DISCARDED
    assert general.repository.list() == []
    assert not buffer.is_active


def test_complete_logs_failures_and_always_log_flag() -> None:
    """실패한 요청이나 always 플래그가 켜진 경우 기록되어야 한다."""

    buffer, _, general = _build()
    buffer.write("failed")
    buffer.complete(success=False)

    buffer.always_log_request_and_response = True
    buffer.write("succeeded")
    buffer.complete(success=True, template="<%s>")

    assert [record.message for record in general.repository.list()] == ["failed", "<succeeded>"]


def test_discard_without_active_buffer_is_inactive() -> None:
    """활성 스트림이 없으면 폐기는 INACTIVE를 반환해야 한다."""

    buffer, _, _ = _build()

    assert buffer.discard().status == DispatchStatus.INACTIVE


def test_capture_flushes_even_when_block_raises() -> None:
    """블록에서 예외가 나도 스트림이 플러시되고 정리되어야 한다."""

    buffer, _, general = _build()

    with pytest.raises(RuntimeError):
        with buffer.capture("trace: %s") as handle:
            handle.write(b"partial")
            raise RuntimeError("request failed")

    assert general.repository.list()[0].message == "trace: partial"
    assert not buffer.is_active


def test_externally_closed_handle_is_treated_as_inactive() -> None:
    """외부에서 닫힌 핸들은 비활성으로 취급되어야 한다."""

    buffer, _, general = _build()
    buffer.acquire().close()

    assert buffer.finalize().status == DispatchStatus.INACTIVE
    assert general.repository.list() == []
    assert buffer.acquire() is not None


def test_redact_bot_token_patterns() -> None:
    """토큰 패턴만 치환되고 형식이 다른 경로는 유지되어야 한다."""

    assert redact_bot_token("/bot1:abc_DEF-9/ and /bot2:x/") == (
        "/botBOT_TOKEN_REMOVED/ and /botBOT_TOKEN_REMOVED/"
    )
    assert redact_bot_token("/botabc:123/") == "/botabc:123/"
    assert redact_bot_token("/bot123:token") == "/bot123:token"


def test_render_template_uses_first_placeholder_only() -> None:
    """템플릿의 첫 `%s`만 치환되어야 한다."""

    assert render_template("%s", "body") == "body"
    assert render_template("a=%s b=%s", "x") == "a=x b=%s"
    assert render_template("no placeholder", "x") == "no placeholder"


def test_render_template_collapses_escaped_percent() -> None:
    """`%%`는 리터럴 `%`로 바뀌고 내용 안의 `%%`는 그대로 남아야 한다."""

    assert render_template("100%% [%s]", "x") == "100% [x]"
    assert render_template("%s done", "50%%") == "50%% done"


def test_sink_creation_failure_is_soft(monkeypatch: pytest.MonkeyPatch) -> None:
    """스트림 생성에 실패하면 None/0/INACTIVE로 처리되고 진단 로그가 남아야 한다."""

    def _raise_memory_error() -> None:
        raise MemoryError

    diagnostics = InMemoryLogger(name="DebugBuffer", emit_stdout=False)
    buffer, _, general = _build(logger=diagnostics)
    monkeypatch.setattr(debug_buffer_module.io, "BytesIO", _raise_memory_error)

    assert buffer.acquire() is None
    assert buffer.write("x") == 0
    assert buffer.finalize().status == DispatchStatus.INACTIVE
    assert not buffer.is_active
    assert general.repository.list() == []
    assert [record.level for record in diagnostics.repository.list()] == [LogLevel.ERROR, LogLevel.ERROR]
