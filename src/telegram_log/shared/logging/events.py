"""
목적: 카테고리 기반 구조화 이벤트 기록기를 제공한다.
설명: 모든 로그 호출을 심각도/메시지 쌍으로 저장하고, 필요 시 JSON 라인으로 stdout에 출력한다.
디자인 패턴: 저장소 패턴
참조: src/telegram_log/shared/logging/models.py, src/telegram_log/shared/logging/logger.py
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import List, Optional

from telegram_log.shared.logging.logger import read_emit_stdout_env
from telegram_log.shared.logging.models import EventRecord, EventType


class EventRepository(ABC):
    """이벤트 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: EventRecord) -> None:
        """이벤트 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[EventRecord]:
        """저장된 이벤트를 반환한다."""


class InMemoryEventRepository(EventRepository):
    """인메모리 이벤트 저장소 구현체."""

    def __init__(self) -> None:
        self._records: List[EventRecord] = []

    def add(self, record: EventRecord) -> None:
        self._records.append(record)

    def list(self) -> List[EventRecord]:
        return list(self._records)


class EventRecorder:
    """카테고리 라벨에 묶인 구조화 이벤트 기록기.

    Args:
        category: 기록기 카테고리 라벨. 생성 후 변경되지 않는다.
        repository: 주입 가능한 이벤트 저장소.
        emit_stdout: stdout JSON 출력 여부. None이면 `LOG_STDOUT`을 따른다.
    """

    def __init__(
        self,
        category: str,
        repository: Optional[EventRepository] = None,
        emit_stdout: Optional[bool] = None,
    ) -> None:
        if not category or not category.strip():
            raise ValueError("category는 비어 있을 수 없습니다.")
        self._category = category
        self._repository = repository or InMemoryEventRepository()
        self._emit_stdout = read_emit_stdout_env() if emit_stdout is None else emit_stdout

    @property
    def category(self) -> str:
        """카테고리 라벨을 반환한다."""

        return self._category

    @property
    def repository(self) -> EventRepository:
        """저장소를 반환한다."""

        return self._repository

    def record(self, event_type: EventType, message: str) -> EventRecord:
        """이벤트를 기록하고 생성된 레코드를 반환한다."""

        record = EventRecord(event_type=event_type, message=message, category=self._category)
        self._repository.add(record)
        if self._emit_stdout:
            self._write_stdout(record)
        return record

    def _write_stdout(self, record: EventRecord) -> None:
        payload = {
            "timestamp": record.timestamp.isoformat(),
            "event_type": record.event_type.value,
            "category": record.category,
            "message": record.message,
        }
        print(json.dumps(payload, ensure_ascii=False), flush=True)
