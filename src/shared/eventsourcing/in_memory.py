"""프로세스 내 히스토리 제공자(테스트/임베딩용, 비영속).

`InMemoryHistoryProvider`는 식별자별로 이벤트를 추가 순서대로 쌓고, 처음 추가될 때
대리 키를 한 번 부여한다. `record`를 `InMemoryEventBus.subscribe()`에 연결하면
발행된 이벤트가 그대로 히스토리가 된다.
"""

from __future__ import annotations

import logging
import threading
from itertools import count
from typing import Iterable

from shared.eventsourcing.history import AggregateHistory
from shared.modeling.domain_event import DomainEvent
from shared.modeling.exceptions import HistoryMismatchError, history_mismatch_err
from shared.modeling.identity import AggregateId
from shared.primitives.maybe import Maybe

__all__ = ["InMemoryHistoryProvider"]

logger = logging.getLogger(__name__)


class InMemoryHistoryProvider:
    """식별자 → (대리 키가 부여된 식별자, 이벤트 리스트) 저장소."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids: dict[str, AggregateId] = {}
        self._events: dict[str, list[DomainEvent]] = {}
        self._sequence = count(1)

    def append(self, aggregate_id: AggregateId, events: Iterable[DomainEvent]) -> AggregateId:
        """이벤트를 히스토리 끝에 추가한다.

        Args:
            aggregate_id: 대상 식별자.
            events: 추가할 이벤트들(발생 순).

        Returns:
            AggregateId: 대리 키가 부여된 저장 식별자.

        Raises:
            HistoryMismatchError: 다른 식별자의 이벤트가 포함된 경우. 아무것도 추가되지 않는다.
        """
        batch = list(events)
        for event in batch:
            if event.aggregate_id != aggregate_id:
                raise HistoryMismatchError(
                    history_mismatch_err(expected=aggregate_id.value, got=event.aggregate_id.value)
                )
        with self._lock:
            stored = self._ids.get(aggregate_id.value)
            if stored is None:
                stored = aggregate_id.with_surrogate(next(self._sequence))
                self._ids[aggregate_id.value] = stored
                self._events[aggregate_id.value] = []
            self._events[aggregate_id.value].extend(batch)
        logger.debug("appended %d event(s) to %s", len(batch), stored)
        return stored

    def record(self, event: DomainEvent) -> None:
        """이벤트 하나를 추가한다. 버스 구독자로 쓰기 위한 형태다."""
        self.append(event.aggregate_id, (event,))

    def load(self, aggregate_id: AggregateId) -> Maybe[AggregateHistory]:
        with self._lock:
            stored = self._ids.get(aggregate_id.value)
            events = tuple(self._events.get(aggregate_id.value, ()))
        return Maybe.from_optional(stored).map(lambda s: AggregateHistory(s, events))
