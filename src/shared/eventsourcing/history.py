"""애그리거트 히스토리와 히스토리 제공자 포트.

개요:
    `AggregateHistory`는 한 애그리거트 식별자와, 그 식별자에 속한 이벤트들의
    **발생 순서 그대로의** 불변 시퀀스를 묶은 값이다. 재생(replay) 전용이다.

    소속 검증은 생성 시점(경계)에서 한 번만 수행한다. 폴드 도중에는 다시 확인하지 않는다.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol

from shared.modeling.domain_event import DomainEvent
from shared.modeling.exceptions import HistoryMismatchError, history_mismatch_err
from shared.modeling.identity import AggregateId
from shared.primitives.maybe import Maybe

__all__ = ["AggregateHistory", "HistoryProvider"]


class AggregateHistory:
    """(식별자, 순서 있는 이벤트 시퀀스) 쌍.

    Args:
        aggregate_id: 히스토리의 애그리거트 식별자.
        events: 발생 순서대로 정렬된 이벤트들. 내부적으로 튜플로 고정된다.

    Raises:
        HistoryMismatchError: 다른 식별자의 이벤트가 하나라도 섞여 있을 때.
    """

    __slots__ = ("_aggregate_id", "_events")

    def __init__(self, aggregate_id: AggregateId, events: Iterable[DomainEvent]) -> None:
        frozen = tuple(events)
        for event in frozen:
            if event.aggregate_id != aggregate_id:
                raise HistoryMismatchError(
                    history_mismatch_err(expected=aggregate_id.value, got=event.aggregate_id.value)
                )
        self._aggregate_id = aggregate_id
        self._events = frozen

    @property
    def aggregate_id(self) -> AggregateId:
        return self._aggregate_id

    def events(self) -> Iterator[DomainEvent]:
        """발생 순서대로 이벤트를 순회하는 읽기 전용 이터레이터를 돌려준다.

        이벤트는 생성 시 튜플로 고정되므로 호출할 때마다 처음부터 다시 순회하는
        새 이터레이터를 돌려준다. 같은 히스토리를 여러 번 재생해도 결과가 같다.
        """
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"AggregateHistory(aggregate_id={self._aggregate_id.value!r}, events={len(self._events)})"


class HistoryProvider(Protocol):
    """식별자로 히스토리를 조회하는 포트. 저장 형식은 구현체의 관심사다."""

    def load(self, aggregate_id: AggregateId) -> Maybe[AggregateHistory]:
        """히스토리를 조회한다. 없으면 ``Nothing``."""
        ...
