"""이벤트 버스 포트와 동기식 인메모리 구현.

애그리거트는 새로 기록한 이벤트를 `EventBus.publish()`로 알리기만 한다(fire-and-forget).
전달 실패/배압 처리는 버스 구현의 몫이다.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from shared.modeling.domain_event import DomainEvent

__all__ = ["EventBus", "InMemoryEventBus", "Subscriber"]

logger = logging.getLogger(__name__)

Subscriber = Callable[[DomainEvent], None]


class EventBus(Protocol):
    """이벤트 발행 싱크."""

    def publish(self, event: DomainEvent) -> None:
        ...


class InMemoryEventBus:
    """발행된 이벤트를 순서대로 보관하고 구독자에게 동기 전달하는 버스.

    구독자 예외는 발행자(애그리거트)로 전파하지 않고 로그로 남긴다.
    """

    def __init__(self) -> None:
        self._published: list[DomainEvent] = []
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def publish(self, event: DomainEvent) -> None:
        self._published.append(event)
        logger.debug("published %s for %s", event.kind, event.aggregate_id)
        for subscriber in self._subscribers:
            try:
                subscriber(event)
            except Exception:
                logger.exception("subscriber %r failed on %s", subscriber, event.kind)

    @property
    def published(self) -> tuple[DomainEvent, ...]:
        """지금까지 발행된 이벤트(발행 순)."""
        return tuple(self._published)

    def clear(self) -> None:
        self._published.clear()
