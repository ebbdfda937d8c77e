from __future__ import annotations

import pytest

from shared.eventsourcing.event_bus import InMemoryEventBus
from shared.eventsourcing.in_memory import InMemoryHistoryProvider
from shared.modeling.exceptions import HistoryMismatchError
from shared.modeling.identity import AggregateId
from shared.primitives.maybe import Nothing

from counter_aggregate import Counter, Incremented


@pytest.fixture
def provider() -> InMemoryHistoryProvider:
    return InMemoryHistoryProvider()


def test_load_unknown_is_nothing(provider: InMemoryHistoryProvider):
    assert provider.load(AggregateId.generate()) is Nothing


def test_first_append_assigns_surrogate_once(provider: InMemoryHistoryProvider, counter_id: AggregateId):
    """GIVEN 빈 저장소
       WHEN 같은 식별자로 두 번 append
       THEN 대리 키는 처음 한 번만 부여되고 이후에도 유지된다
    """
    stored = provider.append(counter_id, [Incremented(aggregate_id=counter_id, by=1)])
    again = provider.append(counter_id, [Incremented(aggregate_id=counter_id, by=2)])
    other = provider.append(AggregateId.generate(), [])

    assert stored.surrogate_id == 1
    assert again is stored
    assert other.surrogate_id == 2


def test_load_returns_ordered_history(provider: InMemoryHistoryProvider, counter_id: AggregateId):
    provider.append(counter_id, [Incremented(aggregate_id=counter_id, by=1)])
    provider.append(counter_id, [Incremented(aggregate_id=counter_id, by=5)])

    history = provider.load(counter_id).to_optional()

    assert history is not None
    assert history.aggregate_id.surrogate_id == 1
    assert [e.by for e in history.events()] == [1, 5]


def test_append_rejects_foreign_events(provider: InMemoryHistoryProvider, counter_id: AggregateId):
    with pytest.raises(HistoryMismatchError):
        provider.append(counter_id, [Incremented(aggregate_id=AggregateId.generate(), by=1)])
    assert provider.load(counter_id) is Nothing


def test_bus_subscription_feeds_history(
    provider: InMemoryHistoryProvider, bus: InMemoryEventBus, counter_id: AggregateId
):
    """GIVEN 저장소가 구독한 버스
       WHEN 애그리거트가 커맨드를 수행하고 저장소에서 다시 불러오면
       THEN 같은 상태로 복원된다
    """
    bus.subscribe(provider.record)
    counter = Counter(counter_id, event_bus=bus)
    counter.increment(2)
    counter.increment(3)

    restored = provider.load(counter_id).map(lambda h: Counter.reconstitute_from(h, event_bus=bus))

    assert restored.is_some()
    again = restored.unwrap_or(None)
    assert again.state == counter.state
    assert again.id.surrogate_id == 1
