from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import pytest

from shared.eventsourcing.aggregate import AggregateRoot
from shared.eventsourcing.event_bus import InMemoryEventBus
from shared.eventsourcing.history import AggregateHistory
from shared.modeling.domain_event import DomainEvent
from shared.modeling.exceptions import UnhandledEventError
from shared.modeling.identity import AggregateId

from counter_aggregate import Counter, CounterKind, CounterState, Incremented, Reset


class StrayKind(Enum):
    STRAY = "stray"


@dataclass(frozen=True, slots=True, kw_only=True)
class Stray(DomainEvent):
    KIND: ClassVar[StrayKind] = StrayKind.STRAY


# ──────────────────────────────────────────────────────────────
# 디스패치 테이블
# ──────────────────────────────────────────────────────────────
class TestDispatchTable:
    def test_missing_fold_fails_at_class_definition(self):
        """GIVEN 변형 하나에 폴드가 없는 테이블
           WHEN 애그리거트 클래스를 정의하면
           THEN TypeError가 발생하고 빠진 변형 이름이 메시지에 포함된다
        """
        with pytest.raises(TypeError, match="RESET"):
            class Broken(AggregateRoot):
                event_kinds = CounterKind
                fold_table = {CounterKind.INCREMENTED: lambda s, e: s}

    def test_kinds_without_table_is_rejected(self):
        with pytest.raises(TypeError):
            class HalfDeclared(AggregateRoot):
                event_kinds = CounterKind

    def test_table_is_read_only_after_definition(self):
        with pytest.raises(TypeError):
            Counter.fold_table[CounterKind.RESET] = lambda s, e: s  # type: ignore[index]

    def test_unknown_variant_raises_and_keeps_state(self, bus: InMemoryEventBus, counter_id: AggregateId):
        """GIVEN 핸들러가 없는 변형의 이벤트
           WHEN apply(event)
           THEN UnhandledEventError가 발생하고 상태/버전은 그대로다
        """
        counter = Counter(counter_id, event_bus=bus)
        counter.apply(Incremented(aggregate_id=counter_id, by=2))
        with pytest.raises(UnhandledEventError) as exc_info:
            counter.apply(Stray(aggregate_id=counter_id))
        assert exc_info.value.code == "unhandled_event"
        assert counter.state.value == 2
        assert counter.version == 1


# ──────────────────────────────────────────────────────────────
# 기록(record) = 폴드 + 발행
# ──────────────────────────────────────────────────────────────
class TestRecord:
    def test_record_folds_then_publishes(self, bus: InMemoryEventBus, counter_id: AggregateId):
        counter = Counter(counter_id, event_bus=bus)
        seen: list[int] = []
        bus.subscribe(lambda _e: seen.append(counter.state.value))

        counter.increment(3)

        assert counter.state.value == 3
        assert seen == [3]
        assert [e.kind for e in bus.published] == [CounterKind.INCREMENTED]

    def test_failed_command_records_nothing(self, bus: InMemoryEventBus, counter_id: AggregateId):
        counter = Counter(counter_id, event_bus=bus)
        with pytest.raises(ValueError):
            counter.increment(0)
        assert counter.version == 0
        assert bus.published == ()


# ──────────────────────────────────────────────────────────────
# 재구성
# ──────────────────────────────────────────────────────────────
class TestReconstitution:
    def test_replay_publishes_nothing(self, bus: InMemoryEventBus, counter_id: AggregateId):
        history = AggregateHistory(counter_id, [Incremented(aggregate_id=counter_id, by=1)])
        counter = Counter.reconstitute_from(history, event_bus=bus)
        assert counter.state.value == 1
        assert counter.version == 1
        assert bus.published == ()

    def test_replay_is_deterministic(self, bus: InMemoryEventBus, counter_id: AggregateId):
        events = [
            Incremented(aggregate_id=counter_id, by=4),
            Reset(aggregate_id=counter_id, to=1),
            Incremented(aggregate_id=counter_id, by=2),
        ]
        first = Counter.reconstitute_from(AggregateHistory(counter_id, events), event_bus=bus)
        second = Counter.reconstitute_from(AggregateHistory(counter_id, events), event_bus=bus)
        assert first.state == second.state == CounterState(value=3)
        assert first.version == second.version == 3

    def test_replay_is_order_sensitive(self, bus: InMemoryEventBus, counter_id: AggregateId):
        inc = Incremented(aggregate_id=counter_id, by=4)
        reset = Reset(aggregate_id=counter_id, to=0)
        in_order = Counter.reconstitute_from(AggregateHistory(counter_id, [inc, reset]), event_bus=bus)
        swapped = Counter.reconstitute_from(AggregateHistory(counter_id, [reset, inc]), event_bus=bus)
        assert in_order.state.value == 0
        assert swapped.state.value == 4

    def test_identity_keeps_surrogate(self, bus: InMemoryEventBus, counter_id: AggregateId):
        stored = counter_id.with_surrogate(42)
        counter = Counter.reconstitute_from(AggregateHistory(stored, []), event_bus=bus)
        assert counter.id == counter_id
        assert counter.id.surrogate_id == 42
        assert counter.version == 0

    def test_reconstituted_aggregate_publishes_new_events(self, bus: InMemoryEventBus, counter_id: AggregateId):
        history = AggregateHistory(counter_id, [Incremented(aggregate_id=counter_id, by=1)])
        counter = Counter.reconstitute_from(history, event_bus=bus)
        counter.increment(1)
        assert counter.state.value == 2
        assert len(bus.published) == 1
