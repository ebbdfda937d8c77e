"""이벤트 소싱 애그리거트 베이스.

개요:
    애그리거트의 현재 상태는 직접 대입하지 않는다. 초기(빈) 상태에 이벤트를 순서대로
    **폴드(apply)** 해서만 얻는다.

    * 결정 로직(커맨드)은 현재 상태를 검사한 뒤 이벤트를 정확히 하나 만들어
      `_record_that()`으로 넘긴다.
    * 상태 투영(폴드)은 ``(state, event) -> state`` 순수 함수이며, 이벤트에 실린 값만 사용한다.

디스패치:
    하위 클래스는 ``event_kinds``(변형 태그 Enum)와 ``fold_table``(태그 → 폴드 함수)을
    클래스 속성으로 선언한다. 클래스 정의 시점에 테이블이 모든 태그를 덮는지 검사하며,
    빠진 태그가 있으면 import 단계에서 `TypeError`가 난다.

Examples:
    >>> from enum import Enum
    >>> class Kind(Enum):
    ...     PINGED = "pinged"
    >>> class Pinger(AggregateRoot):
    ...     event_kinds = Kind
    ...     fold_table = {Kind.PINGED: lambda state, event: state + 1}
    ...     @classmethod
    ...     def initial_state(cls):
    ...         return 0
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Generic, Mapping, Self, TypeVar

from shared.eventsourcing.event_bus import EventBus
from shared.eventsourcing.history import AggregateHistory
from shared.modeling.domain_event import DomainEvent
from shared.modeling.exceptions import UnhandledEventError, unhandled_event_err
from shared.modeling.identity import AggregateId

__all__ = ["AggregateRoot", "Fold"]

logger = logging.getLogger(__name__)

TId = TypeVar("TId", bound=AggregateId)
TState = TypeVar("TState")

Fold = Callable[[Any, Any], Any]
"""폴드 함수 타입: ``(state, event) -> new_state``."""


class AggregateRoot(Generic[TId, TState]):
    """이벤트 폴드로만 상태가 바뀌는 애그리거트.

    Class Attributes:
        id_type: 재구성 시 히스토리 식별자를 옮겨 담을 식별자 타입.
        event_kinds: 이 애그리거트가 받을 수 있는 변형 태그 Enum.
        fold_table: 변형 태그 → 폴드 함수. 클래스 정의 후 읽기 전용이 된다.
    """

    id_type: ClassVar[type[AggregateId]] = AggregateId
    event_kinds: ClassVar[type[Enum]]
    fold_table: ClassVar[Mapping[Enum, Fold]]

    __slots__ = ("_id", "_state", "_version", "_event_bus")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kinds = cls.__dict__.get("event_kinds")
        table = cls.__dict__.get("fold_table")
        if kinds is None and table is None:
            return
        if kinds is None or table is None:
            raise TypeError(f"{cls.__name__} must declare both event_kinds and fold_table")
        missing = [k.name for k in kinds if k not in table]
        if missing:
            raise TypeError(f"{cls.__name__} has no fold for: {', '.join(missing)}")
        cls.fold_table = MappingProxyType(dict(table))

    def __init__(self, aggregate_id: TId, *, event_bus: EventBus) -> None:
        self._id = aggregate_id
        self._state: TState = self.initial_state()
        self._version = 0
        self._event_bus = event_bus

    @classmethod
    def initial_state(cls) -> TState:
        """폴드의 시작점이 되는 빈 상태."""
        raise NotImplementedError

    @classmethod
    def reconstitute_from(cls, history: AggregateHistory, *, event_bus: EventBus) -> Self:
        """히스토리를 처음부터 폴드해 애그리거트를 복원한다.

        식별자는 히스토리의 것을 ``id_type``으로 옮긴다(외부 식별자/대리 키 유지).
        재생 중에는 아무것도 발행하지 않는다. 같은 히스토리는 항상 같은 상태를 만든다.

        Args:
            history: 재생할 히스토리.
            event_bus: 복원 이후 커맨드가 사용할 버스.

        Returns:
            Self: 모든 이벤트가 반영된 애그리거트.
        """
        aggregate = cls(cls.id_type.of(history.aggregate_id), event_bus=event_bus)
        for event in history.events():
            aggregate.apply(event)
        logger.debug("reconstituted %s %s at version %d", cls.__name__, aggregate._id, aggregate._version)
        return aggregate

    def apply(self, event: DomainEvent) -> None:
        """이벤트 하나를 현재 상태에 폴드한다.

        Raises:
            UnhandledEventError: ``fold_table``에 이벤트의 변형 태그가 없을 때. 상태는 바뀌지 않는다.
                값이 같더라도 ``event_kinds``가 아닌 Enum의 태그는 처리하지 않는다.
        """
        kind = event.kind
        fold = self.fold_table.get(kind) if isinstance(kind, self.event_kinds) else None
        if fold is None:
            raise UnhandledEventError(unhandled_event_err(aggregate=type(self).__name__, kind=kind))
        self._state = fold(self._state, event)
        self._version += 1

    def _record_that(self, event: DomainEvent) -> None:
        # 로컬 상태를 먼저 갱신한 뒤 발행한다.
        self.apply(event)
        logger.debug("recorded %s for %s", event.kind, self._id)
        self._event_bus.publish(event)

    @property
    def id(self) -> TId:
        return self._id

    @property
    def version(self) -> int:
        """지금까지 폴드한 이벤트 수."""
        return self._version

    @property
    def state(self) -> TState:
        """현재 상태 스냅샷(불변 값)."""
        return self._state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value!r}, version={self._version})"
