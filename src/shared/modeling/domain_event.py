"""도메인 이벤트 베이스.

개요:
    도메인 이벤트는 한 애그리거트에 일어난 사실을 기록하는 불변 값이다.
    각 구체 이벤트는 클래스 속성 ``KIND``로 **선언된 변형 태그**(Enum 멤버)를 가지며,
    애그리거트는 이 태그로 폴드 핸들러를 찾는다. 클래스 이름은 디스패치에 쓰지 않는다.

공통 필드:
    - aggregate_id: 이벤트가 속한 애그리거트 식별자.
    - event_id: 이벤트 ID(UUID4).
    - occurred_at: 발생 시각(tz-aware, 기본 UTC now).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar
from uuid import UUID, uuid4

from shared.modeling.exceptions import InvalidArgumentError, tz_naive_err
from shared.modeling.identity import AggregateId

__all__ = ["DomainEvent"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainEvent:
    """모든 도메인 이벤트의 베이스(불변).

    Class Attributes:
        KIND: 구체 이벤트의 변형 태그. 하위 클래스에서 반드시 지정한다.
    """

    KIND: ClassVar[Enum]

    aggregate_id: AggregateId
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.occurred_at.tzinfo is None or self.occurred_at.utcoffset() is None:
            raise InvalidArgumentError(tz_naive_err())

    @property
    def kind(self) -> Enum:
        """선언된 변형 태그."""
        return type(self).KIND
