"""애그리거트 식별자(2단계 생성).

개요:
    애그리거트 식별자는 두 부분으로 구성된다.

    * 외부 식별자 ``value``: UUID 문자열. 생성 시 고정되며 논리적 동일성을 결정한다.
    * 대리 키 ``surrogate_id``: 영속화 경계가 최초 저장 시 부여하는 정수. 한 번만 부여된다.

    `with_surrogate()`는 값 객체의 copy-on-write 규칙을 따른다.
    대리 키가 없으면 **새 인스턴스**를, 이미 있으면 **같은 인스턴스**를 돌려준다.

Examples:
    >>> uid = AggregateId.from_string("2f1e7a0c-5b5d-4c1e-9a59-3c7d6f0e2b11")
    >>> uid.with_surrogate(5).with_surrogate(9).surrogate_id
    5
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Final, Self
from uuid import uuid4

from shared.primitives.result import Result, Err
from shared.modeling.exceptions import (
    DomainError,
    InvalidArgumentError,
    invalid_identity_err,
    negative_surrogate_err,
)
from shared.modeling.value_object import ensure_regex

__all__ = ["AggregateId", "UUID_RX"]

UUID_RX: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


@dataclass(frozen=True, slots=True, kw_only=True, eq=False)
class AggregateId:
    """외부 식별자 + 선택적 대리 키로 구성된 불변 식별자.

    Attributes:
        value: 정규화된(소문자) UUID 문자열.
        surrogate_id: 대리 키. 미부여 시 ``None``.
    """

    value: str
    surrogate_id: int | None = None

    @classmethod
    def generate(cls) -> Self:
        """무작위 UUID4로 새 식별자를 만든다. 대리 키는 없다."""
        return cls(value=str(uuid4()))

    @classmethod
    def parse(cls, raw: str) -> Result[Self, DomainError]:
        """문자열을 식별자로 검증·정규화한다. (총함수)

        Args:
            raw: ``8-4-4-4-12`` 형태의 16진 UUID 문자열.

        Returns:
            Result[Self, DomainError]: 성공 시 ``Ok(identity)``, 아니면 ``Err("invalid_identity")``.
        """
        if not isinstance(raw, str):
            return Err(invalid_identity_err(str(raw)))
        check = ensure_regex(UUID_RX, code="invalid_identity", hint=invalid_identity_err(raw).message)
        return check(raw).map(lambda s: cls(value=s.lower()))

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """`parse`와 같지만 실패 시 `InvalidArgumentError`를 던진다."""
        return cls.parse(raw).unwrap_or_raise(InvalidArgumentError)

    @classmethod
    def of(cls, other: AggregateId) -> Self:
        """다른 식별자를 이 타입으로 옮긴다. 외부 식별자와 대리 키는 그대로 유지한다."""
        if type(other) is cls:
            return other  # type: ignore[return-value]
        return cls(value=other.value, surrogate_id=other.surrogate_id)

    def with_surrogate(self, surrogate_id: int) -> Self:
        """대리 키를 부여한다.

        규칙:
            * 음수는 항상 거부한다(``InvalidArgumentError``). 식별자는 변하지 않는다.
            * 이미 대리 키가 있으면 no-op으로 ``self``를 그대로 돌려준다.
            * 없으면 대리 키가 설정된 새 인스턴스를 돌려준다.
            * ``0``도 부여된 대리 키로 본다. 미부여 상태는 ``None``뿐이다.

        Args:
            surrogate_id: 부여할 대리 키(0 이상).

        Returns:
            Self: 대리 키가 설정된 식별자.
        """
        if surrogate_id < 0:
            raise InvalidArgumentError(negative_surrogate_err(got=surrogate_id))
        if self.surrogate_id is not None:
            return self
        return replace(self, surrogate_id=surrogate_id)

    @property
    def has_surrogate(self) -> bool:
        return self.surrogate_id is not None

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        """외부 식별자만으로 비교한다. 대리 키는 메타데이터다."""
        return isinstance(other, AggregateId) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)
