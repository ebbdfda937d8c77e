# src/shared/primitives/maybe.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, cast

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")

__all__ = ["Maybe", "Some", "Nothing"]


class Maybe(Generic[TValue], ABC):
    """값의 존재/부재를 표현하는 최소 컨테이너.

    히스토리 제공자(`HistoryProvider.load`)처럼 "없을 수도 있는" 조회 결과를
    `None` 대신 명시적으로 돌려줄 때 사용한다.

    Type Parameters:
        TValue: 존재하는 값의 타입.
    """

    @abstractmethod
    def is_some(self) -> bool:
        """값이 존재하는지 여부.

        Returns:
            bool: Some이면 True, Nothing이면 False.
        """
        ...

    def is_nothing(self) -> bool:
        """값이 부재인지 여부."""
        return not self.is_some()

    @abstractmethod
    def map(self, f: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        """값이 있을 때만 변환합니다.

        Args:
            f: TValue → TNewValue 함수.

        Returns:
            Maybe[TNewValue]: 변환된 maybe, 값이 없으면 Nothing.
        """
        ...

    @abstractmethod
    def unwrap_or(self, default: TValue) -> TValue:
        """값을 꺼내거나 기본값을 반환합니다."""
        ...

    def to_optional(self) -> Optional[TValue]:
        """Optional로 변환합니다. Some(v) → v, Nothing → None."""
        return cast(Optional[TValue], self.unwrap_or(cast(TValue, None)))

    @staticmethod
    def from_optional(value: Optional[TValue]) -> "Maybe[TValue]":
        """옵셔널 값을 Maybe로 승격합니다.

        Args:
            value: 옵셔널 값.

        Returns:
            Maybe[TValue]: 값이 있으면 Some(value), 없으면 Nothing.
        """
        return Some(_value=value) if value is not None else Nothing


@dataclass(frozen=True, slots=True, kw_only=True)
class Some(Maybe[TValue]):
    """값이 존재함을 나타내는 `Maybe`의 변형.

    Attributes:
        _value: 담긴 실제 값.

    Examples:
        >>> Some(_value=21).map(lambda x: x * 2)
        Some(_value=42)
        >>> Some(_value=1).unwrap_or(999)
        1

    Notes:
        - 생성자는 `kw_only=True`이므로 `Some(_value=42)`로 호출해야 합니다.
    """

    _value: TValue

    def is_some(self) -> bool:
        return True

    def map(self, f: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        return Some(_value=f(self._value))

    def unwrap_or(self, default: TValue) -> TValue:
        return self._value


class _Nothing(Maybe[Any]):
    """값의 부재를 나타내는 내부 싱글턴. 모듈 하단의 `Nothing`으로만 노출된다."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Nothing"

    def is_some(self) -> bool:
        return False

    def map(self, f, /):
        return self

    def unwrap_or(self, default):
        return default


Nothing: Maybe[Any] = _Nothing()
