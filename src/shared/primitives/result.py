"""입력 검증 결과를 값으로 표현하는 `Result` 컨테이너.

개요:
    원시 입력(UUID 문자열, 로그인, 비밀번호 해시 등)의 검증은 예외 없이
    `Result[T, DomainError]`를 반환하는 총함수로 작성한다. 계약상 "실패"해야 하는
    경계(예: `UserId.from_string`)에서만 `unwrap_or_raise()`로 예외로 승격한다.

제공 기능:
    - 상태 질의: is_ok(), is_err()
    - 변환/체이닝: map(), and_then()
    - 구조 분해: unwrap_or(), unwrap_or_raise()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")
TError = TypeVar("TError")

__all__ = ["Result", "Ok", "Err"]


class Result(Generic[TValue, TError], ABC):
    """성공(`Ok`) 또는 실패(`Err`)를 값으로 표현하는 최소 구현.

    Type Parameters:
        TValue: 성공 값의 타입.
        TError: 에러 페이로드의 타입.
    """

    @abstractmethod
    def is_ok(self) -> bool:
        """`Ok` 여부를 반환합니다."""
        ...

    def is_err(self) -> bool:
        """`Err` 여부를 반환합니다."""
        return not self.is_ok()

    @abstractmethod
    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        """성공 값이 있을 때만 값을 변환합니다."""
        ...

    @abstractmethod
    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        """성공 값이 있을 때만 `Result`를 반환하는 계산을 연결합니다."""
        ...

    @abstractmethod
    def unwrap_or(self, default: TValue) -> TValue:
        """성공 값을 꺼내거나 기본값을 반환합니다."""
        ...

    @abstractmethod
    def unwrap_or_raise(self, to_exc: Callable[[TError], BaseException]) -> TValue:
        """성공 값을 꺼내거나, 에러를 예외로 변환해 던집니다.

        Args:
            to_exc: 에러 페이로드를 예외 인스턴스로 바꾸는 함수(보통 예외 클래스 자체).

        Returns:
            TValue: `Ok`일 때의 값.

        Raises:
            BaseException: `Err`일 때 ``to_exc(error)``.
        """
        ...


@dataclass(frozen=True, slots=True)
class Ok(Result[TValue, TError]):
    """성공 결과(불변)."""
    value: TValue

    def is_ok(self) -> bool:
        return True

    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        return Ok(value=f(self.value))

    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        return f(self.value)

    def unwrap_or(self, default: TValue) -> TValue:
        return self.value

    def unwrap_or_raise(self, to_exc: Callable[[TError], BaseException]) -> TValue:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Result[TValue, TError]):
    """실패 결과(불변)."""
    error: TError

    def is_ok(self) -> bool:
        return False

    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        return Err(error=self.error)

    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        return Err(error=self.error)

    def unwrap_or(self, default: TValue) -> TValue:
        return default

    def unwrap_or_raise(self, to_exc: Callable[[TError], BaseException]) -> TValue:
        raise to_exc(self.error)
