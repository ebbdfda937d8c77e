"""값 객체(Value Object) 베이스 & 검증 유틸.

개요:
    - 실패를 `Result[T, DomainError]`로 표현하는 값 객체(VO) 베이스와
      재사용 가능한 **검증기(validator)** 를 제공합니다.
    - 값 객체는 `@dataclass(frozen=True, slots=True)` 기반으로 **불변**이며,
      동등성은 **값 기반**입니다.
    - 예외가 필요한 경계에서는 `create_or_raise()`가 `InvalidArgumentError`를 던집니다.

예시:
    >>> validator = all_of(ensure_non_empty_str, ensure_max_len(10))
    >>> validator("hello").is_ok()
    True
    >>> validator("")
    Err(error=DomainError(code='vo_empty', message='빈 문자열은 허용되지 않습니다.'))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Self
import re

from shared.primitives.result import Result, Ok, Err
from shared.modeling.exceptions import (
    DomainError,
    InvalidArgumentError,
    vo_empty_err,
    vo_len_gt_err,
)

__all__ = [
    "Validator",
    "all_of",
    "ensure_non_empty_str",
    "ensure_max_len",
    "ensure_regex",
    "ValueObject",
    "SingleValueVO",
]

T = TypeVar("T")

# ──────────────────────────────────────────────────────────────
# 검증 유틸(총함수)
# ──────────────────────────────────────────────────────────────
Validator = Callable[[T], Result[T, DomainError]]
"""검증기 타입 별칭: `Callable[[T], Result[T, DomainError]]`."""


def all_of(*validators: Validator[T]) -> Validator[T]:
    """여러 검증기를 순차 적용하는 합성 검증기를 생성합니다.

    **처음 실패**(Err)가 발생하면 즉시 반환하고, 모두 통과하면 `Ok(value)`.

    Args:
        *validators: 합성할 검증기(0개 이상). 순서대로 적용됩니다.

    Returns:
        Validator[T]: 합성 검증기.
    """
    def _run(value: T) -> Result[T, DomainError]:
        for v in validators:
            r = v(value)
            if r.is_err():
                return r
        return Ok(value=value)
    return _run


def ensure_non_empty_str(s: str) -> Result[str, DomainError]:
    """공백을 제거한 뒤 비어 있지 않은 문자열인지 검사합니다. 원본 `s`를 그대로 돌려줍니다."""
    if len(s.strip()) == 0:
        return Err(error=vo_empty_err())
    return Ok(value=s)


def ensure_max_len(n: int) -> Validator[str]:
    """문자열 길이가 **n 이하**인지 검사하는 검증기를 생성합니다.

    Examples:
        >>> ensure_max_len(3)("abcd").is_err()
        True
    """
    def _f(s: str) -> Result[str, DomainError]:
        if len(s) > n:
            return Err(error=vo_len_gt_err(limit=n, got=len(s)))
        return Ok(value=s)
    return _f


def ensure_regex(rx: re.Pattern[str], *, code: str, hint: str = "") -> Validator[str]:
    """주어진 정규식과 **전체 일치**하는지 검사하는 검증기를 생성합니다.

    Args:
        rx: 전체 일치(`fullmatch`)에 사용할 정규식 패턴.
        code: 미일치 시 사용할 오류 코드.
        hint: 오류 메시지 힌트. 미지정 시 "형식 불일치".

    Returns:
        Validator[str]: 정규식 전체 일치 검증기.
    """
    def _f(s: str) -> Result[str, DomainError]:
        if not rx.fullmatch(s):
            return Err(error=DomainError(code=code, message=(hint or "형식 불일치")))
        return Ok(value=s)
    return _f


# ──────────────────────────────────────────────────────────────
# VO 베이스
# ──────────────────────────────────────────────────────────────
class ValueObject:
    """VO 마커 베이스 클래스.

    규약:
        - **불변**: 생성 이후 상태 변경 없이 교체만 허용합니다.
        - **값 동등성**: 식별자 대신 내용으로 동등성을 판정합니다.
    """
    __slots__ = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SingleValueVO(ValueObject, Generic[T]):
    """단일 원시 값을 감싸는 경량 VO 베이스.

    하위 클래스는 `_sanitize(...)`를 오버라이드하여 정규화/검증을 수행합니다.

    Attributes:
        value: 감싼 원시 값(불변).
    """
    value: T

    @classmethod
    def _sanitize(cls, v: T) -> Result[T, DomainError]:
        """값 정규화/검증 훅. 기본 구현은 그대로 통과시킵니다."""
        return Ok(value=v)

    @classmethod
    def create(cls, v: T) -> Result[Self, DomainError]:
        """정규화/검증을 거쳐 불변 인스턴스를 생성합니다.

        Returns:
            Result[Self, DomainError]: 성공 시 `Ok(cls(value=정규화된_값))`.
        """
        return cls._sanitize(v).and_then(lambda vv: Ok(value=cls(value=vv)))

    @classmethod
    def create_or_raise(cls, v: T) -> Self:
        """`create`와 같지만 실패 시 `InvalidArgumentError`를 던집니다."""
        return cls.create(v).unwrap_or_raise(InvalidArgumentError)

    def __str__(self) -> str:
        return str(self.value)
