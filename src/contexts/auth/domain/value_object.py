"""Auth 도메인 값 객체(VO) 모음.

개요:
    User 애그리거트가 사용하는 식별자와 값 객체를 제공한다.

    * UserId: `AggregateId`의 타입 지정 버전.
    * UserLogin: 로그인 문자열(양끝 공백 제거, 비어 있지 않음, 길이 ≤ 255).
    * UserPassword: 저장용 비밀번호 해시 문자열. 해시 방식은 이 도메인의 관심사가 아니며,
      값 동등성으로만 비교한다.

    생성은 `create()`가 `Result[T, DomainError]`를 돌려주고, 예외가 필요한 경계에서는
    `create_or_raise()`를 쓴다.

Examples:
    >>> UserLogin.create("  neo  ").unwrap_or(None).value
    'neo'
    >>> UserPassword.create("").is_err()
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from shared.primitives.result import Result
from shared.modeling.exceptions import DomainError
from shared.modeling.identity import AggregateId
from shared.modeling.value_object import SingleValueVO, all_of, ensure_non_empty_str, ensure_max_len

__all__ = ["UserId", "UserLogin", "UserPassword"]


@dataclass(frozen=True, slots=True, kw_only=True, eq=False)
class UserId(AggregateId):
    """User 애그리거트 식별자."""


@dataclass(frozen=True, slots=True, kw_only=True)
class UserLogin(SingleValueVO[str]):
    """로그인 값 객체.

    Examples:
        >>> UserLogin.create("x" * 256).is_err()
        True
    """

    MAX_LEN: ClassVar[int] = 255

    @classmethod
    def _sanitize(cls, v: str) -> Result[str, DomainError]:
        return all_of(ensure_non_empty_str, ensure_max_len(cls.MAX_LEN))(v.strip())


@dataclass(frozen=True, slots=True, kw_only=True)
class UserPassword(SingleValueVO[str]):
    """비밀번호 해시 값 객체(불투명 문자열)."""

    MAX_LEN: ClassVar[int] = 512

    @classmethod
    def _sanitize(cls, v: str) -> Result[str, DomainError]:
        # 양끝 공백을 포함해 원본 그대로 저장한다.
        return all_of(ensure_non_empty_str, ensure_max_len(cls.MAX_LEN))(v)

    def equals(self, other: UserPassword) -> bool:
        return self.value == other.value
