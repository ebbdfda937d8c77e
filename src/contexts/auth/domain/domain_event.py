"""Auth 도메인: User 관련 도메인 이벤트.

개요:
    User 애그리거트의 상태 전이를 기록하는 불변 값들. 각 이벤트는 `UserEventKind`
    멤버를 ``KIND``로 선언하며, 결과 플래그(active/enabled) 등 폴드에 필요한 값을
    모두 스스로 싣는다. 폴드는 애그리거트의 다른 상태에서 값을 다시 계산하지 않는다.

노출 이벤트:
    - UserRegistered
    - UserActivated
    - UserEnabled
    - UserDisabled
    - UserPasswordChanged
    - UserUnregistered
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from shared.modeling.domain_event import DomainEvent

from contexts.auth.domain.value_object import UserId

__all__ = [
    "UserEventKind",
    "UserEvent",
    "UserRegistered",
    "UserActivated",
    "UserEnabled",
    "UserDisabled",
    "UserPasswordChanged",
    "UserUnregistered",
]


class UserEventKind(str, Enum):
    """User 이벤트 변형 태그. 직렬화 시 값(문자열)을 사용한다."""

    REGISTERED = "user.registered"
    ACTIVATED = "user.activated"
    ENABLED = "user.enabled"
    DISABLED = "user.disabled"
    PASSWORD_CHANGED = "user.password_changed"
    UNREGISTERED = "user.unregistered"


@dataclass(frozen=True, slots=True, kw_only=True)
class UserEvent(DomainEvent):
    """User 이벤트 공통 베이스."""

    aggregate_id: UserId


@dataclass(frozen=True, slots=True, kw_only=True)
class UserRegistered(UserEvent):
    """회원 등록 이벤트.

    Attributes:
        login: 등록된 로그인.
        password_hash: 등록된 비밀번호 해시.
        hash: 로그인 지문(조회 키). `User.hash()`와 같은 값.
        active: 등록 직후 활성 여부(항상 False).
        enabled: 등록 직후 사용 가능 여부(항상 False).
    """

    KIND: ClassVar[UserEventKind] = UserEventKind.REGISTERED

    login: str
    password_hash: str
    hash: str
    active: bool = False
    enabled: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class UserActivated(UserEvent):
    """계정 활성화 이벤트."""

    KIND: ClassVar[UserEventKind] = UserEventKind.ACTIVATED

    active: bool = True
    enabled: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class UserEnabled(UserEvent):
    KIND: ClassVar[UserEventKind] = UserEventKind.ENABLED

    enabled: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class UserDisabled(UserEvent):
    KIND: ClassVar[UserEventKind] = UserEventKind.DISABLED

    enabled: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class UserPasswordChanged(UserEvent):
    """비밀번호 변경 이벤트."""

    KIND: ClassVar[UserEventKind] = UserEventKind.PASSWORD_CHANGED

    password_hash: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UserUnregistered(UserEvent):
    """회원 탈퇴 이벤트(종료 이벤트). 이후 사용자는 비활성/사용 불가로 취급된다."""

    KIND: ClassVar[UserEventKind] = UserEventKind.UNREGISTERED

    active: bool = False
    enabled: bool = False
