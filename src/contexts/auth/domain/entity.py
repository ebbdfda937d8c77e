"""Auth 도메인: 이벤트 소싱 User 애그리거트.

개요:
    User의 필드(login, password_hash, active, enabled)는 직접 대입하지 않는다.
    `UserState`에 이벤트를 폴드해서만 얻으며, 커맨드는 선행 조건을 검사한 뒤
    이벤트를 정확히 하나 기록(폴드 + 발행)한다. 실패한 커맨드는 아무것도 기록하지 않는다.

특징:
    - 불변 상태: `UserState`는 `@dataclass(frozen=True, slots=True)`, 폴드는 `replace()`로 새 값을 만든다.
    - 명시적 디스패치: `UserEventKind` → 폴드 함수 테이블. 빠진 변형은 import 시 `TypeError`.
    - 의존 주입: 이벤트 버스는 `register()`/`reconstitute_from()`에 키워드로 전달한다.
    - 불변식: ``enabled ⇒ active``. 커맨드 시점에 검사하고 폴드는 이를 전제로 한다.

에러:
    - AlreadyActivated, EnableNotAllowed, DisableNotAllowed, PasswordChangeNotAllowed
    - PasswordUnchanged

Examples:
    >>> from shared.eventsourcing.event_bus import InMemoryEventBus
    >>> bus = InMemoryEventBus()
    >>> user = User.register(
    ...     UserId.generate(),
    ...     UserLogin.create_or_raise("neo"),
    ...     UserPassword.create_or_raise("$2y$10$abc"),
    ...     event_bus=bus,
    ... )
    >>> user.activate()
    >>> user.enable()
    >>> (user.active, user.enabled, len(bus.published))
    (True, True, 3)
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from shared.eventsourcing.aggregate import AggregateRoot
from shared.eventsourcing.event_bus import EventBus
from shared.modeling.identity import AggregateId

from contexts.auth.domain.value_object import UserId, UserLogin, UserPassword
from contexts.auth.domain.exceptions import (
    AlreadyActivated,
    DisableNotAllowed,
    EnableNotAllowed,
    PasswordChangeNotAllowed,
    PasswordUnchanged,
    auth_user_already_activated_err,
    auth_user_disable_not_allowed_err,
    auth_user_enable_not_allowed_err,
    auth_user_password_change_not_allowed_err,
    auth_user_password_same_err,
)
from contexts.auth.domain.domain_event import (
    UserEventKind,
    UserRegistered,
    UserActivated,
    UserEnabled,
    UserDisabled,
    UserPasswordChanged,
    UserUnregistered,
)

__all__ = ["User", "UserState", "login_hash"]

LOGIN_HASH_SALT = "::"


def login_hash(login: str, *, salt: str = LOGIN_HASH_SALT) -> str:
    """로그인의 결정적 지문을 계산한다. 조회 키 용도이며 보안 자격 증명이 아니다.

    ``md5(salt + login + salt)``의 32자 hex를 8자 블록 4개로 나눠 [0, 3, 2, 1] 순으로 잇는다.

    Examples:
        >>> len(login_hash("neo"))
        32
        >>> login_hash("neo") == login_hash("neo")
        True
    """
    digest = hashlib.md5(f"{salt}{login}{salt}".encode("utf-8"), usedforsecurity=False).hexdigest()
    return digest[0:8] + digest[24:32] + digest[16:24] + digest[8:16]


@dataclass(frozen=True, slots=True, kw_only=True)
class UserState:
    """User의 파생 상태. 기본값은 미등록(빈) 상태다."""

    login: Optional[UserLogin] = None
    password: Optional[UserPassword] = None
    active: bool = False
    enabled: bool = False


# ──────────────────────────────────────────────────────────────
# 폴드 함수: 이벤트에 실린 값만 사용한다
# ──────────────────────────────────────────────────────────────
def _when_registered(state: UserState, event: UserRegistered) -> UserState:
    return replace(
        state,
        login=UserLogin(value=event.login),
        password=UserPassword(value=event.password_hash),
        active=event.active,
        enabled=event.enabled,
    )


def _when_activated(state: UserState, event: UserActivated) -> UserState:
    return replace(state, active=event.active, enabled=event.enabled)


def _when_enabled(state: UserState, event: UserEnabled) -> UserState:
    return replace(state, enabled=event.enabled)


def _when_disabled(state: UserState, event: UserDisabled) -> UserState:
    return replace(state, enabled=event.enabled)


def _when_password_changed(state: UserState, event: UserPasswordChanged) -> UserState:
    return replace(state, password=UserPassword(value=event.password_hash))


def _when_unregistered(state: UserState, event: UserUnregistered) -> UserState:
    return replace(state, active=event.active, enabled=event.enabled)


class User(AggregateRoot[UserId, UserState]):
    """이벤트 소싱 User 애그리거트.

    생성은 `register()`(Registered 이벤트 1개) 또는 `reconstitute_from()`(새 이벤트 없음)으로만 한다.

    Class Attributes:
        HASH_SALT: `hash()`에 쓰는 고정 솔트.
    """

    id_type = UserId
    event_kinds = UserEventKind
    fold_table = {
        UserEventKind.REGISTERED: _when_registered,
        UserEventKind.ACTIVATED: _when_activated,
        UserEventKind.ENABLED: _when_enabled,
        UserEventKind.DISABLED: _when_disabled,
        UserEventKind.PASSWORD_CHANGED: _when_password_changed,
        UserEventKind.UNREGISTERED: _when_unregistered,
    }

    HASH_SALT: ClassVar[str] = LOGIN_HASH_SALT

    __slots__ = ()

    @classmethod
    def initial_state(cls) -> UserState:
        return UserState()

    @classmethod
    def register(
        cls,
        user_id: AggregateId,
        login: UserLogin,
        password: UserPassword,
        *,
        event_bus: EventBus,
    ) -> "User":
        """새 사용자를 등록한다.

        Args:
            user_id: 사용자 식별자. `UserId`가 아니면 `UserId`로 옮긴다.
            login: 로그인 VO.
            password: 비밀번호 해시 VO.
            event_bus: 기록된 이벤트를 발행할 버스.

        Returns:
            User: 비활성/사용 불가 상태로 등록된 사용자. `UserRegistered` 1개가 발행된다.
        """
        uid = UserId.of(user_id)
        user = cls(uid, event_bus=event_bus)
        user._record_that(
            UserRegistered(
                aggregate_id=uid,
                login=login.value,
                password_hash=password.value,
                hash=login_hash(login.value, salt=cls.HASH_SALT),
            )
        )
        return user

    def activate(self) -> None:
        """계정을 활성화한다.

        Raises:
            AlreadyActivated: 이미 활성 상태일 때.
        """
        if self._state.active:
            raise AlreadyActivated(auth_user_already_activated_err(self._id))
        self._record_that(UserActivated(aggregate_id=self._id))

    def enable(self) -> None:
        """사용 가능 상태로 전환한다.

        Raises:
            EnableNotAllowed: 비활성이거나 이미 사용 가능할 때.
        """
        if not self._state.active or self._state.enabled:
            raise EnableNotAllowed(auth_user_enable_not_allowed_err(self._id))
        self._record_that(UserEnabled(aggregate_id=self._id))

    def disable(self) -> None:
        """사용 불가 상태로 전환한다.

        Raises:
            DisableNotAllowed: 비활성이거나 이미 사용 불가일 때.
        """
        if not self._state.active or not self._state.enabled:
            raise DisableNotAllowed(auth_user_disable_not_allowed_err(self._id))
        self._record_that(UserDisabled(aggregate_id=self._id))

    def change_password(self, password: UserPassword) -> None:
        """비밀번호 해시를 바꾼다.

        제약:
            - 활성 + 사용 가능 상태여야 한다.
            - 현재 비밀번호와 달라야 한다.

        Raises:
            PasswordChangeNotAllowed: 활성+사용 가능 상태가 아닐 때.
            PasswordUnchanged: 새 비밀번호가 현재와 같을 때.
        """
        if not self._state.active or not self._state.enabled:
            raise PasswordChangeNotAllowed(auth_user_password_change_not_allowed_err(self._id))
        if self._state.password is not None and self._state.password.equals(password):
            raise PasswordUnchanged(auth_user_password_same_err(self._id))
        self._record_that(UserPasswordChanged(aggregate_id=self._id, password_hash=password.value))

    def unregister(self) -> None:
        """탈퇴 처리한다. 선행 조건은 없다."""
        self._record_that(UserUnregistered(aggregate_id=self._id))

    def hash(self) -> str:
        """현재 로그인의 지문(조회 키)을 돌려준다."""
        login = self._state.login.value if self._state.login is not None else ""
        return login_hash(login, salt=self.HASH_SALT)

    @property
    def login(self) -> Optional[UserLogin]:
        return self._state.login

    @property
    def password(self) -> Optional[UserPassword]:
        return self._state.password

    @property
    def password_hash(self) -> Optional[str]:
        return self._state.password.value if self._state.password is not None else None

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def enabled(self) -> bool:
        return self._state.enabled
