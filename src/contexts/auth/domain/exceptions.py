"""Auth 도메인: User 커맨드 오류(값 + 예외).

개요:
    User 커맨드의 선행 조건 위반을 `DomainError` 값으로 정의하고, 커맨드는 이를
    아래 예외에 담아 던진다. 예외는 항상 이벤트를 기록하기 **전에** 발생하므로
    실패한 커맨드는 애그리거트 상태를 바꾸지 않는다.

노출 오류 코드:
    - auth_user_already_activated      : 이미 활성화됨
    - auth_user_enable_not_allowed     : 비활성 또는 이미 사용 가능
    - auth_user_disable_not_allowed    : 비활성 또는 이미 사용 불가
    - auth_user_password_change_not_allowed : 활성+사용 가능 상태가 아님
    - auth_user_password_same          : 현재와 같은 비밀번호로 변경 시도
"""

from __future__ import annotations

from shared.modeling.exceptions import AggregateInvariantViolation, DomainError, DomainException
from shared.modeling.identity import AggregateId


__all__ = [
    "AlreadyActivated",
    "EnableNotAllowed",
    "DisableNotAllowed",
    "PasswordChangeNotAllowed",
    "PasswordUnchanged",
    "auth_user_already_activated_err",
    "auth_user_enable_not_allowed_err",
    "auth_user_disable_not_allowed_err",
    "auth_user_password_change_not_allowed_err",
    "auth_user_password_same_err",
]


class AlreadyActivated(AggregateInvariantViolation):
    """이미 활성화된 사용자를 다시 활성화하려 함."""


class EnableNotAllowed(AggregateInvariantViolation):
    """비활성 사용자이거나 이미 사용 가능한 사용자."""


class DisableNotAllowed(AggregateInvariantViolation):
    """비활성 사용자이거나 이미 사용 불가인 사용자."""


class PasswordChangeNotAllowed(AggregateInvariantViolation):
    """활성+사용 가능 상태가 아닌 사용자의 비밀번호 변경."""


class PasswordUnchanged(DomainException):
    """새 비밀번호가 현재 비밀번호와 같음. 상태가 아니라 값 비교 조건이다."""


def auth_user_already_activated_err(user_id: AggregateId) -> DomainError:
    """이미 활성화된 사용자에 대한 오류를 생성한다.

    Args:
        user_id: 대상 사용자 식별자.

    Returns:
        DomainError: 코드 ``"auth_user_already_activated"``.
    """
    return DomainError("auth_user_already_activated", f"user {user_id} is already activated")


def auth_user_enable_not_allowed_err(user_id: AggregateId) -> DomainError:
    return DomainError("auth_user_enable_not_allowed", f"user {user_id} cannot be enabled")


def auth_user_disable_not_allowed_err(user_id: AggregateId) -> DomainError:
    return DomainError("auth_user_disable_not_allowed", f"user {user_id} cannot be disabled")


def auth_user_password_change_not_allowed_err(user_id: AggregateId) -> DomainError:
    """활성+사용 가능 상태가 아닌 사용자의 비밀번호 변경 오류를 생성한다."""
    return DomainError(
        "auth_user_password_change_not_allowed",
        f"password of user {user_id} cannot be changed while inactive or disabled",
    )


def auth_user_password_same_err(user_id: AggregateId) -> DomainError:
    """동일 비밀번호로 변경 시도에 대한 오류를 생성한다.

    Returns:
        DomainError: 코드 ``"auth_user_password_same"``.
    """
    return DomainError("auth_user_password_same", f"new password of user {user_id} equals the current one")
