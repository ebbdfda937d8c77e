"""이벤트 소싱 코어의 도메인 오류: 값(`DomainError`) + 예외(`DomainException`).

개요:
    모든 실패는 먼저 불변 값 `DomainError(code, message)`로 기술한다. 검증 함수는
    이 값을 `Err(...)`로 돌려주고, 계약상 "실패해야 하는" 연산(식별자 파싱, 커맨드,
    히스토리 생성 등)은 같은 값을 `DomainException` 하위 예외에 담아 던진다.
    호출자는 예외 타입으로 분기하거나 ``exc.code``로 안정적인 코드를 읽을 수 있다.

네이밍:
    * 오류 코드는 **snake_case**를 사용합니다. 예: ``"invalid_identity"``.
    * 고정 메시지 오류는 모듈 싱글턴으로 재사용합니다.

예외 계층:
    DomainException
    ├── InvalidArgumentError          잘못된 식별자 문자열, 음수 대리 키, VO 검증 실패
    ├── AggregateInvariantViolation   커맨드 선행 조건 불충족 (상태 기반)
    ├── HistoryMismatchError          다른 애그리거트의 이벤트가 섞인 히스토리
    └── UnhandledEventError           폴드 핸들러가 없는 이벤트 변형

예시:
    >>> err = negative_surrogate_err(got=-1)
    >>> err.code
    'negative_surrogate'
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    # 타입
    "DomainError",
    "DomainException",
    "InvalidArgumentError",
    "AggregateInvariantViolation",
    "HistoryMismatchError",
    "UnhandledEventError",
    # 식별자/시간 계열
    "invalid_identity_err",
    "tz_naive_err",
    "negative_surrogate_err",
    # 이벤트 소싱 계열
    "history_mismatch_err",
    "unhandled_event_err",
    # VO 계열
    "vo_empty_err",
    "vo_len_gt_err",
]


# ──────────────────────────────────────────────────────────────
# 기본 타입
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class DomainError:
    """도메인 오류를 표현하는 불변 값 객체.

    Attributes:
        code: 오류 코드(영문 소문자/밑줄). 예: ``"invalid_identity"``.
        message: 사용자 또는 로그 출력용 메시지(간결 권장).
    """

    code: str
    message: str


class DomainException(Exception):
    """`DomainError`를 싣고 던져지는 예외의 베이스.

    Attributes:
        error: 원인 `DomainError`.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str:
        """원인 오류의 코드."""
        return self.error.code


class InvalidArgumentError(DomainException):
    """형식이 잘못된 입력(식별자 문자열, 음수 대리 키, VO 값)."""


class AggregateInvariantViolation(DomainException):
    """현재 상태에서 커맨드를 수행할 수 없음. 이벤트는 기록되지 않는다."""


class HistoryMismatchError(DomainException):
    """선언된 식별자와 다른 애그리거트의 이벤트가 히스토리에 포함됨."""


class UnhandledEventError(DomainException):
    """애그리거트에 폴드 핸들러가 등록되지 않은 이벤트 변형."""


# ──────────────────────────────────────────────────────────────
# 식별자/시간 계열
# ──────────────────────────────────────────────────────────────
def invalid_identity_err(raw: str) -> DomainError:
    """UUID 형식이 아닌 식별자 문자열에 대한 오류를 생성한다.

    Args:
        raw: 입력된 원본 문자열.

    Returns:
        DomainError: 코드 ``"invalid_identity"``.
    """
    return DomainError("invalid_identity", f"invalid aggregate identity: {raw!r}")


def negative_surrogate_err(*, got: int) -> DomainError:
    """음수 대리 키 지정 시도에 대한 오류를 생성한다.

    Args:
        got: 지정하려던 값.

    Returns:
        DomainError: 코드 ``"negative_surrogate"``.
    """
    return DomainError("negative_surrogate", f"surrogate id must be ≥ 0 (got={got})")


_TZ_NAIVE = DomainError("timestamp_naive", "datetime must be timezone-aware")


def tz_naive_err() -> DomainError:
    """tz-aware가 아닌(datetime naive) 입력에 대한 오류를 반환한다(싱글턴)."""
    return _TZ_NAIVE


# ──────────────────────────────────────────────────────────────
# 이벤트 소싱 계열
# ──────────────────────────────────────────────────────────────
def history_mismatch_err(*, expected: str, got: str) -> DomainError:
    """히스토리 식별자와 이벤트 식별자가 다를 때의 오류를 생성한다.

    Examples:
        >>> history_mismatch_err(expected="a", got="b").message
        'event belongs to b, history is for a'
    """
    return DomainError("history_mismatch", f"event belongs to {got}, history is for {expected}")


def unhandled_event_err(*, aggregate: str, kind: object) -> DomainError:
    """핸들러가 없는 이벤트 변형에 대한 오류를 생성한다."""
    return DomainError("unhandled_event", f"{aggregate} has no handler for {kind!r}")


# ──────────────────────────────────────────────────────────────
# VO 계열
# ──────────────────────────────────────────────────────────────
_VO_EMPTY = DomainError("vo_empty", "빈 문자열은 허용되지 않습니다.")


def vo_empty_err() -> DomainError:
    """VO: 빈 문자열 금지(싱글턴).

    Examples:
        >>> vo_empty_err() is vo_empty_err()
        True
    """
    return _VO_EMPTY


def vo_len_gt_err(*, limit: int, got: int) -> DomainError:
    """VO: 최대 길이 초과.

    Examples:
        >>> e = vo_len_gt_err(limit=10, got=12)
        >>> (e.code, e.message)
        ('vo_len_gt', '길이>10 (got=12)')
    """
    return DomainError("vo_len_gt", f"길이>{limit} (got={got})")
