"""조회용 페이지네이션 값."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Pagination"]


@dataclass(frozen=True, slots=True)
class Pagination:
    """현재 페이지(1부터)와 페이지 크기로 오프셋을 계산한다.

    입력 검증은 하지 않는다. 0 이하 값은 수식대로의 (의미 없는) 오프셋을 만든다.

    Examples:
        >>> Pagination(current_page=3, per_page=20).offset
        40
    """

    current_page: int
    per_page: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.per_page
