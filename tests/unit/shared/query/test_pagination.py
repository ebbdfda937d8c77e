from __future__ import annotations

import pytest

from shared.query.pagination import Pagination


@pytest.mark.parametrize(
    ("current_page", "per_page", "offset"),
    [
        (1, 20, 0),
        (3, 20, 40),
        (2, 1, 1),
        (0, 20, -20),
    ],
)
def test_offset(current_page: int, per_page: int, offset: int):
    """GIVEN 현재 페이지와 페이지 크기
       WHEN offset을 읽으면
       THEN (current_page - 1) * per_page 이다 (검증 없음)
    """
    p = Pagination(current_page=current_page, per_page=per_page)
    assert p.offset == offset
    assert (p.current_page, p.per_page) == (current_page, per_page)
