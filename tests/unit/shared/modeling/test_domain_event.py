from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

import pytest

from shared.modeling.domain_event import DomainEvent
from shared.modeling.exceptions import InvalidArgumentError
from shared.modeling.identity import AggregateId


class NoteKind(Enum):
    WRITTEN = "note.written"


@dataclass(frozen=True, slots=True, kw_only=True)
class NoteWritten(DomainEvent):
    KIND: ClassVar[NoteKind] = NoteKind.WRITTEN
    text: str


@pytest.fixture
def note_id() -> AggregateId:
    return AggregateId.generate()


def test_kind_is_declared_tag(note_id: AggregateId):
    assert NoteWritten(aggregate_id=note_id, text="hi").kind is NoteKind.WRITTEN


def test_metadata_defaults(note_id: AggregateId):
    """GIVEN 메타데이터 없이 만든 이벤트 두 개
       THEN event_id는 서로 다르고 occurred_at은 UTC aware 이다
    """
    a = NoteWritten(aggregate_id=note_id, text="a")
    b = NoteWritten(aggregate_id=note_id, text="a")
    assert a.event_id != b.event_id
    assert a.occurred_at.tzinfo is not None


def test_event_is_frozen(note_id: AggregateId):
    e = NoteWritten(aggregate_id=note_id, text="a")
    with pytest.raises(FrozenInstanceError):
        e.text = "b"  # type: ignore[misc]


def test_naive_occurred_at_is_rejected(note_id: AggregateId):
    with pytest.raises(InvalidArgumentError) as exc_info:
        NoteWritten(aggregate_id=note_id, text="a", occurred_at=datetime.now())
    assert exc_info.value.code == "timestamp_naive"


def test_explicit_occurred_at_is_kept(note_id: AggregateId):
    at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert NoteWritten(aggregate_id=note_id, text="a", occurred_at=at).occurred_at == at
