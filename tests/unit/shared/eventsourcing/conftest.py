from __future__ import annotations

import pytest

from shared.eventsourcing.event_bus import InMemoryEventBus
from shared.modeling.identity import AggregateId


@pytest.fixture
def bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def counter_id() -> AggregateId:
    return AggregateId.from_string("0b6c4a8e-1f0e-4d7a-8c35-9a2e4b7f6d10")
