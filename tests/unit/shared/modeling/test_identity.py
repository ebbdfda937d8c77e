from __future__ import annotations

import pytest

from shared.modeling.exceptions import InvalidArgumentError
from shared.modeling.identity import AggregateId, UUID_RX
from shared.primitives.result import Err, Ok

UUID = "2f1e7a0c-5b5d-4c1e-9a59-3c7d6f0e2b11"


@pytest.fixture
def identity() -> AggregateId:
    """대리 키가 없는 식별자."""
    return AggregateId.from_string(UUID)


class TestCreation:
    def test_from_string_keeps_external_id(self, identity: AggregateId):
        assert identity.value == UUID
        assert str(identity) == UUID

    def test_from_string_normalizes_case(self):
        assert AggregateId.from_string(UUID.upper()).value == UUID

    def test_generate_has_no_surrogate(self):
        """GIVEN generate()로 만든 식별자
           THEN 유효한 UUID 문자열이며 대리 키가 없다
        """
        generated = AggregateId.generate()
        assert UUID_RX.fullmatch(generated.value)
        assert generated.surrogate_id is None
        assert generated.has_surrogate is False

    def test_generate_is_unique(self):
        assert AggregateId.generate() != AggregateId.generate()

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", UUID + "0", UUID.replace("-", ""), f" {UUID}"])
    def test_from_string_rejects_malformed(self, raw: str):
        """GIVEN UUID 형식이 아닌 문자열
           WHEN from_string(raw)를 호출하면
           THEN InvalidArgumentError(code='invalid_identity')가 발생한다
        """
        with pytest.raises(InvalidArgumentError) as exc_info:
            AggregateId.from_string(raw)
        assert exc_info.value.code == "invalid_identity"

    def test_parse_is_total(self):
        assert isinstance(AggregateId.parse(UUID), Ok)
        r = AggregateId.parse("nope")
        assert isinstance(r, Err)
        assert r.error.code == "invalid_identity"
        assert "nope" in r.error.message


class TestSurrogate:
    def test_sets_surrogate_on_new_instance(self, identity: AggregateId):
        """GIVEN 대리 키가 없는 식별자
           WHEN with_surrogate(2345)
           THEN 새 인스턴스가 반환되고 원본은 그대로다
        """
        assigned = identity.with_surrogate(2345)
        assert assigned is not identity
        assert assigned.surrogate_id == 2345
        assert identity.surrogate_id is None

    def test_second_assignment_is_noop_returning_same_instance(self, identity: AggregateId):
        assigned = identity.with_surrogate(5)
        again = assigned.with_surrogate(9)
        assert again is assigned
        assert again.surrogate_id == 5

    def test_zero_is_a_valid_surrogate(self, identity: AggregateId):
        assert identity.with_surrogate(0).surrogate_id == 0

    def test_zero_counts_as_assigned(self, identity: AggregateId):
        """GIVEN 대리 키 0이 부여된 식별자
           WHEN with_surrogate(5)
           THEN 같은 인스턴스가 돌아오고 대리 키는 0으로 남는다
        """
        zero = identity.with_surrogate(0)
        assert zero.has_surrogate
        assert zero.with_surrogate(5) is zero
        assert zero.surrogate_id == 0

    def test_negative_surrogate_is_rejected(self, identity: AggregateId):
        """GIVEN 식별자
           WHEN with_surrogate(-1)
           THEN InvalidArgumentError가 발생하고 식별자는 변하지 않는다
        """
        with pytest.raises(InvalidArgumentError) as exc_info:
            identity.with_surrogate(-1)
        assert exc_info.value.code == "negative_surrogate"
        assert identity.surrogate_id is None

    def test_negative_surrogate_is_rejected_even_when_assigned(self, identity: AggregateId):
        assigned = identity.with_surrogate(1)
        with pytest.raises(InvalidArgumentError):
            assigned.with_surrogate(-1234)


class TestEquality:
    def test_equality_ignores_surrogate(self, identity: AggregateId):
        assert identity == identity.with_surrogate(7)
        assert hash(identity) == hash(identity.with_surrogate(7))

    def test_of_retypes_and_keeps_surrogate(self, identity: AggregateId):
        class OrderId(AggregateId):
            __slots__ = ()

        retyped = OrderId.of(identity.with_surrogate(3))
        assert type(retyped) is OrderId
        assert retyped.value == UUID
        assert retyped.surrogate_id == 3
        assert OrderId.of(retyped) is retyped

    def test_not_equal_to_plain_string(self, identity: AggregateId):
        assert identity != UUID
