"""Tests for serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from billing_core.models import Address, BillPayment, Regime, TaxRegime
from billing_core.serialization import (
    allocation_to_payload,
    dataclass_to_dict,
    serialize_value,
    to_dict,
)


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["name"] == "test"
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_dict_passthrough(self) -> None:
        d = {"key": "value"}
        assert to_dict(d) == d

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_tax_regime(self) -> None:
        regime = TaxRegime(Regime.INTER, Decimal("0"), Decimal("0"), Decimal("18"), "Inter-state transaction")
        assert to_dict(regime) == {
            "regime": "inter",
            "cgst_rate": "0",
            "sgst_rate": "0",
            "igst_rate": "18",
            "reason": "Inter-state transaction",
        }


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_enum(self) -> None:
        assert serialize_value(Regime.EXEMPT) == "exempt"

    def test_nested(self) -> None:
        data = {"amounts": [Decimal("10.00")], "info": {"date": datetime(2024, 1, 1)}}
        result = serialize_value(data)
        assert result["amounts"] == ["10.00"]
        assert result["info"]["date"] == "2024-01-01T00:00:00"

    def test_passthrough(self) -> None:
        assert serialize_value("hello") == "hello"
        assert serialize_value(None) is None


class TestDataclassToDict:
    """Tests for dataclass_to_dict with nested dataclasses."""

    def test_nested_address(self) -> None:
        @dataclass
        class _Holder:
            address: Address

        result = dataclass_to_dict(_Holder(address=Address(city="Pune")))
        assert result["address"]["city"] == "Pune"
        assert result["address"]["country"] == "India"


class TestAllocationPayload:
    """Tests for allocation_to_payload."""

    def test_payload_shape(self) -> None:
        allocation = {
            "bill-b": BillPayment(Decimal("50"), date(2024, 3, 15)),
            "bill-a": BillPayment(Decimal("70.25"), date(2024, 3, 15)),
        }
        assert allocation_to_payload(allocation) == {
            "bill-b": {"payment": 50.0, "paymentMadeOn": "2024-03-15"},
            "bill-a": {"payment": 70.25, "paymentMadeOn": "2024-03-15"},
        }

    def test_empty(self) -> None:
        assert allocation_to_payload({}) == {}
