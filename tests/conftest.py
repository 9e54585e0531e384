"""Pytest configuration and fixtures."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from billing_core.models import Address, CustomerSnapshot, Payable, TaxPreference


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed 'today' stamped on allocations."""
    return date(2024, 3, 15)


@pytest.fixture
def captured_at() -> datetime:
    """Fixed snapshot capture time."""
    return datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_snapshot(captured_at: datetime):
    """Factory for customer snapshots with overridable fields."""

    def _make(**overrides) -> CustomerSnapshot:
        fields = {
            "customer_id": "cust-test-001",
            "customer_name": "Asha Traders",
            "display_name": "Asha Traders",
            "company_name": "Asha Traders Pvt Ltd",
            "email": "accounts@ashatraders.in",
            "phone": "+91 98200 00000",
            "billing_address": Address(street="12 MG Road", city="Pune", state="Maharashtra"),
            "shipping_address": Address(street="12 MG Road", city="Pune", state="Maharashtra"),
            "gst_treatment": "Registered Business - Regular",
            "tax_preference": TaxPreference.TAXABLE,
            "gstin": "",
            "place_of_supply": "",
            "pan": "AAGCA4900Q",
            "snapshot_date": captured_at,
        }
        fields.update(overrides)
        return CustomerSnapshot(**fields)

    return _make


@pytest.fixture
def make_payable():
    """Factory for payables."""

    def _make(
        payable_id: str,
        bill_date: date | None,
        amount_due: str | int,
        total: str | int | None = None,
    ) -> Payable:
        return Payable(
            id=payable_id,
            date=bill_date,
            total=Decimal(str(total if total is not None else amount_due)),
            amount_due=Decimal(str(amount_due)),
            number=f"BILL-{payable_id}",
        )

    return _make
