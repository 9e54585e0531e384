"""Adapt bill and invoice API records into payables."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable

from billing_core.exceptions import PayloadShapeError
from billing_core.models import InvoiceStatus, Payable
from billing_core.money import to_decimal

# Invoice statuses that can still receive a payment
UNPAID_INVOICE_STATUSES = frozenset(
    {
        InvoiceStatus.PENDING.value,
        InvoiceStatus.OVERDUE.value,
        InvoiceStatus.PARTIALLY_PAID.value,
        InvoiceStatus.SENT.value,
    }
)


def parse_amount(value: Any) -> Decimal:
    """Parse a form or API amount; anything unusable is ``0``."""
    return to_decimal(value)


def parse_date(value: Any) -> date | None:
    """Parse an ISO date or timestamp. Returns ``None`` when unparsable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _require_mapping(record: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise PayloadShapeError(f"{kind} record must be a mapping, got {type(record).__name__}")
    return record


def normalize_bill(record: Mapping[str, Any]) -> Payable:
    """Normalize a bill from the bills API.

    ``balanceDue`` is the amount due whenever the key is present, so an
    explicit ``null`` means nothing is due; only a missing key falls back
    to the bill ``total``. ``billDate`` takes precedence over ``date``.
    """
    record = _require_mapping(record, "Bill")
    total = parse_amount(record.get("total"))
    if "balanceDue" in record:
        amount_due = parse_amount(record["balanceDue"])
    else:
        amount_due = total

    return Payable(
        id=str(record.get("id", "")),
        date=parse_date(record.get("billDate") or record.get("date")),
        total=total,
        amount_due=amount_due,
        number=str(record.get("billNumber") or ""),
        status=str(record.get("status") or ""),
    )


def normalize_invoice(record: Mapping[str, Any]) -> Payable:
    """Normalize an invoice from the invoices API.

    A positive ``balanceDue`` is the amount due; otherwise the invoice
    ``amount`` (or ``total``) is, as for a freshly issued invoice.
    """
    record = _require_mapping(record, "Invoice")
    total = parse_amount(record.get("amount", record.get("total")))
    balance_due = parse_amount(record.get("balanceDue"))
    amount_due = balance_due if balance_due > 0 else total

    return Payable(
        id=str(record.get("id", "")),
        date=parse_date(record.get("date") or record.get("invoiceDate")),
        total=total,
        amount_due=amount_due,
        number=str(record.get("invoiceNumber") or ""),
        status=str(record.get("status") or ""),
    )


def unpaid_invoices(records: Iterable[Mapping[str, Any]]) -> list[Payable]:
    """Invoices that can still be paid: positive balance and an open status.

    An explicit ``balanceDue`` of zero marks the invoice as settled even if
    its ``amount`` is positive.
    """
    payables = []
    for record in records:
        payable = normalize_invoice(record)
        if record.get("balanceDue") is not None:
            balance = parse_amount(record.get("balanceDue"))
        else:
            balance = payable.total
        if balance > 0 and payable.status in UNPAID_INVOICE_STATUSES:
            payables.append(payable)
    return payables
