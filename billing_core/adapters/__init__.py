"""Adapters from loosely-shaped API payloads to billing models."""

from billing_core.adapters.customer import (
    PAYMENT_TERMS_DAYS,
    calculate_due_date_from_terms,
    create_customer_snapshot,
    format_address_display,
    normalize_address,
)
from billing_core.adapters.payable import (
    UNPAID_INVOICE_STATUSES,
    normalize_bill,
    normalize_invoice,
    parse_amount,
    parse_date,
    unpaid_invoices,
)

__all__ = [
    "PAYMENT_TERMS_DAYS",
    "UNPAID_INVOICE_STATUSES",
    "calculate_due_date_from_terms",
    "create_customer_snapshot",
    "format_address_display",
    "normalize_address",
    "normalize_bill",
    "normalize_invoice",
    "parse_amount",
    "parse_date",
    "unpaid_invoices",
]
