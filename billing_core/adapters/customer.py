"""Adapt customer API records into snapshots and form values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import Any

from billing_core.config import DefaultsConfig
from billing_core.exceptions import PayloadShapeError
from billing_core.models import Address, CustomerSnapshot, TaxPreference

# Payment term -> days until due
PAYMENT_TERMS_DAYS: dict[str, int] = {
    "Due on Receipt": 0,
    "Net 15": 15,
    "Net 30": 30,
    "Net 45": 45,
    "Net 60": 60,
    "due_on_receipt": 0,
    "net15": 15,
    "net30": 30,
    "net45": 45,
    "net60": 60,
}
DEFAULT_TERMS_DAYS = 30

_ADDRESS_KEYS = {
    "street": "street",
    "city": "city",
    "state": "state",
    "country": "country",
    "pincode": "postal_code",
    "postalCode": "postal_code",
    "postal_code": "postal_code",
}


def _text(value: Any) -> str:
    """Coerce an optional scalar to ``str``; falsy values become ``""``."""
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_address(value: Any, default: Address | None = None) -> Address:
    """Normalize an address given as a string, a mapping or nothing.

    Parameters
    ----------
    value : Any
        ``None``/empty, a single-line street string, or a mapping with any of
        ``street``, ``city``, ``state``, ``country``, ``pincode``.
    default : Address | None
        Address whose fields fill the gaps. Defaults to a blank Indian address.

    Returns
    -------
    Address
        Five-field address.

    Raises
    ------
    PayloadShapeError
        If ``value`` is neither a string nor a mapping.
    """
    base = default or Address()

    if not value:
        return base

    if isinstance(value, str):
        return replace(base, street=value)

    if isinstance(value, Mapping):
        updates = {}
        for key, attr in _ADDRESS_KEYS.items():
            if key in value and value[key] is not None:
                updates[attr] = _text(value[key])
        return replace(base, **updates)

    raise PayloadShapeError(f"Unsupported address payload: {type(value).__name__}")


def create_customer_snapshot(
    record: Mapping[str, Any],
    now: datetime | None = None,
    defaults: DefaultsConfig | None = None,
) -> CustomerSnapshot:
    """Capture a snapshot from a customer API record.

    Every absent field falls back to a blank or configured default. The
    shipping address falls back to the billing address.

    Parameters
    ----------
    record : Mapping[str, Any]
        Customer as returned by the customers API (camelCase keys).
    now : datetime | None
        Capture time. Defaults to the current UTC time.
    defaults : DefaultsConfig | None
        Currency, payment terms and country used for blank fields.

    Returns
    -------
    CustomerSnapshot
        Immutable snapshot.

    Raises
    ------
    PayloadShapeError
        If ``record`` is not a mapping.
    """
    if not isinstance(record, Mapping):
        raise PayloadShapeError(f"Customer record must be a mapping, got {type(record).__name__}")

    defaults = defaults or DefaultsConfig()
    blank_address = Address(country=defaults.country)

    billing_address = normalize_address(record.get("billingAddress"), blank_address)
    shipping_payload = record.get("shippingAddress")
    shipping_address = (
        normalize_address(shipping_payload, blank_address) if shipping_payload else billing_address
    )

    tax_preference = (
        TaxPreference.TAX_EXEMPT
        if record.get("taxPreference") == TaxPreference.TAX_EXEMPT.value
        else TaxPreference.TAXABLE
    )

    return CustomerSnapshot(
        customer_id=_text(record.get("id")),
        customer_name=_text(record.get("name")),
        display_name=_text(record.get("displayName") or record.get("name")),
        company_name=_text(record.get("companyName")),
        email=_text(record.get("email")),
        phone=_text(record.get("phone") or record.get("workPhone")),
        billing_address=billing_address,
        shipping_address=shipping_address,
        gst_treatment=_text(record.get("gstTreatment")),
        tax_preference=tax_preference,
        gstin=_text(record.get("gstin")),
        place_of_supply=_text(record.get("placeOfSupply")),
        pan=_text(record.get("pan")),
        exemption_reason=_text(record.get("exemptionReason")),
        currency=_text(record.get("currency")) or defaults.currency,
        payment_terms=_text(record.get("paymentTerms")) or defaults.payment_terms,
        price_list=_text(record.get("priceList")),
        snapshot_date=now or datetime.now(timezone.utc),
    )


def format_address_display(address: Address | None) -> str:
    """Join the non-empty address parts, one per line."""
    if address is None:
        return ""
    parts = [
        address.street,
        address.city,
        address.state,
        address.country,
        address.postal_code,
    ]
    return "\n".join(part for part in parts if part)


def calculate_due_date_from_terms(invoice_date: date, payment_terms: str) -> date:
    """Due date for ``invoice_date`` under ``payment_terms``.

    Unknown terms are treated as Net 30.
    """
    days = PAYMENT_TERMS_DAYS.get(payment_terms, DEFAULT_TERMS_DAYS)
    return invoice_date + timedelta(days=days)
