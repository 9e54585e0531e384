"""Customer bootstrap for transaction-creation forms."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Callable

from billing_core.adapters.customer import (
    calculate_due_date_from_terms,
    create_customer_snapshot,
    format_address_display,
)
from billing_core.config import DefaultsConfig
from billing_core.exceptions import BillingCoreError
from billing_core.models import CustomerSnapshot, TaxRegime, TransactionFormData, TransactionType
from billing_core.tax import DEFAULT_SELLER_STATE_CODE, determine_tax_regime

logger = logging.getLogger(__name__)

CUSTOMER_LOAD_ERROR = "Unable to load customer details. Please retry."

# Fetches a raw customer record by id; returns None when the customer is unknown
CustomerFetcher = Callable[[str], Mapping[str, Any] | None]


def build_form_data(snapshot: CustomerSnapshot | None) -> TransactionFormData:
    """Form values for a transaction, blank when no customer is selected."""
    if snapshot is None:
        return TransactionFormData()

    return TransactionFormData(
        customer_name=snapshot.customer_name,
        display_name=snapshot.display_name,
        billing_address_text=format_address_display(snapshot.billing_address),
        shipping_address_text=format_address_display(snapshot.shipping_address),
        gst_treatment=snapshot.gst_treatment,
        tax_preference=snapshot.tax_preference,
        gstin=snapshot.gstin,
        place_of_supply=snapshot.place_of_supply,
        pan=snapshot.pan,
        currency=snapshot.currency,
        payment_terms=snapshot.payment_terms,
        is_tax_exempt=snapshot.is_tax_exempt,
        exemption_reason=snapshot.exemption_reason,
    )


class TransactionBootstrap:
    """Customer state of a transaction form being filled in.

    Holds the selected customer's snapshot and derives the tax regime and
    form values from it. The customers API and the seller's state code are
    passed in rather than read from ambient state.

    Parameters
    ----------
    transaction_type : TransactionType
        Kind of transaction the form creates.
    fetch_customer : CustomerFetcher
        Returns the raw customer record for an id.
    seller_state_code : str
        GST state code of the selling organization.
    defaults : DefaultsConfig | None
        Defaults for blank customer fields.
    clock : Callable[[], datetime] | None
        Source of snapshot capture times.
    """

    def __init__(
        self,
        transaction_type: TransactionType,
        fetch_customer: CustomerFetcher,
        seller_state_code: str = DEFAULT_SELLER_STATE_CODE,
        defaults: DefaultsConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.transaction_type = transaction_type
        self.seller_state_code = seller_state_code
        self._fetch_customer = fetch_customer
        self._defaults = defaults
        self._clock = clock
        self.customer_id: str | None = None
        self.snapshot: CustomerSnapshot | None = None
        self.error: str | None = None

    @property
    def tax_regime(self) -> TaxRegime:
        return determine_tax_regime(self.snapshot, self.seller_state_code)

    @property
    def form_data(self) -> TransactionFormData:
        return build_form_data(self.snapshot)

    def select_customer(self, customer_id: str | None) -> CustomerSnapshot | None:
        """Switch the form to another customer and capture its snapshot.

        Selecting the current customer again keeps the existing snapshot.
        An empty id clears the selection.
        """
        if customer_id == self.customer_id:
            return self.snapshot

        self.clear()
        self.customer_id = customer_id or None
        if self.customer_id is None:
            return None
        return self._load(self.customer_id)

    def refresh(self) -> CustomerSnapshot | None:
        """Re-fetch the current customer and capture a fresh snapshot."""
        if self.customer_id is None:
            return None
        return self._load(self.customer_id)

    def clear(self) -> None:
        self.customer_id = None
        self.snapshot = None
        self.error = None

    def due_date(self, invoice_date: date) -> date:
        """Due date under the customer's payment terms (Net 30 when unknown)."""
        terms = self.form_data.payment_terms
        return calculate_due_date_from_terms(invoice_date, terms)

    def _load(self, customer_id: str) -> CustomerSnapshot | None:
        self.error = None
        try:
            record = self._fetch_customer(customer_id)
            if record is None:
                raise BillingCoreError(f"Customer {customer_id} not found")
            now = self._clock() if self._clock else None
            self.snapshot = create_customer_snapshot(record, now=now, defaults=self._defaults)
        except Exception:
            logger.warning(
                "Failed to load customer %s for %s",
                customer_id,
                self.transaction_type.value,
                exc_info=True,
                extra={
                    "customer_id": customer_id,
                    "transaction_type": self.transaction_type.value,
                },
            )
            self.snapshot = None
            self.error = CUSTOMER_LOAD_ERROR
        return self.snapshot
