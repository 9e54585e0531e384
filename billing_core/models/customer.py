"""Customer snapshot model."""

from dataclasses import dataclass, field
from datetime import datetime

from billing_core.models.base import Address
from billing_core.models.enums import TaxPreference


@dataclass(frozen=True)
class CustomerSnapshot:
    """Point-in-time copy of a customer, attached to a transaction.

    Later edits to the customer record do not reach transactions that already
    hold a snapshot. Choosing another customer captures a new snapshot.
    """

    customer_id: str
    customer_name: str
    display_name: str
    company_name: str
    email: str
    phone: str

    billing_address: Address
    shipping_address: Address

    gst_treatment: str  # e.g. "Registered Business - Regular", "Consumer"
    tax_preference: TaxPreference
    gstin: str  # 15 chars, first two are the state code
    place_of_supply: str  # "29 - Karnataka"
    pan: str

    snapshot_date: datetime
    exemption_reason: str = ""
    currency: str = "INR"
    payment_terms: str = "Due on Receipt"
    price_list: str = ""

    @property
    def is_tax_exempt(self) -> bool:
        return self.tax_preference == TaxPreference.TAX_EXEMPT
