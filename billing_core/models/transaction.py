"""Form-ready view of a transaction's customer."""

from dataclasses import dataclass

from billing_core.models.enums import TaxPreference


@dataclass(frozen=True)
class TransactionFormData:
    """Values a transaction form pre-fills from the customer snapshot."""

    customer_name: str = ""
    display_name: str = ""
    billing_address_text: str = ""
    shipping_address_text: str = ""
    gst_treatment: str = ""
    tax_preference: TaxPreference = TaxPreference.TAXABLE
    gstin: str = ""
    place_of_supply: str = ""
    pan: str = ""
    currency: str = "INR"
    payment_terms: str = "Due on Receipt"
    is_tax_exempt: bool = False
    exemption_reason: str = ""
