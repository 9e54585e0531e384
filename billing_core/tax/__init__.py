"""GST regime determination and tax split."""

from billing_core.tax.regime import (
    INTER_IGST_RATE,
    INTRA_CGST_RATE,
    INTRA_SGST_RATE,
    calculate_item_tax,
    calculate_line_items_tax,
    determine_tax_regime,
    extract_state_code_from_gstin,
    resolve_customer_state_code,
    state_code_from_place_of_supply,
)
from billing_core.tax.states import (
    DEFAULT_SELLER_STATE_CODE,
    GST_STATE_CODES,
    format_place_of_supply,
    is_known_state_code,
    state_name,
)

__all__ = [
    "DEFAULT_SELLER_STATE_CODE",
    "GST_STATE_CODES",
    "INTER_IGST_RATE",
    "INTRA_CGST_RATE",
    "INTRA_SGST_RATE",
    "calculate_item_tax",
    "calculate_line_items_tax",
    "determine_tax_regime",
    "extract_state_code_from_gstin",
    "format_place_of_supply",
    "is_known_state_code",
    "resolve_customer_state_code",
    "state_code_from_place_of_supply",
    "state_name",
]
