"""Tax regime and per-item tax models."""

from dataclasses import dataclass
from decimal import Decimal

from billing_core.models.enums import Regime


@dataclass(frozen=True)
class TaxRegime:
    """GST treatment for a transaction. Rates are percentages."""

    regime: Regime
    cgst_rate: Decimal
    sgst_rate: Decimal
    igst_rate: Decimal
    reason: str | None = None


@dataclass(frozen=True)
class ItemTax:
    """Tax amounts for one line item."""

    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total: Decimal
