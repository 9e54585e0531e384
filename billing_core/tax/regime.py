"""GST regime determination and line-item tax split."""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Iterable

from billing_core.models import CustomerSnapshot, ItemTax, Regime, TaxPreference, TaxRegime
from billing_core.money import ZERO as _ZERO
from billing_core.money import to_decimal
from billing_core.tax.states import DEFAULT_SELLER_STATE_CODE

logger = logging.getLogger(__name__)

# Fixed rates applied regardless of the item's configured GST rate
INTRA_CGST_RATE = Decimal("9")
INTRA_SGST_RATE = Decimal("9")
INTER_IGST_RATE = Decimal("18")

_HUNDRED = Decimal("100")
_STATE_CODE_PATTERN = re.compile(r"^(\d{2})")


def _intra(reason: str) -> TaxRegime:
    return TaxRegime(
        regime=Regime.INTRA,
        cgst_rate=INTRA_CGST_RATE,
        sgst_rate=INTRA_SGST_RATE,
        igst_rate=_ZERO,
        reason=reason,
    )


def extract_state_code_from_gstin(gstin: str) -> str:
    """Return the state code encoded in a GSTIN, or ``""`` if too short."""
    if not gstin or len(gstin) < 2:
        return ""
    return gstin[:2]


def state_code_from_place_of_supply(place_of_supply: str) -> str:
    """Return the leading two digits of a place of supply (``"27 - Maharashtra"``)."""
    if not place_of_supply:
        return ""
    match = _STATE_CODE_PATTERN.match(place_of_supply)
    return match.group(1) if match else ""


def resolve_customer_state_code(snapshot: CustomerSnapshot) -> str:
    """Customer state code: place of supply first, then GSTIN."""
    return state_code_from_place_of_supply(
        snapshot.place_of_supply
    ) or extract_state_code_from_gstin(snapshot.gstin)


def determine_tax_regime(
    snapshot: CustomerSnapshot | None,
    seller_state_code: str = DEFAULT_SELLER_STATE_CODE,
) -> TaxRegime:
    """Decide the GST treatment of a transaction.

    Rules are evaluated in order and the first match wins:

    1. no customer selected: intra-state
    2. tax-exempt customer: exempt, regardless of state
    3. customer state unknown: intra-state
    4. customer state equals ``seller_state_code``: intra-state
    5. otherwise: inter-state

    Intra-state always uses 9% CGST + 9% SGST and inter-state 18% IGST.
    Missing or malformed data never raises; it falls back to intra-state.

    Parameters
    ----------
    snapshot : CustomerSnapshot | None
        Customer attached to the transaction, if any.
    seller_state_code : str
        Two-digit GST state code of the selling organization.

    Returns
    -------
    TaxRegime
        Regime, rates and a human-readable reason.
    """
    if snapshot is None:
        return _intra("No customer selected")

    if snapshot.tax_preference == TaxPreference.TAX_EXEMPT:
        return TaxRegime(
            regime=Regime.EXEMPT,
            cgst_rate=_ZERO,
            sgst_rate=_ZERO,
            igst_rate=_ZERO,
            reason=snapshot.exemption_reason or "Customer is tax exempt",
        )

    customer_state_code = resolve_customer_state_code(snapshot)

    if not customer_state_code:
        logger.debug(
            "No state code for customer %s, defaulting to intra-state", snapshot.customer_id
        )
        return _intra("Same state transaction (default)")

    if customer_state_code == seller_state_code:
        return _intra("Same state transaction")

    return TaxRegime(
        regime=Regime.INTER,
        cgst_rate=_ZERO,
        sgst_rate=_ZERO,
        igst_rate=INTER_IGST_RATE,
        reason="Inter-state transaction",
    )


def calculate_item_tax(
    amount: Decimal | float | int | str,
    gst_rate: Decimal | float | int | str,
    regime: TaxRegime,
) -> ItemTax:
    """Split the GST on one line item according to ``regime``.

    Parameters
    ----------
    amount : Decimal | float | int | str
        Taxable amount of the line.
    gst_rate : Decimal | float | int | str
        Item GST rate in percent (e.g. 18).
    regime : TaxRegime
        Result of :func:`determine_tax_regime`.

    Returns
    -------
    ItemTax
        Unrounded CGST, SGST, IGST and their sum.
    """
    amount = to_decimal(amount)
    gst_rate = to_decimal(gst_rate)

    if regime.regime == Regime.EXEMPT or gst_rate <= 0:
        return ItemTax(cgst=_ZERO, sgst=_ZERO, igst=_ZERO, total=_ZERO)

    total_tax = amount * gst_rate / _HUNDRED

    if regime.regime == Regime.INTER:
        return ItemTax(cgst=_ZERO, sgst=_ZERO, igst=total_tax, total=total_tax)

    half_tax = total_tax / 2
    return ItemTax(cgst=half_tax, sgst=half_tax, igst=_ZERO, total=total_tax)


def calculate_line_items_tax(
    lines: Iterable[tuple[Decimal | float | int | str, Decimal | float | int | str]],
    regime: TaxRegime,
) -> ItemTax:
    """Sum the tax of several ``(amount, gst_rate)`` lines under one regime."""
    cgst = sgst = igst = _ZERO
    for amount, gst_rate in lines:
        item = calculate_item_tax(amount, gst_rate, regime)
        cgst += item.cgst
        sgst += item.sgst
        igst += item.igst
    return ItemTax(cgst=cgst, sgst=sgst, igst=igst, total=cgst + sgst + igst)
