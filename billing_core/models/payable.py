"""Payable (bill/invoice) and payment allocation models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from billing_core.money import to_decimal


@dataclass(frozen=True)
class Payable:
    """Outstanding bill or invoice, normalized for allocation.

    ``total`` and ``amount_due`` are coerced to finite Decimals, so floats,
    numeric strings and NaN are accepted.
    """

    id: str
    date: date | None
    total: Decimal
    amount_due: Decimal  # total - amount paid so far
    number: str = ""  # bill number or invoice number
    status: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", to_decimal(self.total))
        object.__setattr__(self, "amount_due", to_decimal(self.amount_due))


@dataclass(frozen=True)
class BillPayment:
    """Amount applied to a single payable."""

    payment: Decimal
    payment_made_on: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "payment", to_decimal(self.payment))


# payable id -> payment applied to it
Allocation = dict[str, BillPayment]


@dataclass(frozen=True)
class PaymentTotals:
    """Summary shown under the payment form."""

    amount_paid: Decimal
    used_for_payments: Decimal
    amount_refunded: Decimal
    amount_in_excess: Decimal  # negative when manually over-allocated
