"""Oldest-first allocation of a payment across outstanding bills."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from billing_core.exceptions import PayableNotFoundError
from billing_core.models import Allocation, BillPayment, Payable, PaymentTotals
from billing_core.money import ZERO, to_decimal

logger = logging.getLogger(__name__)


def _unique_by_id(payables: Iterable[Payable]) -> list[Payable]:
    """Drop payables whose id was already seen, keeping the first."""
    seen: set[str] = set()
    unique = []
    for payable in payables:
        if payable.id in seen:
            logger.warning(
                "Ignoring duplicate payable %s",
                payable.id,
                extra={"payable_id": payable.id},
            )
            continue
        seen.add(payable.id)
        unique.append(payable)
    return unique


def auto_allocate(
    total_amount: Any,
    payables: Iterable[Payable],
    today: date | None = None,
) -> Allocation:
    """Spread a payment over outstanding payables, oldest first.

    Payables are ordered by date (a missing date counts as ``today``).
    Each payable with a positive balance receives
    ``min(remaining, amount_due)`` until the payment runs out. Whatever is
    left afterwards is not recorded; see :func:`calculate_totals`. A payable
    whose id repeats an earlier one is ignored with a warning.

    Parameters
    ----------
    total_amount : Any
        Payment entered by the user. NaN, negative and non-numeric values
        count as zero.
    payables : Iterable[Payable]
        Outstanding bills or invoices of one party.
    today : date | None
        Date stamped on each allocation. Defaults to ``date.today()``.

    Returns
    -------
    Allocation
        Payable id -> payment. Empty when nothing can be allocated.
    """
    payables = _unique_by_id(payables)
    if not payables:
        return {}

    remaining = to_decimal(total_amount)
    if remaining <= 0:
        return {}

    today = today or date.today()
    ordered = sorted(payables, key=lambda p: p.date or today)

    allocation: Allocation = {}
    for payable in ordered:
        if remaining <= 0:
            break
        if payable.amount_due <= 0:
            continue

        payment = min(remaining, payable.amount_due)
        allocation[payable.id] = BillPayment(payment=payment, payment_made_on=today)
        remaining -= payment
        logger.debug(
            "Allocated %s to %s, remaining: %s",
            payment,
            payable.number or payable.id,
            remaining,
            extra={"payable_id": payable.id, "payment": payment, "remaining": remaining},
        )

    return allocation


def set_bill_payment(
    allocation: Allocation,
    bill_id: str,
    amount: Any,
    today: date | None = None,
) -> Allocation:
    """Return a copy of ``allocation`` with one payable's payment replaced.

    The sweep is not re-run and the amount is not clamped, so the sum may
    exceed the entered total.
    """
    updated = dict(allocation)
    updated[bill_id] = BillPayment(
        payment=to_decimal(amount),
        payment_made_on=today or date.today(),
    )
    return updated


def calculate_totals(allocation: Allocation, total_amount: Any) -> PaymentTotals:
    """Summarize an allocation against the entered payment amount.

    Parameters
    ----------
    allocation : Allocation
        Current per-payable payments.
    total_amount : Any
        Payment entered by the user.

    Returns
    -------
    PaymentTotals
        ``amount_in_excess`` is ``amount_paid - used_for_payments`` and may be
        negative.
    """
    amount_paid = to_decimal(total_amount)
    used_for_payments = sum((entry.payment for entry in allocation.values()), ZERO)
    return PaymentTotals(
        amount_paid=amount_paid,
        used_for_payments=used_for_payments,
        amount_refunded=ZERO,
        amount_in_excess=amount_paid - used_for_payments,
    )


class PaymentAllocator:
    """Allocation state behind a bill-payment or payment-received form.

    Changing the total re-runs :func:`auto_allocate` and discards manual
    edits. Manual edits stay until the total or the payables change.

    Parameters
    ----------
    payables : Iterable[Payable] | None
        Outstanding payables of the selected party.
    today : date | None
        Fixed date for ``payment_made_on``. When ``None`` each call uses
        ``date.today()``.
    """

    def __init__(
        self,
        payables: Iterable[Payable] | None = None,
        today: date | None = None,
    ) -> None:
        self._payables: dict[str, Payable] = {}
        self._today = today
        self._total: Decimal = ZERO
        self._allocation: Allocation = {}
        if payables is not None:
            self.set_payables(payables)

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def payables(self) -> list[Payable]:
        return list(self._payables.values())

    @property
    def allocation(self) -> Allocation:
        return dict(self._allocation)

    @property
    def totals(self) -> PaymentTotals:
        return calculate_totals(self._allocation, self._total)

    @property
    def excess(self) -> Decimal:
        return self.totals.amount_in_excess

    def set_payables(self, payables: Iterable[Payable]) -> Allocation:
        """Replace the outstanding payables, e.g. after the party changes."""
        self._payables = {p.id: p for p in _unique_by_id(payables)}
        self._allocation = {}
        if self._total > 0:
            self._reallocate()
        return self.allocation

    def set_total(self, amount: Any) -> Allocation:
        """Set the payment amount and recompute the allocation from scratch."""
        self._total = to_decimal(amount)
        self._reallocate()
        return self.allocation

    def set_payment(self, bill_id: str, amount: Any, clamp: bool = False) -> Allocation:
        """Manually set the payment applied to one payable.

        Parameters
        ----------
        bill_id : str
            Payable id.
        amount : Any
            Payment to apply.
        clamp : bool
            Limit the amount to ``[0, amount_due]`` of the payable.

        Raises
        ------
        PayableNotFoundError
            If ``clamp`` is set and ``bill_id`` is not an outstanding payable.
        """
        payment = to_decimal(amount)
        if clamp:
            payable = self._payables.get(bill_id)
            if payable is None:
                raise PayableNotFoundError(f"Payable {bill_id} not found")
            payment = min(max(ZERO, payment), payable.amount_due)

        self._allocation = set_bill_payment(self._allocation, bill_id, payment, self._today)
        return self.allocation

    def clear(self) -> None:
        """Drop the total and every allocation."""
        self._total = ZERO
        self._allocation = {}

    def _reallocate(self) -> None:
        self._allocation = auto_allocate(self._total, self._payables.values(), self._today)
