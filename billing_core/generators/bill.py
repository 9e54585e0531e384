"""Bill record generator producing bills-API payloads."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Iterator

from billing_core.generators.base import BaseGenerator

BILL_STATUSES = ["OPEN", "PARTIALLY_PAID", "OVERDUE", "PAID"]
BILL_STATUS_WEIGHTS = [0.5, 0.2, 0.2, 0.1]


class BillRecordGenerator(BaseGenerator):
    """Generate raw vendor bills with ``balanceDue`` and ``billDate``."""

    def __init__(
        self,
        seed: int | None = None,
        min_total: float = 500.0,
        max_total: float = 250000.0,
    ) -> None:
        super().__init__(seed)
        self.min_total = min_total
        self.max_total = max_total
        self._sequence = 0

    def generate(self, vendor_id: str, as_of: date | None = None) -> dict[str, Any]:
        """Generate a single bill for ``vendor_id``.

        Parameters
        ----------
        vendor_id : str
            Vendor the bill belongs to.
        as_of : date | None
            Latest possible bill date. Defaults to today.

        Returns
        -------
        dict[str, Any]
            camelCase bill record.
        """
        as_of = as_of or date.today()
        self._sequence += 1

        total = Decimal(str(round(self.random.uniform(self.min_total, self.max_total), 2)))
        status = self.random.choices(BILL_STATUSES, weights=BILL_STATUS_WEIGHTS, k=1)[0]
        if status == "PAID":
            balance_due = Decimal("0.00")
        elif status == "PARTIALLY_PAID":
            paid_share = Decimal(str(round(self.random.uniform(0.1, 0.9), 2)))
            balance_due = (total * (1 - paid_share)).quantize(Decimal("0.01"))
        else:
            balance_due = total

        bill_date = as_of - timedelta(days=self.random.randint(0, 180))

        return {
            "id": self.fake.uuid4(),
            "vendorId": vendor_id,
            "billNumber": f"BILL-{self._sequence:05d}",
            "billDate": bill_date.isoformat(),
            "total": float(total),
            "balanceDue": float(balance_due),
            "status": status,
        }

    def generate_for_vendor(
        self,
        vendor_id: str,
        count: int,
        as_of: date | None = None,
    ) -> Iterator[dict[str, Any]]:
        """Generate ``count`` bills for one vendor.

        Yields
        ------
        dict[str, Any]
            Generated bill records.
        """
        for _ in range(count):
            yield self.generate(vendor_id, as_of)
