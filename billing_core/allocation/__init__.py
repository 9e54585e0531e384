"""Payment allocation across outstanding bills and invoices."""

from billing_core.allocation.allocator import (
    PaymentAllocator,
    auto_allocate,
    calculate_totals,
    set_bill_payment,
)

__all__ = ["PaymentAllocator", "auto_allocate", "calculate_totals", "set_bill_payment"]
