"""Billing domain models."""

from billing_core.models.base import Address
from billing_core.models.customer import CustomerSnapshot
from billing_core.models.enums import InvoiceStatus, Regime, TaxPreference, TransactionType
from billing_core.models.payable import Allocation, BillPayment, Payable, PaymentTotals
from billing_core.models.tax import ItemTax, TaxRegime
from billing_core.models.transaction import TransactionFormData

__all__ = [
    "Address",
    "Allocation",
    "BillPayment",
    "CustomerSnapshot",
    "InvoiceStatus",
    "ItemTax",
    "Payable",
    "PaymentTotals",
    "Regime",
    "TaxPreference",
    "TaxRegime",
    "TransactionFormData",
    "TransactionType",
]
