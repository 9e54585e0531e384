"""Enumeration types for billing entities."""

from enum import Enum


class TaxPreference(str, Enum):
    TAXABLE = "taxable"
    TAX_EXEMPT = "tax_exempt"


class Regime(str, Enum):
    INTRA = "intra"
    INTER = "inter"
    EXEMPT = "exempt"


class TransactionType(str, Enum):
    INVOICE = "invoice"
    QUOTE = "quote"
    SALES_ORDER = "sales_order"
    DELIVERY_CHALLAN = "delivery_challan"
    PAYMENT = "payment"
    CREDIT_NOTE = "credit_note"


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    PENDING = "PENDING"
    OVERDUE = "OVERDUE"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    VOID = "VOID"
