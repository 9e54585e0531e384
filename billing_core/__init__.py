"""GST tax-regime resolution and payment allocation for billing forms."""

__version__ = "0.1.0"
