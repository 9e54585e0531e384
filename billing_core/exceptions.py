"""Custom exception hierarchy for billing-core."""


class BillingCoreError(Exception):
    """Base exception for all billing-core errors."""


class ConfigurationError(BillingCoreError):
    """Raised when configuration is invalid or missing."""


class PayloadShapeError(BillingCoreError):
    """Raised when an API payload cannot be adapted into a record."""


class PayableNotFoundError(BillingCoreError):
    """Raised when a bill or invoice id is not among the outstanding payables."""
