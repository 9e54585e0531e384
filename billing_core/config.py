"""Configuration management for billing-core."""

from dataclasses import dataclass, field
from pathlib import Path

from billing_core.exceptions import ConfigurationError
from billing_core.tax.states import DEFAULT_SELLER_STATE_CODE, is_known_state_code

# Tenant header the host application sends on every API call
ORGANIZATION_HEADER = "x-organization-id"


@dataclass
class TaxConfig:
    """Seller-side tax configuration."""

    seller_state_code: str = DEFAULT_SELLER_STATE_CODE


@dataclass
class DefaultsConfig:
    """Defaults applied when a customer record leaves a field blank."""

    currency: str = "INR"
    payment_terms: str = "Due on Receipt"
    country: str = "India"


@dataclass
class OutputConfig:
    """Output configuration for the sample-data script."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class BillingConfig:
    """Main configuration for billing-core."""

    tax: TaxConfig = field(default_factory=TaxConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    def validate(self) -> None:
        """Check the configuration.

        Raises
        ------
        ConfigurationError
            If the seller state code is not a GST state code.
        """
        if not is_known_state_code(self.tax.seller_state_code):
            raise ConfigurationError(
                f"Unknown seller state code: {self.tax.seller_state_code!r}"
            )

    @classmethod
    def from_env(cls) -> "BillingConfig":
        """Create config from environment variables."""
        import os

        tax = TaxConfig(
            seller_state_code=os.getenv("SELLER_STATE_CODE", DEFAULT_SELLER_STATE_CODE),
        )

        defaults = DefaultsConfig(
            currency=os.getenv("DEFAULT_CURRENCY", "INR"),
            payment_terms=os.getenv("DEFAULT_PAYMENT_TERMS", "Due on Receipt"),
            country=os.getenv("DEFAULT_COUNTRY", "India"),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        config = cls(
            tax=tax,
            defaults=defaults,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
        config.validate()
        return config
