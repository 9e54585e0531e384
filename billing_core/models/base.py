"""Base models shared across billing entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address as stored on a customer or vendor.

    Every field is a plain string; blanks are ``""`` rather than ``None`` so
    that forms can render the address without further checks.
    """

    street: str = ""
    city: str = ""
    state: str = ""
    country: str = "India"
    postal_code: str = ""
