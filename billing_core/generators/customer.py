"""Customer record generator producing customers-API payloads."""

from __future__ import annotations

import string
from typing import Any, Iterator

from billing_core.generators.base import BaseGenerator
from billing_core.tax.states import GST_STATE_CODES, format_place_of_supply

GST_TREATMENTS = [
    "Registered Business - Regular",
    "Registered Business - Composition",
    "Unregistered Business",
    "Consumer",
]
GST_TREATMENT_WEIGHTS = [0.55, 0.10, 0.15, 0.20]

PAYMENT_TERMS = ["Due on Receipt", "Net 15", "Net 30", "Net 45", "Net 60"]

EXEMPTION_REASONS = [
    "SEZ unit",
    "Charitable trust",
    "Government entity",
]


class CustomerRecordGenerator(BaseGenerator):
    """Generate raw customer records as the customers API returns them.

    Records deliberately vary in shape: addresses arrive either as a
    single-line string or as an object, and registered businesses carry a
    GSTIN while consumers may only have a place of supply, or nothing.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    tax_exempt_rate : float
        Share of customers marked ``tax_exempt``.
    string_address_rate : float
        Share of customers whose billing address is a bare string.
    """

    def __init__(
        self,
        seed: int | None = None,
        tax_exempt_rate: float = 0.05,
        string_address_rate: float = 0.2,
    ) -> None:
        super().__init__(seed)
        self.tax_exempt_rate = tax_exempt_rate
        self.string_address_rate = string_address_rate
        self._state_codes = sorted(GST_STATE_CODES)

    def generate(self, state_code: str | None = None) -> dict[str, Any]:
        """Generate a single customer record.

        Parameters
        ----------
        state_code : str | None
            GST state code of the customer. Random when ``None``.

        Returns
        -------
        dict[str, Any]
            camelCase customer record.
        """
        state_code = state_code or self.random.choice(self._state_codes)
        treatment = self.random.choices(GST_TREATMENTS, weights=GST_TREATMENT_WEIGHTS, k=1)[0]
        registered = treatment.startswith("Registered")
        pan = self.generate_pan()
        company = self.fake.company() if treatment != "Consumer" else ""
        name = self.fake.name()

        record: dict[str, Any] = {
            "id": self.fake.uuid4(),
            "name": name,
            "displayName": company or name,
            "companyName": company,
            "email": self.fake.email(),
            "phone": self.fake.phone_number(),
            "billingAddress": self._address(state_code),
            "gstTreatment": treatment,
            "taxPreference": "taxable",
            "pan": pan,
            "currency": "INR",
            "paymentTerms": self.random.choice(PAYMENT_TERMS),
        }

        if registered:
            record["gstin"] = self.generate_gstin(state_code, pan)
        # Consumers sometimes have no place of supply on file
        if registered or self.random.random() < 0.7:
            record["placeOfSupply"] = format_place_of_supply(state_code)

        if self.random.random() < self.tax_exempt_rate:
            record["taxPreference"] = "tax_exempt"
            record["exemptionReason"] = self.random.choice(EXEMPTION_REASONS)

        if self.random.random() < 0.3:
            record["shippingAddress"] = self._address(state_code)

        return record

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        """Generate multiple customer records.

        Parameters
        ----------
        count : int
            Number of records to generate.

        Yields
        ------
        dict[str, Any]
            Generated customer records.
        """
        for _ in range(count):
            yield self.generate()

    def generate_pan(self) -> str:
        """PAN-shaped id: five letters, four digits, one letter."""
        letters = string.ascii_uppercase
        return (
            "".join(self.random.choices(letters, k=5))
            + "".join(self.random.choices(string.digits, k=4))
            + self.random.choice(letters)
        )

    def generate_gstin(self, state_code: str, pan: str | None = None) -> str:
        """GSTIN-shaped id: state code, PAN, entity number, ``Z``, check char."""
        pan = pan or self.generate_pan()
        check = self.random.choice(string.ascii_uppercase + string.digits)
        return f"{state_code}{pan}1Z{check}"

    def _address(self, state_code: str) -> str | dict[str, str]:
        street = self.fake.street_address()
        if self.random.random() < self.string_address_rate:
            return street
        return {
            "street": street,
            "city": self.fake.city(),
            "state": GST_STATE_CODES[state_code],
            "country": "India",
            "pincode": self.fake.postcode(),
        }
