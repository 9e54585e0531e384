#!/usr/bin/env python3
"""Generate sample data files for validation.

Generates customer records, their snapshots and tax regimes, plus vendor
bills with an oldest-first allocation of a sample payment, and writes each
to a JSON file in the configured output directory.
"""

import argparse
import json
import logging
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from billing_core.adapters import create_customer_snapshot, normalize_bill
from billing_core.allocation import PaymentAllocator
from billing_core.config import BillingConfig
from billing_core.generators import BillRecordGenerator, CustomerRecordGenerator
from billing_core.logging import setup_logging
from billing_core.serialization import allocation_to_payload, to_dict
from billing_core.tax import calculate_item_tax, determine_tax_regime

logger = logging.getLogger("billing_core.scripts.sample_data")


def save_json(data: list | dict, filename: str, output_dir: Path, pretty: bool) -> None:
    """Save data to JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2 if pretty else None, ensure_ascii=False)
    logger.info("Saved %s to %s", filename, filepath)


def generate_customers(config: BillingConfig, count: int) -> list[dict]:
    """Generate customers with their snapshot, regime and a sample line tax."""
    customer_gen = CustomerRecordGenerator(seed=config.seed)
    rows = []
    for record in customer_gen.generate_batch(count):
        snapshot = create_customer_snapshot(record, defaults=config.defaults)
        regime = determine_tax_regime(snapshot, config.tax.seller_state_code)
        sample_tax = calculate_item_tax(Decimal("1000"), Decimal("18"), regime)
        rows.append(
            {
                "record": record,
                "snapshot": to_dict(snapshot),
                "taxRegime": to_dict(regime),
                "sampleLineTax": to_dict(sample_tax),
            }
        )
    return rows


def generate_bill_payment(
    config: BillingConfig, bills_per_vendor: int, as_of: date
) -> dict:
    """Generate one vendor's bills and allocate a payment across them."""
    bill_gen = BillRecordGenerator(seed=config.seed)
    records = list(bill_gen.generate_for_vendor("vendor-sample-001", bills_per_vendor, as_of))
    payables = [normalize_bill(r) for r in records]

    outstanding = sum((p.amount_due for p in payables if p.amount_due > 0), Decimal("0"))
    payment = (outstanding * Decimal("0.6")).quantize(Decimal("0.01"))

    allocator = PaymentAllocator(payables, today=as_of)
    allocator.set_total(payment)

    return {
        "bills": records,
        "paymentAmount": str(payment),
        "billPayments": allocation_to_payload(allocator.allocation),
        "totals": to_dict(allocator.totals),
    }


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--customers", type=int, default=20)
    parser.add_argument("--bills", type=int, default=8)
    args = parser.parse_args()

    config = BillingConfig.from_env()
    setup_logging(config.log_level)

    output_dir = config.output.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    as_of = date.today()

    logger.info("Generating %d customers", args.customers)
    customers = generate_customers(config, args.customers)
    save_json(customers, "customers.json", output_dir, config.output.pretty_json)

    logger.info("Generating %d bills and allocating a payment", args.bills)
    bill_payment = generate_bill_payment(config, args.bills, as_of)
    save_json(bill_payment, "bill_payment.json", output_dir, config.output.pretty_json)

    return 0


if __name__ == "__main__":
    sys.exit(main())
