"""Faker-based generators of sample customers-API and bills-API records."""

from billing_core.generators.bill import BillRecordGenerator
from billing_core.generators.customer import CustomerRecordGenerator

__all__ = ["BillRecordGenerator", "CustomerRecordGenerator"]
