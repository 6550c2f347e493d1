"""Domain layer for workhours application.

Only the pure billing core is exported here; services live in their own
modules because they depend on the database layer.
"""

from workhours.domain.billing_period import custom_range, resolve_period
from workhours.domain.earnings import compute_earnings, record_earnings, select_records
from workhours.domain.ledger import record_payment

__all__ = [
    "resolve_period",
    "custom_range",
    "select_records",
    "compute_earnings",
    "record_earnings",
    "record_payment",
]
