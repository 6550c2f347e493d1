"""Payment ledger domain service."""

import logging
from datetime import date, datetime
from typing import Optional

from workhours.database.base import Database
from workhours.domain.entities import PaymentAction, PaymentRecord
from workhours.domain.errors import NotFoundError, payment_record_not_found
from workhours.domain.ledger import record_payment

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for the append-only payment ledger."""

    def __init__(self, db: Database):
        """Initialize payment service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_payment(
        self,
        company_id: str,
        period_start: date,
        period_end: date,
        amount: float,
        action: PaymentAction | str,
        now: Optional[datetime] = None,
    ) -> PaymentRecord:
        """Append a payment record to the ledger.

        The amount is stored as given. No check is made against earlier
        records for the same period.

        Returns:
            The new PaymentRecord
        """
        payment = record_payment(
            company_id, period_start, period_end, amount, action, now=now
        )
        payments = self.db.load_payment_records()
        payments.append(payment)
        self.db.save_payment_records(payments)
        logger.info(
            "Recorded %s payment of %.2f for company %s (%s to %s)",
            payment.action.value,
            payment.amount,
            company_id,
            period_start.isoformat(),
            period_end.isoformat(),
        )
        return payment

    def list_payments(self, company_id: Optional[str] = None) -> list[PaymentRecord]:
        """List payment records, most recent first.

        Args:
            company_id: Optional company ID filter
        """
        payments = self.db.load_payment_records()
        if company_id is not None:
            payments = [p for p in payments if p.company_id == company_id]
        return sorted(payments, key=lambda p: p.created_at, reverse=True)

    def delete_payment(self, payment_id: str) -> None:
        """Delete a single payment record.

        Raises:
            NotFoundError: If no payment record has this ID
        """
        payments = self.db.load_payment_records()
        remaining = [p for p in payments if p.id != payment_id]
        if len(remaining) == len(payments):
            raise NotFoundError(payment_record_not_found(payment_id))
        self.db.save_payment_records(remaining)
