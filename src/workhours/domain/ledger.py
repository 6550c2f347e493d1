"""Payment ledger entries.

A payment record snapshots an invoice total at the time it is marked due or
withdrawn. The amount is taken as given and never recomputed, so later edits
to work records leave recorded payments untouched. Any sequence of actions
is accepted for a period.
"""

import uuid
from datetime import date, datetime, UTC
from typing import Optional

from workhours.domain.entities import PaymentAction, PaymentRecord
from workhours.domain.errors import ValidationError


def parse_payment_action(action: PaymentAction | str) -> PaymentAction:
    """Convert an action name to a PaymentAction.

    Raises:
        ValidationError: If the name is not a known action
    """
    if isinstance(action, PaymentAction):
        return action
    try:
        return PaymentAction(str(action).strip().lower())
    except ValueError:
        choices = ", ".join(a.value for a in PaymentAction)
        raise ValidationError(f"Unknown payment action '{action}'. Choose from: {choices}")


def record_payment(
    company_id: str,
    period_start: date,
    period_end: date,
    amount: float,
    action: PaymentAction | str,
    *,
    now: Optional[datetime] = None,
) -> PaymentRecord:
    """Create a new payment record.

    Args:
        company_id: Company the payment refers to
        period_start: First day of the invoiced period
        period_end: Last day of the invoiced period
        amount: Total to snapshot
        action: Due or withdrawn
        now: Creation timestamp (defaults to the current UTC time)

    Returns:
        New PaymentRecord with a fresh ID
    """
    return PaymentRecord(
        id=uuid.uuid4().hex,
        company_id=company_id,
        period_start=period_start,
        period_end=period_end,
        amount=float(amount),
        action=parse_payment_action(action),
        created_at=now if now is not None else datetime.now(UTC),
    )
