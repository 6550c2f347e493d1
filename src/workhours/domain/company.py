"""Company domain service."""

import dataclasses
import logging
import math
import uuid
from typing import Any, Optional

from workhours.database.base import Database
from workhours.domain.billing_period import validate_month_start_day
from workhours.domain.entities import Company, PaymentType
from workhours.domain.errors import (
    NotFoundError,
    ValidationError,
    company_not_found,
    negative_value,
    not_finite,
)

logger = logging.getLogger(__name__)


def parse_payment_type(payment_type: PaymentType | str) -> PaymentType:
    """Convert a payment type name to a PaymentType.

    Raises:
        ValidationError: If the name is not a known payment type
    """
    if isinstance(payment_type, PaymentType):
        return payment_type
    try:
        return PaymentType(str(payment_type).strip().lower())
    except ValueError:
        choices = ", ".join(t.value for t in PaymentType)
        raise ValidationError(f"Unknown payment type '{payment_type}'. Choose from: {choices}")


class CompanyService:
    """Service for managing companies."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(
        self,
        name: str,
        payment_type: PaymentType | str,
        hourly_rate: Optional[float] = None,
        point_rate: Optional[float] = None,
        month_start_day: int = 1,
    ) -> Company:
        """Create a new company.

        Args:
            name: Company name
            payment_type: Hourly or point (piecework) payment
            hourly_rate: Pay per hour
            point_rate: Pay per unit
            month_start_day: Billing cycle anchor, 1 or 16

        Returns:
            The created Company

        Raises:
            ValidationError: If any field is invalid
        """
        company = self._validated(
            Company(
                id=uuid.uuid4().hex,
                name=name,
                payment_type=parse_payment_type(payment_type),
                hourly_rate=hourly_rate,
                point_rate=point_rate,
                month_start_day=month_start_day,
            )
        )
        companies = self.db.load_companies()
        companies.append(company)
        self.db.save_companies(companies)
        logger.info("Created company %s (%s)", company.name, company.id)
        return company

    def get_company(self, company_id: str) -> Optional[Company]:
        """Get company by ID.

        Args:
            company_id: Company ID

        Returns:
            Company entity or None if not found
        """
        for company in self.db.load_companies():
            if company.id == company_id:
                return company
        return None

    def require_company(self, company_id: str) -> Company:
        """Get company by ID, raising if it does not exist."""
        company = self.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        return company

    def list_companies(self) -> list[Company]:
        """List all companies sorted by name."""
        return sorted(self.db.load_companies(), key=lambda c: (c.name.lower(), c.id))

    def update_company(self, company_id: str, **changes: Any) -> Company:
        """Replace a company with an edited copy.

        Args:
            company_id: Company ID to edit
            **changes: Company fields to change (name, payment_type,
                hourly_rate, point_rate, month_start_day)

        Returns:
            The updated Company

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the edited company is invalid
        """
        if "id" in changes:
            raise ValidationError("Company ID cannot be changed")
        if "payment_type" in changes:
            changes["payment_type"] = parse_payment_type(changes["payment_type"])

        companies = self.db.load_companies()
        for index, company in enumerate(companies):
            if company.id == company_id:
                updated = self._validated(dataclasses.replace(company, **changes))
                companies[index] = updated
                self.db.save_companies(companies)
                return updated
        raise NotFoundError(company_not_found(company_id))

    def delete_company(self, company_id: str) -> int:
        """Delete a company together with all of its work records.

        Payment records are kept: they are snapshots and stay valid after
        the company is gone.

        Args:
            company_id: Company ID to delete

        Returns:
            Number of work records deleted with the company

        Raises:
            NotFoundError: If the company does not exist
        """
        companies = self.db.load_companies()
        remaining = [c for c in companies if c.id != company_id]
        if len(remaining) == len(companies):
            raise NotFoundError(company_not_found(company_id))

        records = self.db.load_work_records()
        kept_records = [r for r in records if r.company_id != company_id]
        removed = len(records) - len(kept_records)

        self.db.save_snapshot(companies=remaining, work_records=kept_records)
        logger.info("Deleted company %s and %d work records", company_id, removed)
        return removed

    def _validated(self, company: Company) -> Company:
        name = (company.name or "").strip()
        if not name:
            raise ValidationError("Company name cannot be empty")
        validate_month_start_day(company.month_start_day)
        for field_name in ("hourly_rate", "point_rate"):
            value = getattr(company, field_name)
            if value is not None and not math.isfinite(value):
                raise ValidationError(not_finite(field_name, value))
            if value is not None and value < 0:
                raise ValidationError(negative_value(field_name, value))
        return dataclasses.replace(company, name=name)
