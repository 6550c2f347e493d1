"""Work record domain service."""

import dataclasses
import logging
import math
import uuid
from datetime import date, datetime
from typing import Any, Optional

from workhours.database.base import Database
from workhours.domain.entities import WorkRecord
from workhours.domain.errors import (
    NotFoundError,
    ValidationError,
    company_not_found,
    negative_value,
    not_finite,
    work_record_not_found,
)

logger = logging.getLogger(__name__)

NON_NEGATIVE_FIELDS = (
    "hours_worked",
    "break_duration",
    "unit_count",
    "unit_rate",
    "transport_bill",
)


class WorkRecordService:
    """Service for logging work sessions and piecework."""

    def __init__(self, db: Database):
        """Initialize work record service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_record(
        self,
        company_id: str,
        record_date: date,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        hours_worked: Optional[float] = None,
        break_duration: Optional[float] = None,
        unit_count: Optional[float] = None,
        unit_rate: Optional[float] = None,
        transport_bill: Optional[float] = None,
    ) -> WorkRecord:
        """Log a work record for a company.

        Args:
            company_id: Company the work is billed to
            record_date: Day the work is attributed to
            start_time: Optional session start
            end_time: Optional session end
            hours_worked: Manual hours, used when start/end are not both set
            break_duration: Break hours subtracted from the session
            unit_count: Piecework units
            unit_rate: Per-unit rate overriding the company's point rate
            transport_bill: Flat transport add-on

        Returns:
            The created WorkRecord

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If a quantity is negative
        """
        record = WorkRecord(
            id=uuid.uuid4().hex,
            company_id=company_id,
            date=record_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=hours_worked,
            break_duration=break_duration,
            unit_count=unit_count,
            unit_rate=unit_rate,
            transport_bill=transport_bill,
        )
        self._validate(record)

        records = self.db.load_work_records()
        records.append(record)
        self.db.save_work_records(records)
        logger.debug("Added work record %s for company %s", record.id, company_id)
        return record

    def get_record(self, record_id: str) -> Optional[WorkRecord]:
        """Get work record by ID."""
        for record in self.db.load_work_records():
            if record.id == record_id:
                return record
        return None

    def list_records(self, company_id: Optional[str] = None) -> list[WorkRecord]:
        """List work records, most recent first.

        Args:
            company_id: Optional company ID filter
        """
        records = self.db.load_work_records()
        if company_id is not None:
            records = [r for r in records if r.company_id == company_id]
        return sorted(records, key=lambda r: r.date, reverse=True)

    def replace_record(self, record: WorkRecord) -> WorkRecord:
        """Replace a stored work record with the same ID.

        Raises:
            NotFoundError: If no record has this ID or its company is gone
            ValidationError: If a quantity is negative
        """
        self._validate(record)
        records = self.db.load_work_records()
        for index, existing in enumerate(records):
            if existing.id == record.id:
                records[index] = record
                self.db.save_work_records(records)
                return record
        raise NotFoundError(work_record_not_found(record.id))

    def update_record(self, record_id: str, **changes: Any) -> WorkRecord:
        """Replace a work record with an edited copy."""
        if "id" in changes:
            raise ValidationError("Work record ID cannot be changed")
        record = self.get_record(record_id)
        if record is None:
            raise NotFoundError(work_record_not_found(record_id))
        return self.replace_record(dataclasses.replace(record, **changes))

    def delete_record(self, record_id: str) -> None:
        """Delete a single work record.

        Raises:
            NotFoundError: If no record has this ID
        """
        records = self.db.load_work_records()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            raise NotFoundError(work_record_not_found(record_id))
        self.db.save_work_records(remaining)

    def _validate(self, record: WorkRecord) -> None:
        if not any(c.id == record.company_id for c in self.db.load_companies()):
            raise NotFoundError(company_not_found(record.company_id))
        for field_name in NON_NEGATIVE_FIELDS:
            value = getattr(record, field_name)
            if value is not None and not math.isfinite(value):
                raise ValidationError(not_finite(field_name, value))
            if value is not None and value < 0:
                raise ValidationError(negative_value(field_name, value))
