"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the billing code never sees
ORM objects and the schema can change without touching it.
"""

from workhours.domain import entities as domain
from workhours.database.models import (
    Company as ORMCompany,
    WorkRecord as ORMWorkRecord,
    PaymentRecord as ORMPaymentRecord,
)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        payment_type=domain.PaymentType(orm_company.payment_type),
        hourly_rate=orm_company.hourly_rate,
        point_rate=orm_company.point_rate,
        month_start_day=orm_company.month_start_day,
    )


def company_to_orm(company: domain.Company) -> ORMCompany:
    """Convert domain Company entity to SQLAlchemy Company model."""
    return ORMCompany(
        id=company.id,
        name=company.name,
        payment_type=company.payment_type.value,
        hourly_rate=company.hourly_rate,
        point_rate=company.point_rate,
        month_start_day=company.month_start_day,
    )


def work_record_to_domain(orm_record: ORMWorkRecord) -> domain.WorkRecord:
    """Convert SQLAlchemy WorkRecord model to domain WorkRecord entity."""
    return domain.WorkRecord(
        id=orm_record.id,
        company_id=orm_record.company_id,
        date=orm_record.date,
        start_time=orm_record.start_time,
        end_time=orm_record.end_time,
        hours_worked=orm_record.hours_worked,
        break_duration=orm_record.break_duration,
        unit_count=orm_record.unit_count,
        unit_rate=orm_record.unit_rate,
        transport_bill=orm_record.transport_bill,
    )


def work_record_to_orm(record: domain.WorkRecord) -> ORMWorkRecord:
    """Convert domain WorkRecord entity to SQLAlchemy WorkRecord model."""
    return ORMWorkRecord(
        id=record.id,
        company_id=record.company_id,
        date=record.date,
        start_time=record.start_time,
        end_time=record.end_time,
        hours_worked=record.hours_worked,
        break_duration=record.break_duration,
        unit_count=record.unit_count,
        unit_rate=record.unit_rate,
        transport_bill=record.transport_bill,
    )


def payment_record_to_domain(orm_payment: ORMPaymentRecord) -> domain.PaymentRecord:
    """Convert SQLAlchemy PaymentRecord model to domain PaymentRecord entity."""
    return domain.PaymentRecord(
        id=orm_payment.id,
        company_id=orm_payment.company_id,
        period_start=orm_payment.period_start,
        period_end=orm_payment.period_end,
        amount=orm_payment.amount,
        action=domain.PaymentAction(orm_payment.action),
        created_at=orm_payment.created_at,
    )


def payment_record_to_orm(payment: domain.PaymentRecord) -> ORMPaymentRecord:
    """Convert domain PaymentRecord entity to SQLAlchemy PaymentRecord model."""
    return ORMPaymentRecord(
        id=payment.id,
        company_id=payment.company_id,
        period_start=payment.period_start,
        period_end=payment.period_end,
        amount=payment.amount,
        action=payment.action.value,
        created_at=payment.created_at,
    )
