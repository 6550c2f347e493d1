"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def company_not_found(company_id: str) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def work_record_not_found(record_id: str) -> str:
    """Return message for missing work record."""
    return f"Work record {record_id} not found"


def payment_record_not_found(record_id: str) -> str:
    """Return message for missing payment record."""
    return f"Payment record {record_id} not found"


def invalid_month_start_day(value: int) -> str:
    """Return message for an unsupported billing cycle anchor."""
    return f"Invalid month start day {value}: must be 1 or 16"


def negative_value(field_name: str, value: float) -> str:
    """Return message for a quantity that must not be negative."""
    return f"{field_name} cannot be negative (got {value})"


def not_finite(field_name: str, value: float) -> str:
    """Return message for a quantity that is NaN or infinite."""
    return f"{field_name} must be a finite number (got {value})"
