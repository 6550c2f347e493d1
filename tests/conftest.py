"""Shared pytest fixtures for workhours tests."""

import tempfile
import os
import pytest

from workhours.database.factories import create_sqlite_database
from workhours.domain.company import CompanyService
from workhours.domain.invoice import InvoiceService
from workhours.domain.payment import PaymentService
from workhours.domain.work_record import WorkRecordService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def work_record_service(temp_db):
    """Create a WorkRecordService with a temporary database."""
    return WorkRecordService(temp_db)


@pytest.fixture
def payment_service(temp_db):
    """Create a PaymentService with a temporary database."""
    return PaymentService(temp_db)


@pytest.fixture
def invoice_service(temp_db):
    """Create an InvoiceService with a temporary database."""
    return InvoiceService(temp_db)


@pytest.fixture
def hourly_company(company_service):
    """Create an hourly company billed per calendar month."""
    return company_service.create_company(
        name="Acme", payment_type="hourly", hourly_rate=30.0, month_start_day=1
    )


@pytest.fixture
def point_company(company_service):
    """Create a piecework company on a mid-month cycle."""
    return company_service.create_company(
        name="Packing Co", payment_type="point", point_rate=5.0, month_start_day=16
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
