"""SQLAlchemy models for workhours database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Float,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Company(Base):
    """Company model."""

    __tablename__ = "companies"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    payment_type = Column(String, nullable=False)
    hourly_rate = Column(Float, nullable=True)
    point_rate = Column(Float, nullable=True)
    month_start_day = Column(Integer, default=1, nullable=False)


class WorkRecord(Base):
    """Work record model.

    company_id is a weak reference: companies and their records are kept
    consistent by the domain services, not by the schema.
    """

    __tablename__ = "work_records"

    id = Column(String, primary_key=True)
    company_id = Column(String, index=True, nullable=False)
    date = Column(Date, nullable=False)
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)
    hours_worked = Column(Float, nullable=True)
    break_duration = Column(Float, nullable=True)
    unit_count = Column(Float, nullable=True)
    unit_rate = Column(Float, nullable=True)
    transport_bill = Column(Float, nullable=True)


class PaymentRecord(Base):
    """Payment record model."""

    __tablename__ = "payment_records"

    id = Column(String, primary_key=True)
    company_id = Column(String, index=True, nullable=False)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    amount = Column(Float, nullable=False)
    action = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
