"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from workhours.domain.entities import Company, WorkRecord, PaymentRecord


class Database(ABC):
    """Abstract persistence interface for workhours.

    Each collection is loaded and saved as a whole. Saving a collection
    replaces what is stored: items missing from the saved list are removed.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load_companies(self) -> list[Company]:
        """Load all companies."""
        pass

    @abstractmethod
    def load_work_records(self) -> list[WorkRecord]:
        """Load all work records."""
        pass

    @abstractmethod
    def load_payment_records(self) -> list[PaymentRecord]:
        """Load all payment records."""
        pass

    @abstractmethod
    def save_snapshot(
        self,
        companies: Optional[Sequence[Company]] = None,
        work_records: Optional[Sequence[WorkRecord]] = None,
        payment_records: Optional[Sequence[PaymentRecord]] = None,
    ) -> None:
        """Replace the given collections in a single transaction.

        Collections passed as None are left untouched.
        """
        pass

    def save_companies(self, companies: Sequence[Company]) -> None:
        """Replace all stored companies."""
        self.save_snapshot(companies=companies)

    def save_work_records(self, work_records: Sequence[WorkRecord]) -> None:
        """Replace all stored work records."""
        self.save_snapshot(work_records=work_records)

    def save_payment_records(self, payment_records: Sequence[PaymentRecord]) -> None:
        """Replace all stored payment records."""
        self.save_snapshot(payment_records=payment_records)
