"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from theater.domain import Invoice, InvoiceId, Play


class PlayStore(ABC):
    """Interface for play catalog lookups."""

    @abstractmethod
    def get_catalog(self) -> Mapping[str, Play]:
        """Return a read-only mapping of play ID to Play."""
        ...


class InvoiceStore(ABC):
    """Interface for invoice persistence operations."""

    @abstractmethod
    def get_invoice(self, invoice_id: InvoiceId) -> Invoice | None:
        """Return an invoice with its performances in order, or None if not found."""
        ...
