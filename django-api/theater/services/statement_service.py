"""Statement service - orchestration around the domain renderer.

Services:
- Depend only on interfaces (stores)
- Validate identifiers and map missing records to domain errors
- Let pricing and catalog errors propagate unchanged
"""

import logging

from theater.domain import Invoice, InvoiceId, Statement, build_statement
from theater.domain.errors import InvalidInvoiceIdError, InvoiceNotFoundError
from theater.stores.interfaces import InvoiceStore, PlayStore

logger = logging.getLogger(__name__)


class StatementService:
    """Service for producing invoice statements."""

    def __init__(self, plays: PlayStore, invoices: InvoiceStore) -> None:
        self._plays = plays
        self._invoices = invoices

    def statement_for(self, invoice: Invoice) -> Statement:
        """Return the statement for an invoice priced against the store's catalog.

        Raises:
            UnknownPlayError: If a performance references a play not in the catalog.
            UnknownGenreError: If a referenced play has an unpriced genre.
        """
        result = build_statement(invoice, self._plays.get_catalog())
        logger.debug(
            "Built statement for %s: %d lines, total %d cents",
            invoice.customer,
            len(result.lines),
            result.total_amount,
        )
        return result

    def statement_for_invoice(self, invoice_id: str) -> Statement:
        """Return the statement for a stored invoice.

        Raises:
            InvalidInvoiceIdError: If the invoice_id is not a positive integer.
            InvoiceNotFoundError: If the invoice does not exist.
        """
        try:
            parsed = InvoiceId.from_string(invoice_id)
        except ValueError:
            raise InvalidInvoiceIdError() from None

        invoice = self._invoices.get_invoice(parsed)
        if invoice is None:
            raise InvoiceNotFoundError(parsed.value)

        logger.info("Generating statement for invoice %d", parsed.value)
        return self.statement_for(invoice)
