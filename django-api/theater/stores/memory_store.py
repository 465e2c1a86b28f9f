"""In-memory stores for ad-hoc catalogs and tests."""

from collections.abc import Mapping

from theater.domain import Invoice, InvoiceId, Play, build_catalog
from theater.stores.interfaces import InvoiceStore, PlayStore


class InMemoryPlayStore(PlayStore):
    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._catalog = build_catalog(plays)

    def get_catalog(self) -> Mapping[str, Play]:
        return self._catalog


class InMemoryInvoiceStore(InvoiceStore):
    def __init__(self, invoices: Mapping[int, Invoice] | None = None) -> None:
        self._invoices = dict(invoices or {})

    def get_invoice(self, invoice_id: InvoiceId) -> Invoice | None:
        return self._invoices.get(invoice_id.value)
