from theater.stores.interfaces import InvoiceStore, PlayStore
from theater.stores.memory_store import InMemoryInvoiceStore, InMemoryPlayStore

__all__ = [
    "PlayStore",
    "InvoiceStore",
    "InMemoryPlayStore",
    "InMemoryInvoiceStore",
]
