from theater.domain.models import Invoice, Performance, Play, build_catalog
from theater.domain.statement import Statement, StatementLine, build_statement, statement
from theater.domain.value_objects import Genre, InvoiceId

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "build_catalog",
    "Statement",
    "StatementLine",
    "build_statement",
    "statement",
    "Genre",
    "InvoiceId",
]
