from theater.handlers.views import InvoiceStatementView, StatementView

__all__ = ["InvoiceStatementView", "StatementView"]
