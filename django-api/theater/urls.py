from django.urls import path

from theater.handlers import InvoiceStatementView, StatementView

urlpatterns = [
    path("statements", StatementView.as_view(), name="statement-create"),
    path(
        "invoices/<str:invoice_id>/statement",
        InvoiceStatementView.as_view(),
        name="invoice-statement",
    ),
]
