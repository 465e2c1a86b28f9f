"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.renderers import JSONRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from theater.domain.errors import (
    DomainError,
    InvalidInvoiceIdError,
    InvoiceNotFoundError,
    UnknownGenreError,
    UnknownPlayError,
)
from theater.domain.statement import Statement, render_plain_text
from theater.handlers.renderers import PlainTextRenderer
from theater.handlers.serializers import StatementRequestSerializer, StatementSerializer
from theater.services.statement_service import StatementService
from theater.stores import InMemoryInvoiceStore, InMemoryPlayStore
from theater.stores.django_store import DjangoInvoiceStore, DjangoPlayStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidInvoiceIdError: status.HTTP_400_BAD_REQUEST,
    InvoiceNotFoundError: status.HTTP_404_NOT_FOUND,
    UnknownPlayError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UnknownGenreError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def error_response(error: DomainError) -> Response:
    status_code = ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    logger.warning("Statement request failed: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status_code,
    )


class StatementResponseMixin:
    renderer_classes = [JSONRenderer, PlainTextRenderer]

    def statement_response(self, request: Request, result: Statement) -> Response:
        if request.accepted_renderer.format == PlainTextRenderer.format:
            return Response(render_plain_text(result))
        return Response(StatementSerializer(result).data)


class StatementView(StatementResponseMixin, APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> Response:
        serializer = StatementRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        invoice, plays = serializer.to_domain()

        service = StatementService(InMemoryPlayStore(plays), InMemoryInvoiceStore())
        try:
            result = service.statement_for(invoice)
        except DomainError as error:
            return error_response(error)
        return self.statement_response(request, result)


class InvoiceStatementView(StatementResponseMixin, APIView):
    """Handler for GET /api/invoices/{invoice_id}/statement"""

    def get(self, request: Request, invoice_id: str) -> Response:
        service = StatementService(DjangoPlayStore(), DjangoInvoiceStore())
        try:
            result = service.statement_for_invoice(invoice_id)
        except DomainError as error:
            return error_response(error)
        return self.statement_response(request, result)
